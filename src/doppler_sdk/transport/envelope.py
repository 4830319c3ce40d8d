"""
Response envelope — the metadata every Doppler response carries.

HTTP details (status, headers, request id, rate limit) are bound from the
transport response; success/messages/page come from the JSON body.
"""

import re
from datetime import datetime, timezone
from typing import Any, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from doppler_sdk.errors import APIError

HEADER_REQUEST_ID = "X-Request-Id"
HEADER_RATE_LIMIT_LIMIT = "X-RateLimit-Limit"
HEADER_RATE_LIMIT_REMAINING = "X-RateLimit-Remaining"
HEADER_RATE_LIMIT_RESET = "X-RateLimit-Reset"

_INTEGER = re.compile(r"^[+-]?\d+$")


class RateLimit(BaseModel):
    model_config = ConfigDict(frozen=True)

    limit: int
    remaining: int
    reset: datetime


def _parse_int(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    raw = raw.strip()
    if not _INTEGER.match(raw):
        return None
    return int(raw)


def extract_rate_limit(headers: httpx.Headers) -> Optional[RateLimit]:
    """All three headers must parse, otherwise there is no rate limit at all."""
    limit = _parse_int(headers.get(HEADER_RATE_LIMIT_LIMIT))
    remaining = _parse_int(headers.get(HEADER_RATE_LIMIT_REMAINING))
    reset = _parse_int(headers.get(HEADER_RATE_LIMIT_RESET))
    if limit is None or remaining is None or reset is None:
        return None
    try:
        reset_at = datetime.fromtimestamp(reset, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
    return RateLimit(limit=limit, remaining=remaining, reset=reset_at)


class APIResponse(BaseModel):
    """Base of every typed response."""

    # Bound from the HTTP response, never from the body.
    # Every value of every header, keyed by lower-case name.
    header: dict[str, list[str]] = Field(default_factory=dict, exclude=True)
    request_id: Optional[str] = Field(default=None, exclude=True)
    rate_limit: Optional[RateLimit] = Field(default=None, exclude=True)
    status: Optional[str] = Field(default=None, exclude=True)
    status_code: Optional[int] = Field(default=None, exclude=True)

    # Set by Doppler in the body.
    success: Optional[bool] = None
    messages: list[str] = Field(default_factory=list)
    page: Optional[int] = None

    @field_validator("messages", mode="before")
    @classmethod
    def _null_messages(cls, value: Any) -> Any:
        return [] if value is None else value

    def bind(self, resp: Optional[httpx.Response]) -> None:
        """Copy status, headers, request id and rate limit from resp."""
        if resp is None:
            return
        self.status_code = resp.status_code
        self.status = f"{resp.status_code} {resp.reason_phrase}".strip()
        self.header = {name: resp.headers.get_list(name) for name in resp.headers.keys()}
        self.request_id = resp.headers.get(HEADER_REQUEST_ID)
        self.rate_limit = extract_rate_limit(resp.headers)

    def absorb_body(self, data: Any) -> None:
        """Pick success/messages/page out of a body that didn't fit the typed model."""
        if not isinstance(data, dict):
            return
        try:
            parsed = APIResponse.model_validate(data)
        except ValidationError:
            return
        self.success = parsed.success
        self.messages = parsed.messages
        self.page = parsed.page

    def error(self) -> Optional[APIError]:
        if self.messages:
            return APIError(self.messages, response=self)
        return None

    def envelope(self) -> "APIResponse":
        """A plain APIResponse with this response's metadata and no payload."""
        return APIResponse(
            header={name: list(values) for name, values in self.header.items()},
            request_id=self.request_id,
            rate_limit=self.rate_limit,
            status=self.status,
            status_code=self.status_code,
            success=self.success,
            messages=list(self.messages),
            page=self.page,
        )


def lift_inline(data: Any, key: str, fields: tuple[str, ...]) -> Any:
    """Nest top-level `fields` of a response body under `key`.

    Some endpoints return their record inline with the envelope fields; typed
    responses still expose it as a single attribute.
    """
    if not isinstance(data, dict) or key in data:
        return data
    inline = {name: data[name] for name in fields if name in data}
    if not inline:
        return data
    return {**data, key: inline}
