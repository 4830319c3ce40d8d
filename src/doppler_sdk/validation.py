"""
Payload validation.

Constraints live on the option types themselves, as pydantic metadata inside
`Annotated` hints (see the aliases below). They are checked here, right before a
request is built, rather than when the options are constructed, so that
`settings.enable_validation = False` lets malformed payloads through to the server.
"""

import dataclasses
from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, TypeAdapter, ValidationError

from doppler_sdk import settings
from doppler_sdk.errors import InvalidPayloadError
from doppler_sdk.options import is_option_record

RequiredStr = Annotated[str, Field(min_length=1)]


@lru_cache(maxsize=None)
def _adapter(option_type: type) -> TypeAdapter:
    return TypeAdapter(option_type)


def _as_input(value: Any) -> Any:
    # Plain dicts: pydantic skips revalidation of dataclass instances.
    if is_option_record(value):
        return {f.name: _as_input(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, list):
        return [_as_input(v) for v in value]
    return value


def _violations(exc: ValidationError) -> list[dict[str, Any]]:
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "type": err["type"],
            "message": err["msg"],
        }
        for err in exc.errors()
    ]


def validate_payload(payload: Any) -> None:
    """Raise InvalidPayloadError listing every violated constraint of payload."""
    if not settings.enable_validation or payload is None:
        return
    if not is_option_record(payload):
        return

    try:
        _adapter(type(payload)).validate_python(_as_input(payload))
    except ValidationError as exc:
        violations = _violations(exc)
        summary = "; ".join(f"{v['field']}: {v['message']}" for v in violations)
        raise InvalidPayloadError(f"validate request payload: {summary}", violations) from exc
