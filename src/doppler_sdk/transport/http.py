"""
REST HTTP backend for the Doppler API.

One call = validate payload -> encode query/body -> send -> bind envelope ->
decode typed body -> raise on server messages. Nothing is retried.
"""

import base64
import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, TypeVar

import httpx
from pydantic import ValidationError

from doppler_sdk import settings
from doppler_sdk.errors import APIError, DecodeError
from doppler_sdk.options import encode_body, query_params
from doppler_sdk.transport.envelope import APIResponse
from doppler_sdk.validation import validate_payload

DEFAULT_BASE_URL = "https://api.doppler.com"
DEFAULT_TIMEOUT = 60.0

R = TypeVar("R", bound=APIResponse)

logger = logging.getLogger("doppler_sdk.transport.http")

_default_client: Optional[httpx.Client] = None


def default_client() -> httpx.Client:
    """The shared client used by backends configured without one."""
    global _default_client
    if _default_client is None:
        _default_client = httpx.Client(timeout=DEFAULT_TIMEOUT)
    return _default_client


def normalize_url(url: str) -> str:
    """Strip the trailing slash and API version; endpoint paths carry their own."""
    while True:
        trimmed = url.removesuffix("/").removesuffix("/v3").removesuffix("/v1")
        if trimmed == url:
            return url
        url = trimmed


@dataclass
class Request:
    """A single outbound API call."""
    method: str
    path: str
    key: Optional[str] = None
    # Option record (or any JSON-serialisable value) carrying query and body fields.
    payload: Any = None
    headers: Optional[dict[str, str]] = None
    # Per-call deadline in seconds; overrides the client's timeout.
    timeout: Optional[float] = None


@dataclass
class BackendConfig:
    client: Optional[httpx.Client] = None
    url: Optional[str] = None
    logger: Optional[logging.Logger] = None


@dataclass
class AsyncBackendConfig:
    client: Optional[httpx.AsyncClient] = None
    url: Optional[str] = None
    logger: Optional[logging.Logger] = None
    timeout: float = DEFAULT_TIMEOUT


def _basic_auth(key: Optional[str]) -> str:
    token = base64.b64encode(f"{key or ''}:".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class _BaseBackend:
    def __init__(self, url: Optional[str], log: Optional[logging.Logger]):
        self._url = normalize_url(url or settings.api_host() or DEFAULT_BASE_URL)
        self._logger = log or logger

    @property
    def url(self) -> str:
        return self._url

    def _build_request(self, client: Any, req: Request) -> httpx.Request:
        validate_payload(req.payload)

        path = req.path if req.path.startswith("/") else f"/{req.path}"
        method = req.method.upper()

        headers = httpx.Headers({
            "Authorization": _basic_auth(req.key),
            "Accept": "application/json",
            "User-Agent": settings.user_agent(),
        })
        content: Optional[bytes] = None
        if method != "GET":
            content = encode_body(req.payload)
            headers["Content-Type"] = "application/json"
        # Per-request headers replace the defaults.
        for name, value in (req.headers or {}).items():
            headers[name] = value

        kwargs: dict[str, Any] = {"headers": headers}
        params = query_params(req.payload)
        if params:
            kwargs["params"] = params
        if content is not None:
            kwargs["content"] = content
        if req.timeout is not None:
            kwargs["timeout"] = req.timeout

        http_req = client.build_request(method, self._url + path, **kwargs)
        self._logger.info("Sending HTTP request method=%s url=%s", http_req.method, http_req.url)
        return http_req

    def _parse(self, req: Request, resp: httpx.Response, response_type: Optional[type[R]]) -> Any:
        result = (response_type or APIResponse)()
        result.bind(resp)

        if response_type is None or not resp.content or resp.headers.get("content-length") == "0":
            return result

        content_type = resp.headers.get("content-type", "")
        decode_error: Optional[DecodeError] = None
        if content_type.startswith("application/json"):
            try:
                data = json.loads(resp.content)
            except ValueError as e:
                raise DecodeError(f"decode response body: {e}", response=result) from e
            try:
                result = response_type.model_validate(data)
                result.bind(resp)
            except ValidationError as e:
                result.absorb_body(data)
                decode_error = DecodeError(f"decode response body: {e}", response=result)
        else:
            self._logger.warning("Response body is not JSON content_type=%s", content_type)

        api_error = result.error()
        if api_error is not None or decode_error is not None:
            self._logger.debug(
                "HTTP request failed method=%s path=%s response=%s",
                req.method, req.path, result.model_dump_json(),
            )
        if api_error is not None:
            raise APIError(api_error.messages, response=result, decode_error=decode_error)
        if decode_error is not None:
            raise decode_error
        return result


class Backend(_BaseBackend):
    """Synchronous backend. Safe to share between threads once constructed."""

    def __init__(self, config: Optional[BackendConfig] = None):
        config = config or BackendConfig()
        super().__init__(config.url, config.logger)
        self._client = config.client or default_client()

    def call_raw(self, req: Request) -> httpx.Response:
        """Send req and return the unread response. The caller must close it."""
        http_req = self._build_request(self._client, req)
        return self._client.send(http_req, stream=True)

    def call(self, req: Request, response_type: Optional[type[R]] = None) -> Any:
        """Send req and decode the body into response_type.

        Returns the typed response (or a bare APIResponse when response_type is None).
        Raises APIError when Doppler reports messages, even on a 2xx status.
        """
        http_req = self._build_request(self._client, req)
        resp = self._client.send(http_req)
        return self._parse(req, resp, response_type)


class AsyncBackend(_BaseBackend):
    """Asyncio backend. Cancelling the awaiting task aborts the in-flight request."""

    def __init__(self, config: Optional[AsyncBackendConfig] = None):
        config = config or AsyncBackendConfig()
        super().__init__(config.url, config.logger)
        self._owns_client = config.client is None
        self._client = config.client or httpx.AsyncClient(timeout=config.timeout)

    async def call_raw(self, req: Request) -> httpx.Response:
        """Send req and return the unread response. The caller must aclose() it."""
        http_req = self._build_request(self._client, req)
        return await self._client.send(http_req, stream=True)

    async def call(self, req: Request, response_type: Optional[type[R]] = None) -> Any:
        http_req = self._build_request(self._client, req)
        resp = await self._client.send(http_req)
        return self._parse(req, resp, response_type)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncBackend":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def get_backend_with_config(config: BackendConfig) -> Backend:
    return Backend(config)


def get_backend() -> Backend:
    """A backend built from the current process-wide settings."""
    return Backend(BackendConfig())
