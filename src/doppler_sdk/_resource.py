"""
Shared plumbing for the resource clients.
"""

from typing import Any, Optional, TypeVar

from doppler_sdk import settings
from doppler_sdk.transport.envelope import APIResponse
from doppler_sdk.transport.http import Backend, Request, get_backend

R = TypeVar("R", bound=APIResponse)


class Resource:
    """Base of every `...API` class: a backend plus the key it authenticates with."""

    def __init__(self, backend: Optional[Backend] = None, key: Optional[str] = None):
        self._backend = backend or get_backend()
        self._key = key if key is not None else settings.api_key()

    @property
    def backend(self) -> Backend:
        return self._backend

    @property
    def key(self) -> Optional[str]:
        return self._key

    def _call(self, method: str, path: str, payload: Any, response_type: type[R]) -> R:
        return self._backend.call(
            Request(method=method, path=path, key=self._key, payload=payload),
            response_type,
        )
