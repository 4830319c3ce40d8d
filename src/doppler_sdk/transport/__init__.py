from doppler_sdk.transport.envelope import APIResponse, RateLimit
from doppler_sdk.transport.http import (
    DEFAULT_BASE_URL,
    AsyncBackend,
    AsyncBackendConfig,
    Backend,
    BackendConfig,
    Request,
    get_backend,
    get_backend_with_config,
    normalize_url,
)

__all__ = [
    "APIResponse",
    "RateLimit",
    "DEFAULT_BASE_URL",
    "AsyncBackend",
    "AsyncBackendConfig",
    "Backend",
    "BackendConfig",
    "Request",
    "get_backend",
    "get_backend_with_config",
    "normalize_url",
]
