"""
doppler-sdk — Python client for the Doppler secrets-management API.

Typed option records in, typed records plus the response envelope out.
"""

import logging

from doppler_sdk.client import Doppler
from doppler_sdk.errors import APIError, DecodeError, DopplerError, EncodingError, InvalidPayloadError
from doppler_sdk.options import ListOptions
from doppler_sdk.settings import SDK_VERSION, AppInfo
from doppler_sdk.transport import (
    APIResponse,
    AsyncBackend,
    AsyncBackendConfig,
    Backend,
    BackendConfig,
    RateLimit,
    Request,
    get_backend,
    get_backend_with_config,
)

logging.getLogger("doppler_sdk").addHandler(logging.NullHandler())

__version__ = SDK_VERSION
__all__ = [
    "Doppler",
    "APIError",
    "DecodeError",
    "DopplerError",
    "EncodingError",
    "InvalidPayloadError",
    "ListOptions",
    "AppInfo",
    "APIResponse",
    "AsyncBackend",
    "AsyncBackendConfig",
    "Backend",
    "BackendConfig",
    "RateLimit",
    "Request",
    "get_backend",
    "get_backend_with_config",
]
