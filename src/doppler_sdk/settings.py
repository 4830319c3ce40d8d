"""
Process-wide SDK settings.

Set these once at start-up, before the first request:

    from doppler_sdk import settings

    settings.key = "dp.st.prd.xxxx"
    settings.set_app_info(settings.AppInfo(name="my-app", version="1.2.0"))

Backends built explicitly (Backend / Doppler) snapshot what they need and ignore
later changes; only the module-level convenience functions read these on each call.
"""

import os
from typing import Optional

from pydantic import BaseModel

SDK_VERSION = "0.2.0"
USER_AGENT_PRODUCT = "doppler-go"

KEY_ENV_VAR = "DOPPLER_TOKEN"
API_HOST_ENV_VAR = "DOPPLER_API_HOST"

# API key used by the default clients. Falls back to $DOPPLER_TOKEN when unset.
key: Optional[str] = None

# Validate option payloads before sending them.
enable_validation: bool = True


class AppInfo(BaseModel):
    """The application this integration belongs to, reported in the User-Agent."""
    name: str
    url: str = ""
    version: str = ""

    def format_user_agent(self) -> str:
        user_agent = self.name
        if self.version:
            user_agent += f"/{self.version}"
        if self.url:
            user_agent += f" ({self.url})"
        return user_agent


_app_info: Optional[AppInfo] = None
_user_agent: str = ""


def _init_user_agent() -> None:
    global _user_agent
    _user_agent = f"{USER_AGENT_PRODUCT}/{SDK_VERSION}"
    if _app_info is not None:
        _user_agent += f" {_app_info.format_user_agent()}"


def set_app_info(info: Optional[AppInfo]) -> None:
    """Set (or clear, with None) the app info appended to the User-Agent."""
    global _app_info
    if info is not None and not info.name:
        raise ValueError("app info name must not be empty")
    _app_info = info
    _init_user_agent()


def get_app_info() -> Optional[AppInfo]:
    return _app_info


def user_agent() -> str:
    return _user_agent


def api_key() -> Optional[str]:
    return key or os.environ.get(KEY_ENV_VAR)


def api_host() -> Optional[str]:
    return os.environ.get(API_HOST_ENV_VAR) or None


_init_user_agent()
