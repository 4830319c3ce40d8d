"""
Config models — /v3/configs.

Locked configs cannot be renamed or deleted; lock state changes only through the
lock/unlock endpoints.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field

from doppler_sdk.options import ListOptions, param
from doppler_sdk.transport.envelope import APIResponse
from doppler_sdk.validation import RequiredStr


class Config(BaseModel):
    name: Optional[str] = None
    project: Optional[str] = None
    environment: Optional[str] = None
    root: Optional[bool] = None              # Root config of its environment
    locked: Optional[bool] = None
    initial_fetch_at: Optional[str] = None
    last_fetch_at: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(kw_only=True)
class ConfigGetOptions:
    project: RequiredStr = param(query="project")
    config: RequiredStr = param(query="config")


@dataclass(kw_only=True)
class ConfigListOptions(ListOptions):
    project: RequiredStr = param(query="project")


@dataclass(kw_only=True)
class ConfigCreateOptions:
    project: RequiredStr = param(body="project")
    environment: RequiredStr = param(body="environment")
    name: RequiredStr = param(body="name")


@dataclass(kw_only=True)
class ConfigUpdateOptions:
    project: RequiredStr = param(body="project")
    config: RequiredStr = param(body="config")
    new_name: RequiredStr = param(body="name")


@dataclass(kw_only=True)
class ConfigDeleteOptions:
    project: RequiredStr = param(body="project")
    config: RequiredStr = param(body="config")


@dataclass(kw_only=True)
class ConfigLockOptions:
    project: RequiredStr = param(body="project")
    config: RequiredStr = param(body="config")


@dataclass(kw_only=True)
class ConfigUnlockOptions:
    project: RequiredStr = param(body="project")
    config: RequiredStr = param(body="config")


@dataclass(kw_only=True)
class ConfigCloneOptions:
    project: RequiredStr = param(body="project")
    config: RequiredStr = param(body="config")
    new_config: RequiredStr = param(body="name")


class ConfigGetResponse(APIResponse):
    config: Optional[Config] = None


class ConfigListResponse(APIResponse):
    configs: list[Config] = Field(default_factory=list)


class ConfigCreateResponse(APIResponse):
    config: Optional[Config] = None


class ConfigUpdateResponse(APIResponse):
    config: Optional[Config] = None


class ConfigDeleteResponse(APIResponse):
    pass


class ConfigLockResponse(APIResponse):
    config: Optional[Config] = None


class ConfigUnlockResponse(APIResponse):
    config: Optional[Config] = None


class ConfigCloneResponse(APIResponse):
    config: Optional[Config] = None
