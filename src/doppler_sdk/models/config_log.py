"""
Config log models — /v3/configs/config/logs.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field

from doppler_sdk.models.user import User
from doppler_sdk.options import ListOptions, param
from doppler_sdk.transport.envelope import APIResponse
from doppler_sdk.validation import RequiredStr


class ConfigLogDiff(BaseModel):
    name: Optional[str] = None
    added: Optional[str] = None


class ConfigLog(BaseModel):
    id: Optional[str] = None
    text: Optional[str] = None
    html: Optional[str] = None
    diff: list[ConfigLogDiff] = Field(default_factory=list)
    rollback: Optional[bool] = None     # True if this entry rolled back an earlier one
    user: Optional[User] = None
    project: Optional[str] = None
    environment: Optional[str] = None
    config: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(kw_only=True)
class ConfigLogGetOptions:
    project: RequiredStr = param(query="project")
    config: RequiredStr = param(query="config")
    id: RequiredStr = param(query="log")


@dataclass(kw_only=True)
class ConfigLogListOptions(ListOptions):
    project: RequiredStr = param(query="project")
    config: RequiredStr = param(query="config")


@dataclass(kw_only=True)
class ConfigLogRollbackOptions:
    project: RequiredStr = param(query="project")
    config: RequiredStr = param(query="config")
    id: RequiredStr = param(query="log")


class ConfigLogGetResponse(APIResponse):
    config_log: Optional[ConfigLog] = None


class ConfigLogListResponse(APIResponse):
    logs: list[ConfigLog] = Field(default_factory=list)


class ConfigLogRollbackResponse(APIResponse):
    config_log: Optional[ConfigLog] = None
