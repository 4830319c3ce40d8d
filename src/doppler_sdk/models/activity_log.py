"""
Activity log models — /v3/logs.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field

from doppler_sdk.models.user import User
from doppler_sdk.options import ListOptions, param
from doppler_sdk.transport.envelope import APIResponse
from doppler_sdk.validation import RequiredStr


class ActivityLog(BaseModel):
    id: Optional[str] = None
    text: Optional[str] = None
    html: Optional[str] = None
    user: Optional[User] = None
    project: Optional[str] = None
    environment: Optional[str] = None
    config: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(kw_only=True)
class ActivityLogGetOptions:
    id: RequiredStr = param(query="log")


@dataclass(kw_only=True)
class ActivityLogListOptions(ListOptions):
    pass


class ActivityLogGetResponse(APIResponse):
    log: Optional[ActivityLog] = None


class ActivityLogListResponse(APIResponse):
    logs: list[ActivityLog] = Field(default_factory=list)
