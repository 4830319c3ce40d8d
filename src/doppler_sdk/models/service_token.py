"""
Service token models — /v3/configs/config/tokens.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field

from doppler_sdk.options import param
from doppler_sdk.transport.envelope import APIResponse
from doppler_sdk.validation import RequiredStr


class ServiceToken(BaseModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    key: Optional[str] = None           # Only returned when the token is created
    project: Optional[str] = None
    environment: Optional[str] = None
    config: Optional[str] = None
    access: Optional[str] = None        # "read" or "read/write"
    expires_at: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(kw_only=True)
class ServiceTokenListOptions:
    project: RequiredStr = param(query="project", omitempty=True)
    config: RequiredStr = param(query="config", omitempty=True)


@dataclass(kw_only=True)
class ServiceTokenCreateOptions:
    project: RequiredStr = param(body="project", omitempty=True)
    config: RequiredStr = param(body="config", omitempty=True)
    name: RequiredStr = param(body="name", omitempty=True)
    access: Optional[str] = param(body="access", omitempty=True, default=None)
    expires_at: Optional[str] = param(body="expires_at", omitempty=True, default=None)


@dataclass(kw_only=True)
class ServiceTokenDeleteOptions:
    project: RequiredStr = param(body="project", omitempty=True)
    config: RequiredStr = param(body="config", omitempty=True)
    slug: RequiredStr = param(body="slug", omitempty=True)


class ServiceTokenListResponse(APIResponse):
    tokens: list[ServiceToken] = Field(default_factory=list)


class ServiceTokenCreateResponse(APIResponse):
    token: Optional[ServiceToken] = None


class ServiceTokenDeleteResponse(APIResponse):
    pass
