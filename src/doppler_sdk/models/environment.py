"""
Environment models — /v3/environments.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field

from doppler_sdk.options import param
from doppler_sdk.transport.envelope import APIResponse
from doppler_sdk.validation import RequiredStr


class Environment(BaseModel):
    id: Optional[str] = None
    slug: Optional[str] = None
    name: Optional[str] = None
    project: Optional[str] = None
    initial_fetch_at: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(kw_only=True)
class EnvironmentGetOptions:
    project: RequiredStr = param(query="project")
    slug: RequiredStr = param(query="environment")


@dataclass(kw_only=True)
class EnvironmentListOptions:
    project: RequiredStr = param(query="project")


@dataclass(kw_only=True)
class EnvironmentCreateOptions:
    project: RequiredStr = param(query="project")
    name: RequiredStr = param(body="name", omitempty=True)
    slug: RequiredStr = param(body="slug", omitempty=True)


@dataclass(kw_only=True)
class EnvironmentRenameOptions:
    project: RequiredStr = param(query="project")
    slug: RequiredStr = param(query="environment")
    new_name: Optional[str] = param(body="name", omitempty=True, default=None)
    new_slug: Optional[str] = param(body="slug", omitempty=True, default=None)


@dataclass(kw_only=True)
class EnvironmentDeleteOptions:
    project: RequiredStr = param(query="project")
    slug: RequiredStr = param(query="environment")


class EnvironmentGetResponse(APIResponse):
    environment: Optional[Environment] = None


class EnvironmentListResponse(APIResponse):
    environments: list[Environment] = Field(default_factory=list)


class EnvironmentCreateResponse(APIResponse):
    environment: Optional[Environment] = None


class EnvironmentRenameResponse(APIResponse):
    environment: Optional[Environment] = None


class EnvironmentDeleteResponse(APIResponse):
    pass
