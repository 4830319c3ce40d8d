"""
Project models — /v3/projects.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field

from doppler_sdk.options import ListOptions, param
from doppler_sdk.transport.envelope import APIResponse
from doppler_sdk.validation import RequiredStr


class Project(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    slug: Optional[str] = None          # Abbreviated name
    description: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(kw_only=True)
class ProjectGetOptions:
    name: RequiredStr = param(query="project")


@dataclass(kw_only=True)
class ProjectListOptions(ListOptions):
    pass


@dataclass(kw_only=True)
class ProjectCreateOptions:
    name: RequiredStr = param(body="name")
    description: Optional[str] = param(body="description", omitempty=True, default=None)


@dataclass(kw_only=True)
class ProjectUpdateOptions:
    name: RequiredStr = param(body="project")
    new_name: RequiredStr = param(body="name", omitempty=True)
    new_description: Optional[str] = param(body="description", omitempty=True, default=None)


@dataclass(kw_only=True)
class ProjectDeleteOptions:
    name: RequiredStr = param(body="project")


class ProjectGetResponse(APIResponse):
    project: Optional[Project] = None


class ProjectListResponse(APIResponse):
    projects: list[Project] = Field(default_factory=list)


class ProjectCreateResponse(APIResponse):
    project: Optional[Project] = None


class ProjectUpdateResponse(APIResponse):
    project: Optional[Project] = None


class ProjectDeleteResponse(APIResponse):
    pass
