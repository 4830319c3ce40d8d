"""
Projects API.
"""

from typing import List, Optional

from doppler_sdk._resource import Resource
from doppler_sdk.models.project import (
    Project,
    ProjectCreateOptions,
    ProjectCreateResponse,
    ProjectDeleteOptions,
    ProjectDeleteResponse,
    ProjectGetOptions,
    ProjectGetResponse,
    ProjectListOptions,
    ProjectListResponse,
    ProjectUpdateOptions,
    ProjectUpdateResponse,
)
from doppler_sdk.transport.envelope import APIResponse


class ProjectsAPI(Resource):
    def get(self, options: ProjectGetOptions) -> tuple[Optional[Project], APIResponse]:
        resp = self._call("GET", "/v3/projects/project", options, ProjectGetResponse)
        return resp.project, resp.envelope()

    def list(self, options: Optional[ProjectListOptions] = None) -> tuple[List[Project], APIResponse]:
        resp = self._call("GET", "/v3/projects", options, ProjectListResponse)
        return resp.projects, resp.envelope()

    def create(self, options: ProjectCreateOptions) -> tuple[Optional[Project], APIResponse]:
        resp = self._call("POST", "/v3/projects", options, ProjectCreateResponse)
        return resp.project, resp.envelope()

    def update(self, options: ProjectUpdateOptions) -> tuple[Optional[Project], APIResponse]:
        resp = self._call("POST", "/v3/projects/project", options, ProjectUpdateResponse)
        return resp.project, resp.envelope()

    def delete(self, options: ProjectDeleteOptions) -> APIResponse:
        resp = self._call("DELETE", "/v3/projects/project", options, ProjectDeleteResponse)
        return resp.envelope()


def default() -> ProjectsAPI:
    return ProjectsAPI()


def get(options: ProjectGetOptions) -> tuple[Optional[Project], APIResponse]:
    return default().get(options)


def list(options: Optional[ProjectListOptions] = None) -> tuple[List[Project], APIResponse]:
    return default().list(options)


def create(options: ProjectCreateOptions) -> tuple[Optional[Project], APIResponse]:
    return default().create(options)


def update(options: ProjectUpdateOptions) -> tuple[Optional[Project], APIResponse]:
    return default().update(options)


def delete(options: ProjectDeleteOptions) -> APIResponse:
    return default().delete(options)
