"""
Environments API.
"""

from typing import List, Optional

from doppler_sdk._resource import Resource
from doppler_sdk.models.environment import (
    Environment,
    EnvironmentCreateOptions,
    EnvironmentCreateResponse,
    EnvironmentDeleteOptions,
    EnvironmentDeleteResponse,
    EnvironmentGetOptions,
    EnvironmentGetResponse,
    EnvironmentListOptions,
    EnvironmentListResponse,
    EnvironmentRenameOptions,
    EnvironmentRenameResponse,
)
from doppler_sdk.transport.envelope import APIResponse


class EnvironmentsAPI(Resource):
    def get(self, options: EnvironmentGetOptions) -> tuple[Optional[Environment], APIResponse]:
        resp = self._call("GET", "/v3/environments/environment", options, EnvironmentGetResponse)
        return resp.environment, resp.envelope()

    def list(self, options: EnvironmentListOptions) -> tuple[List[Environment], APIResponse]:
        resp = self._call("GET", "/v3/environments", options, EnvironmentListResponse)
        return resp.environments, resp.envelope()

    def create(self, options: EnvironmentCreateOptions) -> tuple[Optional[Environment], APIResponse]:
        resp = self._call("POST", "/v3/environments", options, EnvironmentCreateResponse)
        return resp.environment, resp.envelope()

    def rename(self, options: EnvironmentRenameOptions) -> tuple[Optional[Environment], APIResponse]:
        resp = self._call("PUT", "/v3/environments/environment", options, EnvironmentRenameResponse)
        return resp.environment, resp.envelope()

    def delete(self, options: EnvironmentDeleteOptions) -> APIResponse:
        resp = self._call("DELETE", "/v3/environments/environment", options, EnvironmentDeleteResponse)
        return resp.envelope()


def default() -> EnvironmentsAPI:
    return EnvironmentsAPI()


def get(options: EnvironmentGetOptions) -> tuple[Optional[Environment], APIResponse]:
    return default().get(options)


def list(options: EnvironmentListOptions) -> tuple[List[Environment], APIResponse]:
    return default().list(options)


def create(options: EnvironmentCreateOptions) -> tuple[Optional[Environment], APIResponse]:
    return default().create(options)


def rename(options: EnvironmentRenameOptions) -> tuple[Optional[Environment], APIResponse]:
    return default().rename(options)


def delete(options: EnvironmentDeleteOptions) -> APIResponse:
    return default().delete(options)
