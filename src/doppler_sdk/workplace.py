"""
Workplace API.
"""

from typing import Optional

from doppler_sdk._resource import Resource
from doppler_sdk.models.workplace import (
    Workplace,
    WorkplaceGetResponse,
    WorkplaceUpdateOptions,
    WorkplaceUpdateResponse,
)
from doppler_sdk.transport.envelope import APIResponse


class WorkplaceAPI(Resource):
    def get(self) -> tuple[Optional[Workplace], APIResponse]:
        resp = self._call("GET", "/v3/workplace", None, WorkplaceGetResponse)
        return resp.workplace, resp.envelope()

    def update(self, options: WorkplaceUpdateOptions) -> tuple[Optional[Workplace], APIResponse]:
        resp = self._call("POST", "/v3/workplace", options, WorkplaceUpdateResponse)
        return resp.workplace, resp.envelope()


def default() -> WorkplaceAPI:
    return WorkplaceAPI()


def get() -> tuple[Optional[Workplace], APIResponse]:
    return default().get()


def update(options: WorkplaceUpdateOptions) -> tuple[Optional[Workplace], APIResponse]:
    return default().update(options)
