"""
Service tokens API: read-only or read/write tokens scoped to a single config.
"""

from typing import List, Optional

from doppler_sdk._resource import Resource
from doppler_sdk.models.service_token import (
    ServiceToken,
    ServiceTokenCreateOptions,
    ServiceTokenCreateResponse,
    ServiceTokenDeleteOptions,
    ServiceTokenDeleteResponse,
    ServiceTokenListOptions,
    ServiceTokenListResponse,
)
from doppler_sdk.transport.envelope import APIResponse


class ServiceTokensAPI(Resource):
    def list(self, options: ServiceTokenListOptions) -> tuple[List[ServiceToken], APIResponse]:
        resp = self._call("GET", "/v3/configs/config/tokens", options, ServiceTokenListResponse)
        return resp.tokens, resp.envelope()

    def create(self, options: ServiceTokenCreateOptions) -> tuple[Optional[ServiceToken], APIResponse]:
        resp = self._call("POST", "/v3/configs/config/tokens", options, ServiceTokenCreateResponse)
        return resp.token, resp.envelope()

    def delete(self, options: ServiceTokenDeleteOptions) -> APIResponse:
        resp = self._call("DELETE", "/v3/configs/config/tokens/token", options, ServiceTokenDeleteResponse)
        return resp.envelope()


def default() -> ServiceTokensAPI:
    return ServiceTokensAPI()


def list(options: ServiceTokenListOptions) -> tuple[List[ServiceToken], APIResponse]:
    return default().list(options)


def create(options: ServiceTokenCreateOptions) -> tuple[Optional[ServiceToken], APIResponse]:
    return default().create(options)


def delete(options: ServiceTokenDeleteOptions) -> APIResponse:
    return default().delete(options)
