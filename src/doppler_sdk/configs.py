"""
Configs API.

Lock and unlock only flip server-side state; the returned config reflects it.
"""

from typing import List, Optional

from doppler_sdk._resource import Resource
from doppler_sdk.models.config import (
    Config,
    ConfigCloneOptions,
    ConfigCloneResponse,
    ConfigCreateOptions,
    ConfigCreateResponse,
    ConfigDeleteOptions,
    ConfigDeleteResponse,
    ConfigGetOptions,
    ConfigGetResponse,
    ConfigListOptions,
    ConfigListResponse,
    ConfigLockOptions,
    ConfigLockResponse,
    ConfigUnlockOptions,
    ConfigUnlockResponse,
    ConfigUpdateOptions,
    ConfigUpdateResponse,
)
from doppler_sdk.transport.envelope import APIResponse


class ConfigsAPI(Resource):
    def get(self, options: ConfigGetOptions) -> tuple[Optional[Config], APIResponse]:
        resp = self._call("GET", "/v3/configs/config", options, ConfigGetResponse)
        return resp.config, resp.envelope()

    def list(self, options: ConfigListOptions) -> tuple[List[Config], APIResponse]:
        resp = self._call("GET", "/v3/configs", options, ConfigListResponse)
        return resp.configs, resp.envelope()

    def create(self, options: ConfigCreateOptions) -> tuple[Optional[Config], APIResponse]:
        resp = self._call("POST", "/v3/configs", options, ConfigCreateResponse)
        return resp.config, resp.envelope()

    def update(self, options: ConfigUpdateOptions) -> tuple[Optional[Config], APIResponse]:
        resp = self._call("POST", "/v3/configs/config", options, ConfigUpdateResponse)
        return resp.config, resp.envelope()

    def delete(self, options: ConfigDeleteOptions) -> APIResponse:
        resp = self._call("DELETE", "/v3/configs/config", options, ConfigDeleteResponse)
        return resp.envelope()

    def lock(self, options: ConfigLockOptions) -> tuple[Optional[Config], APIResponse]:
        resp = self._call("POST", "/v3/configs/config/lock", options, ConfigLockResponse)
        return resp.config, resp.envelope()

    def unlock(self, options: ConfigUnlockOptions) -> tuple[Optional[Config], APIResponse]:
        resp = self._call("POST", "/v3/configs/config/unlock", options, ConfigUnlockResponse)
        return resp.config, resp.envelope()

    def clone(self, options: ConfigCloneOptions) -> tuple[Optional[Config], APIResponse]:
        resp = self._call("POST", "/v3/configs/config/clone", options, ConfigCloneResponse)
        return resp.config, resp.envelope()


def default() -> ConfigsAPI:
    return ConfigsAPI()


def get(options: ConfigGetOptions) -> tuple[Optional[Config], APIResponse]:
    return default().get(options)


def list(options: ConfigListOptions) -> tuple[List[Config], APIResponse]:
    return default().list(options)


def create(options: ConfigCreateOptions) -> tuple[Optional[Config], APIResponse]:
    return default().create(options)


def update(options: ConfigUpdateOptions) -> tuple[Optional[Config], APIResponse]:
    return default().update(options)


def delete(options: ConfigDeleteOptions) -> APIResponse:
    return default().delete(options)


def lock(options: ConfigLockOptions) -> tuple[Optional[Config], APIResponse]:
    return default().lock(options)


def unlock(options: ConfigUnlockOptions) -> tuple[Optional[Config], APIResponse]:
    return default().unlock(options)


def clone(options: ConfigCloneOptions) -> tuple[Optional[Config], APIResponse]:
    return default().clone(options)
