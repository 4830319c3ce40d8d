"""
Config logs API: the change history of a config, and rolling back to an entry.
"""

from typing import List, Optional

from doppler_sdk._resource import Resource
from doppler_sdk.models.config_log import (
    ConfigLog,
    ConfigLogGetOptions,
    ConfigLogGetResponse,
    ConfigLogListOptions,
    ConfigLogListResponse,
    ConfigLogRollbackOptions,
    ConfigLogRollbackResponse,
)
from doppler_sdk.transport.envelope import APIResponse


class ConfigLogsAPI(Resource):
    def get(self, options: ConfigLogGetOptions) -> tuple[Optional[ConfigLog], APIResponse]:
        resp = self._call("GET", "/v3/configs/config/logs/log", options, ConfigLogGetResponse)
        return resp.config_log, resp.envelope()

    def list(self, options: ConfigLogListOptions) -> tuple[List[ConfigLog], APIResponse]:
        resp = self._call("GET", "/v3/configs/config/logs", options, ConfigLogListResponse)
        return resp.logs, resp.envelope()

    def rollback(self, options: ConfigLogRollbackOptions) -> tuple[Optional[ConfigLog], APIResponse]:
        resp = self._call("POST", "/v3/configs/config/logs/log/rollback", options, ConfigLogRollbackResponse)
        return resp.config_log, resp.envelope()


def default() -> ConfigLogsAPI:
    return ConfigLogsAPI()


def get(options: ConfigLogGetOptions) -> tuple[Optional[ConfigLog], APIResponse]:
    return default().get(options)


def list(options: ConfigLogListOptions) -> tuple[List[ConfigLog], APIResponse]:
    return default().list(options)


def rollback(options: ConfigLogRollbackOptions) -> tuple[Optional[ConfigLog], APIResponse]:
    return default().rollback(options)
