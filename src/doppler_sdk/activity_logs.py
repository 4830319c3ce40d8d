"""
Activity logs API: the workplace-wide audit trail.
"""

from typing import List, Optional

from doppler_sdk._resource import Resource
from doppler_sdk.models.activity_log import (
    ActivityLog,
    ActivityLogGetOptions,
    ActivityLogGetResponse,
    ActivityLogListOptions,
    ActivityLogListResponse,
)
from doppler_sdk.transport.envelope import APIResponse


class ActivityLogsAPI(Resource):
    def get(self, options: ActivityLogGetOptions) -> tuple[Optional[ActivityLog], APIResponse]:
        resp = self._call("GET", "/v3/logs/log", options, ActivityLogGetResponse)
        return resp.log, resp.envelope()

    def list(self, options: Optional[ActivityLogListOptions] = None) -> tuple[List[ActivityLog], APIResponse]:
        resp = self._call("GET", "/v3/logs", options, ActivityLogListResponse)
        return resp.logs, resp.envelope()


def default() -> ActivityLogsAPI:
    return ActivityLogsAPI()


def get(options: ActivityLogGetOptions) -> tuple[Optional[ActivityLog], APIResponse]:
    return default().get(options)


def list(options: Optional[ActivityLogListOptions] = None) -> tuple[List[ActivityLog], APIResponse]:
    return default().list(options)
