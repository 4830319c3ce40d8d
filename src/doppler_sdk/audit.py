"""
Audit API: workplace settings and member access, for compliance reporting.
"""

from typing import List, Optional
from urllib.parse import quote

from doppler_sdk._resource import Resource
from doppler_sdk.models.audit import (
    AuditWorkplace,
    AuditWorkplaceGetOptions,
    AuditWorkplaceGetResponse,
    AuditWorkplaceUser,
    AuditWorkplaceUserGetOptions,
    AuditWorkplaceUserGetResponse,
    AuditWorkplaceUserListOptions,
    AuditWorkplaceUserListResponse,
)
from doppler_sdk.transport.envelope import APIResponse


class AuditAPI(Resource):
    def workplace_get(
        self, options: Optional[AuditWorkplaceGetOptions] = None,
    ) -> tuple[Optional[AuditWorkplace], APIResponse]:
        resp = self._call("GET", "/v3/workplace", options, AuditWorkplaceGetResponse)
        return resp.workplace, resp.envelope()

    def workplace_user_get(
        self, options: AuditWorkplaceUserGetOptions,
    ) -> tuple[Optional[AuditWorkplaceUser], APIResponse]:
        path = f"/v3/workplace/users/{quote(options.user_id or '', safe='')}"
        resp = self._call("GET", path, options, AuditWorkplaceUserGetResponse)
        return resp.workplace_user, resp.envelope()

    def workplace_user_list(
        self, options: Optional[AuditWorkplaceUserListOptions] = None,
    ) -> tuple[List[AuditWorkplaceUser], APIResponse]:
        resp = self._call("GET", "/v3/workplace/users", options, AuditWorkplaceUserListResponse)
        return resp.workplace_users, resp.envelope()


def default() -> AuditAPI:
    return AuditAPI()


def workplace_get(
    options: Optional[AuditWorkplaceGetOptions] = None,
) -> tuple[Optional[AuditWorkplace], APIResponse]:
    return default().workplace_get(options)


def workplace_user_get(options: AuditWorkplaceUserGetOptions) -> tuple[Optional[AuditWorkplaceUser], APIResponse]:
    return default().workplace_user_get(options)


def workplace_user_list(
    options: Optional[AuditWorkplaceUserListOptions] = None,
) -> tuple[List[AuditWorkplaceUser], APIResponse]:
    return default().workplace_user_list(options)
