"""
Audit models — /v3/workplace and /v3/workplace/users.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field

from doppler_sdk.models.user import User
from doppler_sdk.options import param
from doppler_sdk.transport.envelope import APIResponse
from doppler_sdk.validation import RequiredStr


class AuditWorkplace(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    billing_email: Optional[str] = None
    saml_enabled: Optional[bool] = None
    scim_enabled: Optional[bool] = None


class AuditWorkplaceUser(BaseModel):
    id: Optional[str] = None
    access: Optional[str] = None
    user: Optional[User] = None
    created_at: Optional[str] = None


# settings=True asks for extra detail such as SAML/SCIM status.

@dataclass(kw_only=True)
class AuditWorkplaceGetOptions:
    settings: Optional[bool] = param(query="settings", omitempty=True, default=None)


@dataclass(kw_only=True)
class AuditWorkplaceUserGetOptions:
    user_id: RequiredStr = param()      # Interpolated into the path
    settings: Optional[bool] = param(query="settings", omitempty=True, default=None)


@dataclass(kw_only=True)
class AuditWorkplaceUserListOptions:
    settings: Optional[bool] = param(query="settings", omitempty=True, default=None)


class AuditWorkplaceGetResponse(APIResponse):
    workplace: Optional[AuditWorkplace] = None


class AuditWorkplaceUserGetResponse(APIResponse):
    workplace_user: Optional[AuditWorkplaceUser] = None


class AuditWorkplaceUserListResponse(APIResponse):
    workplace_users: list[AuditWorkplaceUser] = Field(default_factory=list)
