"""
Dynamic secret lease models — /v3/configs/config/dynamic_secrets.

A lease is issued with a TTL and lives until it expires or is revoked.
"""

from dataclasses import dataclass
from typing import Annotated

from pydantic import Field

from doppler_sdk.options import param
from doppler_sdk.transport.envelope import APIResponse
from doppler_sdk.validation import RequiredStr


@dataclass(kw_only=True)
class DynamicSecretIssueLeaseOptions:
    project: RequiredStr = param(body="project")
    config: RequiredStr = param(body="config")
    name: RequiredStr = param(body="dynamic_secret")
    ttl_seconds: Annotated[int, Field(gt=0)] = param(body="ttl_seconds")


@dataclass(kw_only=True)
class DynamicSecretRevokeLeaseOptions:
    project: RequiredStr = param(body="project")
    config: RequiredStr = param(body="config")
    name: RequiredStr = param(body="dynamic_secret")
    slug: RequiredStr = param(body="slug")          # The lease to revoke


class DynamicSecretIssueLeaseResponse(APIResponse):
    pass


class DynamicSecretRevokeLeaseResponse(APIResponse):
    pass
