"""
Secret models — /v3/configs/config/secret(s).
"""

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from doppler_sdk.options import param
from doppler_sdk.transport.envelope import APIResponse, lift_inline
from doppler_sdk.validation import RequiredStr


class SecretValue(BaseModel):
    raw: Optional[str] = None
    computed: Optional[str] = None      # Value with references resolved


class Secret(BaseModel):
    name: Optional[str] = None
    value: Optional[SecretValue] = None


@dataclass(kw_only=True)
class SecretGetOptions:
    project: RequiredStr = param(query="project")
    config: RequiredStr = param(query="config")
    name: RequiredStr = param(query="name")


@dataclass(kw_only=True)
class SecretListOptions:
    project: RequiredStr = param(query="project")
    config: RequiredStr = param(query="config")
    include_dynamic: Optional[bool] = param(query="include_dynamic_secrets", omitempty=True, default=None)
    # Lease lifetime for dynamic secrets; only used together with include_dynamic.
    dynamic_ttl_seconds: Optional[int] = param(query="dynamic_secrets_ttl_sec", omitempty=True, default=None)
    # Comma-separated secret names to restrict the result to.
    secrets: Optional[str] = param(query="secrets", omitempty=True, default=None)


@dataclass(kw_only=True)
class SecretUpdateOptions:
    project: RequiredStr = param(body="project")
    config: RequiredStr = param(body="config")
    new_secrets: dict[str, str] = param(body="secrets", default_factory=dict)


@dataclass(kw_only=True)
class SecretDownloadOptions:
    project: RequiredStr = param(query="project")
    config: RequiredStr = param(query="config")
    include_dynamic: Optional[bool] = param(query="include_dynamic_secrets", omitempty=True, default=None)
    dynamic_ttl_seconds: Optional[int] = param(query="dynamic_secrets_ttl_sec", omitempty=True, default=None)
    # json, env, yaml, docker, env-no-quotes, dotnet-json
    format: Optional[str] = param(query="format", omitempty=True, default=None)
    # camel, upper-camel, lower-snake, tf-var, dotnet, dotnet-env, lower-kebab
    name_transformer: Optional[str] = param(query="name_transformer", omitempty=True, default=None)


class SecretGetResponse(APIResponse):
    secret: Optional[Secret] = None

    @model_validator(mode="before")
    @classmethod
    def _inline_secret(cls, data: Any) -> Any:
        return lift_inline(data, "secret", ("name", "value"))


class SecretListResponse(APIResponse):
    secrets: dict[str, SecretValue] = Field(default_factory=dict)


class SecretUpdateResponse(APIResponse):
    secrets: dict[str, str] = Field(default_factory=dict)
