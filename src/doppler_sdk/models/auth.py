"""
Auth models — /v3/auth/revoke.
"""

from dataclasses import dataclass
from typing import Annotated, Any, Optional

from pydantic import Field

from doppler_sdk.options import param
from doppler_sdk.transport.envelope import APIResponse


@dataclass(kw_only=True)
class AuthToken:
    token: Optional[str] = param(body="token", omitempty=True, default=None)


@dataclass(kw_only=True)
class AuthRevokeOptions:
    tokens: Annotated[list[AuthToken], Field(min_length=1)] = param(body="tokens", default_factory=list)

    def as_json_body(self) -> Any:
        # The endpoint takes the bare token list, not {"tokens": [...]}.
        return list(self.tokens)


class AuthRevokeResponse(APIResponse):
    pass
