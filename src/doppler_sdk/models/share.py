"""
Doppler Share models — /v1/share/secrets.

Encrypted shares are end-to-end: the secret is AES-GCM encrypted client side with a
key derived via PBKDF2, and only the ciphertext plus a hash of the password is sent.
"""

from dataclasses import dataclass
from typing import Any, Literal, Optional

from pydantic import BaseModel, model_validator

from doppler_sdk.options import param
from doppler_sdk.transport.envelope import APIResponse, lift_inline
from doppler_sdk.validation import RequiredStr

SHARE_ENCRYPTION_KDF = "pbkdf2"
SHARE_ENCRYPTION_SALT_ROUNDS = 100000


class SharePlain(BaseModel):
    url: Optional[str] = None
    authenticated_url: Optional[str] = None
    password: Optional[str] = None


class ShareEncrypted(BaseModel):
    url: Optional[str] = None


@dataclass(kw_only=True)
class SharePlainOptions:
    secret: RequiredStr = param(body="secret")
    expire_views: Optional[int] = param(body="expire_views", omitempty=True, default=None)    # 1-50, -1 for unlimited
    expire_days: Optional[int] = param(body="expire_days", omitempty=True, default=None)      # 1-90


@dataclass(kw_only=True)
class ShareEncryptedOptions:
    secret: RequiredStr = param(body="encrypted_secret")           # Base64 AES-GCM ciphertext
    password: RequiredStr = param(body="hashed_password")          # SHA256 of the password, not of the derived key
    kdf: Literal["pbkdf2"] = param(body="encryption_kdf", default=SHARE_ENCRYPTION_KDF)
    salt_rounds: Literal[100000] = param(body="encryption_salt_rounds", default=SHARE_ENCRYPTION_SALT_ROUNDS)
    expire_views: Optional[int] = param(body="expire_views", omitempty=True, default=None)
    expire_days: Optional[int] = param(body="expire_days", omitempty=True, default=None)


class SharePlainResponse(APIResponse):
    secret: Optional[SharePlain] = None

    @model_validator(mode="before")
    @classmethod
    def _inline_secret(cls, data: Any) -> Any:
        return lift_inline(data, "secret", ("url", "authenticated_url", "password"))


class ShareEncryptedResponse(APIResponse):
    secret: Optional[ShareEncrypted] = None

    @model_validator(mode="before")
    @classmethod
    def _inline_secret(cls, data: Any) -> Any:
        return lift_inline(data, "secret", ("url",))
