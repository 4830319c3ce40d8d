"""
Share API: one-off links to a secret value (share.doppler.com).
"""

from typing import Optional

from doppler_sdk._resource import Resource
from doppler_sdk.models.share import (
    ShareEncrypted,
    ShareEncryptedOptions,
    ShareEncryptedResponse,
    SharePlain,
    SharePlainOptions,
    SharePlainResponse,
)
from doppler_sdk.transport.envelope import APIResponse


class ShareAPI(Resource):
    def plain(self, options: SharePlainOptions) -> tuple[Optional[SharePlain], APIResponse]:
        """Share a plain-text secret; Doppler encrypts it server side."""
        resp = self._call("POST", "/v1/share/secrets/plain", options, SharePlainResponse)
        return resp.secret, resp.envelope()

    def encrypted(self, options: ShareEncryptedOptions) -> tuple[Optional[ShareEncrypted], APIResponse]:
        """Share a secret already encrypted by the caller.

        The password is never sent; the recipient needs it out of band to decrypt.
        """
        resp = self._call("POST", "/v1/share/secrets/encrypted", options, ShareEncryptedResponse)
        return resp.secret, resp.envelope()


def default() -> ShareAPI:
    return ShareAPI()


def plain(options: SharePlainOptions) -> tuple[Optional[SharePlain], APIResponse]:
    return default().plain(options)


def encrypted(options: ShareEncryptedOptions) -> tuple[Optional[ShareEncrypted], APIResponse]:
    return default().encrypted(options)
