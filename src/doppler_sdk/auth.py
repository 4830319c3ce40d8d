"""
Auth API.
"""

from doppler_sdk._resource import Resource
from doppler_sdk.models.auth import AuthRevokeOptions, AuthRevokeResponse
from doppler_sdk.transport.envelope import APIResponse


class AuthAPI(Resource):
    def revoke(self, options: AuthRevokeOptions) -> APIResponse:
        """Revoke API tokens. Revoking the key in use ends this client's access too."""
        resp = self._call("POST", "/v3/auth/revoke", options, AuthRevokeResponse)
        return resp.envelope()


def default() -> AuthAPI:
    return AuthAPI()


def revoke(options: AuthRevokeOptions) -> APIResponse:
    return default().revoke(options)
