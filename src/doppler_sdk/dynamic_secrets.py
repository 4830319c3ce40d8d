"""
Dynamic secrets API: issuing and revoking leases.
"""

from doppler_sdk._resource import Resource
from doppler_sdk.models.dynamic_secret import (
    DynamicSecretIssueLeaseOptions,
    DynamicSecretIssueLeaseResponse,
    DynamicSecretRevokeLeaseOptions,
    DynamicSecretRevokeLeaseResponse,
)
from doppler_sdk.transport.envelope import APIResponse


class DynamicSecretsAPI(Resource):
    def issue_lease(self, options: DynamicSecretIssueLeaseOptions) -> APIResponse:
        resp = self._call(
            "POST", "/v3/configs/config/dynamic_secrets/dynamic_secret/leases",
            options, DynamicSecretIssueLeaseResponse,
        )
        return resp.envelope()

    def revoke_lease(self, options: DynamicSecretRevokeLeaseOptions) -> APIResponse:
        resp = self._call(
            "DELETE", "/v3/configs/config/dynamic_secrets/dynamic_secret/leases/lease",
            options, DynamicSecretRevokeLeaseResponse,
        )
        return resp.envelope()


def default() -> DynamicSecretsAPI:
    return DynamicSecretsAPI()


def issue_lease(options: DynamicSecretIssueLeaseOptions) -> APIResponse:
    return default().issue_lease(options)


def revoke_lease(options: DynamicSecretRevokeLeaseOptions) -> APIResponse:
    return default().revoke_lease(options)
