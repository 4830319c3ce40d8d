"""
Secrets API.

`download` returns the config's secrets as a file in the requested format, so the
body is read verbatim instead of being decoded as JSON.
"""

import json
from typing import Optional

from doppler_sdk._resource import Resource
from doppler_sdk.errors import APIError
from doppler_sdk.models.secret import (
    Secret,
    SecretDownloadOptions,
    SecretGetOptions,
    SecretGetResponse,
    SecretListOptions,
    SecretListResponse,
    SecretUpdateOptions,
    SecretUpdateResponse,
    SecretValue,
)
from doppler_sdk.transport.envelope import APIResponse
from doppler_sdk.transport.http import Request


class SecretsAPI(Resource):
    def get(self, options: SecretGetOptions) -> tuple[Optional[Secret], APIResponse]:
        resp = self._call("GET", "/v3/configs/config/secret", options, SecretGetResponse)
        return resp.secret, resp.envelope()

    def list(self, options: SecretListOptions) -> tuple[dict[str, SecretValue], APIResponse]:
        resp = self._call("GET", "/v3/configs/config/secrets", options, SecretListResponse)
        return resp.secrets, resp.envelope()

    def update(self, options: SecretUpdateOptions) -> tuple[dict[str, str], APIResponse]:
        """Set several secrets at once. Returns the resulting name -> value map."""
        resp = self._call("PUT", "/v3/configs/config/secrets", options, SecretUpdateResponse)
        return resp.secrets, resp.envelope()

    def download(self, options: SecretDownloadOptions) -> tuple[str, APIResponse]:
        """Download the secrets as text (`options.format`, JSON by default)."""
        req = Request(method="GET", path="/v3/configs/config/secrets/download", key=self._key, payload=options)
        resp = self._backend.call_raw(req)
        try:
            body = resp.read()
            text = resp.text
        finally:
            resp.close()

        envelope = APIResponse()
        envelope.bind(resp)
        if resp.status_code >= 400 and resp.headers.get("content-type", "").startswith("application/json"):
            try:
                data = json.loads(body)
            except ValueError:
                data = None
            envelope.absorb_body(data)
            if envelope.messages:
                raise APIError(envelope.messages, response=envelope)
        return text, envelope


def default() -> SecretsAPI:
    return SecretsAPI()


def get(options: SecretGetOptions) -> tuple[Optional[Secret], APIResponse]:
    return default().get(options)


def list(options: SecretListOptions) -> tuple[dict[str, SecretValue], APIResponse]:
    return default().list(options)


def update(options: SecretUpdateOptions) -> tuple[dict[str, str], APIResponse]:
    return default().update(options)


def download(options: SecretDownloadOptions) -> tuple[str, APIResponse]:
    return default().download(options)
