"""Shared fixtures: settings isolation and a recording mock transport."""

import httpx
import pytest

from doppler_sdk import Doppler, settings
from doppler_sdk.transport.http import Backend, BackendConfig

BASE_URL = "https://api.example.com"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    monkeypatch.delenv(settings.KEY_ENV_VAR, raising=False)
    monkeypatch.delenv(settings.API_HOST_ENV_VAR, raising=False)
    monkeypatch.setattr(settings, "key", None)
    monkeypatch.setattr(settings, "enable_validation", True)
    yield
    settings.set_app_info(None)


class Recorder:
    """Answers every request with the next queued response and keeps what it saw."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []

    def reply(self, status_code: int = 200, **kwargs) -> "Recorder":
        self.responses.append(httpx.Response(status_code, **kwargs))
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self.responses:
            return self.responses.pop(0)
        return httpx.Response(200, json={"success": True})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def http_client(recorder):
    with httpx.Client(transport=httpx.MockTransport(recorder)) as client:
        yield client


@pytest.fixture
def backend(http_client):
    return Backend(BackendConfig(client=http_client, url=BASE_URL))


@pytest.fixture
def doppler(http_client):
    with Doppler(key="dp.pt.test", base_url=BASE_URL, client=http_client) as client:
        yield client
