"""AsyncBackend: same contract as Backend, with task cancellation."""

import asyncio
import json

import httpx
import pytest

from doppler_sdk.errors import APIError, InvalidPayloadError
from doppler_sdk.models.project import ProjectGetOptions, ProjectGetResponse
from doppler_sdk.transport.http import AsyncBackend, AsyncBackendConfig, Request

BASE_URL = "https://api.example.com/v3"


def make_backend(handler) -> AsyncBackend:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AsyncBackend(AsyncBackendConfig(client=client, url=BASE_URL))


@pytest.mark.asyncio
async def test_call_decodes_typed_response():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"success": True, "project": {"name": "backend"}})

    backend = make_backend(handler)
    resp = await backend.call(
        Request(method="GET", path="/v3/projects/project", key="k", payload=ProjectGetOptions(name="backend")),
        ProjectGetResponse,
    )
    assert resp.project.name == "backend"
    assert resp.status_code == 200
    assert str(seen[0].url) == "https://api.example.com/v3/projects/project?project=backend"


@pytest.mark.asyncio
async def test_messages_raise():
    backend = make_backend(lambda request: httpx.Response(200, json={"messages": ["bad config"]}))
    with pytest.raises(APIError, match="bad config"):
        await backend.call(Request(method="GET", path="/v3/projects", key="k"), ProjectGetResponse)


@pytest.mark.asyncio
async def test_validation_gate():
    seen = []
    backend = make_backend(lambda request: seen.append(request) or httpx.Response(200))
    with pytest.raises(InvalidPayloadError):
        await backend.call(Request(method="GET", path="/v3/projects/project", key="k", payload=ProjectGetOptions(name="")))
    assert seen == []


@pytest.mark.asyncio
async def test_call_raw_streams():
    backend = make_backend(lambda request: httpx.Response(200, content=b'{"A":"1"}'))
    resp = await backend.call_raw(Request(method="GET", path="/v3/configs/config/secrets/download", key="k"))
    try:
        assert json.loads(await resp.aread()) == {"A": "1"}
    finally:
        await resp.aclose()


@pytest.mark.asyncio
async def test_cancellation_aborts_the_request():
    started = asyncio.Event()

    async def handler(request):
        started.set()
        await asyncio.sleep(30)
        return httpx.Response(200)

    backend = make_backend(handler)
    task = asyncio.create_task(backend.call(Request(method="GET", path="/v3/projects", key="k")))
    await started.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task


@pytest.mark.asyncio
async def test_owned_client_is_closed():
    async with AsyncBackend() as backend:
        client = backend._client
    assert client.is_closed


@pytest.mark.asyncio
async def test_supplied_client_is_left_open():
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    async with AsyncBackend(AsyncBackendConfig(client=client)):
        pass
    assert not client.is_closed
    await client.aclose()
