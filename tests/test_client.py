"""Tests for the httpx registration transport."""

import json

import httpx
import pytest

from runner_register import LabelSpec, RegistrationRequest, TransportError, TransportUnavailableError
from runner_register.client import REGISTER_PATH, HttpRegistrationClient


def _request() -> RegistrationRequest:
    return RegistrationRequest(
        token="token",
        instance_addr="http://test",
        name="runner-1",
        labels=[LabelSpec("ubuntu", "host"), LabelSpec("builder", "docker", "node:18")],
    )


@pytest.mark.asyncio
async def test_register_posts_labels():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={"runner": {"id": "3", "uuid": "u-3", "name": "runner-1", "token": "secret"}},
        )

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test") as raw:
        client = HttpRegistrationClient("http://test", client=raw)
        runner = await client.register(_request())

    assert seen["path"] == REGISTER_PATH
    assert seen["body"]["token"] == "token"
    assert seen["body"]["name"] == "runner-1"
    assert seen["body"]["labels"] == ["ubuntu:host", "builder:docker:node:18"]
    assert runner.id == 3
    assert runner.uuid == "u-3"
    assert runner.token == "secret"
    assert runner.address == "http://test"


@pytest.mark.asyncio
async def test_http_error_surfaces_detail():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"msg": "runner registration token not found"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test") as raw:
        client = HttpRegistrationClient("http://test", client=raw)
        with pytest.raises(TransportError) as exc:
            await client.register(_request())

    assert exc.value.status_code == 401
    message = str(exc.value)
    assert f"POST {REGISTER_PATH} -> 401" in message
    assert "runner registration token not found" in message


@pytest.mark.asyncio
async def test_text_error_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="upstream meltdown")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test") as raw:
        client = HttpRegistrationClient("http://test", client=raw)
        with pytest.raises(TransportError, match="upstream meltdown"):
            await client.register(_request())


@pytest.mark.asyncio
async def test_connection_failure_is_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test") as raw:
        client = HttpRegistrationClient("http://test", client=raw)
        with pytest.raises(TransportUnavailableError, match="cannot reach http://test"):
            await client.register(_request())


@pytest.mark.asyncio
async def test_missing_runner_in_response():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"ok": True})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test") as raw:
        client = HttpRegistrationClient("http://test", client=raw)
        with pytest.raises(TransportError, match="missing runner"):
            await client.register(_request())


@pytest.mark.asyncio
async def test_external_client_not_closed():
    async with httpx.AsyncClient(base_url="http://test") as raw:
        client = HttpRegistrationClient("http://test/", client=raw)
        assert client.base_url == "http://test"
        await client.aclose()
        assert not raw.is_closed


@pytest.mark.asyncio
async def test_non_json_response():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>welcome</html>")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test") as raw:
        client = HttpRegistrationClient("http://test", client=raw)
        with pytest.raises(TransportError, match="not JSON"):
            await client.register(_request())


@pytest.mark.asyncio
async def test_runner_with_invalid_fields():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"runner": {"id": "not-a-number", "uuid": "u"}})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test") as raw:
        client = HttpRegistrationClient("http://test", client=raw)
        with pytest.raises(TransportError, match="invalid response from http://test"):
            await client.register(_request())


@pytest.mark.asyncio
async def test_invalid_address_fails_on_register_not_construction():
    client = HttpRegistrationClient("http://[::1")

    with pytest.raises(TransportError, match="invalid instance address"):
        await client.register(_request())
    await client.aclose()
