"""Tests for the HTTP authorization engine client."""

import json

import httpx
import pytest

from neo_dualwrite.core.exceptions import AuthzReadError, AuthzResponseError
from neo_dualwrite.features.tuples.entities import TupleCondition, TupleKey
from neo_dualwrite.integrations.authz import HttpAuthzClient, ReadRequest


def make_client(handler) -> HttpAuthzClient:
    http_client = httpx.AsyncClient(
        base_url="http://authz.local",
        transport=httpx.MockTransport(handler),
    )
    return HttpAuthzClient("http://authz.local", http_client=http_client)


class TestHttpAuthzClient:
    @pytest.mark.asyncio
    async def test_read_request_and_response(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["path"] = request.url.path
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={
                "tuples": [
                    {
                        "key": {"user": "user:u1", "relation": "resource_get", "object": "folder:f1",
                                "condition": {"name": "group_filter",
                                              "context": {"group_resources": ["g2", "g1"]}}},
                        "timestamp": "2024-05-01T10:00:00Z",
                    },
                    {"key": {"user": "folder:f0", "relation": "parent", "object": "folder:f1"}},
                ],
                "continuation_token": "next",
            })

        client = make_client(handler)
        response = await client.read(ReadRequest(
            namespace="org-1",
            object="folder:f1",
            relation="resource_get",
            continuation_token="prev",
            page_size=10,
        ))

        assert captured["path"] == "/v1/namespaces/org-1/read"
        assert captured["body"] == {
            "tuple_key": {"object": "folder:f1", "relation": "resource_get"},
            "page_size": 10,
            "continuation_token": "prev",
        }
        assert response.continuation_token == "next"
        assert response.has_more
        assert response.tuples[0].key == TupleKey(
            user="user:u1",
            relation="resource_get",
            object="folder:f1",
            condition=TupleCondition("group_filter", ("g1", "g2")),
        )
        assert response.tuples[0].timestamp is not None
        assert str(response.tuples[1].key) == "folder:f1#parent@folder:f0"

    @pytest.mark.asyncio
    async def test_empty_response_is_last_page(self):
        client = make_client(lambda request: httpx.Response(200, json={}))

        response = await client.read(ReadRequest("default", "team:t1", "team-admin"))

        assert response.tuples == []
        assert response.continuation_token == ""
        assert not response.has_more

    @pytest.mark.asyncio
    async def test_null_continuation_token(self):
        client = make_client(
            lambda request: httpx.Response(200, json={"tuples": [], "continuation_token": None})
        )

        response = await client.read(ReadRequest("default", "team:t1", "team-admin"))

        assert response.continuation_token == ""

    @pytest.mark.asyncio
    async def test_error_status(self):
        client = make_client(lambda request: httpx.Response(503, text="unavailable"))

        with pytest.raises(AuthzReadError) as exc_info:
            await client.read(ReadRequest("default", "team:t1", "team-admin"))

        assert exc_info.value.status_code == 503
        assert exc_info.value.object == "team:t1"
        assert "unavailable" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)

        with pytest.raises(AuthzReadError) as exc_info:
            await client.read(ReadRequest("default", "team:t1", "team-admin"))

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        client = make_client(lambda request: httpx.Response(200, text="not json"))

        with pytest.raises(AuthzResponseError):
            await client.read(ReadRequest("default", "team:t1", "team-admin"))

    @pytest.mark.asyncio
    async def test_invalid_payload(self):
        client = make_client(lambda request: httpx.Response(200, json={
            "tuples": [{"key": {"user": "user:u1", "object": "team:t1"}}],
        }))

        with pytest.raises(AuthzResponseError):
            await client.read(ReadRequest("default", "team:t1", "team-admin"))

    @pytest.mark.asyncio
    async def test_invalid_group_resources(self):
        client = make_client(lambda request: httpx.Response(200, json={
            "tuples": [{"key": {
                "user": "user:u1", "relation": "resource_get", "object": "folder:f1",
                "condition": {"name": "group_filter", "context": {"group_resources": "g1"}},
            }}],
        }))

        with pytest.raises(AuthzResponseError):
            await client.read(ReadRequest("default", "folder:f1", "resource_get"))

    @pytest.mark.asyncio
    async def test_close_leaves_injected_client_open(self):
        http_client = httpx.AsyncClient(
            base_url="http://authz.local",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})),
        )
        async with HttpAuthzClient("http://authz.local", http_client=http_client):
            pass

        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_sends_token(self):
        client = HttpAuthzClient("http://authz.local/", token="secret")

        assert client._http_client.headers["Authorization"] == "Bearer secret"
        assert client._http_client.base_url.host == "authz.local"

        await client.close()
        assert client._http_client.is_closed
