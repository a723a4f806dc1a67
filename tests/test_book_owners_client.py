import json

import httpx
import pytest

from bookowners.integrations.clients.mocks.book_owners import MockBookOwnersClient
from bookowners.integrations.clients.real_http.book_owners import RealBookOwnersClient
from bookowners.integrations.policy.response_wrappers import IntegrationResponseError

BASE_URL = "https://mocked-api.com"


def _client(handler, base_url=BASE_URL, **kwargs):
    return RealBookOwnersClient(base_url=base_url, transport=httpx.MockTransport(handler), **kwargs)


@pytest.mark.asyncio
async def test_fetches_owners_from_bookowners_endpoint(owners_payload):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=owners_payload)

    owners = await _client(handler).get_book_owners()

    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert str(seen[0].url) == "https://mocked-api.com/api/v1/bookowners"
    assert [o.name for o in owners] == ["Jane", "Charlotte", "Max", "William", "Charles", "Bob"]
    assert owners[0].books[1].type == "Paperback"
    assert owners[-1].books is None


@pytest.mark.asyncio
async def test_trailing_slash_on_base_url_is_ignored():
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json=[])

    await _client(handler, base_url=BASE_URL + "/").get_book_owners()

    assert seen == ["https://mocked-api.com/api/v1/bookowners"]


@pytest.mark.asyncio
async def test_null_body_returns_empty_list():
    owners = await _client(lambda request: httpx.Response(200, content=b"null", headers={"Content-Type": "application/json"})).get_book_owners()

    assert owners == []


@pytest.mark.asyncio
async def test_empty_body_returns_empty_list():
    owners = await _client(lambda request: httpx.Response(200, content=b"")).get_book_owners()

    assert owners == []


@pytest.mark.asyncio
async def test_pascal_case_fields_are_accepted():
    payload = [{"Name": "Jane", "Age": 16, "Books": [{"Name": "Emma", "Type": "Hardcover"}]}]

    owners = await _client(lambda request: httpx.Response(200, json=payload)).get_book_owners()

    assert owners[0].name == "Jane"
    assert owners[0].age == 16
    assert owners[0].books[0].name == "Emma"


@pytest.mark.asyncio
async def test_server_error_raises_http_status_error():
    client = _client(lambda request: httpx.Response(500, text="upstream exploded"))

    with pytest.raises(httpx.HTTPStatusError) as excinfo:
        await client.get_book_owners()

    assert excinfo.value.response.status_code == 500
    assert "500" in str(excinfo.value)


@pytest.mark.asyncio
async def test_not_found_raises_http_status_error():
    client = _client(lambda request: httpx.Response(404))

    with pytest.raises(httpx.HTTPStatusError):
        await client.get_book_owners()


@pytest.mark.asyncio
async def test_timeout_propagates():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(httpx.TimeoutException):
        await _client(handler).get_book_owners()


@pytest.mark.asyncio
async def test_connection_error_propagates():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(httpx.ConnectError):
        await _client(handler).get_book_owners()


@pytest.mark.asyncio
async def test_malformed_json_raises_decode_error():
    client = _client(lambda request: httpx.Response(200, content=b"{not json"))

    with pytest.raises(json.JSONDecodeError):
        await client.get_book_owners()


@pytest.mark.asyncio
async def test_non_array_payload_raises_integration_error():
    client = _client(lambda request: httpx.Response(200, json={"owners": []}))

    with pytest.raises(IntegrationResponseError):
        await client.get_book_owners()


@pytest.mark.asyncio
async def test_missing_base_url_is_rejected(monkeypatch):
    monkeypatch.delenv("BOOK_OWNERS_API_URL", raising=False)
    client = RealBookOwnersClient(base_url="")

    with pytest.raises(ValueError):
        await client.get_book_owners()


def test_base_url_falls_back_to_environment(monkeypatch):
    monkeypatch.setenv("BOOK_OWNERS_API_URL", "https://env-api.example/")

    client = RealBookOwnersClient()

    assert client.url == "https://env-api.example/api/v1/bookowners"


@pytest.mark.asyncio
async def test_mock_client_reads_json_file(tmp_path, owners_payload):
    data_path = tmp_path / "owners.json"
    data_path.write_text(json.dumps(owners_payload), encoding="utf-8")

    owners = await MockBookOwnersClient(data_path=data_path).get_book_owners()

    assert len(owners) == len(owners_payload)
    assert owners[2].name == "Max"


@pytest.mark.asyncio
async def test_mock_client_missing_file_returns_empty(tmp_path):
    owners = await MockBookOwnersClient(data_path=tmp_path / "missing.json").get_book_owners()

    assert owners == []


@pytest.mark.asyncio
async def test_mock_client_in_memory_owners():
    client = MockBookOwnersClient(owners=[{"name": "Kid", "age": 8, "books": []}])

    owners = await client.get_book_owners()

    assert owners[0].name == "Kid"
    assert owners[0].books == []
