import json

import httpx
import pytest

from src.snippet.errors import ResourceNotFoundError, StorageError
from src.store.config import StoreConfig
from src.store.http_store import HttpResourceStore, create_remote_store


def _store(handler, **overrides):
    config = StoreConfig(url="https://store.example", store_id="abc", resource="s", **overrides)
    transport = httpx.MockTransport(handler)
    return HttpResourceStore(
        config,
        client_factory=lambda cfg: httpx.Client(
            base_url=cfg.url,
            timeout=cfg.timeout,
            transport=transport,
        ),
    )


def test_store_requires_an_id():
    with pytest.raises(ValueError):
        HttpResourceStore(StoreConfig(store_id=None))


def test_set_puts_json_payload():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = request.url
        seen["body"] = json.loads(request.content.decode("utf-8"))
        return httpx.Response(200, json=True)

    store = _store(handler)
    try:
        assert store.set("k1", {"script": "ls"}) is True
    finally:
        store.close()

    assert seen["method"] == "PUT"
    assert seen["url"] == httpx.URL("https://store.example/abc/s/k1")
    assert seen["body"] == {"script": "ls"}


def test_set_rejection_carries_status():
    store = _store(lambda request: httpx.Response(413))

    with pytest.raises(StorageError) as excinfo:
        store.set("k1", {"script": "ls"})

    assert excinfo.value.status == 413


def test_set_transport_failure_is_storage_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection failed")

    with pytest.raises(StorageError):
        _store(handler).set("k1", {})


def test_get_returns_decoded_value():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/abc/s/k1"
        return httpx.Response(200, json={"id": "k1"})

    assert _store(handler).get("k1") == {"id": "k1"}


def test_composite_keys_stay_a_single_segment():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["raw_path"] = request.url.raw_path
        return httpx.Response(200, json={"id": "alice/greet"})

    _store(handler).get("alice/greet")

    assert seen["raw_path"] == b"/abc/s/alice%2Fgreet"


@pytest.mark.parametrize(
    "response",
    [httpx.Response(404), httpx.Response(200, content=b"null")],
)
def test_get_missing_key(response):
    with pytest.raises(ResourceNotFoundError):
        _store(lambda request: response).get("k1")


def test_get_server_error_is_storage_error():
    with pytest.raises(StorageError) as excinfo:
        _store(lambda request: httpx.Response(502)).get("k1")

    assert excinfo.value.status == 502
    assert not isinstance(excinfo.value, ResourceNotFoundError)


def test_list_returns_all_values():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/abc/s/"
        return httpx.Response(200, json=[{"id": "a"}, {"id": "b"}])

    assert _store(handler).list() == [{"id": "a"}, {"id": "b"}]


@pytest.mark.parametrize(
    "response",
    [httpx.Response(500), httpx.Response(200, content=b"<html>"), httpx.Response(200, json={})],
)
def test_list_swallows_failures(response):
    assert _store(lambda request: response).list() == []


def test_remove_and_remove_all_report_success():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append((request.method, request.url.path))
        return httpx.Response(200)

    store = _store(handler)

    assert store.remove("k1") is True
    assert store.remove_all() is True
    assert calls == [("DELETE", "/abc/s/k1"), ("DELETE", "/abc/s/")]


def test_resource_names_and_drop_store():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "DELETE":
            return httpx.Response(404)
        return httpx.Response(200, json=["s", "users"])

    store = _store(handler)

    assert store.resource_names() == ["s", "users"]
    assert store.drop_store() is False


def test_create_remote_store_returns_new_id():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/new"
        return httpx.Response(200, json={"id": "f00d"})

    client = httpx.Client(base_url="https://store.example", transport=httpx.MockTransport(handler))

    assert create_remote_store("https://store.example", client=client) == "f00d"


def test_create_remote_store_without_id_fails():
    client = httpx.Client(
        base_url="https://store.example",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})),
    )

    with pytest.raises(StorageError):
        create_remote_store("https://store.example", client=client)
