import asyncio
import json

import httpx
import pytest

from model_presets.core.errors import (
    HttpStatusError,
    MalformedResponseError,
    ParseError,
    TransportError,
)
from model_presets.presets import registry


def test_round_trip_single_record(registry_body, make_record):
    presets = registry.parse_and_map(registry_body(make_record("foo", "foo-backend", "bar")))
    assert len(presets) == 1
    preset = presets[0]
    assert preset.id == "foo-backend"
    assert preset.model == "foo-backend"
    assert preset.display_name == "foo"
    assert preset.description == "bar"
    assert preset.is_default is True
    assert preset.default_reasoning_effort is None
    assert preset.supported_reasoning_efforts == ()


def test_first_record_is_the_only_default(registry_body, make_record):
    body = registry_body(
        make_record("alpha", "alpha-b"),
        make_record("beta", "beta-b"),
        make_record("gamma", "gamma-b"),
    )
    presets = registry.parse_and_map(body)
    assert [preset.id for preset in presets] == ["alpha-b", "beta-b", "gamma-b"]
    assert [preset.is_default for preset in presets] == [True, False, False]


def test_missing_description_defaults_to_empty(registry_body, make_record):
    preset = registry.parse_and_map(registry_body(make_record("foo", "foo-backend")))[0]
    assert preset.description == ""


def test_null_description_defaults_to_empty():
    body = {"data": [{"model_name": "foo", "litellm_params": {"model": "f"}, "model_info": {"description": None}}]}
    assert registry.parse_and_map(json.dumps(body))[0].description == ""


def test_unknown_fields_are_ignored(registry_body, make_record):
    item = make_record("foo", "foo-backend", "bar")
    item["tier"] = "gold"
    item["model_info"]["reasoning"] = {"levels": ["low"]}
    presets = registry.parse_and_map(registry_body(item, pagination={"next": None}))
    assert presets[0].id == "foo-backend"


@pytest.mark.parametrize(
    ("litellm_extra", "info_extra"),
    [
        ({}, {"labels": ["beta"]}),
        ({}, {"version": 2}),
        ({}, {"context_window": "200k", "banner": {"text": "new"}, "survey_id": 42}),
        ({"max_tokens": 4096.5}, {}),
    ],
)
def test_unread_fields_never_fail_the_catalog(registry_body, make_record, litellm_extra, info_extra):
    item = make_record("foo", "foo-backend", "bar")
    item["litellm_params"].update(litellm_extra)
    item["model_info"].update(info_extra)
    presets = registry.parse_and_map(registry_body(item))
    assert [(preset.id, preset.description) for preset in presets] == [("foo-backend", "bar")]


def test_empty_data_maps_to_empty_catalog(registry_body):
    assert registry.parse_and_map(registry_body()) == []


@pytest.mark.parametrize(
    "body",
    [
        b'{"object": "list"}',
        b'{"data": {"model_name": "foo"}}',
        b'{"data": [{"litellm_params": {"model": "foo-backend"}}]}',
        b'{"data": [{"model_name": "foo", "litellm_params": {}}]}',
        b'{"data": [{"model_name": 7, "litellm_params": {"model": "foo-backend"}}]}',
        b"[]",
        b"not json",
    ],
)
def test_malformed_bodies_raise_parse_error(body):
    with pytest.raises(ParseError):
        registry.parse_and_map(body)


def test_build_model_info_url_trims_trailing_slashes():
    assert registry.build_model_info_url("https://oca.example.com//") == "https://oca.example.com/v1/model/info"
    assert registry.build_model_info_url("https://oca.example.com/api") == "https://oca.example.com/api/v1/model/info"


def test_fetch_remote_sends_bearer_token(mock_client, registry_body, make_record):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=registry_body(make_record("foo", "foo-backend", "bar")))

    async def _run():
        async with mock_client(handler) as client:
            return await registry.fetch_remote("https://oca.example.com/", "tok-123", client=client)

    presets = asyncio.run(_run())
    assert [preset.id for preset in presets] == ["foo-backend"]
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert str(seen[0].url) == "https://oca.example.com/v1/model/info"
    assert seen[0].headers["Authorization"] == "Bearer tok-123"


def test_fetch_remote_http_error_skips_parsing(mock_client, monkeypatch):
    def fail_parse(raw):
        raise AssertionError("body must not be parsed")

    monkeypatch.setattr(registry, "parse_and_map", fail_parse)

    async def _run():
        async with mock_client(lambda request: httpx.Response(401, text="nope")) as client:
            await registry.fetch_remote("https://oca.example.com", "bad", client=client)

    with pytest.raises(HttpStatusError) as excinfo:
        asyncio.run(_run())
    assert excinfo.value.status_code == 401


def test_fetch_remote_wraps_malformed_body(mock_client):
    async def _run():
        async with mock_client(lambda request: httpx.Response(200, json={"models": []})) as client:
            await registry.fetch_remote("https://oca.example.com", "tok", client=client)

    with pytest.raises(MalformedResponseError) as excinfo:
        asyncio.run(_run())
    assert isinstance(excinfo.value.__cause__, ParseError)


def test_fetch_remote_wraps_transport_failures(mock_client):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async def _run():
        async with mock_client(handler) as client:
            await registry.fetch_remote("https://oca.example.com", "tok", client=client)

    with pytest.raises(TransportError):
        asyncio.run(_run())


def test_cancellation_is_not_a_fetch_error(mock_client):
    async def _run() -> bool:
        entered = asyncio.Event()

        async def handler(request: httpx.Request) -> httpx.Response:
            entered.set()
            await asyncio.Event().wait()
            return httpx.Response(200)

        async with mock_client(handler) as client:
            task = asyncio.create_task(registry.fetch_remote("https://oca.example.com", "tok", client=client))
            await entered.wait()
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task
            return task.cancelled()

    assert asyncio.run(_run()) is True


@pytest.mark.parametrize(("timeout_s", "expected_kwargs"), [(2.5, {"timeout": 2.5}), (None, {})])
def test_fetch_remote_opens_and_closes_its_own_client(monkeypatch, registry_body, make_record, timeout_s, expected_kwargs):
    real_client = httpx.AsyncClient
    created: list[tuple[dict, httpx.AsyncClient]] = []
    body = registry_body(make_record("foo", "foo-backend", "bar"))

    def factory(**kwargs):
        client = real_client(transport=httpx.MockTransport(lambda request: httpx.Response(200, content=body)), **kwargs)
        created.append((kwargs, client))
        return client

    monkeypatch.setattr(registry.httpx, "AsyncClient", factory)
    presets = asyncio.run(registry.fetch_remote("https://oca.example.com", "tok", timeout_s=timeout_s))

    assert [preset.id for preset in presets] == ["foo-backend"]
    assert len(created) == 1
    kwargs, client = created[0]
    assert kwargs == expected_kwargs
    assert client.is_closed
