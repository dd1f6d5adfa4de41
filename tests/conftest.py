from __future__ import annotations

import json
import os
from typing import Any, Callable

import httpx
import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("MODEL_PRESETS_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def registry_body() -> Callable[..., bytes]:
    def _build(*records: dict[str, Any], **extra: Any) -> bytes:
        payload: dict[str, Any] = {"object": "list", "data": list(records)}
        payload.update(extra)
        return json.dumps(payload).encode("utf-8")

    return _build


@pytest.fixture
def mock_client() -> Callable[..., httpx.AsyncClient]:
    def _build(handler: Callable[[httpx.Request], Any]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _build


@pytest.fixture
def make_record() -> Callable[..., dict[str, Any]]:
    def _build(name: str, backend: str, description: str | None = None) -> dict[str, Any]:
        item: dict[str, Any] = {
            "model_name": name,
            "litellm_params": {"model": backend, "max_tokens": 8192},
        }
        if description is not None:
            item["model_info"] = {"description": description, "context_window": 200000}
        return item

    return _build
