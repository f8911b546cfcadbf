"""Remote sync use-case tests."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
from schema_typegen.remote_sync import (
    SyncError,
    SyncRequest,
    execute_sync,
    fetch_remote_schema,
    parse_headers,
)

_REMOTE_URL = "https://api.example.com/openapi.json"


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_sync_writes_types_and_raw_schema(tmp_path: Path) -> None:
    document = {
        "openapi": "3.0.0",
        "info": {"title": "Remote Shop", "version": "4.0.0"},
        "components": {"schemas": {"Item": {"type": "object", "properties": {}}}},
    }
    seen_headers: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen_headers.update(request.headers)
        return httpx.Response(200, json=document)

    outcome = execute_sync(
        SyncRequest(
            url=_REMOTE_URL,
            output_dir=str(tmp_path / "types"),
            headers='{"Authorization": "Bearer token"}',
        ),
        client=_client(handler),
    )

    assert seen_headers["authorization"] == "Bearer token"
    assert outcome.definition_count == 1
    assert outcome.types_path.name == "remote-types.ts"
    types_text = outcome.types_path.read_text(encoding="utf-8")
    assert " * Remote Shop\n * Version: 4.0.0\n" in types_text
    assert "export interface Item {}" in types_text
    assert json.loads(outcome.schema_path.read_text(encoding="utf-8")) == document


def test_sync_requires_url(tmp_path: Path) -> None:
    with pytest.raises(SyncError, match="API URL is required"):
        execute_sync(SyncRequest(url=None, output_dir=str(tmp_path)))


@pytest.mark.parametrize("raw_headers", ["not-json", "[1, 2]"])
def test_invalid_headers_are_rejected(raw_headers: str) -> None:
    with pytest.raises(SyncError, match="Invalid headers format"):
        parse_headers(raw_headers)


def test_headers_are_stringified() -> None:
    assert parse_headers('{"X-Retry": 3}') == {"X-Retry": "3"}
    assert parse_headers(None) == {}


def test_http_error_status_is_reported() -> None:
    client = _client(lambda request: httpx.Response(404))

    with pytest.raises(SyncError, match="API request failed: 404 Not Found"):
        fetch_remote_schema(_REMOTE_URL, headers={}, timeout=5, client=client)


def test_empty_response_is_reported() -> None:
    client = _client(lambda request: httpx.Response(200, content=b""))

    with pytest.raises(SyncError, match="No data received from API"):
        fetch_remote_schema(_REMOTE_URL, headers={}, timeout=5, client=client)


def test_non_json_response_is_reported() -> None:
    client = _client(lambda request: httpx.Response(200, content=b"<html></html>"))

    with pytest.raises(SyncError, match="not valid JSON"):
        fetch_remote_schema(_REMOTE_URL, headers={}, timeout=5, client=client)


def test_transport_errors_are_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SyncError, match="Sync failed: connection refused"):
        fetch_remote_schema(_REMOTE_URL, headers={}, timeout=5, client=_client(handler))
