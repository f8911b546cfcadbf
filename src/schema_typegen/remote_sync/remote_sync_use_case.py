"""Remote schema sync use-case service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import httpx

from schema_typegen.schema_management import normalize_remote
from schema_typegen.type_rendering import OutputFormat, RenderOptions, render

from .sync_contracts import SyncOutcome, SyncRequest

logger = logging.getLogger(__name__)

REMOTE_TYPES_FILENAME = "remote-types.ts"
REMOTE_SCHEMA_FILENAME = "remote-schema.json"


class SyncError(Exception):
    """Raised when a remote sync cannot be completed."""


def execute_sync(request: SyncRequest, *, client: httpx.Client | None = None) -> SyncOutcome:
    """Fetch a remote schema document, render structural types and store both."""
    if not request.url:
        raise SyncError("API URL is required. Use --url option.")
    headers = parse_headers(request.headers)

    document = fetch_remote_schema(
        request.url, headers=headers, timeout=request.timeout_seconds, client=client
    )
    schema = normalize_remote(document)
    generated = render(schema, RenderOptions(output_format=OutputFormat.STRUCTURAL))

    output_dir = Path(request.output_dir)
    types_path = output_dir / REMOTE_TYPES_FILENAME
    schema_path = output_dir / REMOTE_SCHEMA_FILENAME
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        types_path.write_text(generated, encoding="utf-8")
        schema_path.write_text(
            json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
    except OSError as exc:
        raise SyncError(f"Sync failed: {exc}") from exc

    logger.info("Synced %d type definitions from %s", len(schema.definitions), request.url)
    return SyncOutcome(
        types_path=types_path.resolve(),
        schema_path=schema_path.resolve(),
        definition_count=len(schema.definitions),
    )


def parse_headers(raw_headers: str | None) -> dict[str, str]:
    """Parse a JSON object of custom request headers."""
    if not raw_headers:
        return {}
    try:
        parsed = json.loads(raw_headers)
    except json.JSONDecodeError as exc:
        raise SyncError("Invalid headers format. Use JSON format.") from exc
    if not isinstance(parsed, Mapping):
        raise SyncError("Invalid headers format. Use JSON format.")
    return {str(key): str(value) for key, value in parsed.items()}


def fetch_remote_schema(
    url: str,
    *,
    headers: Mapping[str, str],
    timeout: float,
    client: httpx.Client | None = None,
) -> Any:
    """GET a schema document and return its decoded JSON body."""
    logger.debug("Fetching schema from %s", url)
    owns_client = client is None
    http_client = client or httpx.Client(follow_redirects=True, timeout=timeout)
    try:
        response = http_client.get(url, headers=dict(headers))
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        raise SyncError(f"API request failed: {status} {exc.response.reason_phrase}") from exc
    except httpx.HTTPError as exc:
        raise SyncError(f"Sync failed: {exc}") from exc
    finally:
        if owns_client:
            http_client.close()

    if not response.content.strip():
        raise SyncError("No data received from API")
    try:
        document = response.json()
    except ValueError as exc:
        raise SyncError(f"Sync failed: response is not valid JSON: {exc}") from exc
    if not document:
        raise SyncError("No data received from API")
    return document
