"""Remote sync entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class SyncRequest:
    """Input contract for syncing types from a remote schema endpoint."""

    url: str | None
    output_dir: str
    headers: str | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class SyncOutcome:
    """Output contract for one completed sync."""

    types_path: Path
    schema_path: Path
    definition_count: int
