"""Remote sync domain exports."""

from .remote_sync_use_case import (
    REMOTE_SCHEMA_FILENAME,
    REMOTE_TYPES_FILENAME,
    SyncError,
    execute_sync,
    fetch_remote_schema,
    parse_headers,
)
from .sync_contracts import SyncOutcome, SyncRequest

__all__ = [
    "SyncRequest",
    "SyncOutcome",
    "SyncError",
    "REMOTE_SCHEMA_FILENAME",
    "REMOTE_TYPES_FILENAME",
    "execute_sync",
    "fetch_remote_schema",
    "parse_headers",
]
