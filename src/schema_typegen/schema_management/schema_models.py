"""Schema management entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Dialect(str, Enum):
    """Supported schema document families."""

    OPENAPI = "openapi"
    JSON_SCHEMA = "json_schema"


@dataclass(frozen=True)
class CanonicalSchema:
    """Dialect-independent schema with ordered definitions."""

    title: str | None
    version: str | None
    definitions: dict[str, Any]
    paths: Any = None

    @property
    def definition_names(self) -> tuple[str, ...]:
        return tuple(self.definitions)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of structural schema checks."""

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        """Return True when no blocking errors are present."""
        return not self.errors
