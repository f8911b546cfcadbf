"""Canonical type tree produced from schema nodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias

DATE_TIME_FORMAT = "date-time"


class PrimitiveKind(str, Enum):
    """Semantic primitive categories."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PropertyNode:
    """One member of an object type."""

    name: str
    type_node: TypeNode
    required: bool
    description: str | None = None


@dataclass(frozen=True)
class ObjectNode:
    properties: tuple[PropertyNode, ...] = ()


@dataclass(frozen=True)
class ArrayNode:
    item: TypeNode


@dataclass(frozen=True)
class EnumNode:
    values: tuple[Any, ...]


@dataclass(frozen=True)
class UnionNode:
    variants: tuple[TypeNode, ...]


@dataclass(frozen=True)
class PrimitiveNode:
    kind: PrimitiveKind
    format_hint: str | None = None

    @property
    def is_date_or_string(self) -> bool:
        """Return True for strings that also accept date values."""
        return self.kind is PrimitiveKind.STRING and self.format_hint == DATE_TIME_FORMAT


@dataclass(frozen=True)
class UnknownNode:
    """Fallback for nodes with no recognizable shape."""


TypeNode: TypeAlias = ObjectNode | ArrayNode | EnumNode | UnionNode | PrimitiveNode | UnknownNode


@dataclass(frozen=True)
class TypeDefinition:
    """Named top-level type mapped from one schema definition."""

    name: str
    type_node: TypeNode
    description: str | None = None
