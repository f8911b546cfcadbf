"""Schema node to type tree mapping service."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from schema_typegen.schema_management.schema_models import CanonicalSchema

from .type_nodes import (
    ArrayNode,
    EnumNode,
    ObjectNode,
    PrimitiveKind,
    PrimitiveNode,
    PropertyNode,
    TypeDefinition,
    TypeNode,
    UnionNode,
    UnknownNode,
)

MAX_MAPPING_DEPTH = 64

_PRIMITIVE_KINDS: dict[str, PrimitiveKind] = {
    "string": PrimitiveKind.STRING,
    "number": PrimitiveKind.NUMBER,
    "integer": PrimitiveKind.NUMBER,
    "boolean": PrimitiveKind.BOOLEAN,
    "null": PrimitiveKind.NULL,
}


def map_definitions(schema: CanonicalSchema) -> tuple[TypeDefinition, ...]:
    """Map every schema definition in declaration order."""
    return tuple(
        TypeDefinition(name=name, type_node=map_node(node), description=_description(node))
        for name, node in schema.definitions.items()
    )


def map_node(node: Any, *, depth: int = 0) -> TypeNode:
    """Classify one schema node into a type tree.

    Never raises: nodes that are not mappings, or that sit deeper than
    ``MAX_MAPPING_DEPTH``, become ``UnknownNode``.
    """
    if depth > MAX_MAPPING_DEPTH or not isinstance(node, Mapping):
        return UnknownNode()

    node_type = node.get("type")
    if node_type == "object" or "properties" in node:
        return _map_object(node, depth=depth)

    if node_type == "array":
        if "items" not in node:
            return ArrayNode(item=UnknownNode())
        return ArrayNode(item=map_node(node["items"], depth=depth + 1))

    enum_values = node.get("enum")
    if isinstance(enum_values, list):
        return EnumNode(values=tuple(enum_values))

    for key in ("oneOf", "anyOf"):
        variants = node.get(key)
        if isinstance(variants, list):
            return UnionNode(
                variants=tuple(map_node(variant, depth=depth + 1) for variant in variants)
            )

    return map_primitive(node_type, node.get("format"))


def map_primitive(schema_type: Any, schema_format: Any = None) -> PrimitiveNode:
    """Map a primitive ``type``/``format`` pair to a semantic primitive."""
    kind = _PRIMITIVE_KINDS.get(schema_type) if isinstance(schema_type, str) else None
    if kind is None:
        return PrimitiveNode(kind=PrimitiveKind.UNKNOWN)
    format_hint = schema_format if isinstance(schema_format, str) else None
    return PrimitiveNode(kind=kind, format_hint=format_hint)


def _map_object(node: Mapping[str, Any], *, depth: int) -> ObjectNode:
    properties = node.get("properties")
    if not isinstance(properties, Mapping):
        return ObjectNode()
    required_names = _required_names(node.get("required"))
    return ObjectNode(
        properties=tuple(
            PropertyNode(
                name=str(name),
                type_node=map_node(child, depth=depth + 1),
                required=name in required_names,
                description=_description(child),
            )
            for name, child in properties.items()
        )
    )


def _required_names(value: Any) -> set[str]:
    if not isinstance(value, list):
        return set()
    return {name for name in value if isinstance(name, str)}


def _description(node: Any) -> str | None:
    if not isinstance(node, Mapping):
        return None
    description = node.get("description")
    return description if isinstance(description, str) else None
