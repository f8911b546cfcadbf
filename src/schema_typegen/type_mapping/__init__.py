"""Type mapping exports."""

from .type_mapper import MAX_MAPPING_DEPTH, map_definitions, map_node, map_primitive
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

__all__ = [
    "ArrayNode",
    "EnumNode",
    "ObjectNode",
    "PrimitiveKind",
    "PrimitiveNode",
    "PropertyNode",
    "TypeDefinition",
    "TypeNode",
    "UnionNode",
    "UnknownNode",
    "MAX_MAPPING_DEPTH",
    "map_definitions",
    "map_node",
    "map_primitive",
]
