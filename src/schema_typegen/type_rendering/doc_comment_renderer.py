"""Documentation-comment (JSDoc typedef) rendering."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import assert_never

from schema_typegen.type_mapping.type_nodes import (
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

from .declaration_text import comment_text, declaration_names

_OBJECT_MARKER = "Object"
_ANY_MARKER = "*"


def render_doc_comments(definitions: Sequence[TypeDefinition]) -> str:
    """Render one typedef block per definition.

    Object-typed members are annotated with the generic ``Object`` marker rather
    than being expanded into their nested structure.
    """
    names = declaration_names(definition.name for definition in definitions)
    return "".join(
        _render_typedef(definition, name) + "\n\n"
        for definition, name in zip(definitions, names, strict=True)
    )


def doc_comment_type(node: TypeNode) -> str:
    """Return a best-effort doc-comment type annotation for a type tree."""
    if isinstance(node, ObjectNode):
        return _OBJECT_MARKER
    if isinstance(node, ArrayNode):
        item = doc_comment_type(node.item)
        return f"({item})[]" if "|" in item else f"{item}[]"
    if isinstance(node, EnumNode):
        literals = (
            json.dumps(value, ensure_ascii=False, separators=(",", ":")) for value in node.values
        )
        return "|".join(literals) or _ANY_MARKER
    if isinstance(node, UnionNode):
        return "|".join(doc_comment_type(variant) for variant in node.variants) or _ANY_MARKER
    if isinstance(node, PrimitiveNode):
        return _primitive_marker(node)
    if isinstance(node, UnknownNode):
        return _ANY_MARKER
    assert_never(node)


def _render_typedef(definition: TypeDefinition, name: str) -> str:
    type_text = comment_text(doc_comment_type(definition.type_node))
    lines = ["/**", f" * @typedef {{{type_text}}} {name}"]
    if definition.description:
        lines.append(f" * @description {_single_line(definition.description)}")
    if isinstance(definition.type_node, ObjectNode):
        lines.extend(_render_property(prop) for prop in definition.type_node.properties)
    lines.append(" */")
    return "\n".join(lines)


def _render_property(prop: PropertyNode) -> str:
    name = comment_text(prop.name if prop.required else f"[{prop.name}]")
    line = f" * @property {{{comment_text(doc_comment_type(prop.type_node))}}} {name}"
    if prop.description:
        line += f" - {_single_line(prop.description)}"
    return line


def _primitive_marker(node: PrimitiveNode) -> str:
    if node.kind is PrimitiveKind.STRING:
        return "Date|string" if node.is_date_or_string else "string"
    if node.kind is PrimitiveKind.NUMBER:
        return "number"
    if node.kind is PrimitiveKind.BOOLEAN:
        return "boolean"
    if node.kind is PrimitiveKind.NULL:
        return "null"
    if node.kind is PrimitiveKind.UNKNOWN:
        return _ANY_MARKER
    assert_never(node.kind)


def _single_line(text: str) -> str:
    return comment_text(" ".join(text.split()))
