"""Structural (interface/type alias) declaration rendering."""

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

from .declaration_text import IDENTIFIER_PATTERN, comment_text, declaration_names
from .render_options import RenderOptions

_INDENT = "  "


def render_structural(definitions: Sequence[TypeDefinition], options: RenderOptions) -> str:
    """Render one exported declaration per definition followed by the export section."""
    declared = declaration_names(definition.name for definition in definitions)
    output = "\n\n".join(
        _render_declaration(definition, name, include_comments=options.include_comments)
        for definition, name in zip(definitions, declared, strict=True)
    )

    names = ", ".join(declared)
    if names:
        output += f"\n\n// Exports\nexport type {{ {names} }};\n"
        if options.includes_default_export:
            output += f"\nexport default {{ {names} }};\n"
    return output


def render_type_expression(
    node: TypeNode, *, include_comments: bool = False, depth: int = 0
) -> str:
    """Render a type tree as a structural type expression."""
    if isinstance(node, ObjectNode):
        return _render_object(node, include_comments=include_comments, depth=depth)
    if isinstance(node, ArrayNode):
        item = render_type_expression(node.item, include_comments=include_comments, depth=depth)
        if _is_compound(node.item):
            item = f"({item})"
        return f"{item}[]"
    if isinstance(node, EnumNode):
        return " | ".join(_literal(value) for value in node.values) or "never"
    if isinstance(node, UnionNode):
        rendered = (
            render_type_expression(variant, include_comments=include_comments, depth=depth)
            for variant in node.variants
        )
        return " | ".join(rendered) or "never"
    if isinstance(node, PrimitiveNode):
        return _primitive_name(node)
    if isinstance(node, UnknownNode):
        return "any"
    assert_never(node)


def _render_declaration(
    definition: TypeDefinition, name: str, *, include_comments: bool
) -> str:
    output = ""
    if include_comments and definition.description:
        lines = definition.description.splitlines()
        body = "\n".join(f" * {comment_text(line)}".rstrip() for line in lines)
        output += f"/**\n{body}\n */\n"

    expression = render_type_expression(definition.type_node, include_comments=include_comments)
    if isinstance(definition.type_node, ObjectNode):
        return output + f"export interface {name} {expression}"
    return output + f"export type {name} = {expression};"


def _render_object(node: ObjectNode, *, include_comments: bool, depth: int) -> str:
    if not node.properties:
        return "{}"
    padding = _INDENT * (depth + 1)
    members = [
        _render_property(prop, include_comments=include_comments, depth=depth, padding=padding)
        for prop in node.properties
    ]
    return "{\n" + "\n".join(members) + "\n" + _INDENT * depth + "}"


def _render_property(
    prop: PropertyNode, *, include_comments: bool, depth: int, padding: str
) -> str:
    comment = ""
    if include_comments and prop.description:
        comment = f"{padding}/** {comment_text(' '.join(prop.description.split()))} */\n"
    marker = "" if prop.required else "?"
    expression = render_type_expression(
        prop.type_node, include_comments=include_comments, depth=depth + 1
    )
    return f"{comment}{padding}{_property_key(prop.name)}{marker}: {expression};"


def _primitive_name(node: PrimitiveNode) -> str:
    if node.kind is PrimitiveKind.STRING:
        return "Date | string" if node.is_date_or_string else "string"
    if node.kind is PrimitiveKind.NUMBER:
        return "number"
    if node.kind is PrimitiveKind.BOOLEAN:
        return "boolean"
    if node.kind is PrimitiveKind.NULL:
        return "null"
    if node.kind is PrimitiveKind.UNKNOWN:
        return "any"
    assert_never(node.kind)


def _is_compound(node: TypeNode) -> bool:
    if isinstance(node, EnumNode):
        return len(node.values) > 1
    if isinstance(node, UnionNode):
        if len(node.variants) == 1:
            return _is_compound(node.variants[0])
        return len(node.variants) > 1
    if isinstance(node, PrimitiveNode):
        return node.is_date_or_string
    return False


def _property_key(name: str) -> str:
    if IDENTIFIER_PATTERN.match(name):
        return name
    return json.dumps(name, ensure_ascii=False)


def _literal(value: object) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
