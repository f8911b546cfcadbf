"""Type mapper tests."""

from __future__ import annotations

import pytest
from schema_typegen.schema_management import CanonicalSchema
from schema_typegen.type_mapping import (
    MAX_MAPPING_DEPTH,
    ArrayNode,
    EnumNode,
    ObjectNode,
    PrimitiveKind,
    PrimitiveNode,
    PropertyNode,
    TypeDefinition,
    UnionNode,
    UnknownNode,
    map_definitions,
    map_node,
    map_primitive,
)


@pytest.mark.parametrize(
    ("schema_type", "schema_format", "expected"),
    [
        ("string", None, PrimitiveNode(PrimitiveKind.STRING)),
        ("string", "email", PrimitiveNode(PrimitiveKind.STRING, "email")),
        ("string", "date-time", PrimitiveNode(PrimitiveKind.STRING, "date-time")),
        ("integer", "int64", PrimitiveNode(PrimitiveKind.NUMBER, "int64")),
        ("number", None, PrimitiveNode(PrimitiveKind.NUMBER)),
        ("boolean", None, PrimitiveNode(PrimitiveKind.BOOLEAN)),
        ("null", None, PrimitiveNode(PrimitiveKind.NULL)),
        (None, None, PrimitiveNode(PrimitiveKind.UNKNOWN)),
        ("uuid", None, PrimitiveNode(PrimitiveKind.UNKNOWN)),
        (["string", "null"], None, PrimitiveNode(PrimitiveKind.UNKNOWN)),
    ],
)
def test_primitive_mapping_table(schema_type, schema_format, expected) -> None:
    assert map_primitive(schema_type, schema_format) == expected


def test_only_date_time_strings_accept_dates() -> None:
    assert map_primitive("string", "date-time").is_date_or_string is True
    assert map_primitive("string", "date").is_date_or_string is False
    assert map_primitive("number", "date-time").is_date_or_string is False


def test_object_properties_keep_order_required_flags_and_descriptions() -> None:
    node = {
        "type": "object",
        "properties": {
            "b": {"type": "string", "description": "Second letter"},
            "a": {"type": "integer"},
        },
        "required": ["a"],
    }

    assert map_node(node) == ObjectNode(
        properties=(
            PropertyNode("b", PrimitiveNode(PrimitiveKind.STRING), False, "Second letter"),
            PropertyNode("a", PrimitiveNode(PrimitiveKind.NUMBER), True, None),
        )
    )


def test_properties_without_type_still_classify_as_object() -> None:
    mapped = map_node({"properties": {"x": {"type": "boolean"}}})

    assert isinstance(mapped, ObjectNode)
    assert mapped.properties[0].required is False


def test_object_without_properties_is_empty_object() -> None:
    assert map_node({"type": "object"}) == ObjectNode()


def test_array_without_items_maps_to_unknown_item() -> None:
    assert map_node({"type": "array"}) == ArrayNode(item=UnknownNode())


def test_array_items_are_mapped_recursively() -> None:
    node = {"type": "array", "items": {"type": "array", "items": {"type": "string"}}}

    assert map_node(node) == ArrayNode(ArrayNode(PrimitiveNode(PrimitiveKind.STRING)))


def test_enum_preserves_order_and_duplicates() -> None:
    mapped = map_node({"type": "string", "enum": ["b", "a", "b", None, 3]})

    assert mapped == EnumNode(values=("b", "a", "b", None, 3))


def test_object_shape_takes_precedence_over_enum() -> None:
    mapped = map_node({"type": "object", "enum": [{}], "properties": {}})

    assert isinstance(mapped, ObjectNode)


def test_one_of_wins_over_any_of() -> None:
    node = {
        "oneOf": [{"type": "string"}, {"type": "number"}],
        "anyOf": [{"type": "boolean"}],
    }

    assert map_node(node) == UnionNode(
        variants=(PrimitiveNode(PrimitiveKind.STRING), PrimitiveNode(PrimitiveKind.NUMBER))
    )


def test_any_of_maps_to_union() -> None:
    mapped = map_node({"anyOf": [{"type": "null"}, {"type": "boolean"}]})

    assert mapped == UnionNode(
        variants=(PrimitiveNode(PrimitiveKind.NULL), PrimitiveNode(PrimitiveKind.BOOLEAN))
    )


def test_unresolved_reference_and_all_of_degrade_to_unknown_primitive() -> None:
    assert map_node({"$ref": "#/definitions/User"}) == PrimitiveNode(PrimitiveKind.UNKNOWN)
    assert map_node({"allOf": [{"type": "string"}]}) == PrimitiveNode(PrimitiveKind.UNKNOWN)


def test_non_mapping_nodes_become_unknown() -> None:
    assert map_node(True) == UnknownNode()
    assert map_node(None) == UnknownNode()
    assert map_node({"type": "array", "items": [{"type": "string"}]}) == ArrayNode(UnknownNode())


def test_deep_nesting_is_cut_off_instead_of_overflowing() -> None:
    node: dict = {"type": "string"}
    for _ in range(MAX_MAPPING_DEPTH * 20):
        node = {"type": "array", "items": node}

    mapped = map_node(node)
    depth = 0
    while isinstance(mapped, ArrayNode):
        mapped = mapped.item
        depth += 1

    assert mapped == UnknownNode()
    assert depth == MAX_MAPPING_DEPTH + 1


def test_self_referencing_structure_terminates() -> None:
    node: dict = {"type": "object", "properties": {}}
    node["properties"]["self"] = node

    mapped = map_node(node)

    assert isinstance(mapped, ObjectNode)


def test_map_definitions_carries_top_level_descriptions() -> None:
    schema = CanonicalSchema(
        title=None,
        version=None,
        definitions={
            "Status": {"enum": ["on", "off"], "description": "Power state"},
            "Count": {"type": "integer"},
        },
    )

    assert map_definitions(schema) == (
        TypeDefinition("Status", EnumNode(("on", "off")), "Power state"),
        TypeDefinition("Count", PrimitiveNode(PrimitiveKind.NUMBER), None),
    )
