"""Fragment projection and navigation tests."""

from __future__ import annotations

import pytest
from schema_fragments.content_loading import InMemoryContentLoader
from schema_fragments.fragment_resolution import (
    Fragment,
    FragmentRegistry,
    NotFoundError,
    TypeMismatchError,
    ValueKind,
)
from schema_fragments.references import Reference

_SCHEMA = """
type: object
required:
  - id
  - name
properties:
  id:
    type: integer
  name:
    $ref: "#/definitions/Name"
  nickname:
    $ref: "#/definitions/Name"
  tags:
    type: array
    items:
      $ref: "common.yaml#/Tag"
  active:
    type: boolean
    default: "True"
  weight:
    type: number
    default: 1.5
definitions:
  Name:
    type: string
"""

_COMMON = """
Tag:
  type: string
Label:
  type: string
"""


def _root() -> Fragment:
    registry = FragmentRegistry(
        InMemoryContentLoader({"dto.yaml": _SCHEMA, "common.yaml": _COMMON})
    )
    return registry.get(Reference.root("dto.yaml"))


def test_kinds_cover_every_value_shape() -> None:
    root = _root()

    assert root.kind is ValueKind.MAPPING
    assert root["required"].kind is ValueKind.SEQUENCE
    assert root["type"].kind is ValueKind.STRING
    assert root["properties", "weight", "default"].kind is ValueKind.SCALAR
    assert root["properties", "active", "default"].kind is ValueKind.STRING


def test_projections_return_underlying_values() -> None:
    root = _root()

    assert root["type"].as_string() == "object"
    assert list(root["required"].as_list()) == ["id", "name"]
    assert set(root["properties"].as_map()) >= {"id", "name", "tags"}


def test_projection_of_wrong_kind_names_reference_and_kinds() -> None:
    root = _root()

    with pytest.raises(TypeMismatchError) as excinfo:
        root["type"].as_map()

    assert excinfo.value.reference == Reference("dto.yaml", ("type",))
    assert excinfo.value.expected == "mapping"
    assert excinfo.value.actual == "string"
    with pytest.raises(TypeMismatchError):
        root.as_list()
    with pytest.raises(TypeMismatchError):
        root["required"].as_string()
    with pytest.raises(TypeMismatchError):
        root["properties", "weight", "default"].as_boolean()


def test_as_boolean_accepts_boolean_literals_in_strings() -> None:
    registry = FragmentRegistry(
        InMemoryContentLoader({"flags.json": '{"a": true, "b": "TRUE", "c": "no", "d": false}'})
    )
    root = registry.get(Reference.root("flags.json"))

    assert root["a"].as_boolean() is True
    assert root["b"].as_boolean() is True
    assert root["c"].as_boolean() is False
    assert root["d"].as_boolean() is False
    assert _root()["properties", "active", "default"].as_boolean() is True


def test_get_follows_indirection_and_reports_dereferenced_reference() -> None:
    root = _root()

    name = root.get("properties", "name")

    assert name.reference == Reference("dto.yaml", ("definitions", "Name"))
    assert name["type"].as_string() == "string"


def test_get_index_and_tuple_subscription() -> None:
    root = _root()

    assert root.get("required", 1).as_string() == "name"
    assert root["required"][0].as_string() == "id"
    assert root["properties", "tags", "items"].reference == Reference("common.yaml", ("Tag",))


def test_get_missing_element_raises_not_found_naming_full_coordinate() -> None:
    root = _root()

    with pytest.raises(NotFoundError) as excinfo:
        root.get("properties", "missing")

    assert excinfo.value.reference == Reference("dto.yaml", ("properties", "missing"))
    assert root.get_optional("properties", "missing") is None


def test_equality_uses_reference_only() -> None:
    root = _root()

    name = root["properties", "name"]
    nickname = root["properties", "nickname"]
    tag = root["properties", "tags", "items"]
    label = root.registry.get(Reference("common.yaml", ("Label",)))

    assert name == nickname
    assert hash(name) == hash(nickname)
    assert name is not nickname
    assert tag.value == label.value
    assert tag != label
    assert len({name, nickname, tag, label}) == 3


def test_parent_navigates_from_dereferenced_location() -> None:
    root = _root()

    tag = root["properties", "tags", "items"]

    parent = tag.parent()
    assert parent is not None
    assert parent.reference == Reference.root("common.yaml")
    assert root.parent() is None


def test_iteration_over_mapping_preserves_insertion_order() -> None:
    root = _root()

    keys = root["properties"].map(lambda key, fragment: key)
    seen: list[tuple[str, Reference]] = []
    root["properties"].for_each(lambda key, fragment: seen.append((key, fragment.reference)))

    assert keys == ["id", "name", "nickname", "tags", "active", "weight"]
    assert seen[1] == ("name", Reference("dto.yaml", ("definitions", "Name")))
    assert [key for key, _ in root["definitions"].items()] == ["Name"]


def test_iteration_over_sequence_in_index_order() -> None:
    root = _root()
    required = root["required"]
    indexed: list[tuple[int, str]] = []

    required.for_each_indexed(lambda index, fragment: indexed.append((index, fragment.value)))

    assert required.map_elements(lambda fragment: fragment.as_string()) == ["id", "name"]
    assert required.map_indexed(lambda index, fragment: f"{index}:{fragment.value}") == [
        "0:id",
        "1:name",
    ]
    assert indexed == [(0, "id"), (1, "name")]
    assert [fragment.reference.segments[-1] for fragment in required.elements()] == ["0", "1"]


def test_iteration_helpers_reject_wrong_receiver_kind() -> None:
    root = _root()

    with pytest.raises(TypeMismatchError):
        root.map_elements(lambda fragment: fragment)
    with pytest.raises(TypeMismatchError):
        root["required"].map(lambda key, fragment: key)
    with pytest.raises(TypeMismatchError):
        root["type"].for_each(lambda key, fragment: None)


def test_items_and_elements_check_kind_when_called() -> None:
    root = _root()

    with pytest.raises(TypeMismatchError):
        root.elements()
    with pytest.raises(TypeMismatchError):
        root["required"].items()


def test_repr_shows_reference_and_kind() -> None:
    assert repr(_root()["required"]) == "Fragment(reference=dto.yaml#/required, kind=sequence)"
