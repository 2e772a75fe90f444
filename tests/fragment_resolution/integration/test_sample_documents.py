"""Resolution of the bundled petstore sample documents from disk."""

from __future__ import annotations

from pathlib import Path

from schema_fragments.content_loading import FileContentLoader
from schema_fragments.fragment_resolution import Fragment, FragmentRegistry
from schema_fragments.references import Reference


def _sample_dir() -> Path:
    return Path(__file__).resolve().parents[3] / "samples" / "petstore"


def _api() -> Fragment:
    registry = FragmentRegistry(FileContentLoader(_sample_dir()))
    return registry.get(Reference.root("openapi.yaml"))


def test_operation_response_schema_resolves_across_files() -> None:
    api = _api()

    schema = api["paths", "/pets/{petId}", "get", "responses", "200", "content"][
        "application/json", "schema"
    ]

    assert schema.reference == Reference.root("schemas/pet.yaml")
    assert schema["required"].map_elements(lambda fragment: fragment.as_string()) == [
        "id",
        "name",
    ]


def test_parameters_resolve_through_components() -> None:
    api = _api()

    parameter = api["paths", "/pets/{petId}", "get", "parameters"][0]

    assert parameter.reference == Reference(
        "openapi.yaml", ("components", "parameters", "PetId")
    )
    assert parameter["required"].as_boolean() is True
    assert parameter["in"].as_string() == "path"


def test_recursive_schema_reuses_the_same_fragment_identity() -> None:
    api = _api()

    pet = api["components", "schemas", "Pet"]
    owner = pet["properties", "owner"]

    assert owner == pet
    assert owner["properties", "tag", "type"].as_string() == "string"


def test_json_document_without_pointer_resolves_to_its_root() -> None:
    api = _api()

    error = api["components", "schemas", "Error"]

    assert error.reference == Reference.root("schemas/error.json")
    assert error["properties", "code", "format"].as_string() == "int32"


def test_generated_type_names_deduplicate_by_location() -> None:
    api = _api()
    schemas: dict[Fragment, str] = {}

    def register(name: str, fragment: Fragment) -> None:
        schemas.setdefault(fragment, name)

    api["components", "schemas"].for_each(register)
    items = api["paths", "/pets", "get", "responses", "200", "content", "application/json"][
        "schema", "items"
    ]
    register("ListItem", items)

    assert list(schemas.values()) == ["Pet", "Error"]
    assert schemas[items] == "Pet"
