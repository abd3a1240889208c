import json

from contactbook.docs import SwaggerInfo, swagger_spec


def _collect_refs(node):
    if isinstance(node, dict):
        for key, value in node.items():
            if key == "$ref":
                yield value
            else:
                yield from _collect_refs(value)
    elif isinstance(node, list):
        for item in node:
            yield from _collect_refs(item)


def test_default_header_values():
    spec = swagger_spec()
    assert spec["swagger"] == "2.0"
    assert spec["info"]["title"] == "Contact List API"
    assert spec["info"]["version"] == "1.0"
    assert spec["info"]["description"] == "API para gerenciamento de lista de contatos"
    assert spec["host"] == "localhost:8080"
    assert spec["basePath"] == "/"
    assert spec["schemes"] == []


def test_paths_and_methods():
    paths = swagger_spec()["paths"]
    assert set(paths) == {
        "/contacts/",
        "/contacts/email-providers",
        "/contacts/search",
        "/contacts/summary",
        "/contacts/{id}",
    }
    assert set(paths["/contacts/"]) == {"get", "post"}
    assert set(paths["/contacts/{id}"]) == {"get", "put", "delete"}


def test_every_ref_resolves_to_a_definition():
    spec = swagger_spec()
    refs = set(_collect_refs(spec["paths"]))
    assert refs
    prefix = "#/definitions/"
    for ref in refs:
        assert ref.startswith(prefix)
        assert ref[len(prefix):] in spec["definitions"]


def test_every_operation_is_tagged_contacts():
    for operations in swagger_spec()["paths"].values():
        for operation in operations.values():
            assert operation["tags"] == ["Contacts"]


def test_operation_summaries():
    paths = swagger_spec()["paths"]
    assert paths["/contacts/"]["get"]["summary"] == "Lista todos os contatos"
    assert paths["/contacts/"]["post"]["summary"] == "Cria um novo contato"
    assert paths["/contacts/{id}"]["delete"]["summary"] == "Remove um contato"
    assert paths["/contacts/search"]["get"]["parameters"][0]["name"] == "name"


def test_contact_definition_fields():
    contact = swagger_spec()["definitions"]["models.Contact"]
    properties = contact["properties"]
    assert set(properties) == {"id", "name", "email", "phone"}
    assert properties["id"]["type"] == "integer"
    assert properties["name"]["example"] == "João da Silva"
    assert properties["email"]["example"].endswith("@example.com")


def test_delete_has_no_content_response():
    responses = swagger_spec()["paths"]["/contacts/{id}"]["delete"]["responses"]
    assert responses["204"] == {"description": "No Content"}


def test_custom_info_is_reflected():
    info = SwaggerInfo(title="Other", host="api.example.com", schemes=["https"])
    spec = info.to_spec()
    assert spec["info"]["title"] == "Other"
    assert spec["host"] == "api.example.com"
    assert spec["schemes"] == ["https"]
    assert spec["paths"] == swagger_spec()["paths"]


def test_spec_is_json_round_trippable():
    spec = swagger_spec()
    assert json.loads(json.dumps(spec, ensure_ascii=False)) == spec


def test_returned_spec_is_independent():
    first = swagger_spec()
    first["paths"]["/contacts/"]["get"]["tags"].append("Mutated")
    first["definitions"].clear()
    second = swagger_spec()
    assert second["paths"]["/contacts/"]["get"]["tags"] == ["Contacts"]
    assert "models.Contact" in second["definitions"]