"""Swagger 2.0 description of the contact list HTTP API."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Mapping, Optional, Sequence

_MEDIA_TYPE = "application/json"
_TAG = "Contacts"


def _ref(name: str) -> dict[str, Any]:
    return {"$ref": f"#/definitions/{name}"}


def _contact() -> dict[str, Any]:
    return _ref("models.Contact")


def _http_error() -> dict[str, Any]:
    return _ref("handlers.HTTPError")


def _string_map() -> dict[str, Any]:
    return {"type": "object", "additionalProperties": {"type": "string"}}


def _array_of(items: dict[str, Any]) -> dict[str, Any]:
    return {"type": "array", "items": items}


def _id_in_path() -> dict[str, Any]:
    return dict(type="integer", description="ID do contato", name="id", required=True, **{"in": "path"})


def _contact_in_body(description: str) -> dict[str, Any]:
    return dict(description=description, name="contact", required=True, schema=_contact(), **{"in": "body"})


def _string_in_query(name: str, description: str) -> dict[str, Any]:
    return dict(type="string", description=description, name=name, required=True, **{"in": "query"})


def _responses(schemas: Mapping[int, Optional[dict[str, Any]]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for code, schema in schemas.items():
        entry: dict[str, Any] = {"description": HTTPStatus(code).phrase}
        if schema is not None:
            entry["schema"] = schema
        result[str(code)] = entry
    return result


def _operation(
    summary: str,
    responses: Mapping[int, Optional[dict[str, Any]]],
    *,
    description: str | None = None,
    accepts_json: bool = False,
    returns_json: bool = True,
    parameters: Sequence[dict[str, Any]] = (),
) -> dict[str, Any]:
    op: dict[str, Any] = {}
    if description is not None:
        op["description"] = description
    if accepts_json:
        op["consumes"] = [_MEDIA_TYPE]
    if returns_json:
        op["produces"] = [_MEDIA_TYPE]
    op["tags"] = [_TAG]
    op["summary"] = summary
    if parameters:
        op["parameters"] = list(parameters)
    op["responses"] = _responses(responses)
    return op


def _paths() -> dict[str, Any]:
    return {
        "/contacts/": {
            "get": _operation(
                "Lista todos os contatos",
                {200: _array_of(_contact()), 500: _http_error()},
            ),
            "post": _operation(
                "Cria um novo contato",
                {201: _contact(), 400: _http_error(), 500: _http_error()},
                accepts_json=True,
                parameters=[_contact_in_body("Contato")],
            ),
        },
        "/contacts/email-providers": {
            "get": _operation(
                "Lista provedores de e-mail",
                {200: _array_of({"type": "string"}), 500: _string_map()},
                description="Retorna todos os domínios de e-mail utilizados pelos contatos",
            ),
        },
        "/contacts/search": {
            "get": _operation(
                "Busca contatos",
                {200: _array_of(_contact()), 400: _string_map(), 500: _string_map()},
                description="Busca contatos com base em parte do nome",
                parameters=[_string_in_query("name", "Nome para busca parcial")],
            ),
        },
        "/contacts/summary": {
            "get": _operation(
                "Resumo dos contatos",
                {200: {}, 500: _string_map()},
                description="Obtém estatísticas ou dados agregados sobre os contatos",
            ),
        },
        "/contacts/{id}": {
            "get": _operation(
                "Busca um contato por ID",
                {200: _contact(), 400: _http_error(), 404: _http_error()},
                parameters=[_id_in_path()],
            ),
            "put": _operation(
                "Atualiza um contato por ID",
                {201: _contact(), 400: _string_map(), 404: _string_map()},
                description="Atualiza os dados de um contato existente",
                accepts_json=True,
                parameters=[_id_in_path(), _contact_in_body("Dados atualizados do contato")],
            ),
            "delete": _operation(
                "Remove um contato",
                {204: None, 400: _string_map(), 404: _string_map()},
                description="Deleta um contato existente usando o ID",
                returns_json=False,
                parameters=[_id_in_path()],
            ),
        },
    }


def _object_schema(**properties: dict[str, Any]) -> dict[str, Any]:
    return {"type": "object", "properties": properties}


def _typed(kind: str, example: Any = None) -> dict[str, Any]:
    prop: dict[str, Any] = {"type": kind}
    if example is not None:
        prop["example"] = example
    return prop


def _definitions() -> dict[str, Any]:
    return {
        "handlers.HTTPError": _object_schema(error=_typed("string")),
        "models.Contact": _object_schema(
            email=_typed("string", "joao.silva@example.com"),
            id=_typed("integer", 1),
            name=_typed("string", "João da Silva"),
            phone=_typed("string", "[phone]"),
        ),
    }


@dataclass
class SwaggerInfo:
    """The adjustable header of the API description."""

    version: str = "1.0"
    host: str = "localhost:8080"
    base_path: str = "/"
    schemes: list[str] = field(default_factory=list)
    title: str = "Contact List API"
    description: str = "API para gerenciamento de lista de contatos"

    def to_spec(self) -> dict[str, Any]:
        """Return the full Swagger 2.0 document as a JSON-ready mapping."""
        return {
            "schemes": list(self.schemes),
            "swagger": "2.0",
            "info": {
                "description": self.description,
                "title": self.title,
                "contact": {},
                "version": self.version,
            },
            "host": self.host,
            "basePath": self.base_path,
            "paths": _paths(),
            "definitions": _definitions(),
        }


SWAGGER_INFO = SwaggerInfo()


def swagger_spec() -> dict[str, Any]:
    """Return the API description built from the shared ``SWAGGER_INFO``."""
    return SWAGGER_INFO.to_spec()