"""HTTP handlers for the ``/contacts`` routes."""

from __future__ import annotations

import json
import re
from typing import Any

from flask import Blueprint, Response, jsonify, request

from .models import Contact
from .services import ContactService

_STORE_ERRORS = (OSError, ValueError, TypeError)
_DECIMAL = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_HandlerResult = tuple[Response, int]


def _parse_id(raw: str) -> int:
    """Parse a path id strictly: optional sign, decimal digits, 64-bit range."""
    if not _DECIMAL.fullmatch(raw):
        raise ValueError(f"invalid id {raw!r}")
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"id {raw!r} out of range")
    return value


def _read_contact() -> Contact:
    """Decode the request body as one contact."""
    payload = json.loads(request.get_data(cache=True))
    if payload is None:
        return Contact()
    return Contact.from_dict(payload)


def _error(message: str, status: int) -> _HandlerResult:
    return jsonify({"error": message}), status


def _contact_list(contacts: list[Contact]) -> Response:
    """Encode a list of contacts; an empty list is sent as JSON null."""
    payload: list[dict[str, Any]] | None = [contact.to_dict() for contact in contacts]
    return jsonify(payload or None)


def create_contacts_blueprint(service: ContactService) -> Blueprint:
    """Return a blueprint serving the contact list under ``/contacts``."""
    blueprint = Blueprint("contacts", __name__, url_prefix="/contacts")

    @blueprint.route("/", methods=["GET"])
    def get_contacts() -> _HandlerResult:
        try:
            contacts = service.get_all_contacts()
        except _STORE_ERRORS as exc:
            return _error(str(exc), 500)
        return _contact_list(contacts), 200

    @blueprint.route("/", methods=["POST"])
    def create_contact() -> _HandlerResult:
        try:
            contact = _read_contact()
        except (ValueError, TypeError) as exc:
            return _error(str(exc), 400)
        try:
            service.add_contact(contact)
        except _STORE_ERRORS as exc:
            return _error(str(exc), 500)
        return jsonify(contact.to_dict()), 201

    @blueprint.route("/<contact_id>", methods=["GET"])
    def get_contact_by_id(contact_id: str) -> _HandlerResult:
        try:
            parsed_id = _parse_id(contact_id)
        except ValueError:
            return _error("ID deve ser número", 400)
        try:
            contact = service.get_contact_by_id(parsed_id)
        except _STORE_ERRORS:
            return _error("Contato não encontrado", 404)
        return jsonify(contact.to_dict()), 200

    @blueprint.route("/<contact_id>", methods=["PUT"])
    def update_contact_by_id(contact_id: str) -> _HandlerResult:
        try:
            parsed_id = _parse_id(contact_id)
        except ValueError:
            return _error("Invalid ID", 400)
        try:
            contact = _read_contact()
        except (ValueError, TypeError):
            return _error("Invalid request body", 400)
        try:
            updated = service.update_contact_by_id(parsed_id, contact)
        except _STORE_ERRORS:
            return _error("Contact not found", 404)
        return jsonify(updated.to_dict()), 201

    @blueprint.route("/<contact_id>", methods=["DELETE"])
    def delete_contact(contact_id: str) -> tuple[Response | str, int]:
        try:
            parsed_id = _parse_id(contact_id)
        except ValueError:
            return _error("ID inválido", 400)
        try:
            service.delete_contact_by_id(parsed_id)
        except (LookupError, *_STORE_ERRORS) as exc:
            message = exc.args[0] if isinstance(exc, LookupError) and exc.args else str(exc)
            return _error(str(message), 404)
        return "", 204

    @blueprint.route("/summary", methods=["GET"])
    def get_contacts_summary() -> _HandlerResult:
        try:
            summary = service.get_contacts_summary()
        except _STORE_ERRORS as exc:
            return _error(str(exc), 500)
        return jsonify(summary.to_dict()), 200

    @blueprint.route("/search", methods=["GET"])
    def search_contacts_by_name() -> _HandlerResult:
        query = request.args.get("name", "")
        if not query:
            return _error("Query parameter 'name' is required", 400)
        try:
            contacts = service.search_contacts_by_name(query)
        except _STORE_ERRORS as exc:
            return _error(str(exc), 500)
        return _contact_list(contacts), 200

    @blueprint.route("/email-providers", methods=["GET"])
    def get_email_providers() -> _HandlerResult:
        try:
            providers = service.get_email_providers()
        except _STORE_ERRORS as exc:
            return _error(str(exc), 500)
        return jsonify(providers), 200

    return blueprint