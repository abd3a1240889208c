"""The web application and its command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from flask import Flask, Response, jsonify

from .docs import swagger_spec
from .handlers import create_contacts_blueprint
from .services import ContactService, ContactStore
from .storage import JsonContactStore


def create_app(store: ContactStore | None = None) -> Flask:
    """Build the application over ``store`` (the default JSON file when omitted)."""
    if store is None:
        store = JsonContactStore()
    app = Flask(__name__)
    app.json.sort_keys = False
    app.register_blueprint(create_contacts_blueprint(ContactService(store)))

    @app.get("/swagger/doc.json")
    def swagger_document() -> Response:
        return jsonify(swagger_spec())

    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the contact list API."""
    parser = argparse.ArgumentParser(
        prog="contactbook", description="Serve the contact list HTTP API."
    )
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    parser.add_argument("--data", type=Path, default=None, help="path of the contacts file")
    args = parser.parse_args(argv)

    app = create_app(JsonContactStore(args.data))
    app.run(host=args.host, port=args.port)
    return 0