"""A JSON-file backed Flask HTTP API for managing a list of contacts."""

__version__ = "1.0.0"