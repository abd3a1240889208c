"""JSON file storage for the contact list."""

from __future__ import annotations

import errno
import json
import os
from pathlib import Path

from .models import Contact


class StorageFileNotFoundError(FileNotFoundError):
    """The contacts file, or the directory meant to hold it, does not exist."""

    def __init__(self, path: os.PathLike[str] | str) -> None:
        super().__init__(errno.ENOENT, "file not found", str(path))


def default_data_path() -> Path:
    """Return the default location of the contacts file."""
    return Path(__file__).resolve().parent.parent / "data" / "contacts.json"


class JsonContactStore:
    """Keeps the whole contact list in one JSON file."""

    def __init__(self, path: os.PathLike[str] | str | None = None) -> None:
        self.path = Path(path) if path is not None else default_data_path()

    def load(self) -> list[Contact]:
        """Read every contact, creating an empty file when none exists yet."""
        try:
            fd = os.open(self.path, os.O_RDONLY | os.O_CREAT, 0o644)
        except FileNotFoundError as exc:
            raise StorageFileNotFoundError(self.path) from exc
        with os.fdopen(fd, "rb") as handle:
            raw = handle.read()

        if not raw:
            return []

        data = json.loads(raw)
        if data is None:
            return []
        if not isinstance(data, list):
            raise ValueError("the contacts file must hold a JSON array")
        return [Contact() if item is None else Contact.from_dict(item) for item in data]

    def save(self, contacts: list[Contact]) -> None:
        """Replace the stored list with ``contacts``."""
        text = json.dumps(
            [contact.to_dict() for contact in contacts],
            indent=2,
            ensure_ascii=False,
        )
        try:
            self.path.write_text(text, encoding="utf-8")
        except FileNotFoundError as exc:
            raise StorageFileNotFoundError(self.path) from exc