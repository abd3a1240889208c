"""The contact record and its JSON representation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_TEXT_FIELDS = ("name", "email", "phone")


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    """Return the value for ``key``, preferring an exact match over a case-insensitive one."""
    if key in data:
        return data[key]
    for candidate, value in data.items():
        if isinstance(candidate, str) and candidate.lower() == key:
            return value
    return None


@dataclass(frozen=True)
class Contact:
    """A single entry of the contact list."""

    id: int = 0
    name: str = ""
    email: str = ""
    phone: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of this contact."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Contact:
        """Build a contact from a decoded JSON object.

        Missing or null fields keep their defaults; unknown keys are ignored.
        A field of the wrong type raises ``TypeError``.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"a contact must be a JSON object, not {type(data).__name__}")

        values: dict[str, Any] = {}

        raw_id = _lookup(data, "id")
        if raw_id is not None:
            if isinstance(raw_id, bool) or not isinstance(raw_id, int):
                raise TypeError("field 'id' must be an integer")
            values["id"] = raw_id

        for field_name in _TEXT_FIELDS:
            raw = _lookup(data, field_name)
            if raw is None:
                continue
            if not isinstance(raw, str):
                raise TypeError(f"field {field_name!r} must be a string")
            values[field_name] = raw

        return cls(**values)