"""Operations on the contact list."""

from __future__ import annotations

import dataclasses
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Protocol

from .models import Contact


class ContactStore(Protocol):
    """Anything that can load and save the whole contact list."""

    def load(self) -> list[Contact]: ...

    def save(self, contacts: list[Contact]) -> None: ...


class ContactNotFoundError(LookupError):
    """No contact carries the requested id."""

    def __init__(self, message: str = "contact not found") -> None:
        super().__init__(message)


@dataclass
class ContactSummary:
    """Aggregate figures about the contact list."""

    total: int = 0
    with_email: int = 0
    with_phone: int = 0
    last_contact_name: str = ""
    duplicated_names: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping, leaving out empty optional fields."""
        result: dict[str, Any] = {
            "total": self.total,
            "with_email": self.with_email,
            "with_phone": self.with_phone,
        }
        if self.last_contact_name:
            result["last_contact_name"] = self.last_contact_name
        if self.duplicated_names:
            result["duplicated_names"] = list(self.duplicated_names)
        return result


class ContactService:
    """Business rules over a contact store."""

    def __init__(self, store: ContactStore) -> None:
        self.store = store

    def get_all_contacts(self) -> list[Contact]:
        """Return every stored contact."""
        return self.store.load()

    def add_contact(self, contact: Contact) -> Contact:
        """Store ``contact`` under the next free id and return the stored record."""
        contacts = self.store.load()
        next_id = max((existing.id for existing in contacts), default=0)
        stored = dataclasses.replace(contact, id=max(next_id, 0) + 1)
        self.store.save([*contacts, stored])
        return stored

    def get_contact_by_id(self, contact_id: int) -> Contact:
        """Return the contact with ``contact_id``, or an empty contact when none has it."""
        return next(
            (contact for contact in self.store.load() if contact.id == contact_id),
            Contact(),
        )

    def update_contact_by_id(self, contact_id: int, contact: Contact) -> Contact:
        """Replace the contact with ``contact_id``.

        Returns the stored record, or an empty contact (and saves nothing)
        when no contact has that id.
        """
        contacts = self.store.load()
        updated = dataclasses.replace(contact, id=contact_id)
        if not any(existing.id == contact_id for existing in contacts):
            return Contact()
        self.store.save(
            [updated if existing.id == contact_id else existing for existing in contacts]
        )
        return updated

    def delete_contact_by_id(self, contact_id: int) -> None:
        """Remove the contact with ``contact_id``; raise ``ContactNotFoundError`` if absent."""
        contacts = self.store.load()
        remaining = [contact for contact in contacts if contact.id != contact_id]
        if len(remaining) == len(contacts):
            raise ContactNotFoundError()
        self.store.save(remaining)

    def get_contacts_summary(self) -> ContactSummary:
        """Count contacts, those with e-mail and phone, and repeated names."""
        contacts = self.store.load()
        name_counts = Counter(contact.name.lower() for contact in contacts)
        return ContactSummary(
            total=len(contacts),
            with_email=sum(1 for contact in contacts if contact.email.strip()),
            with_phone=sum(1 for contact in contacts if contact.phone.strip()),
            last_contact_name=contacts[-1].name if contacts else "",
            duplicated_names=[name for name, count in name_counts.items() if count > 1],
        )

    def search_contacts_by_name(self, name: str) -> list[Contact]:
        """Return contacts whose name starts with ``name``, ignoring case."""
        prefix = name.lower()
        return [contact for contact in self.store.load() if contact.name.lower().startswith(prefix)]

    def get_email_providers(self) -> dict[str, int]:
        """Count contacts per e-mail domain, lower-cased."""
        providers: Counter[str] = Counter()
        for contact in self.store.load():
            if not contact.email.strip():
                continue
            parts = contact.email.split("@")
            if len(parts) != 2:
                continue
            providers[parts[1].lower()] += 1
        return dict(providers)