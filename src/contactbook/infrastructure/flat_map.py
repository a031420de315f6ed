"""Flat key-value backend: contacts only, no connections.

Keyed by the lookup form of the name, so search is a single dict lookup.
This store does not implement ConnectionStore; callers check with
supports_connections() first.
"""

import logging
from collections.abc import Iterator

from contactbook.application.dto import (
    ContactAdded,
    ContactDeleted,
    ContactUpdated,
    DuplicateIdentity,
    NotFound,
)
from contactbook.domain import ContactRecord, NameMatch
from contactbook.infrastructure.base import BaseContactStore


class FlatMapBackend(BaseContactStore):
    """Contacts-only store. Search is case-insensitive unless overridden."""

    name_match = NameMatch.CASE_INSENSITIVE

    def __init__(
        self,
        *,
        name_match: NameMatch | str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(name_match=name_match, logger=logger)
        self._contacts: dict[str, ContactRecord] = {}

    def _key(self, name: str) -> str:
        name = (name or "").strip()
        if self.name_match is NameMatch.CASE_INSENSITIVE:
            return name.casefold()
        return name

    def __len__(self) -> int:
        return len(self._contacts)

    def resolve(self, name: str) -> ContactRecord | None:
        return self._contacts.get(self._key(name))

    def _entry(self, record: ContactRecord) -> tuple[str, ContactRecord] | None:
        """Return (key, stored record) for the record's identity."""
        if self.name_match is NameMatch.CASE_INSENSITIVE:
            key = self._key(record.name)
            stored = self._contacts.get(key)
            return (key, stored) if stored == record else None
        for key, stored in self._contacts.items():
            if stored == record:
                return key, stored
        return None

    def _contains(self, record: ContactRecord) -> bool:
        return self._entry(record) is not None

    def add(self, record: ContactRecord) -> ContactAdded | DuplicateIdentity:
        conflict = self._find_conflict(record)
        if conflict is not None:
            return conflict
        self._contacts[self._key(record.name)] = record
        self._log.info("Added contact %s", record)
        return ContactAdded(record=record)

    def delete(self, name: str) -> ContactDeleted | NotFound:
        record = self._contacts.pop(self._key(name), None)
        if record is None:
            self._log.info("Delete failed; contact not found: %r", name)
            return NotFound(name=name)
        self._log.info("Deleted contact %s", record)
        return ContactDeleted(record=record)

    def update(
        self, old: ContactRecord, new_name: str, new_id: int
    ) -> ContactUpdated | NotFound | DuplicateIdentity:
        """Re-key the entry under the new name, keeping its position.

        Raises ValueError if the new name/id cannot form a ContactRecord.
        """
        entry = self._entry(old)
        if entry is None:
            self._log.info("Update failed; contact not found: %s", old)
            return NotFound(name=old.name)
        old_key, previous = entry
        current = ContactRecord(new_name, new_id)
        conflict = self._find_conflict(current, ignore=previous)
        if conflict is not None:
            return conflict
        new_key = self._key(current.name)
        self._contacts = {
            (new_key if key == old_key else key): (current if key == old_key else record)
            for key, record in self._contacts.items()
        }
        self._log.info("Updated contact %s -> %s", previous, current)
        return ContactUpdated(previous=previous, current=current)

    def list_all(self) -> Iterator[ContactRecord]:
        return iter(tuple(self._contacts.values()))
