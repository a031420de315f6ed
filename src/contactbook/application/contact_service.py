"""Representation-agnostic use cases over one ContactStore.

Drivers (CLI, loaders, benchmarks) go through this service so they never
depend on which backend is behind it. Input that cannot form a contact
comes back as Invalid; connection calls on a contacts-only store come back
as UnsupportedCapability.
"""

import logging
from collections.abc import Iterator

from contactbook.application import traversal
from contactbook.application.dto import (
    CapacityExceeded,
    ConnectionAdded,
    ConnectionRemoved,
    ContactAdded,
    ContactDeleted,
    ContactUpdated,
    DuplicateIdentity,
    Invalid,
    InvalidConnection,
    NotFound,
    UnsupportedCapability,
)
from contactbook.application.ports import ContactStore, supports_connections
from contactbook.domain import ContactRecord


class ContactBookService:
    """Contact book use cases: CRUD on contacts, connections, suggestions and traversal."""

    def __init__(self, store: ContactStore, *, logger: logging.Logger | None = None) -> None:
        self._store = store
        self._log = logger or logging.getLogger(__name__)

    @property
    def store(self) -> ContactStore:
        return self._store

    @property
    def backend_name(self) -> str:
        return type(self._store).__name__

    @property
    def supports_connections(self) -> bool:
        return supports_connections(self._store)

    def _unsupported(self, capability: str) -> UnsupportedCapability:
        self._log.info("%s does not support %s", self.backend_name, capability)
        return UnsupportedCapability(capability=capability, backend=self.backend_name)

    # --- contacts ---

    def add_contact(
        self, name: str, contact_id: int | str
    ) -> ContactAdded | DuplicateIdentity | CapacityExceeded | Invalid:
        """Build a record from raw input and add it. String ids are parsed as integers."""
        try:
            record = ContactRecord(name=name, id=_parse_id(contact_id))
        except ValueError as exc:
            return Invalid(reason=str(exc))
        return self._store.add(record)

    def search(self, name: str) -> ContactRecord | NotFound:
        return self._store.search(name)

    def delete(self, name: str) -> ContactDeleted | NotFound:
        return self._store.delete(name)

    def update(
        self, name: str, new_name: str, new_id: int | str
    ) -> ContactUpdated | NotFound | DuplicateIdentity | Invalid:
        """Resolve the contact by name, then replace its identity."""
        current = self._store.search(name)
        if isinstance(current, NotFound):
            return current
        try:
            parsed_id = _parse_id(new_id)
            return self._store.update(current, new_name, parsed_id)
        except ValueError as exc:
            return Invalid(reason=str(exc))

    def list_contacts(self) -> Iterator[ContactRecord]:
        return self._store.list_all()

    def count(self) -> int:
        return len(self._store)

    # --- connections ---

    def add_connection(
        self, source: str, target: str
    ) -> ConnectionAdded | InvalidConnection | UnsupportedCapability:
        if not self.supports_connections:
            return self._unsupported("add_connection")
        return self._store.add_connection(source, target)

    def remove_connection(
        self, source: str, target: str
    ) -> ConnectionRemoved | InvalidConnection | UnsupportedCapability:
        if not self.supports_connections:
            return self._unsupported("remove_connection")
        return self._store.remove_connection(source, target)

    def neighbors(self, name: str) -> list[ContactRecord] | NotFound | UnsupportedCapability:
        if not self.supports_connections:
            return self._unsupported("neighbors")
        record = self._store.resolve(name)
        if record is None:
            return NotFound(name=name)
        return list(self._store.neighbors(record))

    def suggest(self, name: str) -> list[ContactRecord] | NotFound | UnsupportedCapability:
        if not self.supports_connections:
            return self._unsupported("suggest")
        return self._store.suggest(name)

    # --- traversal ---

    def bfs(self, name: str) -> Iterator[ContactRecord] | NotFound | UnsupportedCapability:
        if not self.supports_connections:
            return self._unsupported("bfs")
        return traversal.bfs(self._store, name)

    def dfs(self, name: str) -> Iterator[ContactRecord] | NotFound | UnsupportedCapability:
        if not self.supports_connections:
            return self._unsupported("dfs")
        return traversal.dfs(self._store, name)


def _parse_id(value: int | str) -> int:
    if isinstance(value, bool):
        raise ValueError("Contact id must be an integer.")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"Contact id must be an integer, got {text!r}.") from None
