"""Application ports (interfaces). Implemented by infrastructure backends."""

from collections.abc import Iterator, Sequence
from typing import Protocol, runtime_checkable

from contactbook.application.dto import (
    CapacityExceeded,
    ConnectionAdded,
    ConnectionRemoved,
    ContactAdded,
    ContactDeleted,
    ContactUpdated,
    DuplicateIdentity,
    InvalidConnection,
    NotFound,
)
from contactbook.domain import ContactRecord, NameMatch


@runtime_checkable
class ContactStore(Protocol):
    """Stores contact records. Every backend implements this."""

    name_match: NameMatch

    def add(self, record: ContactRecord) -> ContactAdded | DuplicateIdentity | CapacityExceeded:
        """Store a record with no connections."""
        ...

    def search(self, name: str) -> ContactRecord | NotFound:
        """Return the record answering to name under the store's name_match policy."""
        ...

    def delete(self, name: str) -> ContactDeleted | NotFound:
        """Remove the record and every connection referencing it."""
        ...

    def update(
        self, old: ContactRecord, new_name: str, new_id: int
    ) -> ContactUpdated | NotFound | DuplicateIdentity:
        """Replace the identity `old` everywhere it is referenced."""
        ...

    def list_all(self) -> Iterator[ContactRecord]:
        """Return a one-shot snapshot iterator over all live records."""
        ...

    def __len__(self) -> int:
        ...


@runtime_checkable
class NeighborSource(Protocol):
    """Read-only view of the neighbor relation used by suggestion and traversal."""

    def resolve(self, name: str) -> ContactRecord | None:
        """Return the live record for name, or None."""
        ...

    def neighbors(self, record: ContactRecord) -> Sequence[ContactRecord]:
        """Return direct out-neighbors of a live record in stable order."""
        ...


@runtime_checkable
class ConnectionStore(NeighborSource, Protocol):
    """Keeps connections between stored contacts. Composes with ContactStore."""

    directed: bool

    def add_connection(self, source: str, target: str) -> ConnectionAdded | InvalidConnection:
        """Create source -> target (and the mirror when undirected). Idempotent."""
        ...

    def remove_connection(self, source: str, target: str) -> ConnectionRemoved | InvalidConnection:
        """Clear source -> target (and the mirror when undirected). Idempotent."""
        ...

    def suggest(self, name: str) -> list[ContactRecord] | NotFound:
        """Return two-hop neighbors of the contact, excluding itself and its direct neighbors."""
        ...


def supports_connections(store: object) -> bool:
    """True if the store keeps connections (callers check before connection calls)."""
    return isinstance(store, ConnectionStore)
