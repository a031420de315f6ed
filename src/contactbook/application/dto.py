"""Result types returned by the contact and connection contracts.

Stores never raise for an expected outcome: every operation returns one of
these values so callers can branch with isinstance.
"""

from dataclasses import dataclass

from contactbook.domain import ContactRecord

# --- success results ---


@dataclass(frozen=True)
class ContactAdded:
    """Record was stored with no connections."""

    record: ContactRecord


@dataclass(frozen=True)
class ContactDeleted:
    """Record and every connection touching it were removed."""

    record: ContactRecord


@dataclass(frozen=True)
class ContactUpdated:
    """Identity was replaced; connections now point at `current`."""

    previous: ContactRecord
    current: ContactRecord


@dataclass(frozen=True)
class ConnectionAdded:
    """Edge source -> target exists (mirrored when undirected).

    changed is False when the edge was already present.
    """

    source: ContactRecord
    target: ContactRecord
    changed: bool = True


@dataclass(frozen=True)
class ConnectionRemoved:
    """Edge source -> target is absent (mirrored when undirected).

    changed is False when there was no edge to remove.
    """

    source: ContactRecord
    target: ContactRecord
    changed: bool = True


# --- failures ---


@dataclass(frozen=True)
class DuplicateIdentity:
    """A live contact already has this identity, or already answers to this name."""

    name: str
    id: int


@dataclass(frozen=True)
class NotFound:
    """No live contact resolves from the given name or identity."""

    name: str


@dataclass(frozen=True)
class CapacityExceeded:
    """Fixed-capacity store has no free slot."""

    capacity: int


@dataclass(frozen=True)
class InvalidConnection:
    """Connection call named an endpoint that does not resolve."""

    source: str
    target: str
    missing: tuple[str, ...] = ()


@dataclass(frozen=True)
class UnsupportedCapability:
    """Store does not keep connections (contacts-only backend)."""

    capability: str
    backend: str


@dataclass(frozen=True)
class Invalid:
    """Input cannot form a contact (e.g. empty name, non-integer id)."""

    reason: str


Failure = (
    DuplicateIdentity
    | NotFound
    | CapacityExceeded
    | InvalidConnection
    | UnsupportedCapability
    | Invalid
)
