"""Domain entities: ContactRecord and the name-matching policy used by search."""

from dataclasses import dataclass
from enum import Enum

NAME_MAX_LENGTH = 500


def normalize_name(name: str) -> str:
    """Return the comparison form of a name (trimmed, case-folded)."""
    return name.strip().casefold()


class NameMatch(str, Enum):
    """How a backend resolves a name passed to search/delete/connection calls."""

    EXACT = "exact"
    CASE_INSENSITIVE = "case_insensitive"

    def matches(self, stored: str, query: str) -> bool:
        query = (query or "").strip()
        if self is NameMatch.CASE_INSENSITIVE:
            return stored.casefold() == query.casefold()
        return stored == query


@dataclass(frozen=True, eq=False)
class ContactRecord:
    """
    A contact known to the book: display name plus numeric id.
    Identity is the (trimmed, case-normalized name, id) pair, so
    ContactRecord(" Alice ", 1) == ContactRecord("alice", 1).
    Records are immutable; an update replaces the record everywhere it is held.
    """

    name: str
    id: int

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Contact name must be non-empty.")
        name = self.name.strip()
        if len(name) > NAME_MAX_LENGTH:
            raise ValueError(f"Contact name must be at most {NAME_MAX_LENGTH} chars.")
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError("Contact id must be an integer.")
        object.__setattr__(self, "name", name)

    @property
    def identity(self) -> tuple[str, int]:
        return normalize_name(self.name), self.id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContactRecord):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"
