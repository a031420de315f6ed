"""Adjacency-matrix backend: fixed slot array plus a capacity x capacity byte grid.

Row = from, column = to. A cell is 1 when the edge exists. Each live contact
owns one slot for its whole life; deleting frees the slot for the next add.
"""

import logging
from collections.abc import Iterator

from contactbook.application.dto import (
    CapacityExceeded,
    ContactAdded,
    ContactDeleted,
    ContactUpdated,
    DuplicateIdentity,
    NotFound,
)
from contactbook.domain import ContactRecord, NameMatch
from contactbook.infrastructure.base import GraphBackend

DEFAULT_CAPACITY = 100


class AdjacencyMatrixBackend(GraphBackend):
    """Graph store with a capacity fixed at construction. Search is exact unless overridden."""

    name_match = NameMatch.EXACT

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        *,
        directed: bool = False,
        name_match: NameMatch | str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"Matrix capacity must be a positive integer, got {capacity!r}.")
        super().__init__(directed=directed, name_match=name_match, logger=logger)
        self._capacity = capacity
        self._slots: list[ContactRecord | None] = [None] * capacity
        self._matrix = [bytearray(capacity) for _ in range(capacity)]
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._size

    def _slot_by_name(self, name: str) -> int | None:
        for i, record in enumerate(self._slots):
            if record is not None and self.name_match.matches(record.name, name):
                return i
        return None

    def _slot_of(self, record: ContactRecord) -> int | None:
        for i, stored in enumerate(self._slots):
            if stored is not None and stored == record:
                return i
        return None

    def _free_slot(self) -> int | None:
        for i, stored in enumerate(self._slots):
            if stored is None:
                return i
        return None

    def slot_of(self, name: str) -> int | None:
        """Return the slot index held by the contact answering to name."""
        return self._slot_by_name(name)

    def resolve(self, name: str) -> ContactRecord | None:
        i = self._slot_by_name(name)
        return None if i is None else self._slots[i]

    def _contains(self, record: ContactRecord) -> bool:
        return self._slot_of(record) is not None

    def neighbors(self, record: ContactRecord) -> tuple[ContactRecord, ...]:
        i = self._slot_of(record)
        if i is None:
            return ()
        row = self._matrix[i]
        return tuple(self._slots[j] for j in range(self._capacity) if row[j])

    def has_connection(self, source: ContactRecord, target: ContactRecord) -> bool:
        i, j = self._slot_of(source), self._slot_of(target)
        if i is None or j is None:
            return False
        return self._matrix[i][j] == 1

    def _link(self, source: ContactRecord, target: ContactRecord) -> bool:
        i, j = self._slot_of(source), self._slot_of(target)
        if self._matrix[i][j]:
            return False
        self._matrix[i][j] = 1
        return True

    def _unlink(self, source: ContactRecord, target: ContactRecord) -> bool:
        i, j = self._slot_of(source), self._slot_of(target)
        if not self._matrix[i][j]:
            return False
        self._matrix[i][j] = 0
        return True

    def add(
        self, record: ContactRecord
    ) -> ContactAdded | DuplicateIdentity | CapacityExceeded:
        conflict = self._find_conflict(record)
        if conflict is not None:
            return conflict
        free = self._free_slot()
        if free is None:
            self._log.info("Matrix is full (%d); cannot add %s", self._capacity, record)
            return CapacityExceeded(capacity=self._capacity)
        self._slots[free] = record
        self._size += 1
        self._log.info("Added contact %s at slot %d", record, free)
        return ContactAdded(record=record)

    def delete(self, name: str) -> ContactDeleted | NotFound:
        target = self._slot_by_name(name)
        if target is None:
            self._log.info("Delete failed; contact not found: %r", name)
            return NotFound(name=name)
        row = self._matrix[target]
        for j in range(self._capacity):
            row[j] = 0
        for i in range(self._capacity):
            self._matrix[i][target] = 0
        record = self._slots[target]
        self._slots[target] = None
        self._size -= 1
        self._log.info("Deleted contact %s from slot %d", record, target)
        return ContactDeleted(record=record)

    def update(
        self, old: ContactRecord, new_name: str, new_id: int
    ) -> ContactUpdated | NotFound | DuplicateIdentity:
        """Replace the record in its slot. Edges are keyed by slot, so they carry over as-is.

        Raises ValueError if the new name/id cannot form a ContactRecord.
        """
        target = self._slot_of(old)
        if target is None:
            self._log.info("Update failed; contact not found: %s", old)
            return NotFound(name=old.name)
        previous = self._slots[target]
        current = ContactRecord(new_name, new_id)
        conflict = self._find_conflict(current, ignore=previous)
        if conflict is not None:
            return conflict
        self._slots[target] = current
        self._log.info("Updated contact %s -> %s at slot %d", previous, current, target)
        return ContactUpdated(previous=previous, current=current)

    def list_all(self) -> Iterator[ContactRecord]:
        return iter(tuple(r for r in self._slots if r is not None))

    def __repr__(self) -> str:
        mode = "directed" if self.directed else "undirected"
        return (
            f"{type(self).__name__}(size={self._size}, capacity={self._capacity}, "
            f"{mode}, name_match={self.name_match.value})"
        )
