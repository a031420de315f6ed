"""Adjacency-list backend: contact -> ordered list of out-neighbors."""

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
from contactbook.infrastructure.base import GraphBackend


class AdjacencyListBackend(GraphBackend):
    """Unbounded graph store. Order of contacts and of each neighbor list is insertion order.
    Search is an exact (trimmed) name match unless overridden.
    """

    name_match = NameMatch.EXACT

    def __init__(
        self,
        *,
        directed: bool = False,
        name_match: NameMatch | str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(directed=directed, name_match=name_match, logger=logger)
        self._adj: dict[ContactRecord, list[ContactRecord]] = {}

    def __len__(self) -> int:
        return len(self._adj)

    def resolve(self, name: str) -> ContactRecord | None:
        for record in self._adj:
            if self.name_match.matches(record.name, name):
                return record
        return None

    def _contains(self, record: ContactRecord) -> bool:
        return record in self._adj

    def _stored(self, record: ContactRecord) -> ContactRecord | None:
        for key in self._adj:
            if key == record:
                return key
        return None

    def neighbors(self, record: ContactRecord) -> tuple[ContactRecord, ...]:
        return tuple(self._adj.get(record, ()))

    def has_connection(self, source: ContactRecord, target: ContactRecord) -> bool:
        return target in self._adj.get(source, ())

    def _link(self, source: ContactRecord, target: ContactRecord) -> bool:
        neighbors = self._adj[source]
        if target in neighbors:
            return False
        neighbors.append(target)
        return True

    def _unlink(self, source: ContactRecord, target: ContactRecord) -> bool:
        neighbors = self._adj[source]
        if target not in neighbors:
            return False
        neighbors.remove(target)
        return True

    def add(self, record: ContactRecord) -> ContactAdded | DuplicateIdentity:
        conflict = self._find_conflict(record)
        if conflict is not None:
            return conflict
        self._adj[record] = []
        self._log.info("Added contact %s", record)
        return ContactAdded(record=record)

    def delete(self, name: str) -> ContactDeleted | NotFound:
        target = self.resolve(name)
        if target is None:
            self._log.info("Delete failed; contact not found: %r", name)
            return NotFound(name=name)
        del self._adj[target]
        # Scan every list, not just the target's neighbors: in directed mode
        # incoming edges are only visible from the other side.
        for neighbors in self._adj.values():
            if target in neighbors:
                neighbors.remove(target)
        self._log.info("Deleted contact %s", target)
        return ContactDeleted(record=target)

    def update(
        self, old: ContactRecord, new_name: str, new_id: int
    ) -> ContactUpdated | NotFound | DuplicateIdentity:
        """Replace `old` with ContactRecord(new_name, new_id).

        The key is swapped in place (position kept) and every neighbor list
        entry equal to `old` is rewritten. Raises ValueError if the new
        name/id cannot form a ContactRecord.
        """
        previous = self._stored(old)
        if previous is None:
            self._log.info("Update failed; contact not found: %s", old)
            return NotFound(name=old.name)
        current = ContactRecord(new_name, new_id)
        conflict = self._find_conflict(current, ignore=previous)
        if conflict is not None:
            return conflict
        self._adj = {
            (current if key == previous else key): [
                current if n == previous else n for n in neighbors
            ]
            for key, neighbors in self._adj.items()
        }
        self._log.info("Updated contact %s -> %s", previous, current)
        return ContactUpdated(previous=previous, current=current)

    def list_all(self) -> Iterator[ContactRecord]:
        return iter(tuple(self._adj))
