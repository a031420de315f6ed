"""Shared behavior for the in-memory backends.

BaseContactStore holds the name-match policy, the injected logger and the
duplicate check. GraphBackend adds direction handling and the connection
operations on top of four primitives each graph backend provides.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from contactbook.application import suggestion
from contactbook.application.dto import (
    ConnectionAdded,
    ConnectionRemoved,
    DuplicateIdentity,
    InvalidConnection,
    NotFound,
)
from contactbook.domain import ContactRecord, NameMatch


class BaseContactStore(ABC):
    name_match: NameMatch = NameMatch.EXACT

    def __init__(
        self,
        *,
        name_match: NameMatch | str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if name_match is not None:
            self.name_match = NameMatch(name_match)
        self._log = logger or logging.getLogger(type(self).__module__)

    @abstractmethod
    def resolve(self, name: str) -> ContactRecord | None:
        ...

    @abstractmethod
    def _contains(self, record: ContactRecord) -> bool:
        """True if a live record has the same identity."""

    @abstractmethod
    def __len__(self) -> int:
        ...

    def search(self, name: str) -> ContactRecord | NotFound:
        found = self.resolve(name)
        if found is None:
            self._log.debug("Search miss: %r", name)
            return NotFound(name=name)
        return found

    def _find_conflict(
        self, record: ContactRecord, ignore: ContactRecord | None = None
    ) -> DuplicateIdentity | None:
        """Return DuplicateIdentity if record clashes with a live record other than `ignore`.

        A clash is an equal identity, or a name that already resolves under
        the store's name_match policy (names are the lookup key everywhere).
        """
        by_name = self.resolve(record.name)
        if (by_name is not None and by_name != ignore) or (
            record != ignore and self._contains(record)
        ):
            self._log.info("Rejected duplicate contact %s", record)
            return DuplicateIdentity(name=record.name, id=record.id)
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self)}, name_match={self.name_match.value})"


class GraphBackend(BaseContactStore):
    """Contact store that also keeps connections (ConnectionStore)."""

    def __init__(
        self,
        *,
        directed: bool = False,
        name_match: NameMatch | str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(name_match=name_match, logger=logger)
        self.directed = bool(directed)

    @abstractmethod
    def neighbors(self, record: ContactRecord) -> Sequence[ContactRecord]:
        ...

    @abstractmethod
    def has_connection(self, source: ContactRecord, target: ContactRecord) -> bool:
        ...

    @abstractmethod
    def _link(self, source: ContactRecord, target: ContactRecord) -> bool:
        """Set source -> target. Return False if it was already set."""

    @abstractmethod
    def _unlink(self, source: ContactRecord, target: ContactRecord) -> bool:
        """Clear source -> target. Return False if it was not set."""

    def _endpoints(
        self, source: str, target: str
    ) -> tuple[ContactRecord, ContactRecord] | InvalidConnection:
        a = self.resolve(source)
        b = self.resolve(target)
        if a is None or b is None:
            missing = tuple(n for n, r in ((source, a), (target, b)) if r is None)
            self._log.info("Connection %r -> %r rejected; unresolved: %s", source, target, missing)
            return InvalidConnection(source=source, target=target, missing=missing)
        return a, b

    def add_connection(self, source: str, target: str) -> ConnectionAdded | InvalidConnection:
        endpoints = self._endpoints(source, target)
        if isinstance(endpoints, InvalidConnection):
            return endpoints
        a, b = endpoints
        changed = self._link(a, b)
        if not self.directed:
            changed = self._link(b, a) or changed
        if changed:
            self._log.info("Connected %s -> %s", a, b)
        return ConnectionAdded(source=a, target=b, changed=changed)

    def remove_connection(self, source: str, target: str) -> ConnectionRemoved | InvalidConnection:
        endpoints = self._endpoints(source, target)
        if isinstance(endpoints, InvalidConnection):
            return endpoints
        a, b = endpoints
        changed = self._unlink(a, b)
        if not self.directed:
            changed = self._unlink(b, a) or changed
        if changed:
            self._log.info("Disconnected %s -> %s", a, b)
        return ConnectionRemoved(source=a, target=b, changed=changed)

    def suggest(self, name: str) -> list[ContactRecord] | NotFound:
        return suggestion.suggest(self, name)

    def __repr__(self) -> str:
        mode = "directed" if self.directed else "undirected"
        return f"{type(self).__name__}(size={len(self)}, {mode}, name_match={self.name_match.value})"
