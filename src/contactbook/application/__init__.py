"""Application layer: use cases, ports, shared graph algorithms and result types. Depends only on domain."""

from contactbook.application.contact_service import ContactBookService
from contactbook.application.dto import (
    CapacityExceeded,
    ConnectionAdded,
    ConnectionRemoved,
    ContactAdded,
    ContactDeleted,
    ContactUpdated,
    DuplicateIdentity,
    Failure,
    Invalid,
    InvalidConnection,
    NotFound,
    UnsupportedCapability,
)
from contactbook.application.ports import (
    ConnectionStore,
    ContactStore,
    NeighborSource,
    supports_connections,
)
from contactbook.application.suggestion import two_hop_neighbors
from contactbook.application.traversal import bfs, dfs

__all__ = [
    "CapacityExceeded",
    "ConnectionAdded",
    "ConnectionRemoved",
    "ConnectionStore",
    "ContactAdded",
    "ContactBookService",
    "ContactDeleted",
    "ContactStore",
    "ContactUpdated",
    "DuplicateIdentity",
    "Failure",
    "Invalid",
    "InvalidConnection",
    "NeighborSource",
    "NotFound",
    "UnsupportedCapability",
    "bfs",
    "dfs",
    "supports_connections",
    "two_hop_neighbors",
]
