"""
Contact book core: one contract, three interchangeable backends.

- domain: ContactRecord (immutable identity value) and the NameMatch search policy.
- application: result types, ports (ContactStore, ConnectionStore), suggestion and
  traversal algorithms, ContactBookService.
- infrastructure: AdjacencyListBackend, AdjacencyMatrixBackend, FlatMapBackend,
  backend factory and CSV loader.
"""

from contactbook.application import (
    CapacityExceeded,
    ConnectionAdded,
    ConnectionRemoved,
    ConnectionStore,
    ContactAdded,
    ContactBookService,
    ContactDeleted,
    ContactStore,
    ContactUpdated,
    DuplicateIdentity,
    Failure,
    Invalid,
    InvalidConnection,
    NotFound,
    UnsupportedCapability,
)
from contactbook.domain import ContactRecord, NameMatch
from contactbook.infrastructure import (
    AdjacencyListBackend,
    AdjacencyMatrixBackend,
    FlatMapBackend,
    build_store,
)

__all__ = [
    "AdjacencyListBackend",
    "AdjacencyMatrixBackend",
    "CapacityExceeded",
    "ConnectionAdded",
    "ConnectionRemoved",
    "ConnectionStore",
    "ContactAdded",
    "ContactBookService",
    "ContactDeleted",
    "ContactRecord",
    "ContactStore",
    "ContactUpdated",
    "DuplicateIdentity",
    "Failure",
    "FlatMapBackend",
    "Invalid",
    "InvalidConnection",
    "NameMatch",
    "NotFound",
    "UnsupportedCapability",
    "build_store",
]
