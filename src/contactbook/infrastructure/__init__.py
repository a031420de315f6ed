"""Infrastructure layer: concrete backends for the application ports, plus loading and wiring."""

from contactbook.infrastructure.adjacency_list import AdjacencyListBackend
from contactbook.infrastructure.adjacency_matrix import AdjacencyMatrixBackend
from contactbook.infrastructure.csv_loader import LoadReport, load_connections, load_contacts
from contactbook.infrastructure.factory import BACKENDS, build_store
from contactbook.infrastructure.flat_map import FlatMapBackend

__all__ = [
    "BACKENDS",
    "AdjacencyListBackend",
    "AdjacencyMatrixBackend",
    "FlatMapBackend",
    "LoadReport",
    "build_store",
    "load_connections",
    "load_contacts",
]
