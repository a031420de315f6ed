"""Build the configured backend from Settings."""

import logging

from contactbook.application.ports import ContactStore
from contactbook.config import Settings
from contactbook.infrastructure.adjacency_list import AdjacencyListBackend
from contactbook.infrastructure.adjacency_matrix import AdjacencyMatrixBackend
from contactbook.infrastructure.flat_map import FlatMapBackend

BACKENDS = {
    "adjacency_list": AdjacencyListBackend,
    "adjacency_matrix": AdjacencyMatrixBackend,
    "flat_map": FlatMapBackend,
}


def build_store(settings: Settings, *, logger: logging.Logger | None = None) -> ContactStore:
    """Return a fresh, empty store. `directed` and `capacity` apply only where meaningful."""
    if settings.backend == "adjacency_matrix":
        return AdjacencyMatrixBackend(
            settings.capacity,
            directed=settings.directed,
            name_match=settings.name_match,
            logger=logger,
        )
    if settings.backend == "adjacency_list":
        return AdjacencyListBackend(
            directed=settings.directed,
            name_match=settings.name_match,
            logger=logger,
        )
    if settings.backend == "flat_map":
        return FlatMapBackend(name_match=settings.name_match, logger=logger)
    raise ValueError(f"Unknown backend {settings.backend!r}")
