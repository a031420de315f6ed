"""Populate a store from CSV files, through the public contract only.

contacts CSV: header row, then `id,name` rows.
connections CSV: header row, then `id,source,target` rows (id is ignored).
"""

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path

from contactbook.application.dto import (
    ConnectionAdded,
    ContactAdded,
    Failure,
    UnsupportedCapability,
)
from contactbook.application.ports import ContactStore, supports_connections
from contactbook.domain import ContactRecord

logger = logging.getLogger(__name__)


@dataclass
class LoadReport:
    """Outcome of one CSV load: what went in and which rows were turned away."""

    path: Path
    loaded: int = 0
    rejected: list[tuple[int, Failure]] = field(default_factory=list)


def _rows(path: Path):
    """Yield (line_number, cells) for non-blank data rows, header skipped."""
    with path.open(newline="", encoding="utf-8") as fh:
        reader = csv.reader(fh)
        next(reader, None)
        for row in reader:
            cells = [c.strip() for c in row]
            if not any(cells):
                continue
            yield reader.line_num, cells


def load_contacts(store: ContactStore, path: Path | str) -> LoadReport:
    """Add every `id,name` row. Raises ValueError on a row that cannot form a contact."""
    path = Path(path)
    report = LoadReport(path=path)
    for line, cells in _rows(path):
        if len(cells) < 2:
            raise ValueError(f"{path}:{line}: expected 'id,name', got {','.join(cells)!r}")
        try:
            record = ContactRecord(name=cells[1], id=int(cells[0]))
        except ValueError as exc:
            raise ValueError(f"{path}:{line}: {exc}") from None
        result = store.add(record)
        if isinstance(result, ContactAdded):
            report.loaded += 1
        else:
            report.rejected.append((line, result))
    logger.info("Loaded %d contacts from %s (%d rejected)", report.loaded, path, len(report.rejected))
    return report


def load_connections(store: ContactStore, path: Path | str) -> LoadReport:
    """Apply add_connection for every `id,source,target` row."""
    path = Path(path)
    report = LoadReport(path=path)
    connected = supports_connections(store)
    for line, cells in _rows(path):
        if len(cells) < 3:
            raise ValueError(f"{path}:{line}: expected 'id,source,target', got {','.join(cells)!r}")
        if not connected:
            report.rejected.append(
                (line, UnsupportedCapability(capability="add_connection", backend=type(store).__name__))
            )
            continue
        result = store.add_connection(cells[1], cells[2])
        if isinstance(result, ConnectionAdded):
            report.loaded += 1
        else:
            report.rejected.append((line, result))
    logger.info(
        "Loaded %d connections from %s (%d rejected)", report.loaded, path, len(report.rejected)
    )
    return report
