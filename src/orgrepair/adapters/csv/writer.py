"""CSV export of repaired records."""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from orgrepair.domain.model import IDENTITY_COLUMNS

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

    from orgrepair.domain.model import Record

log = logging.getLogger(__name__)


def export_columns(records: Sequence[Record]) -> list[str]:
    """Identity columns first, then passthrough columns in first-seen order."""

    extras: dict[str, None] = {}
    for record in records:
        for key in record.extra:
            if key not in IDENTITY_COLUMNS:
                extras.setdefault(key, None)
    return [*IDENTITY_COLUMNS, *extras]


def _write_rows(
    handle: TextIO, records: Sequence[Record], columns: Sequence[str], *, delimiter: str
) -> None:
    writer = csv.DictWriter(handle, fieldnames=list(columns), delimiter=delimiter)
    writer.writeheader()
    for record in records:
        row = record.as_row()
        writer.writerow({column: (row.get(column) or "").strip() for column in columns})


def write_csv(
    records: Sequence[Record],
    destination: str | Path | TextIO,
    *,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> None:
    columns = export_columns(records)
    if isinstance(destination, (str, Path)):
        path = Path(destination)
        with path.open("w", newline="", encoding=encoding) as handle:
            _write_rows(handle, records, columns, delimiter=delimiter)
        log.info("Wrote %s rows to %s", len(records), path)
        return
    _write_rows(destination, records, columns, delimiter=delimiter)


def csv_preview(records: Sequence[Record], max_rows: int = 5) -> str:
    buffer = io.StringIO()
    _write_rows(buffer, records[:max_rows], IDENTITY_COLUMNS, delimiter=",")
    return buffer.getvalue()
