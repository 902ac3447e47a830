"""CSV reading and column mapping."""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Final

from orgrepair.domain.model import EMAIL, FULL_NAME, IDENTITY_COLUMNS, MANAGER_EMAIL, Record

from .schema import ColumnMapping, ParseResult

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence
    from typing import TextIO

log = logging.getLogger(__name__)

NAME_PATTERNS: Final[tuple[str, ...]] = (
    "full_name",
    "fullname",
    "name",
    "developer_name",
    "developer name",
    "employee_name",
    "employee name",
)
MANAGER_PATTERNS: Final[tuple[str, ...]] = (
    "manager_email",
    "manager email",
    "manageremail",
    "manager",
    "reports_to",
    "reports to",
    "supervisor_email",
    "supervisor",
)
EMAIL_PATTERNS: Final[tuple[str, ...]] = (
    "email",
    "developer_email",
    "developer email",
    "employee_email",
    "employee email",
    "work_email",
)


class ColumnMappingError(ValueError):
    """Raised when a column mapping cannot be applied to the parsed rows."""


def parse_csv(
    source: str | Path | TextIO,
    *,
    delimiter: str = ",",
    encoding: str = "utf-8-sig",
) -> ParseResult:
    """Parse ``source`` into header -> value rows.

    Malformed content is reported in ``ParseResult.errors`` rather than raised.
    """

    try:
        if isinstance(source, (str, Path)):
            with Path(source).open(newline="", encoding=encoding) as handle:
                return _parse_stream(handle, delimiter=delimiter)
        return _parse_stream(source, delimiter=delimiter)
    except (csv.Error, UnicodeDecodeError) as exc:
        log.warning("Failed to parse CSV from %s: %s", source, exc)
        return ParseResult(errors=[f"Failed to parse CSV: {exc}"])


def parse_csv_text(text: str, *, delimiter: str = ",") -> ParseResult:
    return parse_csv(io.StringIO(text, newline=""), delimiter=delimiter)


def _parse_stream(handle: TextIO, *, delimiter: str) -> ParseResult:
    reader = csv.reader(handle, delimiter=delimiter)
    header_row = next(reader, None)
    if header_row is None:
        return ParseResult(errors=["Failed to parse CSV: file is empty"])

    headers = [header.strip() for header in header_row]
    errors: list[str] = []
    data: list[dict[str, str]] = []

    for row_number, cells in enumerate(reader, start=1):
        if not any(cell.strip() for cell in cells):
            continue
        if len(cells) > len(headers):
            errors.append(
                f"Row {row_number}: Too many fields: expected {len(headers)}, got {len(cells)}"
            )
        elif len(cells) < len(headers):
            errors.append(
                f"Row {row_number}: Too few fields: expected {len(headers)}, got {len(cells)}"
            )
        padded = [*cells, *([""] * (len(headers) - len(cells)))]
        data.append(dict(zip(headers, padded, strict=False)))

    blank = sum(1 for header in headers if not header)
    if blank:
        errors.append(f"Found {blank} blank column header(s)")

    log.debug("Parsed %s rows with %s columns", len(data), len(headers))
    return ParseResult(data=data, headers=headers, errors=errors)


def _find_header(
    headers: Sequence[str],
    patterns: Iterable[str],
    *,
    exclude: str | None = None,
) -> str | None:
    lowered = [header.lower().strip() for header in headers]
    for pattern in patterns:
        for header, candidate in zip(headers, lowered, strict=True):
            if header == exclude:
                continue
            if candidate == pattern or pattern in candidate:
                return header
    return None


def detect_column_mapping(headers: Sequence[str]) -> ColumnMapping:
    """Guess which headers hold the name, email and manager email.

    The manager column is detected before the email column so that a header
    such as ``manager_email`` is never picked as the person's own email.
    """

    full_name = _find_header(headers, NAME_PATTERNS)
    manager_email = _find_header(headers, MANAGER_PATTERNS)
    email = _find_header(headers, EMAIL_PATTERNS, exclude=manager_email)
    return ColumnMapping(full_name=full_name, email=email, manager_email=manager_email)


def apply_column_mapping(
    rows: Iterable[Mapping[str, str]],
    mapping: ColumnMapping,
    *,
    headers: Sequence[str] | None = None,
) -> list[Record]:
    """Turn parsed rows into records; unmapped columns travel along untouched.

    An unmapped column whose header is itself an identity field name (say a
    stray ``email`` column while ``Work Email`` is mapped) would be shadowed by
    the mapped value, so it is kept as ``source_<header>`` instead.
    """

    if not mapping.is_complete:
        raise ColumnMappingError(
            "Column mapping is incomplete: full_name, email and manager_email are required"
        )
    if headers is not None:
        unknown = [header for header in mapping.mapped_headers if header not in headers]
        if unknown:
            raise ColumnMappingError(f"Unknown column(s) in mapping: {', '.join(unknown)}")

    if len(set(mapping.mapped_headers)) != len(mapping.mapped_headers):
        raise ColumnMappingError("Each identity field must map to a different column")

    mapped = {
        mapping.full_name: FULL_NAME,
        mapping.email: EMAIL,
        mapping.manager_email: MANAGER_EMAIL,
    }
    records: list[Record] = []
    shadowed: set[str] = set()
    for row in rows:
        renamed: dict[str, str | None] = {}
        for header, value in row.items():
            target = mapped.get(header)
            if target is None:
                target = header
                if header in IDENTITY_COLUMNS:
                    target = f"source_{header}"
                    shadowed.add(header)
            renamed[target] = value
        records.append(Record.from_row(renamed))
    if shadowed:
        log.warning(
            "Unmapped column(s) %s kept under a source_ prefix",
            ", ".join(sorted(shadowed)),
        )
    return records
