"""CSV collaborator: parse uploads, map columns, export repaired records."""

from __future__ import annotations

from .reader import (
    ColumnMappingError,
    apply_column_mapping,
    detect_column_mapping,
    parse_csv,
    parse_csv_text,
)
from .schema import ColumnMapping, ParseResult
from .writer import csv_preview, export_columns, write_csv

__all__ = [
    "ColumnMapping",
    "ColumnMappingError",
    "ParseResult",
    "apply_column_mapping",
    "csv_preview",
    "detect_column_mapping",
    "export_columns",
    "parse_csv",
    "parse_csv_text",
    "write_csv",
]
