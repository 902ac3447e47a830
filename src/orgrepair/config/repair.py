"""Repair and CSV export configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import optional_env_int, optional_env_var, raw_env_var
from .errors import ConfigurationError

DEFAULT_EXPORT_FILENAME: Final[str] = "sei_developers.csv"
DEFAULT_CSV_DELIMITER: Final[str] = ","
DEFAULT_CSV_ENCODING: Final[str] = "utf-8-sig"
DEFAULT_EXPORT_ENCODING: Final[str] = "utf-8"
DEFAULT_PREVIEW_ROWS: Final[int] = 5


@dataclass(frozen=True, slots=True)
class RepairConfig:
    """Knobs for the repair run and its CSV collaborators."""

    export_filename: str = DEFAULT_EXPORT_FILENAME
    csv_delimiter: str = DEFAULT_CSV_DELIMITER
    csv_encoding: str = DEFAULT_CSV_ENCODING
    export_encoding: str = DEFAULT_EXPORT_ENCODING
    preview_rows: int = DEFAULT_PREVIEW_ROWS
    max_iterations: int | None = None

    def __post_init__(self) -> None:
        if len(self.csv_delimiter) != 1:
            raise ConfigurationError(
                f"CSV delimiter must be a single character, got {self.csv_delimiter!r}"
            )
        if self.preview_rows < 0:
            raise ConfigurationError("Preview rows must be non-negative")
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ConfigurationError("Max iterations must be at least 1")


def get_repair_config() -> RepairConfig:
    preview_rows = optional_env_int("ORGREPAIR_PREVIEW_ROWS")
    return RepairConfig(
        export_filename=(
            optional_env_var("ORGREPAIR_EXPORT_FILENAME") or DEFAULT_EXPORT_FILENAME
        ).strip(),
        csv_delimiter=raw_env_var("ORGREPAIR_CSV_DELIMITER") or DEFAULT_CSV_DELIMITER,
        csv_encoding=(optional_env_var("ORGREPAIR_CSV_ENCODING") or DEFAULT_CSV_ENCODING).strip(),
        export_encoding=(
            optional_env_var("ORGREPAIR_EXPORT_ENCODING") or DEFAULT_EXPORT_ENCODING
        ).strip(),
        preview_rows=DEFAULT_PREVIEW_ROWS if preview_rows is None else preview_rows,
        max_iterations=optional_env_int("ORGREPAIR_MAX_ITERATIONS", minimum=1),
    )
