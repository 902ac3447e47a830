"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from pathlib import Path  # noqa: TC003
from typing import TYPE_CHECKING

from orgrepair.adapters.csv import (
    apply_column_mapping,
    detect_column_mapping,
    parse_csv,
    write_csv,
)
from orgrepair.config import get_repair_config
from orgrepair.domain.diagnostics import validate_records
from orgrepair.domain.hierarchy import build_hierarchy
from orgrepair.domain.repair_pipeline import run_auto_repair

if TYPE_CHECKING:
    from orgrepair.adapters.csv import ColumnMapping, ParseResult
    from orgrepair.config import RepairConfig
    from orgrepair.domain.diagnostics import ValidationReport
    from orgrepair.domain.hierarchy import Hierarchy
    from orgrepair.domain.model import Record
    from orgrepair.domain.repair_pipeline import RepairResult


log = getLogger(__name__)


@dataclass(slots=True)
class RepairFileResult:
    parse: ParseResult
    mapping: ColumnMapping
    repair: RepairResult
    hierarchy: Hierarchy | None = None
    output_path: Path | None = None

    @property
    def success(self) -> bool:
        return self.repair.success


def load_records(
    input_path: Path,
    *,
    mapping: ColumnMapping | None = None,
    config: RepairConfig | None = None,
) -> tuple[ParseResult, ColumnMapping, list[Record]]:
    """Parse ``input_path`` and map its rows, auto-detecting columns when needed."""

    effective_config = config or get_repair_config()
    parsed = parse_csv(
        input_path,
        delimiter=effective_config.csv_delimiter,
        encoding=effective_config.csv_encoding,
    )
    for error in parsed.errors:
        log.warning("%s: %s", input_path, error)

    effective_mapping = mapping or detect_column_mapping(parsed.headers)
    log.debug("Using column mapping %s", effective_mapping.model_dump())
    records = apply_column_mapping(parsed.data, effective_mapping, headers=parsed.headers)
    return parsed, effective_mapping, records


def repair_csv_file(
    input_path: Path,
    *,
    output_path: Path | None = None,
    mapping: ColumnMapping | None = None,
    config: RepairConfig | None = None,
    write_output: bool = True,
) -> RepairFileResult:
    """Repair the records in ``input_path`` and export them when the repair succeeds."""

    effective_config = config or get_repair_config()
    log.info("Repairing %s", input_path)
    parsed, effective_mapping, records = load_records(
        input_path, mapping=mapping, config=effective_config
    )

    repair = run_auto_repair(records, max_iterations=effective_config.max_iterations)
    result = RepairFileResult(parse=parsed, mapping=effective_mapping, repair=repair)
    if not repair.success:
        log.error("Repair of %s failed with %s violation(s)", input_path, len(repair.errors))
        return result

    result.hierarchy = build_hierarchy(repair.records)
    if write_output:
        destination = output_path or input_path.with_name(effective_config.export_filename)
        write_csv(
            repair.records,
            destination,
            delimiter=effective_config.csv_delimiter,
            encoding=effective_config.export_encoding,
        )
        result.output_path = destination
    return result


def validate_csv_file(
    input_path: Path,
    *,
    mapping: ColumnMapping | None = None,
    config: RepairConfig | None = None,
) -> ValidationReport:
    """Report every problem in ``input_path`` without repairing anything."""

    parsed, _mapping, records = load_records(input_path, mapping=mapping, config=config)
    report = validate_records(records, headers=parsed.headers)
    log.info(
        "Validated %s rows: %s error(s), %s warning(s)",
        report.stats.total_rows,
        len(report.errors),
        len(report.warnings),
    )
    return report
