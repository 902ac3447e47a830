# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from orgrepair.adapters.csv import ColumnMapping, ColumnMappingError, csv_preview
from orgrepair.app import repair_csv_file, validate_csv_file
from orgrepair.config import ConfigurationError, configure_logging, get_repair_config
from orgrepair.domain.hierarchy import flatten_hierarchy
from orgrepair.domain.model import Severity

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from orgrepair.domain.hierarchy import Hierarchy

log = logging.getLogger(__name__)


def _add_mapping_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("input", type=Path, help="CSV file with one row per person")
    parser.add_argument(
        "--full-name-column",
        type=str,
        help="Header holding the display name (auto-detected when omitted)",
    )
    parser.add_argument(
        "--email-column",
        type=str,
        help="Header holding the person's email (auto-detected when omitted)",
    )
    parser.add_argument(
        "--manager-column",
        type=str,
        help="Header holding the manager's email (auto-detected when omitted)",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Repair reporting hierarchies in CSV files")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    repair = subparsers.add_parser("repair", help="Repair a CSV file and export the result")
    _add_mapping_arguments(repair)
    repair.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output CSV path (defaults to the configured export file next to the input)",
    )
    repair.add_argument(
        "--json",
        action="store_true",
        help="Print the repair summary as JSON",
    )

    validate = subparsers.add_parser("validate", help="Report problems without repairing")
    _add_mapping_arguments(validate)

    tree = subparsers.add_parser("tree", help="Repair in memory and print the hierarchy")
    _add_mapping_arguments(tree)

    return parser.parse_args(list(argv))


def _mapping_from_args(args: argparse.Namespace) -> ColumnMapping | None:
    columns = (args.full_name_column, args.email_column, args.manager_column)
    if all(column is None for column in columns):
        return None
    if any(column is None for column in columns):
        raise ColumnMappingError(
            "Pass all of --full-name-column, --email-column and --manager-column, or none"
        )
    return ColumnMapping(
        full_name=args.full_name_column,
        email=args.email_column,
        manager_email=args.manager_column,
    )


def render_tree(hierarchy: Hierarchy) -> list[str]:
    lines = [
        f"{node.depth * '  '}{node.full_name} <{node.email}>"
        for node in flatten_hierarchy(hierarchy.roots)
    ]
    stats = hierarchy.stats
    lines.append(
        f"people={stats.total_devs} roots={stats.root_count} "
        f"depth={stats.max_depth} leaves={stats.leaf_count}"
    )
    return lines


def _run_repair(args: argparse.Namespace, mapping: ColumnMapping | None) -> int:
    config = get_repair_config()
    result = repair_csv_file(args.input, output_path=args.output, mapping=mapping, config=config)
    summary = result.repair.summary
    if args.json:
        payload = {
            "success": result.success,
            "errors": result.repair.errors,
            "output": str(result.output_path) if result.output_path else None,
            "summary": summary.as_dict(),
        }
        print(json.dumps(payload, indent=2))
    if not result.success:
        for error in result.repair.errors:
            log.error(error)
        return 1

    log.info(
        "Rows %s -> %s: removed=%s duplicates=%s normalized=%s names_filled=%s "
        "managers_created=%s self_refs_fixed=%s cycles_broken=%s roots=%s depth=%s",
        summary.original_row_count,
        summary.final_row_count,
        summary.rows_removed,
        summary.duplicate_emails_removed,
        summary.emails_normalized,
        summary.full_names_auto_filled,
        summary.managers_auto_created,
        summary.self_reporting_fixed,
        summary.cycles_broken,
        summary.total_root_nodes,
        summary.final_tree_depth,
    )
    for removed in summary.removed_rows:
        log.info("Removed row %s: %s", removed.record.email or "<blank>", removed.reason)
    if not args.json:
        print(csv_preview(result.repair.records, max_rows=config.preview_rows), end="")
    log.info("Wrote %s", result.output_path)
    return 0


def _run_validate(args: argparse.Namespace, mapping: ColumnMapping | None) -> int:
    report = validate_csv_file(args.input, mapping=mapping)
    for issue in report.issues:
        level = logging.ERROR if issue.severity is Severity.ERROR else logging.WARNING
        log.log(level, "[%s] %s", issue.kind, issue.message)
    return 0 if report.is_valid else 1


def _run_tree(args: argparse.Namespace, mapping: ColumnMapping | None) -> int:
    result = repair_csv_file(args.input, mapping=mapping, write_output=False)
    if result.hierarchy is None:
        for error in result.repair.errors:
            log.error(error)
        return 1
    for line in render_tree(result.hierarchy):
        print(line)
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        mapping = _mapping_from_args(parsed_args)
        get_repair_config()
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "repair":
            exit_code = _run_repair(parsed_args, mapping)
        elif parsed_args.command == "validate":
            exit_code = _run_validate(parsed_args, mapping)
        elif parsed_args.command == "tree":
            exit_code = _run_tree(parsed_args, mapping)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except ColumnMappingError:
        log.exception("Column mapping error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during repair")
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
