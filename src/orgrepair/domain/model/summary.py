"""Audit structures describing what a repair run changed."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .record import Record


@dataclass(frozen=True, slots=True)
class RemovedRow:
    record: Record
    reason: str


@dataclass(slots=True)
class RepairSummary:
    """Write-only audit trail accumulated by the repair phases.

    Phases only ever add to the summary; no phase reads it to make a decision.
    ``modified_rows`` collects the emails of every record a phase touched so a
    presentation layer can highlight them.
    """

    original_row_count: int = 0
    final_row_count: int = 0
    rows_removed: int = 0
    duplicate_emails_removed: int = 0
    emails_normalized: int = 0
    full_names_auto_filled: int = 0
    managers_auto_created: int = 0
    self_reporting_fixed: int = 0
    cycles_detected: int = 0
    cycles_broken: int = 0
    total_root_nodes: int = 0
    final_tree_depth: int = 0
    removed_rows: list[RemovedRow] = field(default_factory=list[RemovedRow])
    auto_created_managers: list[str] = field(default_factory=list[str])
    modified_rows: set[str] = field(default_factory=set[str])

    def record_removal(self, record: Record, reason: str) -> None:
        self.removed_rows.append(RemovedRow(record=record, reason=reason))
        self.rows_removed += 1

    def mark_modified(self, email: str) -> None:
        if email:
            self.modified_rows.add(email)

    @property
    def total_fixes(self) -> int:
        """Number of row removals and in-place repairs, excluding normalization."""

        return (
            self.rows_removed
            + self.full_names_auto_filled
            + self.managers_auto_created
            + self.self_reporting_fixed
            + self.cycles_broken
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "original_row_count": self.original_row_count,
            "final_row_count": self.final_row_count,
            "rows_removed": self.rows_removed,
            "duplicate_emails_removed": self.duplicate_emails_removed,
            "emails_normalized": self.emails_normalized,
            "full_names_auto_filled": self.full_names_auto_filled,
            "managers_auto_created": self.managers_auto_created,
            "self_reporting_fixed": self.self_reporting_fixed,
            "cycles_detected": self.cycles_detected,
            "cycles_broken": self.cycles_broken,
            "total_root_nodes": self.total_root_nodes,
            "final_tree_depth": self.final_tree_depth,
            "removed_rows": [
                {"row": removed.record.as_row(), "reason": removed.reason}
                for removed in self.removed_rows
            ],
            "auto_created_managers": list(self.auto_created_managers),
            "modified_rows": sorted(self.modified_rows),
        }
