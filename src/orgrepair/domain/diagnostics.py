"""Read-only diagnostics for record sets that have not been repaired yet.

``validate_records`` reports the same problems the repair pipeline acts on,
without changing anything, so a caller can show users what is wrong before
deciding to repair.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from orgrepair.domain.model import (
    EMAIL,
    MANAGER_EMAIL,
    IssueKind,
    Record,
    Severity,
    is_valid_email,
    normalize_identity,
)
from orgrepair.domain.repair_pipeline.cycles import find_cycles

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    kind: IssueKind
    message: str
    severity: Severity
    row_index: int | None = None
    field: str | None = None
    cycle_chain: tuple[str, ...] = ()


@dataclass(slots=True)
class ValidationStats:
    total_rows: int = 0
    valid_rows: int = 0
    invalid_emails: int = 0
    duplicate_emails: int = 0
    missing_managers: int = 0
    self_references: int = 0
    cycles: int = 0


@dataclass(slots=True)
class ValidationReport:
    issues: list[ValidationIssue] = field(default_factory=list[ValidationIssue])
    stats: ValidationStats = field(default_factory=ValidationStats)

    @property
    def is_valid(self) -> bool:
        return not any(issue.severity is Severity.ERROR for issue in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity is Severity.WARNING]


def blank_header_issues(headers: Iterable[str]) -> list[ValidationIssue]:
    blank = [header for header in headers if not header.strip()]
    if not blank:
        return []
    return [
        ValidationIssue(
            kind=IssueKind.BLANK_HEADER,
            message=f"Found {len(blank)} blank column header(s)",
            severity=Severity.WARNING,
        )
    ]


def validate_records(
    records: Sequence[Record], *, headers: Iterable[str] = ()
) -> ValidationReport:
    report = ValidationReport(issues=blank_header_issues(headers))
    stats = report.stats
    stats.total_rows = len(records)

    normalized = [
        Record(
            full_name=record.full_name,
            email=normalize_identity(record.email),
            manager_email=normalize_identity(record.manager_email),
        )
        for record in records
    ]
    known = {record.email for record in normalized if record.email}
    seen: set[str] = set()
    reported_managers: set[str] = set()
    rows_with_errors: set[int] = set()

    def add(issue: ValidationIssue) -> None:
        report.issues.append(issue)
        if issue.severity is Severity.ERROR and issue.row_index is not None:
            rows_with_errors.add(issue.row_index)

    for index, record in enumerate(normalized):
        email = record.email
        if not email:
            stats.invalid_emails += 1
            add(
                ValidationIssue(
                    kind=IssueKind.REQUIRED_FIELD,
                    message=f"Row {index + 1}: email is required",
                    severity=Severity.ERROR,
                    row_index=index,
                    field=EMAIL,
                )
            )
        elif not is_valid_email(email):
            stats.invalid_emails += 1
            add(
                ValidationIssue(
                    kind=IssueKind.INVALID_EMAIL,
                    message=f"Row {index + 1}: invalid email format: {email}",
                    severity=Severity.ERROR,
                    row_index=index,
                    field=EMAIL,
                )
            )
        elif email in seen:
            stats.duplicate_emails += 1
            add(
                ValidationIssue(
                    kind=IssueKind.DUPLICATE_EMAIL,
                    message=f"Row {index + 1}: duplicate email: {email}",
                    severity=Severity.ERROR,
                    row_index=index,
                    field=EMAIL,
                )
            )
        seen.add(email)

        manager = record.manager_email
        if not manager:
            continue
        if manager == email:
            stats.self_references += 1
            add(
                ValidationIssue(
                    kind=IssueKind.SELF_REFERENCE,
                    message=f"Row {index + 1}: {email} reports to themselves",
                    severity=Severity.WARNING,
                    row_index=index,
                    field=MANAGER_EMAIL,
                )
            )
        elif manager not in known:
            if manager not in reported_managers:
                stats.missing_managers += 1
                reported_managers.add(manager)
            add(
                ValidationIssue(
                    kind=IssueKind.MISSING_MANAGER,
                    message=f"Row {index + 1}: manager {manager} is not in the data",
                    severity=Severity.WARNING,
                    row_index=index,
                    field=MANAGER_EMAIL,
                )
            )

    for cycle in find_cycles(normalized):
        if len(cycle) == 1:
            # already reported as a self reference
            continue
        stats.cycles += 1
        add(
            ValidationIssue(
                kind=IssueKind.CYCLE,
                message=f"Reporting cycle: {' → '.join([*cycle, cycle[0]])}",
                severity=Severity.ERROR,
                field=MANAGER_EMAIL,
                cycle_chain=tuple(cycle),
            )
        )

    stats.valid_rows = stats.total_rows - len(rows_with_errors)
    return report
