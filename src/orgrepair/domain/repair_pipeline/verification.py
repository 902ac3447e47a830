"""Final integrity verification of a repaired record set.

The verifier never changes data. It re-derives every structural invariant from
scratch and reports each violation as a message; a run only succeeds when the
list is empty.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from orgrepair.domain.model import is_valid_email
from orgrepair.domain.repair_pipeline.cycles import find_first_cycle

if TYPE_CHECKING:
    from collections.abc import Sequence

    from orgrepair.domain.model import Record

log = logging.getLogger(__name__)

_PREFIX = "Integrity violation"


@dataclass(slots=True)
class IntegrityReport:
    violations: list[str] = field(default_factory=list[str])
    root_count: int = 0

    @property
    def ok(self) -> bool:
        return not self.violations


def verify_integrity(records: Sequence[Record]) -> IntegrityReport:
    report = IntegrityReport()
    violations = report.violations

    emails: set[str] = set()
    for record in records:
        if not record.email:
            violations.append(f"{_PREFIX}: Missing email found")
        elif not is_valid_email(record.email):
            violations.append(f"{_PREFIX}: Invalid email format: {record.email}")
        if record.email in emails:
            violations.append(f"{_PREFIX}: Duplicate email: {record.email}")
        emails.add(record.email)
        if record.email and record.manager_email == record.email:
            violations.append(f"{_PREFIX}: Self-reporting: {record.email}")

    for record in records:
        if record.manager_email and record.manager_email not in emails:
            violations.append(f"{_PREFIX}: Missing manager: {record.manager_email}")

    cycle = find_first_cycle(records)
    if cycle:
        violations.append(f"{_PREFIX}: Cycle detected: {' → '.join(cycle)}")

    report.root_count = sum(1 for record in records if record.is_root)
    if report.root_count == 0:
        violations.append(f"{_PREFIX}: No root nodes exist")

    for violation in violations:
        log.warning(violation)
    return report


def tree_depth(records: Sequence[Record]) -> int:
    """Return the number of levels in the reporting forest (1-indexed).

    Depths are resolved iteratively along each manager chain; a chain that loops
    back on itself stops counting at the repeated node, so the result is defined
    even for sets that failed verification. Empty input has depth 1.
    """

    managers = {record.email: record.manager_email for record in records}
    depths: dict[str, int] = {}
    deepest = 0
    for record in records:
        chain: list[str] = []
        on_chain: set[str] = set()
        current = record.email
        base = 0
        while True:
            if current in depths:
                base = depths[current] + 1
                break
            if current in on_chain:
                base = 1
                break
            chain.append(current)
            on_chain.add(current)
            manager = managers.get(current, "")
            if not manager:
                break
            current = manager
        # chain[-1] is the top of the walk; assign depths top-down
        for offset, email in enumerate(reversed(chain)):
            depths[email] = base + offset
        if chain:
            deepest = max(deepest, depths[chain[0]])
    return deepest + 1
