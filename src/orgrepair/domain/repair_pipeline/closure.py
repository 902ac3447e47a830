"""Manager closure phase: synthesize records for referenced but absent managers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from orgrepair.domain.model import Record
from orgrepair.domain.repair_pipeline.names import derive_name_from_email
from orgrepair.domain.repair_pipeline.orchestrator import RepairPhase

if TYPE_CHECKING:
    from collections.abc import Sequence

    from orgrepair.domain.repair_pipeline.context import PipelineContext, RecordSet

log = logging.getLogger(__name__)


def missing_managers(records: Sequence[Record]) -> list[str]:
    """Return manager identities referenced but not present, in first-seen order."""

    existing = {record.email for record in records}
    missing: dict[str, None] = {}
    for record in records:
        if record.manager_email and record.manager_email not in existing:
            missing.setdefault(record.manager_email, None)
    return list(missing)


class ManagerClosurePhase(RepairPhase):
    """Append placeholder records until every manager reference resolves.

    Synthesized managers are roots, so each generation can only be followed by
    an empty one; the loop still carries an iteration cap and leaves any gap it
    could not close to the integrity verifier.
    """

    name: str = "manager_closure"

    def run(self, records: Sequence[Record], *, context: PipelineContext) -> RecordSet:
        summary = context.summary
        closed: RecordSet = list(records)
        limit = context.iteration_limit(records)

        for _ in range(limit):
            missing = missing_managers(closed)
            if not missing:
                break
            for manager_email in missing:
                closed.append(
                    Record(
                        full_name=derive_name_from_email(manager_email),
                        email=manager_email,
                        manager_email="",
                    )
                )
                summary.managers_auto_created += 1
                summary.auto_created_managers.append(manager_email)
                summary.mark_modified(manager_email)
        else:
            if missing_managers(closed):
                log.warning("Manager closure stopped after %s iterations", limit)

        log.debug("Auto-created %s managers", summary.managers_auto_created)
        return closed
