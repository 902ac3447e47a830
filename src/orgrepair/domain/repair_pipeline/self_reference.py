"""Self-reporting repair phase."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from orgrepair.domain.repair_pipeline.orchestrator import RepairPhase

if TYPE_CHECKING:
    from collections.abc import Sequence

    from orgrepair.domain.model import Record
    from orgrepair.domain.repair_pipeline.context import PipelineContext, RecordSet

log = logging.getLogger(__name__)


class SelfReferencePhase(RepairPhase):
    """Promote records that name themselves as manager to roots."""

    name: str = "self_reference"

    def run(self, records: Sequence[Record], *, context: PipelineContext) -> RecordSet:
        summary = context.summary
        fixed: RecordSet = []
        for record in records:
            if record.manager_email and record.manager_email == record.email:
                fixed.append(record.evolve(manager_email=""))
                summary.self_reporting_fixed += 1
                summary.mark_modified(record.email)
            else:
                fixed.append(record)

        log.debug("Fixed %s self-reporting rows", summary.self_reporting_fixed)
        return fixed
