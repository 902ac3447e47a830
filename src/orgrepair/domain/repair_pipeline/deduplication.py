"""Duplicate identity removal phase."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from orgrepair.domain.repair_pipeline.orchestrator import RepairPhase

if TYPE_CHECKING:
    from collections.abc import Sequence

    from orgrepair.domain.model import Record
    from orgrepair.domain.repair_pipeline.context import PipelineContext, RecordSet

log = logging.getLogger(__name__)


class DeduplicationPhase(RepairPhase):
    """Keep the first record per email; later ones are removed and logged.

    Emails must already be normalized, so case and whitespace variants collapse.
    """

    name: str = "deduplication"

    def run(self, records: Sequence[Record], *, context: PipelineContext) -> RecordSet:
        summary = context.summary
        seen: set[str] = set()
        survivors: RecordSet = []
        for record in records:
            if record.email in seen:
                summary.record_removal(record, f"Duplicate email: {record.email}")
                summary.duplicate_emails_removed += 1
                continue
            seen.add(record.email)
            survivors.append(record)

        log.debug("Removed %s duplicate rows", summary.duplicate_emails_removed)
        return survivors
