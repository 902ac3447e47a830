"""Structural row validation phase."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from orgrepair.domain.model import is_valid_email
from orgrepair.domain.repair_pipeline.orchestrator import RepairPhase

if TYPE_CHECKING:
    from collections.abc import Sequence

    from orgrepair.domain.model import Record
    from orgrepair.domain.repair_pipeline.context import PipelineContext, RecordSet

log = logging.getLogger(__name__)


def rejection_reason(record: Record) -> str | None:
    """Return why ``record`` cannot be kept, or None when its email is usable."""

    if not record.email:
        return "Missing email"
    if not is_valid_email(record.email):
        return f"Invalid email format: {record.email}"
    return None


class RowValidationPhase(RepairPhase):
    """Drop rows whose email is missing or malformed, keeping order."""

    name: str = "validation"

    def run(self, records: Sequence[Record], *, context: PipelineContext) -> RecordSet:
        survivors: RecordSet = []
        for record in records:
            reason = rejection_reason(record)
            if reason is None:
                survivors.append(record)
                continue
            context.summary.record_removal(record, reason)

        log.debug("Validation kept %s of %s rows", len(survivors), len(records))
        return survivors
