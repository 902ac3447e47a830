"""Identity normalization phase."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from orgrepair.domain.model import normalize_identity
from orgrepair.domain.repair_pipeline.orchestrator import RepairPhase

if TYPE_CHECKING:
    from collections.abc import Sequence

    from orgrepair.domain.model import Record
    from orgrepair.domain.repair_pipeline.context import PipelineContext, RecordSet

log = logging.getLogger(__name__)


class IdentityNormalizationPhase(RepairPhase):
    """Trim and lower-case identity fields; trim the display name.

    A row counts once towards ``emails_normalized`` however many of its three
    fields changed.
    """

    name: str = "normalization"

    def run(self, records: Sequence[Record], *, context: PipelineContext) -> RecordSet:
        summary = context.summary
        normalized: RecordSet = []
        for record in records:
            candidate = record.evolve(
                full_name=(record.full_name or "").strip(),
                email=normalize_identity(record.email),
                manager_email=normalize_identity(record.manager_email),
            )
            if (
                candidate.email != record.email
                or candidate.manager_email != record.manager_email
                or candidate.full_name != record.full_name
            ):
                summary.emails_normalized += 1
                summary.mark_modified(candidate.email)
            normalized.append(candidate)

        log.debug("Normalized %s of %s rows", summary.emails_normalized, len(normalized))
        return normalized
