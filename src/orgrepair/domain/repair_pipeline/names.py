"""Display-name synthesis for records without a name."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from orgrepair.domain.repair_pipeline.orchestrator import RepairPhase

if TYPE_CHECKING:
    from collections.abc import Sequence

    from orgrepair.domain.model import Record
    from orgrepair.domain.repair_pipeline.context import PipelineContext, RecordSet

_SEPARATORS = re.compile(r"[._-]+")
log = logging.getLogger(__name__)


def derive_name_from_email(email: str) -> str:
    """Turn the local part of ``email`` into a display name.

    ``jane.doe@co.com`` becomes ``Jane Doe``. Each token gets an upper-case first
    letter and a lower-case remainder.
    """

    local_part = email.split("@", 1)[0]
    tokens = [token for token in _SEPARATORS.split(local_part) if token]
    if not tokens:
        return local_part
    return " ".join(token[:1].upper() + token[1:].lower() for token in tokens)


class NameSynthesisPhase(RepairPhase):
    """Fill empty ``full_name`` values from the record's email."""

    name: str = "name_synthesis"

    def run(self, records: Sequence[Record], *, context: PipelineContext) -> RecordSet:
        summary = context.summary
        filled: RecordSet = []
        for record in records:
            if record.full_name.strip():
                filled.append(record)
                continue
            filled.append(record.evolve(full_name=derive_name_from_email(record.email)))
            summary.full_names_auto_filled += 1
            summary.mark_modified(record.email)

        log.debug("Auto-filled %s names", summary.full_names_auto_filled)
        return filled
