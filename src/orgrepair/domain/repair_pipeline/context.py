"""Shared context for the repair pipeline (summary + run limits)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

from orgrepair.domain.model import Record, RepairSummary

if TYPE_CHECKING:
    from collections.abc import Sequence


RecordSet: TypeAlias = list[Record]


@dataclass(slots=True)
class PipelineContext:
    """Per-run context threaded through every phase.

    ``summary`` is the write-only audit accumulator. ``max_iterations`` caps the
    fixed-point phases; ``None`` derives the cap from the current record count.
    """

    summary: RepairSummary = field(default_factory=RepairSummary)
    max_iterations: int | None = None

    def iteration_limit(self, records: Sequence[Record]) -> int:
        if self.max_iterations is not None:
            return self.max_iterations
        return len(records) + 1
