"""Phase-based orchestrator for the repair pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from orgrepair.domain.repair_pipeline.context import PipelineContext

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from orgrepair.domain.model import Record
    from orgrepair.domain.repair_pipeline.context import RecordSet


class RepairPhase(Protocol):
    """Contract implemented by each repair phase.

    A phase never mutates the records it is given; it returns the working set
    for the next phase and reports what it changed through ``context.summary``.
    """

    name: str

    def run(self, records: Sequence[Record], *, context: PipelineContext) -> RecordSet: ...


@dataclass(slots=True)
class RepairPipeline:
    """Compose and execute the ordered repair phases."""

    phases: Sequence[RepairPhase] = field(default_factory=tuple)

    def with_phase(self, phase: RepairPhase) -> RepairPipeline:
        """Return a new pipeline appending ``phase`` at the end."""

        return RepairPipeline(phases=(*self.phases, phase))

    def extend(self, phases: Iterable[RepairPhase]) -> RepairPipeline:
        """Return a new pipeline with the provided ``phases`` concatenated."""

        return RepairPipeline(phases=(*self.phases, *tuple(phases)))

    def run(
        self, records: Sequence[Record], *, context: PipelineContext | None = None
    ) -> RecordSet:
        """Execute the configured phases in-order, starting from a copy of ``records``."""

        active_context = context or PipelineContext()
        working: RecordSet = [record.copy() for record in records]
        for phase in self.phases:
            working = phase.run(working, context=active_context)
        return working
