"""Entry point for running the default repair pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .closure import ManagerClosurePhase
from .context import PipelineContext
from .cycles import CycleResolutionPhase
from .deduplication import DeduplicationPhase
from .names import NameSynthesisPhase
from .normalization import IdentityNormalizationPhase
from .orchestrator import RepairPipeline
from .self_reference import SelfReferencePhase
from .validation import RowValidationPhase
from .verification import tree_depth, verify_integrity

if TYPE_CHECKING:
    from collections.abc import Sequence

    from orgrepair.domain.model import Record, RepairSummary

log = logging.getLogger(__name__)


@dataclass(slots=True)
class RepairResult:
    """Outcome of one repair run.

    ``records`` must not be exported or turned into a hierarchy unless
    ``success`` is True; ``errors`` then explains what is still broken.
    """

    success: bool
    records: list[Record]
    summary: RepairSummary
    errors: list[str] = field(default_factory=list[str])


def default_repair_pipeline() -> RepairPipeline:
    return RepairPipeline(
        phases=(
            IdentityNormalizationPhase(),
            RowValidationPhase(),
            NameSynthesisPhase(),
            DeduplicationPhase(),
            SelfReferencePhase(),
            ManagerClosurePhase(),
            CycleResolutionPhase(),
        )
    )


def run_auto_repair(
    records: Sequence[Record],
    *,
    max_iterations: int | None = None,
    pipeline: RepairPipeline | None = None,
) -> RepairResult:
    """Repair ``records`` into a valid reporting forest and verify the result.

    The input sequence and its records are left untouched.
    """

    context = PipelineContext(max_iterations=max_iterations)
    summary = context.summary
    summary.original_row_count = len(records)

    repaired = (pipeline or default_repair_pipeline()).run(records, context=context)
    report = verify_integrity(repaired)

    summary.final_row_count = len(repaired)
    summary.total_root_nodes = report.root_count
    summary.final_tree_depth = tree_depth(repaired)

    log.info(
        "Repair finished: success=%s, rows=%s->%s, removed=%s, managers_created=%s, "
        "cycles_broken=%s",
        report.ok,
        summary.original_row_count,
        summary.final_row_count,
        summary.rows_removed,
        summary.managers_auto_created,
        summary.cycles_broken,
    )
    return RepairResult(
        success=report.ok,
        records=repaired,
        summary=summary,
        errors=list(report.violations),
    )
