"""Record repair pipeline.

The pipeline turns an arbitrary set of person records into a structurally valid
reporting forest. Each phase is a pure transform over the record list and
reports its changes through the run's ``RepairSummary``; the integrity verifier
re-checks the outcome before anything downstream may rely on it.
"""

from __future__ import annotations

from .closure import ManagerClosurePhase, missing_managers
from .context import PipelineContext, RecordSet
from .cycles import CycleResolutionPhase, find_cycles, find_first_cycle
from .deduplication import DeduplicationPhase
from .names import NameSynthesisPhase, derive_name_from_email
from .normalization import IdentityNormalizationPhase
from .orchestrator import RepairPhase, RepairPipeline
from .runner import RepairResult, default_repair_pipeline, run_auto_repair
from .self_reference import SelfReferencePhase
from .validation import RowValidationPhase
from .verification import IntegrityReport, tree_depth, verify_integrity

__all__ = [
    "CycleResolutionPhase",
    "DeduplicationPhase",
    "IdentityNormalizationPhase",
    "IntegrityReport",
    "ManagerClosurePhase",
    "NameSynthesisPhase",
    "PipelineContext",
    "RecordSet",
    "RepairPhase",
    "RepairPipeline",
    "RepairResult",
    "RowValidationPhase",
    "SelfReferencePhase",
    "default_repair_pipeline",
    "derive_name_from_email",
    "find_cycles",
    "find_first_cycle",
    "missing_managers",
    "run_auto_repair",
    "tree_depth",
    "verify_integrity",
]
