"""Reporting-cycle detection and the phase that breaks cycles.

Cycle search walks the ``email -> manager_email`` graph with explicit
collections instead of recursion, so arbitrarily long reporting chains cannot
exhaust the interpreter stack. Each node has at most one outgoing edge, which
makes every walk a simple path that either ends, joins an already explored
path, or closes on itself.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeAlias

from orgrepair.domain.repair_pipeline.orchestrator import RepairPhase

if TYPE_CHECKING:
    from collections.abc import Sequence

    from orgrepair.domain.model import Record
    from orgrepair.domain.repair_pipeline.context import PipelineContext, RecordSet

log = logging.getLogger(__name__)

ManagerGraph: TypeAlias = dict[str, str]
Cycle: TypeAlias = list[str]


def manager_graph(records: Sequence[Record]) -> ManagerGraph:
    """Map each email with a manager to that manager, in record order."""

    graph: ManagerGraph = {}
    for record in records:
        if record.email and record.manager_email:
            graph[record.email] = record.manager_email
    return graph


def _walk(start: str, graph: ManagerGraph, visited: set[str]) -> Cycle | None:
    path: list[str] = []
    position: dict[str, int] = {}
    current = start
    while True:
        if current in position:
            return path[position[current] :]
        if current in visited:
            return None
        visited.add(current)
        position[current] = len(path)
        path.append(current)

        manager = graph.get(current)
        # only nodes that have a manager themselves can continue a cycle
        if manager is None or manager not in graph:
            return None
        current = manager


def find_first_cycle(records: Sequence[Record]) -> Cycle:
    """Return the first cycle in traversal order, or an empty list.

    Walks start from each node in record order. The returned cycle begins at the
    node where the walk closed on itself, i.e. the member reached first.
    """

    graph = manager_graph(records)
    visited: set[str] = set()
    for email in graph:
        cycle = _walk(email, graph, visited)
        if cycle:
            return cycle
    return []


def find_cycles(records: Sequence[Record]) -> list[Cycle]:
    """Return every distinct cycle, each reported once, in traversal order."""

    graph = manager_graph(records)
    visited: set[str] = set()
    cycles: list[Cycle] = []
    for email in graph:
        if email in visited:
            continue
        cycle = _walk(email, graph, visited)
        if cycle:
            cycles.append(cycle)
    return cycles


class CycleResolutionPhase(RepairPhase):
    """Break cycles one at a time by clearing the manager of the first member."""

    name: str = "cycle_resolution"

    def run(self, records: Sequence[Record], *, context: PipelineContext) -> RecordSet:
        summary = context.summary
        resolved: RecordSet = list(records)
        limit = context.iteration_limit(records)

        for _ in range(limit):
            cycle = find_first_cycle(resolved)
            if not cycle:
                break
            summary.cycles_detected += 1
            break_point = cycle[0]
            log.info("Breaking reporting cycle at %s: %s", break_point, " → ".join(cycle))
            resolved = [
                record.evolve(manager_email="") if record.email == break_point else record
                for record in resolved
            ]
            summary.cycles_broken += 1
            summary.mark_modified(break_point)
        else:
            if find_first_cycle(resolved):
                log.warning("Cycle resolution stopped after %s iterations", limit)

        return resolved
