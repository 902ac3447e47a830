"""Reporting hierarchy assembly.

``build_hierarchy`` turns a verified record set into a forest of fresh
``HierarchyNode`` objects. Depth assignment walks down from the roots, so nodes
caught in a cycle are never reached and keep depth 0; callers should only build
hierarchies from record sets that passed integrity verification.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from orgrepair.domain.model import normalize_identity

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from orgrepair.domain.model import Record


@dataclass(eq=False, slots=True)
class HierarchyNode:
    email: str
    full_name: str
    manager_email: str
    children: list[HierarchyNode] = field(default_factory=list["HierarchyNode"])
    is_valid: bool = True
    depth: int = 0

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True, slots=True)
class HierarchyStats:
    """Aggregate shape of a forest.

    ``max_depth`` counts levels (a single root is depth 1), matching how the
    repair summary reports tree depth.
    """

    total_devs: int
    root_count: int
    max_depth: int
    leaf_count: int


@dataclass(slots=True)
class Hierarchy:
    roots: list[HierarchyNode]
    stats: HierarchyStats
    nodes: dict[str, HierarchyNode]


def build_hierarchy(records: Sequence[Record]) -> Hierarchy:
    nodes: dict[str, HierarchyNode] = {}
    for record in records:
        email = normalize_identity(record.email)
        if not email:
            continue
        nodes[email] = HierarchyNode(
            email=email,
            full_name=record.full_name,
            manager_email=normalize_identity(record.manager_email),
        )

    roots: list[HierarchyNode] = []
    for node in nodes.values():
        manager = nodes.get(node.manager_email) if node.manager_email else None
        if manager is not None:
            manager.children.append(node)
            continue
        if node.manager_email:
            node.is_valid = False
        roots.append(node)

    _assign_depths(roots)

    max_depth = max((node.depth for node in nodes.values()), default=0)
    stats = HierarchyStats(
        total_devs=len(nodes),
        root_count=len(roots),
        max_depth=max_depth + 1,
        leaf_count=sum(1 for node in nodes.values() if node.is_leaf),
    )
    return Hierarchy(roots=roots, stats=stats, nodes=nodes)


def _assign_depths(roots: Iterable[HierarchyNode]) -> None:
    stack = [(root, 0) for root in roots]
    while stack:
        node, depth = stack.pop()
        node.depth = depth
        stack.extend((child, depth + 1) for child in node.children)


def flatten_hierarchy(roots: Sequence[HierarchyNode]) -> list[HierarchyNode]:
    """Return every node reachable from ``roots`` in pre-order."""

    result: list[HierarchyNode] = []
    stack = list(reversed(roots))
    while stack:
        node = stack.pop()
        result.append(node)
        stack.extend(reversed(node.children))
    return result
