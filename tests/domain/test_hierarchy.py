from __future__ import annotations

from orgrepair.domain.hierarchy import build_hierarchy, flatten_hierarchy
from orgrepair.domain.model import Record
from tests.helpers.records import chain, make_record


def _org() -> list[Record]:
    return [
        make_record("ceo@x.com", full_name="Chief"),
        make_record("cto@x.com", "ceo@x.com"),
        make_record("dev1@x.com", "cto@x.com"),
        make_record("cfo@x.com", "ceo@x.com"),
        make_record("dev2@x.com", "cto@x.com"),
    ]


def test_build_hierarchy_links_children_in_record_order() -> None:
    hierarchy = build_hierarchy(_org())

    (root,) = hierarchy.roots
    assert root.email == "ceo@x.com"
    assert root.full_name == "Chief"
    assert [child.email for child in root.children] == ["cto@x.com", "cfo@x.com"]
    cto = hierarchy.nodes["cto@x.com"]
    assert [child.email for child in cto.children] == ["dev1@x.com", "dev2@x.com"]
    assert {node.email: node.depth for node in hierarchy.nodes.values()} == {
        "ceo@x.com": 0,
        "cto@x.com": 1,
        "dev1@x.com": 2,
        "cfo@x.com": 1,
        "dev2@x.com": 2,
    }


def test_hierarchy_stats_for_five_people_on_three_levels() -> None:
    stats = build_hierarchy(_org()).stats

    assert stats.total_devs == 5
    assert stats.root_count == 1
    assert stats.max_depth == 3
    assert stats.leaf_count == 3


def test_hierarchy_stats_for_single_chain() -> None:
    stats = build_hierarchy(chain("a@x.com", "b@x.com", "c@x.com")).stats

    assert stats.max_depth == 3
    assert stats.leaf_count == 1
    assert stats.root_count == 1
    assert stats.total_devs == 3


def test_unresolved_manager_makes_invalid_root() -> None:
    hierarchy = build_hierarchy(
        [make_record("a@x.com", "ghost@x.com"), make_record("b@x.com", "a@x.com")]
    )

    (root,) = hierarchy.roots
    assert root.email == "a@x.com"
    assert root.is_valid is False
    assert hierarchy.nodes["b@x.com"].is_valid is True
    assert hierarchy.nodes["b@x.com"].depth == 1


def test_build_hierarchy_normalizes_identities_and_skips_blank_emails() -> None:
    hierarchy = build_hierarchy(
        [
            Record(full_name="Boss", email=" BOSS@x.com"),
            Record(full_name="Worker", email="worker@x.com", manager_email="Boss@X.com "),
            Record(full_name="Nobody", email=" "),
        ]
    )

    assert list(hierarchy.nodes) == ["boss@x.com", "worker@x.com"]
    assert [node.email for node in hierarchy.roots] == ["boss@x.com"]


def test_build_hierarchy_builds_fresh_nodes_every_call() -> None:
    records = _org()

    first = build_hierarchy(records)
    second = build_hierarchy(records)

    assert first.roots[0] is not second.roots[0]


def test_build_hierarchy_of_empty_input() -> None:
    hierarchy = build_hierarchy([])

    assert hierarchy.roots == []
    assert hierarchy.stats.total_devs == 0
    assert hierarchy.stats.max_depth == 1


def test_flatten_hierarchy_is_pre_order() -> None:
    hierarchy = build_hierarchy(_org())

    assert [node.email for node in flatten_hierarchy(hierarchy.roots)] == [
        "ceo@x.com",
        "cto@x.com",
        "dev1@x.com",
        "dev2@x.com",
        "cfo@x.com",
    ]
