from __future__ import annotations

from orgrepair.domain.model import Record
from orgrepair.domain.repair_pipeline import tree_depth, verify_integrity
from tests.helpers.records import chain, make_record


def test_verify_integrity_accepts_valid_forest() -> None:
    report = verify_integrity([*chain("a@x.com", "b@x.com"), make_record("c@x.com")])

    assert report.ok
    assert report.violations == []
    assert report.root_count == 2


def test_verify_integrity_reports_identity_violations() -> None:
    records = [
        Record(email=""),
        Record(email="bad-email"),
        make_record("dup@x.com"),
        make_record("dup@x.com"),
        make_record("orphan@x.com", "ghost@x.com"),
    ]

    report = verify_integrity(records)

    assert not report.ok
    assert report.violations == [
        "Integrity violation: Missing email found",
        "Integrity violation: Invalid email format: bad-email",
        "Integrity violation: Duplicate email: dup@x.com",
        "Integrity violation: Missing manager: ghost@x.com",
    ]


def test_verify_integrity_reports_self_reference() -> None:
    report = verify_integrity([make_record("root@x.com"), make_record("me@x.com", "me@x.com")])

    assert "Integrity violation: Self-reporting: me@x.com" in report.violations
    assert not report.ok


def test_verify_integrity_reports_cycle_and_missing_root() -> None:
    records = [make_record("a@x.com", "b@x.com"), make_record("b@x.com", "a@x.com")]

    report = verify_integrity(records)

    assert report.violations == [
        "Integrity violation: Cycle detected: a@x.com → b@x.com",
        "Integrity violation: No root nodes exist",
    ]
    assert report.root_count == 0


def test_verify_integrity_rejects_empty_input() -> None:
    report = verify_integrity([])

    assert report.violations == ["Integrity violation: No root nodes exist"]


def test_tree_depth_counts_levels() -> None:
    records = [*chain("a@x.com", "b@x.com", "c@x.com"), make_record("d@x.com", "a@x.com")]

    assert tree_depth(records) == 3
    assert tree_depth([make_record("solo@x.com")]) == 1
    assert tree_depth([]) == 1


def test_tree_depth_terminates_on_cycles() -> None:
    records = [make_record("a@x.com", "b@x.com"), make_record("b@x.com", "a@x.com")]

    assert tree_depth(records) == 3
