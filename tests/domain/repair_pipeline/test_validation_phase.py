from __future__ import annotations

import pytest

from orgrepair.domain.model import Record, is_valid_email
from orgrepair.domain.repair_pipeline import PipelineContext, RowValidationPhase


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("jane@co.com", True),
        ("jane.doe+tag@mail.co.uk", True),
        ("jane@localhost", False),
        ("jane@@co.com", False),
        ("jane doe@co.com", False),
        ("@co.com", False),
        ("jane@co.", False),
        ("", False),
    ],
)
def test_email_shape(value: str, *, expected: bool) -> None:
    assert is_valid_email(value) is expected


def test_validation_removes_missing_and_malformed_emails_in_order() -> None:
    records = [
        Record(full_name="Keep One", email="one@x.com"),
        Record(full_name="Nobody", email=""),
        Record(full_name="Broken", email="broken.example.com"),
        Record(full_name="Keep Two", email="two@x.com"),
    ]
    context = PipelineContext()

    survivors = RowValidationPhase().run(records, context=context)

    assert [record.email for record in survivors] == ["one@x.com", "two@x.com"]
    summary = context.summary
    assert summary.rows_removed == 2
    assert [removed.reason for removed in summary.removed_rows] == [
        "Missing email",
        "Invalid email format: broken.example.com",
    ]
    assert summary.removed_rows[0].record.full_name == "Nobody"
