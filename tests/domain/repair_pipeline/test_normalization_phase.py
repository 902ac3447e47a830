from __future__ import annotations

from orgrepair.domain.model import Record
from orgrepair.domain.repair_pipeline import IdentityNormalizationPhase, PipelineContext


def test_normalization_trims_and_lowercases_identity_fields() -> None:
    record = Record(
        full_name="  Jane Doe ", email=" Jane.Doe@Co.COM", manager_email="BOSS@co.com "
    )
    context = PipelineContext()

    (normalized,) = IdentityNormalizationPhase().run([record], context=context)

    assert normalized.full_name == "Jane Doe"
    assert normalized.email == "jane.doe@co.com"
    assert normalized.manager_email == "boss@co.com"
    assert record.email == " Jane.Doe@Co.COM"


def test_normalization_counts_rows_not_fields() -> None:
    records = [
        Record(full_name=" A ", email="A@x.com", manager_email="B@x.com"),
        Record(full_name="B", email="b@x.com"),
    ]
    context = PipelineContext()

    IdentityNormalizationPhase().run(records, context=context)

    assert context.summary.emails_normalized == 1
    assert context.summary.modified_rows == {"a@x.com"}


def test_normalization_never_drops_rows_and_skips_blank_emails_in_modified_set() -> None:
    records = [Record(full_name=" ", email="   "), Record(email="")]
    context = PipelineContext()

    normalized = IdentityNormalizationPhase().run(records, context=context)

    assert len(normalized) == 2
    assert context.summary.emails_normalized == 1
    assert context.summary.modified_rows == set()


def test_normalization_preserves_passthrough_fields() -> None:
    record = Record(email="A@x.com", extra={"team": " Platform "})

    (normalized,) = IdentityNormalizationPhase().run([record], context=PipelineContext())

    assert normalized.extra == {"team": " Platform "}


def test_normalization_treats_absent_fields_as_empty() -> None:
    record = Record(full_name=None, email="A@x.com", manager_email=None)  # type: ignore[arg-type]
    context = PipelineContext()

    (normalized,) = IdentityNormalizationPhase().run([record], context=context)

    assert normalized.full_name == ""
    assert normalized.manager_email == ""
    assert normalized.email == "a@x.com"
