"""Builders for record fixtures."""

from __future__ import annotations

from orgrepair.domain.model import Record


def make_record(
    email: str,
    manager_email: str = "",
    *,
    full_name: str | None = None,
    **extra: str,
) -> Record:
    """Create a record; the name defaults to something derived from ``email``."""

    name = full_name if full_name is not None else email.split("@", 1)[0].title()
    return Record(full_name=name, email=email, manager_email=manager_email, extra=extra)


def chain(*emails: str) -> list[Record]:
    """Build a reporting chain where each email reports to the previous one."""

    records: list[Record] = []
    previous = ""
    for email in emails:
        records.append(make_record(email, previous))
        previous = email
    return records


def emails_of(records: list[Record]) -> list[str]:
    return [record.email for record in records]
