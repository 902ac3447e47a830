"""The person record flowing through the repair pipeline."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

FULL_NAME: Final[str] = "full_name"
EMAIL: Final[str] = "email"
MANAGER_EMAIL: Final[str] = "manager_email"
IDENTITY_COLUMNS: Final[tuple[str, str, str]] = (FULL_NAME, EMAIL, MANAGER_EMAIL)

_EMAIL_SHAPE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(value: str) -> bool:
    """Return True for ``local@domain.tld`` shaped values (one ``@``, no whitespace)."""

    return _EMAIL_SHAPE.fullmatch(value) is not None


def normalize_identity(value: str | None) -> str:
    return (value or "").strip().lower()


@dataclass(frozen=True, slots=True)
class Record:
    """One person and the identity of the person they report to.

    Records are immutable; pipeline stages derive new records with
    :meth:`evolve`. ``extra`` holds passthrough columns that the repair logic
    never reads.
    """

    full_name: str = ""
    email: str = ""
    manager_email: str = ""
    extra: Mapping[str, str] = field(default_factory=dict[str, str])

    @classmethod
    def from_row(cls, row: Mapping[str, str | None]) -> Record:
        """Build a record from a header -> value mapping, copying passthrough fields."""

        extra = {
            key: value or "" for key, value in row.items() if key not in IDENTITY_COLUMNS
        }
        return cls(
            full_name=row.get(FULL_NAME) or "",
            email=row.get(EMAIL) or "",
            manager_email=row.get(MANAGER_EMAIL) or "",
            extra=extra,
        )

    @property
    def is_root(self) -> bool:
        return not self.manager_email

    def evolve(self, **changes: str) -> Record:
        return replace(self, **changes)

    def copy(self) -> Record:
        return replace(self, extra=dict(self.extra))

    def as_row(self) -> dict[str, str]:
        row = {
            FULL_NAME: self.full_name,
            EMAIL: self.email,
            MANAGER_EMAIL: self.manager_email,
        }
        for key, value in self.extra.items():
            row.setdefault(key, value)
        return row
