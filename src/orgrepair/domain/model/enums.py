"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class IssueKind(StrEnum):
    """Category of a problem found in an unrepaired record set."""

    REQUIRED_FIELD = "required_field"
    INVALID_EMAIL = "invalid_email"
    DUPLICATE_EMAIL = "duplicate_email"
    MISSING_MANAGER = "missing_manager"
    SELF_REFERENCE = "self_reference"
    CYCLE = "cycle"
    BLANK_HEADER = "blank_header"


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"
