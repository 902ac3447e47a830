"""Domain model for person records and repair auditing."""

from __future__ import annotations

from .enums import IssueKind, Severity
from .record import (
    EMAIL,
    FULL_NAME,
    IDENTITY_COLUMNS,
    MANAGER_EMAIL,
    Record,
    is_valid_email,
    normalize_identity,
)
from .summary import RemovedRow, RepairSummary

__all__ = [
    "EMAIL",
    "FULL_NAME",
    "IDENTITY_COLUMNS",
    "MANAGER_EMAIL",
    "IssueKind",
    "Record",
    "RemovedRow",
    "RepairSummary",
    "Severity",
    "is_valid_email",
    "normalize_identity",
]
