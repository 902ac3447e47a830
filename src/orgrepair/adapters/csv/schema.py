"""Pydantic models exchanged with the CSV collaborator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CsvBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ColumnMapping(CsvBaseModel):
    """Which source header feeds each identity field."""

    model_config = ConfigDict(frozen=True)

    full_name: str | None = None
    email: str | None = None
    manager_email: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.full_name and self.email and self.manager_email)

    @property
    def mapped_headers(self) -> tuple[str, ...]:
        return tuple(
            header
            for header in (self.full_name, self.email, self.manager_email)
            if header is not None
        )


class ParseResult(CsvBaseModel):
    data: list[dict[str, str]] = Field(default_factory=list)
    headers: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
