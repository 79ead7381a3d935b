from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SetRecord(BaseModel):
    """One named listing to harvest, as read from the sets file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Set name; also the source of the output filename")
    link: str = Field(..., min_length=1, description="Listing URL of the set's first page")


class ErrorLogEntry(BaseModel):
    name: str
    link: str
    error: str

    @classmethod
    def from_record(cls, record: SetRecord, error: str) -> "ErrorLogEntry":
        return cls(name=record.name, link=record.link, error=error)


@dataclass
class HarvestResult:
    record: SetRecord
    path: Optional[Path] = None
    pages: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
