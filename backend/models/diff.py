"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ChangeType(str, Enum):
    """Kind of a single diff line"""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


class LineNumber(BaseModel):
    """1-indexed positions of a line in the old (left) and new (right) text"""

    model_config = ConfigDict(frozen=True)

    left: int | None = None  # set for removed / unchanged
    right: int | None = None  # set for added / unchanged


class DiffLine(BaseModel):
    """A single line in a line-by-line diff"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: ChangeType
    content: str
    line_number: LineNumber = Field(alias="lineNumber")


class DiffStats(BaseModel):
    """Line counts by change type"""

    model_config = ConfigDict(frozen=True)

    additions: int = 0
    deletions: int = 0
    unchanged: int = 0


class DiffResult(BaseModel):
    """Complete line diff of two texts"""

    model_config = ConfigDict(frozen=True)

    lines: list[DiffLine]
    stats: DiffStats


class InlineDiffResult(BaseModel):
    """Character-level differences of two lines (unchanged spans omitted)"""

    model_config = ConfigDict(frozen=True)

    added: list[str] = []
    removed: list[str] = []


class DiffRequest(BaseModel):
    """Request to diff two texts"""

    oldText: str | None = None
    newText: str | None = None


class InlineDiffRequest(BaseModel):
    """Request to diff two single lines"""

    oldLine: str | None = None
    newLine: str | None = None
