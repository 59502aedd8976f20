"""Models module - Pydantic data models"""

from .diff import (
    ChangeType,
    LineNumber,
    DiffLine,
    DiffStats,
    DiffResult,
    InlineDiffResult,
    DiffRequest,
    InlineDiffRequest,
)

__all__ = [
    # Result models
    "ChangeType",
    "LineNumber",
    "DiffLine",
    "DiffStats",
    "DiffResult",
    "InlineDiffResult",
    # Request models
    "DiffRequest",
    "InlineDiffRequest",
]
