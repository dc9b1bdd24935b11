"""
Report Errors - Failures contained by the report pipeline.

No failure here aborts a report. Each one is:
1. Built as a ReportError at the point it happens
2. Recorded on the session as a ReportIssue
3. Logged, and passed to the session's on_issue callback if set

The embedding application decides how to show issues to a user.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class IssueKind(Enum):
    """Types of contained failure."""
    OUTPUT_OPEN_FAILURE = "output_open_failure"
    ASSET_WRITE_FAILURE = "asset_write_failure"
    ASSET_RENDER_FAILURE = "asset_render_failure"


class ReportError(Exception):
    """Base class for report failures."""

    kind: IssueKind

    def __init__(self, path: Path | str, cause: BaseException | None = None, turn_number: int | None = None):
        self.path = Path(path)
        self.cause = cause
        self.turn_number = turn_number
        super().__init__(self.describe())

    def describe(self) -> str:
        raise NotImplementedError


class OutputOpenFailure(ReportError):
    """The report document could not be opened for writing."""

    kind = IssueKind.OUTPUT_OPEN_FAILURE

    def describe(self) -> str:
        return f"Could not open {self.path} for writing."


class AssetWriteFailure(ReportError):
    """A board image could not be written."""

    kind = IssueKind.ASSET_WRITE_FAILURE

    def describe(self) -> str:
        return f"Could not write image {self.path}."


class AssetRenderFailure(ReportError):
    """A board image could not be drawn, usually because the move does not fit the board."""

    kind = IssueKind.ASSET_RENDER_FAILURE

    def describe(self) -> str:
        return f"Could not draw image {self.path}."


@dataclass(frozen=True)
class ReportIssue:
    """A recorded failure, safe to serialize or show to a user."""
    kind: IssueKind
    message: str
    path: str
    turn_number: int | None = None
    detail: str | None = None

    @classmethod
    def from_error(cls, error: ReportError) -> ReportIssue:
        return cls(
            kind=error.kind,
            message=str(error),
            path=str(error.path),
            turn_number=error.turn_number,
            detail=str(error.cause) if error.cause else None,
        )
