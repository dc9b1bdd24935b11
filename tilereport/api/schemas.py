"""
Pydantic Schemas for API - Request/response models for OpenAPI.

Error Codes:
- INVALID_GAME_RECORD: The submitted record is well-formed JSON but
  describes an impossible game (bad board, off-board move, ...)
- INTERNAL_ERROR: Anything else
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field

from ..records.schema import GameRecord


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    INVALID_GAME_RECORD = "INVALID_GAME_RECORD"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class IssueKind(str, Enum):
    """Contained report failures."""
    OUTPUT_OPEN_FAILURE = "output_open_failure"
    ASSET_WRITE_FAILURE = "asset_write_failure"
    ASSET_RENDER_FAILURE = "asset_render_failure"


# =============================================================================
# Requests
# =============================================================================

class ReportRequest(BaseModel):
    """Build a report for a game record."""
    game: GameRecord
    use_analysis: bool = Field(
        default=True,
        description="Rank recorded candidate moves and list them per position",
    )


# =============================================================================
# Responses
# =============================================================================

class ReportIssueInfo(BaseModel):
    kind: IssueKind
    message: str
    path: str
    turn_number: Optional[int] = None


class ReportResponse(BaseModel):
    html: str = Field(..., description="The complete report document")
    positions: int = Field(..., description="Number of positions reported")
    analysed: bool
    issues: list[ReportIssueInfo] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
