"""
API Module - HTTP interface.

Exposes report generation via REST:
1. Client posts a game record
2. Service builds the report
3. Response carries the HTML and any contained issues
"""

from .schemas import (
    # Requests
    ReportRequest,
    # Responses
    ReportResponse,
    ReportIssueInfo,
    ErrorResponse,
    HealthResponse,
    # Enums
    ErrorCode,
)
from .service import ReportService
from .app import create_app

__all__ = [
    # Requests
    "ReportRequest",
    # Responses
    "ReportResponse",
    "ReportIssueInfo",
    "ErrorResponse",
    "HealthResponse",
    # Enums
    "ErrorCode",
    # Service
    "ReportService",
    "create_app",
]
