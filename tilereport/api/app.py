"""
FastAPI Application - REST API for report generation.

Endpoints:
    GET    /api/v1/health     Liveness check
    POST   /api/v1/reports    Build an HTML report from a game record

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Optional

from ..config import get_settings
from .. import __version__


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional ReportService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    import structlog

    from ..records import GameRecordError
    from .service import ReportService
    from .schemas import (
        ReportRequest,
        ReportResponse,
        ErrorResponse,
        HealthResponse,
        ErrorCode,
    )

    logger = structlog.get_logger(__name__)
    settings = get_settings()

    app = FastAPI(
        title="Tilereport API",
        description="""
Crossword game reports - one section per position, with engine move rankings.

## Error Codes

| Code | Description |
|------|-------------|
| `INVALID_GAME_RECORD` | Record describes an impossible game |
| `INTERNAL_ERROR` | Unexpected failure |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    report_service = service or ReportService(settings=settings)

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    # =========================================================================
    # Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["System"],
    )
    def health() -> HealthResponse:
        return HealthResponse(version=__version__)

    @app.post(
        "/api/v1/reports",
        response_model=ReportResponse,
        responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        tags=["Reports"],
        summary="Build an HTML report from a game record",
    )
    def create_report(request: ReportRequest):
        """
        Build a report for the submitted game.

        Image failures cannot occur here (reports are single-document);
        any other contained failure is listed in `issues`.
        """
        try:
            return report_service.build_report(request)
        except GameRecordError as exc:
            logger.warning("game_record_rejected", errors=exc.errors)
            return make_error_response(
                ErrorCode.INVALID_GAME_RECORD,
                "Game record describes an impossible game",
                status_code=422,
                details={"errors": exc.errors},
            )
        except Exception as exc:
            logger.exception("report_failed")
            return make_error_response(
                ErrorCode.INTERNAL_ERROR,
                f"Failed to build report: {exc}",
                status_code=500,
            )

    return app
