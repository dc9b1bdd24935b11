"""
API Service - Business logic layer between API and report pipeline.

The service:
1. Builds the game from a validated record
2. Picks an engine when analysis is requested
3. Runs a ReportSession into a scratch directory
4. Returns the document and any issues

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
Reports built here are single-document (no board images).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
import tempfile

from ..bots import RankedCandidateEngine, MoveEvaluator
from ..config import Settings, get_settings
from ..records import build_game
from ..report import ReportSession
from .schemas import IssueKind, ReportIssueInfo, ReportRequest, ReportResponse


@dataclass
class ReportService:
    """
    Main API service.

    Usage:
        service = ReportService()
        response = service.build_report(request)
    """
    settings: Settings = field(default_factory=get_settings)
    evaluator: MoveEvaluator = field(default_factory=MoveEvaluator)

    def build_report(self, request: ReportRequest) -> ReportResponse:
        """
        Build an HTML report for the requested game.

        Raises GameRecordError if the record describes an impossible game.
        """
        loaded = build_game(request.game)

        engine = None
        if request.use_analysis:
            engine = RankedCandidateEngine(loaded.analysis, evaluator=self.evaluator)

        with tempfile.TemporaryDirectory(prefix="tilereport-") as scratch:
            path = Path(scratch) / "report.html"
            with ReportSession(path, generate_images=False, settings=self.settings) as session:
                session.report_game(loaded.game, engine)
            html = path.read_text(encoding="utf-8") if path.exists() else ""

        return ReportResponse(
            html=html,
            positions=session.positions_reported,
            analysed=engine is not None,
            issues=[
                ReportIssueInfo(
                    kind=IssueKind(issue.kind.value),
                    message=issue.message,
                    path=issue.path,
                    turn_number=issue.turn_number,
                )
                for issue in session.issues
            ],
        )
