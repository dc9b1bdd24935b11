"""
Report - Graphical game reports.

Builds an HTML report of a game, one section per position, with optional
board images and engine move rankings. Failures writing the document or
an image are recorded as issues and never abort the run.
"""

from .errors import AssetRenderFailure, AssetWriteFailure, IssueKind, OutputOpenFailure, ReportError, ReportIssue
from .naming import AssetNamer, RenderedAsset
from .reconciler import MOVES_TO_SHOW, MoveReconciler, ReconciledMoveList, reconcile_moves
from .renderer import PositionRenderer, header_text
from .session import ReportSession

__all__ = [
    "AssetRenderFailure",
    "AssetWriteFailure",
    "IssueKind",
    "OutputOpenFailure",
    "ReportError",
    "ReportIssue",
    "AssetNamer",
    "RenderedAsset",
    "MOVES_TO_SHOW",
    "MoveReconciler",
    "ReconciledMoveList",
    "reconcile_moves",
    "PositionRenderer",
    "header_text",
    "ReportSession",
]
