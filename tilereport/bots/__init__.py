"""
Bots module - Move evaluation engines.

Provides:
- EvaluationEngine: Interface the report pipeline consumes
- RankedCandidateEngine: Ranks recorded candidate moves
- MoveEvaluator: Scores a move as points plus rack leave
"""

from .engine import AnalysisKey, EvaluationEngine, RankedCandidateEngine, analysis_key
from .evaluator import MoveEvaluator, EvaluationWeights, leave_after

__all__ = [
    "EvaluationEngine",
    "RankedCandidateEngine",
    "AnalysisKey",
    "analysis_key",
    "MoveEvaluator",
    "EvaluationWeights",
    "leave_after",
]
