"""Closed-form win probability model for college basketball matchups."""

from .config import ModelConfig
from .exceptions import InvalidInputError
from .models.matchup import MatchupResult
from .models.team import QuadrantRecord, TeamMetrics
from .predictors.composite import CompositePredictor, logistic, predict, predict_slate, weighted_quadrant_score
from .report import format_report, results_to_frame

__version__ = "0.1.0"

__all__ = [
    "CompositePredictor",
    "InvalidInputError",
    "MatchupResult",
    "ModelConfig",
    "QuadrantRecord",
    "TeamMetrics",
    "format_report",
    "logistic",
    "predict",
    "predict_slate",
    "results_to_frame",
    "weighted_quadrant_score",
]
