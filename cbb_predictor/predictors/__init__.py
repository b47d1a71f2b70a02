"""Matchup predictors."""

from .base import BasePredictor
from .composite import (
    CONTRIBUTION_NAMES,
    FEATURE_NAMES,
    CompositePredictor,
    feature_advantages,
    logistic,
    predict,
    predict_slate,
    smoothed_win_rate,
    weighted_quadrant_score,
)

__all__ = [
    "BasePredictor",
    "CONTRIBUTION_NAMES",
    "CompositePredictor",
    "FEATURE_NAMES",
    "feature_advantages",
    "logistic",
    "predict",
    "predict_slate",
    "smoothed_win_rate",
    "weighted_quadrant_score",
]
