"""Composite advanced-metrics predictor.

Scores a home/away matchup from NET rank, Strength of Record, adjusted
efficiency margin and quadrant records, then maps the additive score to a
home win probability with a logistic curve.
"""

import logging
from typing import Iterable, Optional, Tuple

import numpy as np
import pandas as pd
from scipy.special import expit

from .base import BasePredictor
from ..config import ModelConfig
from ..models.matchup import Contribution, MatchupResult
from ..models.team import TeamMetrics
from ..report import results_to_frame

logger = logging.getLogger(__name__)

NET_ADV = "NET_adv"
SOR_ADV = "SOR_adv"
EFF_MARGIN_ADV = "AdjEffMargin_adv"
QUADRANTS_ADV = "Quadrants_adv"
HOME_COURT_BONUS = "HomeCourt_bonus"

FEATURE_NAMES = (NET_ADV, SOR_ADV, EFF_MARGIN_ADV, QUADRANTS_ADV)
CONTRIBUTION_NAMES = FEATURE_NAMES + (HOME_COURT_BONUS,)


def smoothed_win_rate(wins: int, losses: int, alpha: float) -> float:
    """Laplace-smoothed win rate: (W + alpha) / (W + L + 2*alpha)."""
    return (wins + alpha) / (wins + losses + 2.0 * alpha)


def weighted_quadrant_score(team: TeamMetrics, config: Optional[ModelConfig] = None) -> float:
    """
    Collapse a team's quadrant records into one weighted, smoothed win rate.

    Args:
        team: Team to score
        config: Model configuration (defaults apply when omitted)

    Returns:
        Score in [0, 1]; exactly 0.5 when every quadrant weight is zero
    """
    config = config or ModelConfig.default()
    weights = config.quadrant_weights

    wsum = sum(weights)
    if wsum == 0:
        return 0.5

    rates = [smoothed_win_rate(q.wins, q.losses, config.quad_laplace_alpha) for q in team.quadrants]
    return sum(w * r for w, r in zip(weights, rates)) / wsum


def feature_advantages(
    home: TeamMetrics,
    away: TeamMetrics,
    config: Optional[ModelConfig] = None,
) -> Tuple[Contribution, ...]:
    """
    Scaled, unweighted home-minus-away advantage on each feature axis.

    Ranks are inverted (lower is better), so a smaller home rank gives a
    positive advantage.
    """
    config = config or ModelConfig.default()

    net_adv = (float(away.net_rank) - home.net_rank) / config.net_rank_scale
    sor_adv = (float(away.sor_rank) - home.sor_rank) / config.sor_rank_scale
    em_adv = (home.efficiency_margin - away.efficiency_margin) / config.eff_margin_scale
    quad_adv = weighted_quadrant_score(home, config) - weighted_quadrant_score(away, config)

    return (
        (NET_ADV, net_adv),
        (SOR_ADV, sor_adv),
        (EFF_MARGIN_ADV, em_adv),
        (QUADRANTS_ADV, quad_adv),
    )


def logistic(score, slope: float):
    """
    Map a score to a probability with 1 / (1 + exp(-slope * score)).

    Uses scipy's expit so very large magnitudes saturate to 0 or 1 instead of
    overflowing.

    Args:
        score: Scalar or array of composite scores
        slope: Steepness; larger values give more extreme probabilities

    Returns:
        Probability as float for scalar input, ndarray otherwise
    """
    probs = expit(np.multiply(slope, score))
    if np.ndim(probs) == 0:
        return float(probs)
    return probs


def predict(
    home: TeamMetrics,
    away: TeamMetrics,
    config: Optional[ModelConfig] = None,
) -> MatchupResult:
    """
    Predict the probability that the home team beats the away team.

    Args:
        home: Team playing at home (receives the home-court bonus)
        away: Visiting team
        config: Model configuration (defaults apply when omitted)

    Returns:
        MatchupResult with score, probability and ordered contributions
    """
    config = config or ModelConfig.default()
    weights = {
        NET_ADV: config.w_net_adv,
        SOR_ADV: config.w_sor_adv,
        EFF_MARGIN_ADV: config.w_eff_margin_adv,
        QUADRANTS_ADV: config.w_quadrants_adv,
    }

    terms = [(name, weights[name] * adv) for name, adv in feature_advantages(home, away, config)]

    score = 0.0
    for _, term in terms:
        score += term
    score += config.home_court_bonus
    terms.append((HOME_COURT_BONUS, config.home_court_bonus))

    p_home = logistic(score, config.logistic_slope)
    logger.debug("%s vs %s: score=%.4f p_home=%.4f", home.name, away.name, score, p_home)

    return MatchupResult(
        home=home.name,
        away=away.name,
        score=score,
        home_win_prob=p_home,
        contributions=tuple(terms),
    )


def predict_slate(
    matchups: Iterable[Tuple[TeamMetrics, TeamMetrics]],
    config: Optional[ModelConfig] = None,
) -> pd.DataFrame:
    """
    Score a batch of (home, away) matchups.

    Args:
        matchups: Iterable of (home, away) pairs
        config: Model configuration shared by every matchup

    Returns:
        DataFrame with one row per matchup and one column per contribution
    """
    config = config or ModelConfig.default()
    results = [predict(home, away, config) for home, away in matchups]
    logger.info("Scored %d matchups", len(results))
    return results_to_frame(results)


class CompositePredictor(BasePredictor):
    """Predictor combining NET, SOR, efficiency margin and quadrant records."""

    def __init__(self, config: Optional[ModelConfig] = None):
        """
        Initialize composite predictor.

        Args:
            config: Model configuration (default uses stock weights)
        """
        super().__init__("composite")
        self.config = config or ModelConfig.default()

    def evaluate(self, home: TeamMetrics, away: TeamMetrics) -> MatchupResult:
        """Full scoring breakdown for a matchup."""
        return predict(home, away, self.config)

