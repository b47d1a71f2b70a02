"""Base predictor interface for matchup predictions."""

from abc import ABC, abstractmethod
from typing import Tuple

from ..models.matchup import MatchupResult
from ..models.team import TeamMetrics


class BasePredictor(ABC):
    """Abstract base class for home/away matchup models.

    Subclasses implement ``evaluate``; the winner and probability helpers are
    derived from the returned result.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def evaluate(self, home: TeamMetrics, away: TeamMetrics) -> MatchupResult:
        """
        Score a matchup with ``home`` hosting ``away``.

        Args:
            home: Team playing at home
            away: Visiting team

        Returns:
            MatchupResult with the home win probability
        """

    def get_win_probability(self, home: TeamMetrics, away: TeamMetrics) -> float:
        """Probability that ``home`` beats ``away``."""
        return self.evaluate(home, away).home_win_prob

    def predict(self, home: TeamMetrics, away: TeamMetrics) -> Tuple[TeamMetrics, float]:
        """
        Pick the favoured side.

        Returns:
            Tuple of (predicted_winner, win_probability); home wins an even matchup
        """
        home_prob = self.get_win_probability(home, away)
        if home_prob >= 0.5:
            return home, home_prob
        return away, 1.0 - home_prob
