"""Matchup result model."""

from dataclasses import dataclass
from typing import Tuple

Contribution = Tuple[str, float]


@dataclass(frozen=True)
class MatchupResult:
    """Outcome of scoring one home/away matchup."""

    home: str
    away: str
    score: float
    home_win_prob: float
    contributions: Tuple[Contribution, ...] = ()

    @property
    def away_win_prob(self) -> float:
        return 1.0 - self.home_win_prob

    @property
    def favorite(self) -> str:
        """Name of the team the model favours (home on an exact tie)."""
        return self.home if self.home_win_prob >= 0.5 else self.away

    def contribution(self, name: str) -> float:
        """
        Look up one feature's signed contribution to the score.

        Args:
            name: Feature name, e.g. "NET_adv"

        Returns:
            Contribution value

        Raises:
            KeyError: If no contribution has that name
        """
        for key, value in self.contributions:
            if key == name:
                return value
        raise KeyError(name)

    def to_dict(self) -> dict:
        """Convert result to dictionary."""
        return {
            "home": self.home,
            "away": self.away,
            "score": self.score,
            "home_win_prob": self.home_win_prob,
            "contributions": [[name, value] for name, value in self.contributions],
        }
