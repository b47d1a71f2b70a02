"""Value objects for teams and matchup results."""

from .matchup import MatchupResult
from .team import QuadrantRecord, TeamMetrics

__all__ = ["MatchupResult", "QuadrantRecord", "TeamMetrics"]
