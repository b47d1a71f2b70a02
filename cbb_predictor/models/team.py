"""Team metrics model for matchup predictions."""

import logging
from dataclasses import dataclass
from typing import Mapping, Tuple

from ..data.validators import QUADRANT_KEYS, parse_quadrant, to_count, to_float, validate_team_payload
from ..exceptions import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuadrantRecord:
    """Wins and losses against one quadrant of opponents."""

    wins: int = 0
    losses: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses

    def to_dict(self) -> dict:
        return {"wins": self.wins, "losses": self.losses}


@dataclass(frozen=True)
class TeamMetrics:
    """Snapshot of a team's season-level advanced stats."""

    name: str
    net_rank: int
    sor_rank: int
    adj_off_efficiency: float
    adj_def_efficiency: float
    q1: QuadrantRecord = QuadrantRecord()
    q2: QuadrantRecord = QuadrantRecord()
    q3: QuadrantRecord = QuadrantRecord()
    q4: QuadrantRecord = QuadrantRecord()

    @property
    def efficiency_margin(self) -> float:
        """Adjusted offensive minus adjusted defensive efficiency."""
        return self.adj_off_efficiency - self.adj_def_efficiency

    @property
    def quadrants(self) -> Tuple[QuadrantRecord, QuadrantRecord, QuadrantRecord, QuadrantRecord]:
        return (self.q1, self.q2, self.q3, self.q4)

    def to_dict(self) -> dict:
        """Convert team metrics to dictionary."""
        return {
            "name": self.name,
            "net_rank": self.net_rank,
            "sor_rank": self.sor_rank,
            "adj_off_efficiency": self.adj_off_efficiency,
            "adj_def_efficiency": self.adj_def_efficiency,
            "q1": self.q1.to_dict(),
            "q2": self.q2.to_dict(),
            "q3": self.q3.to_dict(),
            "q4": self.q4.to_dict(),
        }

    def to_record(self) -> dict:
        """Flat form with one column per quadrant count."""
        record = {
            "name": self.name,
            "net_rank": self.net_rank,
            "sor_rank": self.sor_rank,
            "adj_off_efficiency": self.adj_off_efficiency,
            "adj_def_efficiency": self.adj_def_efficiency,
        }
        for key, quad in zip(QUADRANT_KEYS, self.quadrants):
            record[f"{key}_wins"] = quad.wins
            record[f"{key}_losses"] = quad.losses
        return record

    @classmethod
    def from_dict(cls, data: Mapping) -> "TeamMetrics":
        """
        Create team metrics from a dictionary.

        Args:
            data: Mapping with ranks, efficiencies and q1..q4 records

        Returns:
            TeamMetrics instance

        Raises:
            InvalidInputError: If any field is missing or out of range
        """
        errors = validate_team_payload(data)
        if errors:
            label = data.get("name", "<unnamed>") if isinstance(data, Mapping) else "<invalid>"
            logger.warning("Rejected team payload for %s: %s", label, errors)
            raise InvalidInputError.from_errors(f"Invalid team metrics for {label}", errors)

        quads = [QuadrantRecord(*parse_quadrant(data[key])) for key in QUADRANT_KEYS]
        return cls(
            name=data["name"],
            net_rank=to_count(data["net_rank"]),
            sor_rank=to_count(data["sor_rank"]),
            adj_off_efficiency=to_float(data["adj_off_efficiency"]),
            adj_def_efficiency=to_float(data["adj_def_efficiency"]),
            q1=quads[0],
            q2=quads[1],
            q3=quads[2],
            q4=quads[3],
        )

    @classmethod
    def from_series(cls, row: Mapping) -> "TeamMetrics":
        """Create team metrics from a flat row (pandas Series or dict) as written by ``to_record``."""
        data = {k: row[k] for k in ("name", "net_rank", "sor_rank", "adj_off_efficiency", "adj_def_efficiency") if k in row}
        for key in QUADRANT_KEYS:
            wins_col, losses_col = f"{key}_wins", f"{key}_losses"
            if wins_col in row and losses_col in row:
                data[key] = [row[wins_col], row[losses_col]]
        return cls.from_dict(data)
