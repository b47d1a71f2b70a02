"""Model configuration for the composite matchup predictor."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Dict, Tuple

from .data.validators import validate_config_values
from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelConfig:
    """Weights and scaling constants for one prediction run."""

    # Feature weights (these should sum to ~1.0 but don't have to)
    w_net_adv: float = 0.25
    w_sor_adv: float = 0.20
    w_eff_margin_adv: float = 0.35
    w_quadrants_adv: float = 0.20

    # Added to the score before the logistic; favours whichever team is home
    home_court_bonus: float = 0.10

    # Rank and margin differences are divided by these to land near [-1, +1]
    net_rank_scale: float = 50.0
    sor_rank_scale: float = 50.0
    eff_margin_scale: float = 10.0

    logistic_slope: float = 1.35

    q1_weight: float = 0.50
    q2_weight: float = 0.25
    q3_weight: float = 0.15
    q4_weight: float = 0.10

    # (W + alpha) / (W + L + 2*alpha)
    quad_laplace_alpha: float = 1.0

    def __post_init__(self):
        errors = validate_config_values(self.to_dict())
        if errors:
            raise InvalidInputError.from_errors("Invalid model configuration", errors)

    @classmethod
    def default(cls) -> "ModelConfig":
        """Return the stock configuration."""
        return cls()

    @property
    def quadrant_weights(self) -> Tuple[float, float, float, float]:
        return (self.q1_weight, self.q2_weight, self.q3_weight, self.q4_weight)

    def with_overrides(self, **overrides) -> "ModelConfig":
        """
        Return a copy of this config with some fields replaced.

        Args:
            **overrides: Field names and their new values

        Returns:
            New ModelConfig; this instance is left untouched
        """
        known = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise InvalidInputError(f"Unknown config fields: {', '.join(unknown)}")
        logger.debug("Applying config overrides: %s", overrides)
        return dataclasses.replace(self, **overrides)

    def neutral_site(self) -> "ModelConfig":
        """Same weights with no home-court bonus."""
        return self.with_overrides(home_court_bonus=0.0)

    def to_dict(self) -> Dict[str, float]:
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "ModelConfig":
        """Build a config from a (possibly partial) mapping; missing keys keep defaults."""
        return cls.default().with_overrides(**data)
