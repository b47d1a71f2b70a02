"""Payload validation helpers."""

from .validators import (
    parse_quadrant,
    to_count,
    to_float,
    validate_config_values,
    validate_team_payload,
)

__all__ = [
    "parse_quadrant",
    "to_count",
    "to_float",
    "validate_config_values",
    "validate_team_payload",
]
