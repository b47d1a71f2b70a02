"""Schema validators for team-metric and model-config payloads."""

from __future__ import annotations

import math
import numbers
from typing import Dict, List, Optional, Tuple

QUADRANT_KEYS = ("q1", "q2", "q3", "q4")
RANK_FIELDS = ("net_rank", "sor_rank")
EFFICIENCY_FIELDS = ("adj_off_efficiency", "adj_def_efficiency")


def to_float(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def to_count(value) -> Optional[int]:
    num = to_float(value)
    if num is None or not math.isfinite(num) or num != int(num):
        return None
    return int(num)


def parse_quadrant(value) -> Optional[Tuple[int, int]]:
    """
    Read a quadrant record from either ``{"wins": W, "losses": L}`` or ``[W, L]``.

    Returns:
        (wins, losses) tuple, or None when the value cannot be parsed
    """
    if isinstance(value, dict):
        wins, losses = value.get("wins"), value.get("losses")
    elif isinstance(value, (list, tuple)) and len(value) == 2:
        wins, losses = value
    else:
        return None

    wins, losses = to_count(wins), to_count(losses)
    if wins is None or losses is None:
        return None
    return wins, losses


def validate_team_payload(payload: Dict) -> List[str]:
    errors: List[str] = []
    if not isinstance(payload, dict):
        return ["team payload must be an object"]

    required = ("name",) + RANK_FIELDS + EFFICIENCY_FIELDS + QUADRANT_KEYS
    missing = [k for k in required if k not in payload]
    if missing:
        errors.append(f"missing fields: {', '.join(missing)}")

    name = payload.get("name")
    if "name" in payload and (not isinstance(name, str) or not name.strip()):
        errors.append("'name' must be a non-empty string")

    for field in RANK_FIELDS:
        if field not in payload:
            continue
        rank = to_count(payload[field])
        if rank is None:
            errors.append(f"missing/invalid integer field '{field}'")
        elif rank < 1:
            errors.append(f"'{field}' must be >= 1, got {rank}")

    for field in EFFICIENCY_FIELDS:
        if field not in payload:
            continue
        val = to_float(payload[field])
        if val is None or not math.isfinite(val):
            errors.append(f"missing/invalid numeric field '{field}'")

    for key in QUADRANT_KEYS:
        if key not in payload:
            continue
        record = parse_quadrant(payload[key])
        if record is None:
            errors.append(f"'{key}' must be {{wins, losses}} or [wins, losses] with integer counts")
        elif record[0] < 0 or record[1] < 0:
            errors.append(f"'{key}' counts must be non-negative, got {record[0]}-{record[1]}")
    return errors


def validate_config_values(values: Dict[str, float]) -> List[str]:
    """Check model configuration values for finiteness and usable divisors."""
    errors: List[str] = []
    for field, value in values.items():
        if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
            errors.append(f"config field '{field}' must be a finite number, got {value!r}")
            continue
        num = float(value)
        if field.endswith("_scale") and num == 0:
            errors.append(f"config field '{field}' must be non-zero")
        if field == "quad_laplace_alpha" and num <= 0:
            errors.append(f"config field '{field}' must be > 0, got {num}")
        if field.startswith("q") and field.endswith("_weight") and num < 0:
            errors.append(f"config field '{field}' must be >= 0, got {num}")
    return errors
