"""Text and tabular reporting for matchup results."""

from typing import Iterable, List

import pandas as pd

from .models.matchup import MatchupResult

BASE_COLUMNS = ["home", "away", "score", "home_win_prob"]


def format_pct(p: float) -> str:
    return format(100.0 * p, ".1f") + "%"


def format_r4(x: float) -> str:
    return format(x, ".4f")


def format_report(result: MatchupResult) -> str:
    """
    Render a human-readable report for one matchup.

    Number formatting never consults the process locale.

    Args:
        result: Scored matchup

    Returns:
        Multi-line report ending with a newline
    """
    lines: List[str] = [
        f"{result.home} vs {result.away}",
        f"Home team win probability: {format_pct(result.home_win_prob)}",
        f"Model score (pre-logistic): {format_r4(result.score)}",
        "Components (home minus away):",
    ]
    for name, value in result.contributions:
        lines.append(f"  {name}: {format_r4(value)}")
    return "\n".join(lines) + "\n"


def results_to_frame(results: Iterable[MatchupResult]) -> pd.DataFrame:
    """One row per result; contribution columns keep their scoring order."""
    rows = []
    contribution_cols: List[str] = []
    for result in results:
        row = {
            "home": result.home,
            "away": result.away,
            "score": result.score,
            "home_win_prob": result.home_win_prob,
        }
        for name, value in result.contributions:
            if name not in contribution_cols:
                contribution_cols.append(name)
            row[name] = value
        rows.append(row)
    return pd.DataFrame(rows, columns=BASE_COLUMNS + contribution_cols)
