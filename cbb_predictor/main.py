"""Command-line demo for the CBB matchup predictor."""

import argparse
import logging
import sys

from .config import ModelConfig
from .exceptions import InvalidInputError
from .models.team import TeamMetrics
from .predictors.composite import predict
from .report import format_report

# Example teams (replace with real numbers)
SAMPLE_HOME = {
    "name": "Home U",
    "net_rank": 12,
    "sor_rank": 18,
    "adj_off_efficiency": 118.5,
    "adj_def_efficiency": 96.2,
    "q1": [6, 3],
    "q2": [5, 2],
    "q3": [6, 1],
    "q4": [6, 0],
}

SAMPLE_AWAY = {
    "name": "Away State",
    "net_rank": 19,
    "sor_rank": 26,
    "adj_off_efficiency": 114.2,
    "adj_def_efficiency": 98.0,
    "q1": [4, 5],
    "q2": [6, 3],
    "q3": [7, 1],
    "q4": [7, 0],
}


def run_demo(config: ModelConfig = None) -> str:
    """
    Score the sample matchup and return the printable report.

    Args:
        config: Model configuration (defaults apply when omitted)

    Returns:
        Report text
    """
    home = TeamMetrics.from_dict(SAMPLE_HOME)
    away = TeamMetrics.from_dict(SAMPLE_AWAY)
    result = predict(home, away, config or ModelConfig.default())
    return format_report(result)


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="CBB Matchup Predictor - home win probability from NET, SOR, efficiency and quadrant records"
    )
    parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        report = run_demo()
    except InvalidInputError as exc:
        print(f"Error: {exc}")
        return 1

    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
