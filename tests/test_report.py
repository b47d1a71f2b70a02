"""Tests for report formatting."""

import locale

import pytest

from cbb_predictor.models.matchup import MatchupResult
from cbb_predictor.predictors.composite import CONTRIBUTION_NAMES, predict
from cbb_predictor.report import format_pct, format_r4, format_report, results_to_frame


def test_format_helpers():
    assert format_pct(0.63158) == "63.2%"
    assert format_pct(1.0) == "100.0%"
    assert format_r4(0.035) == "0.0350"
    assert format_r4(-0.2) == "-0.2000"


def test_format_report_layout(home_team, away_team):
    report = format_report(predict(home_team, away_team))
    lines = report.splitlines()

    assert lines[0] == "Home U vs Away State"
    assert lines[1] == "Home team win probability: 63.2%"
    assert lines[2] == "Model score (pre-logistic): 0.3993"
    assert lines[3] == "Components (home minus away):"
    assert lines[4:] == [
        "  NET_adv: 0.0350",
        "  SOR_adv: 0.0320",
        "  AdjEffMargin_adv: 0.2135",
        "  Quadrants_adv: 0.0188",
        "  HomeCourt_bonus: 0.1000",
    ]


def test_format_report_ignores_locale(home_team, away_team):
    try:
        previous = locale.setlocale(locale.LC_NUMERIC)
        locale.setlocale(locale.LC_NUMERIC, "de_DE.UTF-8")
    except locale.Error:
        pytest.skip("de_DE locale not installed")
    try:
        report = format_report(predict(home_team, away_team))
    finally:
        locale.setlocale(locale.LC_NUMERIC, previous)

    assert "63.2%" in report
    assert "0,0350" not in report


def test_results_to_frame_columns():
    results = [
        MatchupResult("A", "B", 0.1, 0.53, (("NET_adv", 0.0), ("HomeCourt_bonus", 0.1))),
        MatchupResult("B", "A", 0.1, 0.53, (("NET_adv", 0.0), ("HomeCourt_bonus", 0.1))),
    ]
    frame = results_to_frame(results)
    assert list(frame.columns) == ["home", "away", "score", "home_win_prob", "NET_adv", "HomeCourt_bonus"]
    assert frame["HomeCourt_bonus"].tolist() == [0.1, 0.1]


def test_results_to_frame_from_predictions(home_team, away_team):
    frame = results_to_frame([predict(home_team, away_team)])
    assert list(frame.columns)[4:] == list(CONTRIBUTION_NAMES)
    assert frame.loc[0, "AdjEffMargin_adv"] == pytest.approx(0.2135)


def test_format_report_does_not_consult_locale(monkeypatch, home_team, away_team):
    comma_conv = dict(locale.localeconv(), decimal_point=",", thousands_sep=".")
    monkeypatch.setattr(locale, "localeconv", lambda: comma_conv)

    def fail(*_args, **_kwargs):
        raise AssertionError("report formatting must not use locale-aware helpers")

    monkeypatch.setattr(locale, "format_string", fail)
    monkeypatch.setattr(locale, "str", fail)
    monkeypatch.setattr(locale, "currency", fail)

    report = format_report(predict(home_team, away_team))

    assert "Home team win probability: 63.2%" in report
    assert "  NET_adv: 0.0350" in report
    assert "," not in report
