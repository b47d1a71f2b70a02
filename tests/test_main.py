"""Tests for the demo entry point."""

import pytest

from cbb_predictor import main as cli
from cbb_predictor.config import ModelConfig


def test_main_prints_report(capsys):
    assert cli.main([]) == 0

    out = capsys.readouterr().out
    assert "Home U vs Away State" in out
    assert "Home team win probability: 63.2%" in out
    assert "Model score (pre-logistic): 0.3993" in out
    assert "  HomeCourt_bonus: 0.1000" in out


def test_main_rejects_unknown_flags():
    with pytest.raises(SystemExit):
        cli.main(["--neutral"])


def test_run_demo_with_custom_config():
    report = cli.run_demo(ModelConfig.default().neutral_site())
    assert "  HomeCourt_bonus: 0.0000" in report


def test_main_reports_invalid_sample(monkeypatch, capsys):
    monkeypatch.setitem(cli.SAMPLE_HOME, "net_rank", -4)

    assert cli.main([]) == 1
    assert capsys.readouterr().out.startswith("Error: Invalid team metrics for Home U")
