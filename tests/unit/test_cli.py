"""Tests for the Typer CLI."""

import pytest
from typer.testing import CliRunner

from betlytics.cli import app

runner = CliRunner()


class TestCalcCommands:
    def test_kelly(self):
        result = runner.invoke(app, ["calc", "kelly", "2.0", "0.6", "--bankroll", "1000"])
        assert result.exit_code == 0
        assert "5.00%" in result.output
        assert "50.00" in result.output

    def test_kelly_no_edge_warns(self):
        result = runner.invoke(app, ["calc", "kelly", "2.0", "0.4"])
        assert result.exit_code == 0
        assert "No edge detected" in result.output

    def test_invalid_probability_exits_1(self):
        result = runner.invoke(app, ["calc", "kelly", "2.0", "1.5"])
        assert result.exit_code == 1
        assert "win_probability" in result.output

    def test_ev(self):
        result = runner.invoke(app, ["calc", "ev", "2.0", "0.55", "--stake", "100"])
        assert result.exit_code == 0
        assert "+10.00" in result.output

    def test_clv(self):
        result = runner.invoke(app, ["calc", "clv", "2.0", "2.2"])
        assert result.exit_code == 0
        assert "+10.00%" in result.output


class TestReportCommands:
    def test_summary(self, wager_csv):
        result = runner.invoke(app, ["report", "summary", str(wager_csv)])
        assert result.exit_code == 0
        assert "Performance" in result.output

    def test_summary_bad_date(self, wager_csv):
        result = runner.invoke(app, ["report", "summary", str(wager_csv), "--start", "01/02/2024"])
        assert result.exit_code != 0

    def test_summary_missing_file(self, tmp_path):
        result = runner.invoke(app, ["report", "summary", str(tmp_path / "nope.csv")])
        assert result.exit_code == 1

    def test_breakdown(self, wager_csv):
        result = runner.invoke(app, ["report", "breakdown", str(wager_csv), "--window", "1"])
        assert result.exit_code == 0
        assert "By Sport" in result.output

    def test_breakdown_has_weekly_table(self, wager_csv):
        result = runner.invoke(app, ["report", "breakdown", str(wager_csv), "--window", "1"])
        assert result.exit_code == 0
        assert "By Week" in result.output
        assert "2024-01-01" in result.output

    @pytest.mark.parametrize("window", ["0", "-1"])
    def test_breakdown_rejects_window_below_one(self, wager_csv, window):
        result = runner.invoke(app, ["report", "breakdown", str(wager_csv), "--window", window])
        assert result.exit_code == 2
        assert not isinstance(result.exception, ValueError)

    def test_bankroll(self, wager_csv):
        result = runner.invoke(
            app,
            ["report", "bankroll", str(wager_csv), "--starting-bankroll", "500", "--as-of", "2024-01-03"],
        )
        assert result.exit_code == 0
        # +100 then -50
        assert "550.00" in result.output
        assert "+10.00%" in result.output

    def test_bankroll_negative_start_exits_1(self, wager_csv):
        result = runner.invoke(app, ["report", "bankroll", str(wager_csv), "--starting-bankroll", "-1"])
        assert result.exit_code == 1
        assert "starting_bankroll" in result.output
