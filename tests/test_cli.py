"""
Tests for the command line interface.
"""

import pytest
from typer.testing import CliRunner

from datepicker.cli.app import app
from datepicker.domain.models import MonthRelation
from datepicker.services.view_state import ViewStateController

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Keep any local datepicker.yaml out of the tests."""
    monkeypatch.chdir(tmp_path)


class TestCalendarCommand:
    """Tests for the calendar command."""

    def test_renders_month(self):
        """The grid for February 2024 contains the leap day."""
        result = runner.invoke(app, ["calendar", "--month", "2024-02"])

        assert result.exit_code == 0
        assert "February 2024" in result.output
        assert "29" in result.output

    def test_bad_month_fails(self):
        """Unparseable months exit with an error."""
        result = runner.invoke(app, ["calendar", "--month", "February"])

        assert result.exit_code == 1

    def test_missing_config_file_fails(self, tmp_path):
        """An explicit config path must exist."""
        result = runner.invoke(app, ["calendar", "--config", str(tmp_path / "nope.yaml")])

        assert result.exit_code == 1
        assert "not found" in result.output


class TestYearsCommand:
    """Tests for the years command."""

    def test_bounded_years(self):
        """Bounds limit the range."""
        result = runner.invoke(app, ["years", "--min", "2020-01-01", "--max", "2025-12-31"])

        assert result.exit_code == 0
        assert "2020 - 2025 (6 years)" in result.output


class TestClockCommands:
    """Tests for clock-point and clock-hand."""

    def test_clock_point_inner_ring(self):
        """Three o'clock on the inner ring is hour 3."""
        result = runner.invoke(app, ["clock-point", "66", "0"])

        assert result.exit_code == 0
        assert "hour 3 (inner ring)" in result.output

    def test_clock_point_minutes(self):
        """Minute mode reads the outer ring."""
        result = runner.invoke(app, ["clock-point", "99", "0", "--mode", "minute"])

        assert "minute 15 (outer ring)" in result.output

    def test_clock_hand(self):
        """Hour 15 points right on the outer ring."""
        result = runner.invoke(app, ["clock-hand", "15"])

        assert result.exit_code == 0
        assert "x=99.00" in result.output

    def test_clock_hand_out_of_range(self):
        """Values off the dial exit with an error."""
        result = runner.invoke(app, ["clock-hand", "25"])

        assert result.exit_code == 1

    def test_unknown_mode(self):
        """Only hour and minute modes exist."""
        result = runner.invoke(app, ["clock-hand", "5", "--mode", "second"])

        assert result.exit_code == 1


class TestPickCommand:
    """Tests for scripted picker sessions."""

    def test_keys_commit_date(self):
        """Opening and moving right selects the day after the initial value."""
        result = runner.invoke(
            app,
            ["pick", "--value", "2024-03-15", "--keys", "Enter,ArrowRight,Enter"],
        )

        assert result.exit_code == 0
        assert "Selected: 2024-03-16" in result.output

    def test_time_picker(self):
        """A time picker walks the hour and minute clocks."""
        result = runner.invoke(
            app,
            ["pick", "--type", "time", "--value", "2024-03-15 10:45", "--keys", "Enter,ArrowUp,Enter,Enter"],
        )

        assert result.exit_code == 0
        assert "Selected: 2024-03-15 11:45" in result.output

    def test_no_commit(self):
        """Escape leaves nothing selected."""
        result = runner.invoke(app, ["pick", "--keys", "Enter,Escape"])

        assert result.exit_code == 0
        assert "No value committed" in result.output

    def test_uses_configured_grid_and_dial(self, tmp_path, monkeypatch):
        """The session controller is built from the config file's grid and clock settings."""
        (tmp_path / "datepicker.yaml").write_text(
            "pad_trailing_days: true\n"
            "clock:\n"
            "  inner_radius: 50\n"
            "  outer_radius: 90\n"
        )
        built = []

        class RecordingController(ViewStateController):
            def __init__(self, *args, **kwargs):
                super().__init__(*args, **kwargs)
                built.append(self)

        monkeypatch.setattr("datepicker.cli.app.ViewStateController", RecordingController)

        result = runner.invoke(app, ["pick", "--value", "2024-03-15", "--keys", "Enter,Enter"])

        assert result.exit_code == 0
        assert "Selected: 2024-03-15" in result.output
        controller = built[0]
        assert controller.geometry.face.inner_radius == 50
        assert controller.geometry.face.outer_radius == 90
        assert any(cell.month_relation is MonthRelation.NEXT for cell in controller.calendar)


def test_version():
    """The version command prints the package version."""
    from datepicker import __version__

    result = runner.invoke(app, ["version"])

    assert __version__ in result.output
