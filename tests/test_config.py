"""
Tests for YAML configuration loading.
"""

import pytest

from datepicker.config import ClockConfig, PickerConfig, load_config
from datepicker.domain.models import Granularity


class TestPickerConfig:
    """Tests for PickerConfig."""

    def test_load_from_yaml(self, tmp_path):
        """A full config file is parsed into domain objects."""
        config_path = tmp_path / "datepicker.yaml"
        config_path.write_text(
            "type: datetime\n"
            "timezone: Europe/Berlin\n"
            "min: 2020-01-01\n"
            "max: '2025-12-31'\n"
            "clock:\n"
            "  outer_radius: 90\n",
            encoding="utf-8",
        )

        config = PickerConfig.load_from_yaml(config_path)
        bounds = config.bounds()

        assert config.granularity() is Granularity.DATETIME
        assert bounds.min.to_date_string() == "2020-01-01"
        assert bounds.max.to_date_string() == "2025-12-31"
        assert bounds.min.timezone_name == "Europe/Berlin"
        assert config.clock_face().outer_radius == 90

    def test_defaults(self):
        """An empty config is a date picker without bounds."""
        config = PickerConfig()

        assert config.granularity() is Granularity.DATE
        assert config.bounds().min is None
        assert config.bounds().max is None
        assert config.clock_face().inner_radius == 66

    def test_missing_file_raises(self, tmp_path):
        """A missing file is reported."""
        with pytest.raises(FileNotFoundError):
            PickerConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml_raises(self, tmp_path):
        """Broken YAML surfaces as ValueError."""
        config_path = tmp_path / "datepicker.yaml"
        config_path.write_text("type: [date\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            PickerConfig.load_from_yaml(config_path)

    def test_non_mapping_root_raises(self, tmp_path):
        """The root must be a mapping."""
        config_path = tmp_path / "datepicker.yaml"
        config_path.write_text("- date\n- time\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping"):
            PickerConfig.load_from_yaml(config_path)

    def test_malformed_date_rejected(self):
        """Unparseable bounds fail at construction."""
        with pytest.raises(ValueError):
            PickerConfig(min="not a date")

    def test_unknown_timezone_rejected(self):
        """Timezone names are checked."""
        with pytest.raises(ValueError):
            PickerConfig(timezone="Mars/Olympus_Mons")

    def test_inverted_bounds_accepted(self):
        """min > max is left to the caller."""
        config = PickerConfig(min="2025-01-01", max="2020-01-01")

        assert config.bounds().min > config.bounds().max

    def test_load_config_without_file_uses_defaults(self, tmp_path, monkeypatch):
        """No config file anywhere gives the defaults."""
        monkeypatch.chdir(tmp_path)

        assert load_config() == PickerConfig()


class TestClockConfig:
    """Tests for ClockConfig validation."""

    def test_radii_must_be_positive(self):
        """Zero radii are rejected."""
        with pytest.raises(ValueError):
            ClockConfig(tick_radius=0)

    def test_ring_order(self):
        """The inner ring must sit inside the outer ring."""
        with pytest.raises(ValueError):
            ClockConfig(inner_radius=100, outer_radius=99)
