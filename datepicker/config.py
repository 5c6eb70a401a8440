"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import Optional

import pendulum
import yaml
from pendulum import DateTime
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.exceptions import ConfigurationError
from .domain.models import Bounds, ClockFace, Granularity

CONFIG_FILENAME = "datepicker.yaml"


class ClockConfig(BaseModel):
    """Dial geometry in pixels."""
    dial_radius: float = 120
    outer_radius: float = 99
    inner_radius: float = 66
    tick_radius: float = 17

    @field_validator("dial_radius", "outer_radius", "inner_radius", "tick_radius")
    @classmethod
    def validate_positive(cls, value: float) -> float:
        """Radii must be positive."""
        if value <= 0:
            raise ValueError(f"Radius must be greater than zero, got {value}")
        return value

    @model_validator(mode="after")
    def validate_ring_order(self) -> "ClockConfig":
        """Inner ring sits inside the outer ring, which fits on the dial."""
        if not self.inner_radius < self.outer_radius <= self.dial_radius:
            raise ValueError("Radii must satisfy inner_radius < outer_radius <= dial_radius")
        return self

    def to_face(self) -> ClockFace:
        return ClockFace(
            dial_radius=self.dial_radius,
            outer_radius=self.outer_radius,
            inner_radius=self.inner_radius,
            tick_radius=self.tick_radius,
        )


class PickerConfig(BaseModel):
    """Picker configuration."""
    type: Granularity = Granularity.DATE
    timezone: str = "UTC"
    min: Optional[str] = None
    max: Optional[str] = None
    required: bool = False
    placeholder: str = ""
    pad_trailing_days: bool = False
    clock: ClockConfig = Field(default_factory=ClockConfig)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Reject unknown IANA timezone names early."""
        try:
            pendulum.timezone(value)
        except Exception as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @model_validator(mode="after")
    def validate_bounds_parse(self) -> "PickerConfig":
        """Fail on load rather than on first use for malformed bounds."""
        self.bounds()
        return self

    def parse_date(self, raw: Optional[str]) -> Optional[DateTime]:
        """
        Parse an ISO-8601 string in the configured timezone.

        Raises:
            ConfigurationError: If the string is not a valid date
        """
        if raw is None:
            return None
        try:
            parsed = pendulum.parse(raw, tz=self.timezone)
        except Exception as exc:
            raise ConfigurationError(f"Invalid date '{raw}': {exc}") from exc
        if not isinstance(parsed, DateTime):
            raise ConfigurationError(f"'{raw}' is not a calendar date")
        return parsed

    def bounds(self) -> Bounds:
        # min > max is left for the caller to avoid
        return Bounds(min=self.parse_date(self.min), max=self.parse_date(self.max))

    def granularity(self) -> Granularity:
        return self.type

    def clock_face(self) -> ClockFace:
        return self.clock.to_face()

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "PickerConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            PickerConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Create a {CONFIG_FILENAME} or pass options on the command line."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        # YAML turns unquoted dates into date objects
        for key in ("min", "max"):
            if data.get(key) is not None:
                data[key] = str(data[key])

        return cls(**data)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for datepicker.yaml in current directory
    config_path = Path.cwd() / CONFIG_FILENAME

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / CONFIG_FILENAME

    return config_path


def load_config(config_path: Optional[Path] = None) -> PickerConfig:
    """Load the given config file, or defaults when no file exists."""
    if config_path is not None:
        return PickerConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if default_path.exists():
        return PickerConfig.load_from_yaml(default_path)
    return PickerConfig()
