"""Configuration loading for JournalChart.

Settings live in ``~/.config/journalchart/config.toml``; the
``JOURNALCHART_CONFIG`` environment variable points to another file.

Example::

    [chart]
    timezone = "America/New_York"
    days_range = 3
    decimals = 2

    [volatility]
    BTC = 0.03
"""

import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, ValidationError

from journalchart.errors import ConfigError
from journalchart.market.volatility import DEFAULT_TABLE, VolatilityTable

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "journalchart" / "config.toml"
CONFIG_ENV_VAR = "JOURNALCHART_CONFIG"


class ChartSettings(BaseModel):
    """Effective chart generation settings."""

    timezone: str = Field(default="UTC", min_length=1, description="IANA timezone name")
    days_range: int = Field(default=3, ge=0, description="Days spanned by a generated series")
    decimals: int = Field(default=2, ge=0, le=8, description="Price rounding precision")
    volatility: dict[str, float] = Field(
        default_factory=dict, description="Per-symbol volatility overrides"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    def volatility_table(self) -> VolatilityTable:
        """Built-in volatility table with this config's overrides applied."""
        if not self.volatility:
            return DEFAULT_TABLE
        return DEFAULT_TABLE.with_overrides(self.volatility)


def get_config_path() -> Path:
    """Resolve the config file path, honouring the environment override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(config_path: Optional[Path] = None) -> ChartSettings:
    """Load chart settings from a TOML file.

    Args:
        config_path: File to read. Defaults to :func:`get_config_path`.

    Returns:
        Parsed settings, or defaults when the file does not exist.

    Raises:
        ConfigError: If the file cannot be read or holds invalid values.
    """
    path = config_path or get_config_path()
    if not path.exists():
        return ChartSettings()

    try:
        raw = toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e

    chart = raw.get("chart", {})
    if not isinstance(chart, dict):
        raise ConfigError(f"[chart] in {path} must be a table")

    try:
        return ChartSettings(**chart, volatility=raw.get("volatility", {}))
    except (ValidationError, TypeError) as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e
