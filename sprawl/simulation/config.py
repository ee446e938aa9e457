"""Config — load simulation parameters from YAML or legacy text files.

The YAML form is the default::

    region_layout: region1.csv
    time_limit: 20
    refresh_rate: 1

The older ``Key: value`` text form is also accepted::

    Region Layout:region1.csv
    Time Limit:20
    Refresh Rate:1

A relative ``region_layout`` is resolved against the config file's
directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

_TEXT_KEYS = {
    "region layout": "region_layout",
    "time limit": "time_limit",
    "refresh rate": "refresh_rate",
}


class ConfigError(ValueError):
    """Raised when a configuration is missing fields or has bad values."""


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        region_layout: Path to the region layout file.
        time_limit: Maximum number of time steps to run.
        refresh_rate: Report the region state every this many steps.
    """

    region_layout: Path | None = None
    time_limit: int = 20
    refresh_rate: int = 1

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A validated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ConfigError: If a value is missing or invalid.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            msg = f"{path}: expected a mapping at the top level"
            raise ConfigError(msg)
        return cls._from_mapping(data, base_dir=path.parent)

    @classmethod
    def from_text(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a ``Key: value`` text file.

        Unknown keys and lines without a colon are ignored.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ConfigError: If a value is missing or invalid.
        """
        path = Path(path)
        data: dict[str, str] = {}
        with path.open("r") as f:
            for line in f:
                key, sep, value = line.partition(":")
                if not sep:
                    continue
                name = _TEXT_KEYS.get(key.strip().lower())
                if name is not None:
                    data[name] = value.strip()
        return cls._from_mapping(data, base_dir=path.parent)

    @classmethod
    def load(cls, path: str | Path) -> SimulationConfig:
        """Load a config file, choosing the format from its suffix."""
        path = Path(path)
        if path.suffix.lower() == ".txt":
            return cls.from_text(path)
        return cls.from_yaml(path)

    @classmethod
    def _from_mapping(cls, data: dict, base_dir: Path) -> SimulationConfig:
        layout = data.get("region_layout")
        config = cls(
            region_layout=base_dir / str(layout) if layout else None,
            time_limit=_as_int(data, "time_limit", cls.time_limit),
            refresh_rate=_as_int(data, "refresh_rate", cls.refresh_rate),
        )
        config.validate()
        logger.debug("loaded config %s", config)
        return config

    def validate(self) -> None:
        """Check that every field is usable.

        Raises:
            ConfigError: If the layout is unset or a count is not positive.
        """
        if self.region_layout is None:
            msg = "region_layout is required"
            raise ConfigError(msg)
        if self.time_limit <= 0:
            msg = f"time_limit must be positive, got {self.time_limit}"
            raise ConfigError(msg)
        if self.refresh_rate <= 0:
            msg = f"refresh_rate must be positive, got {self.refresh_rate}"
            raise ConfigError(msg)


def _as_int(data: dict, key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, (bool, float)):
        msg = f"{key} must be an integer, got {value!r}"
        raise ConfigError(msg)
    try:
        return int(value)
    except (TypeError, ValueError):
        msg = f"{key} must be an integer, got {value!r}"
        raise ConfigError(msg) from None
