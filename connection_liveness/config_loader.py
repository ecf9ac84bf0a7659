"""Configuration loader for the connection monitor."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import voluptuous as vol
import yaml

from .const import (
    DEFAULT_CONFIG_SECTION,
    FOREGROUND_RECHECK_DELAY,
    MAX_BACKOFF_EXPONENT,
    RECONNECTION_BACKOFF_RATE,
    STALE_THRESHOLD,
)
from .domain.exceptions import ConfigurationError

_LOGGER = logging.getLogger(__name__)

CONF_STALE_THRESHOLD = "stale_threshold"
CONF_RECONNECTION_BACKOFF_RATE = "reconnection_backoff_rate"
CONF_MAX_BACKOFF_EXPONENT = "max_backoff_exponent"
CONF_FOREGROUND_RECHECK_DELAY = "foreground_recheck_delay"

MONITOR_CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_STALE_THRESHOLD, default=STALE_THRESHOLD): vol.All(
            vol.Coerce(float), vol.Range(min=0, min_included=False)
        ),
        vol.Optional(
            CONF_RECONNECTION_BACKOFF_RATE, default=RECONNECTION_BACKOFF_RATE
        ): vol.All(vol.Coerce(float), vol.Range(min=0)),
        vol.Optional(CONF_MAX_BACKOFF_EXPONENT, default=MAX_BACKOFF_EXPONENT): vol.All(
            vol.Coerce(int), vol.Range(min=0)
        ),
        vol.Optional(
            CONF_FOREGROUND_RECHECK_DELAY, default=FOREGROUND_RECHECK_DELAY
        ): vol.All(vol.Coerce(float), vol.Range(min=0)),
    },
    extra=vol.PREVENT_EXTRA,
)


@dataclass(frozen=True)
class MonitorConfig:
    """Tuning for the connection monitor.

    Attributes:
        stale_threshold: Seconds without activity before the connection
            is considered stale
        reconnection_backoff_rate: Growth rate of the poll interval per
            consecutive stale cycle
        max_backoff_exponent: Cap on the backoff exponent
        foreground_recheck_delay: Seconds to wait after a foreground
            transition before re-checking
    """

    stale_threshold: float = STALE_THRESHOLD
    reconnection_backoff_rate: float = RECONNECTION_BACKOFF_RATE
    max_backoff_exponent: int = MAX_BACKOFF_EXPONENT
    foreground_recheck_delay: float = FOREGROUND_RECHECK_DELAY

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> MonitorConfig:
        """Build a validated config, filling in defaults.

        Args:
            data: Raw values, e.g. a section of a YAML file

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If a value is invalid or a key is unknown
        """
        try:
            validated = MONITOR_CONFIG_SCHEMA(data or {})
        except vol.Invalid as err:
            raise ConfigurationError(f"Invalid monitor configuration: {err}") from err
        return cls(**validated)

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_monitor_config(
    path: str | Path,
    section: str | None = DEFAULT_CONFIG_SECTION,
) -> MonitorConfig:
    """Load monitor configuration from a YAML file.

    Args:
        path: YAML file to read
        section: Top-level key holding the monitor settings, or None if the
            whole document is the monitor section

    Returns:
        Validated configuration; defaults when the file or section is empty

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the YAML is malformed or values are invalid

    Example:
        >>> config = load_monitor_config("client.yaml")
        >>> monitor = ConnectionMonitor(connection, config=config)
    """
    config_file = Path(path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    try:
        document = yaml.safe_load(config_file.read_text())
    except yaml.YAMLError as err:
        raise ConfigurationError(f"Invalid YAML: {err}") from err

    if document is None:
        _LOGGER.debug("Configuration file %s is empty, using defaults", config_file)
        return MonitorConfig()

    if not isinstance(document, dict):
        raise ConfigurationError(
            f"Configuration must be a mapping, got {type(document).__name__}"
        )

    data = document if section is None else document.get(section)
    if data is None:
        _LOGGER.debug("No '%s' section in %s, using defaults", section, config_file)
        return MonitorConfig()

    if not isinstance(data, dict):
        raise ConfigurationError(f"Section '{section}' must be a mapping")

    config = MonitorConfig.from_dict(data)
    _LOGGER.debug("Loaded monitor configuration from %s: %s", config_file, config)
    return config
