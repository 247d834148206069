"""Configuration loader for supervisor timings."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import voluptuous as vol
import yaml

from .const import (
    CONF_CONNECTION_TIMEOUT,
    CONF_HEARTBEAT_INTERVAL,
    CONF_RECONNECT_DELAY,
    CONF_SUPERVISOR,
    DEFAULT_CONNECTION_TIMEOUT,
    DEFAULT_HEARTBEAT_INTERVAL,
    DEFAULT_RECONNECT_DELAY,
)
from .domain.exceptions import ConfigurationError
from .domain.value_objects import SupervisorOptions

_LOGGER = logging.getLogger(__name__)

_POSITIVE_MS = vol.All(vol.Coerce(float), vol.Range(min=0, min_included=False))

SUPERVISOR_OPTIONS_SCHEMA = vol.Schema(
    {
        vol.Optional(
            CONF_HEARTBEAT_INTERVAL, default=DEFAULT_HEARTBEAT_INTERVAL
        ): _POSITIVE_MS,
        vol.Optional(CONF_RECONNECT_DELAY, default=DEFAULT_RECONNECT_DELAY): _POSITIVE_MS,
        vol.Optional(
            CONF_CONNECTION_TIMEOUT, default=DEFAULT_CONNECTION_TIMEOUT
        ): _POSITIVE_MS,
    }
)


def options_from_dict(data: Mapping[str, Any] | None) -> SupervisorOptions:
    """Build SupervisorOptions from a configuration mapping.

    The timings may sit at the top level or under a ``supervisor`` section.
    Missing keys take the defaults from ``tether.const``; unknown keys are
    rejected.

    Args:
        data: Configuration mapping (None means all defaults)

    Returns:
        Validated SupervisorOptions

    Raises:
        ConfigurationError: If the mapping does not match the schema

    Example:
        >>> options_from_dict({"supervisor": {"reconnect_delay": 500}})
        SupervisorOptions(heartbeat_interval=15000.0, reconnect_delay=500.0, connection_timeout=15000.0)
    """
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"Configuration must be a mapping, got {type(data).__name__}"
        )

    section = data[CONF_SUPERVISOR] if CONF_SUPERVISOR in data else data
    if section is None:
        section = {}
    if not isinstance(section, Mapping):
        raise ConfigurationError(
            f"'{CONF_SUPERVISOR}' section must be a mapping, "
            f"got {type(section).__name__}"
        )

    try:
        validated = SUPERVISOR_OPTIONS_SCHEMA(dict(section))
    except vol.Invalid as err:
        raise ConfigurationError(f"Invalid supervisor configuration: {err}") from err

    return SupervisorOptions(
        heartbeat_interval=validated[CONF_HEARTBEAT_INTERVAL],
        reconnect_delay=validated[CONF_RECONNECT_DELAY],
        connection_timeout=validated[CONF_CONNECTION_TIMEOUT],
    )


def load_supervisor_options(path: str | Path) -> SupervisorOptions:
    """Load and validate supervisor timings from a YAML file.

    Args:
        path: YAML file to read

    Returns:
        Validated SupervisorOptions (defaults if the file is empty)

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the YAML is invalid or fails validation
    """
    config_file = Path(path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    try:
        config = yaml.safe_load(config_file.read_text())
    except yaml.YAMLError as err:
        raise ConfigurationError(f"Invalid YAML: {err}") from err

    options = options_from_dict(config)
    _LOGGER.info(
        "Loaded supervisor options from %s: heartbeat=%sms, reconnect=%sms, timeout=%sms",
        config_file,
        options.heartbeat_interval,
        options.reconnect_delay,
        options.connection_timeout,
    )
    return options
