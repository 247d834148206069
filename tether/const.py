"""Constants for the tether connection supervisor."""

from __future__ import annotations

# Default timings (milliseconds) used by ManagedWebSocket and the config loader
DEFAULT_HEARTBEAT_INTERVAL = 15000
DEFAULT_RECONNECT_DELAY = 2000
DEFAULT_CONNECTION_TIMEOUT = 15000

# Configuration keys
CONF_SUPERVISOR = "supervisor"
CONF_HEARTBEAT_INTERVAL = "heartbeat_interval"
CONF_RECONNECT_DELAY = "reconnect_delay"
CONF_CONNECTION_TIMEOUT = "connection_timeout"
