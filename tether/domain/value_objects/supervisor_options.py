"""SupervisorOptions value object.

Timing configuration for a connection supervisor. All durations are in
milliseconds.
"""

from dataclasses import dataclass

from ..exceptions import ConfigurationError


@dataclass(frozen=True)
class SupervisorOptions:
    """Immutable supervisor timing configuration.

    The supervisor itself has no defaults; callers choose their own (see
    ``tether.const`` for the values the facade and config loader use).

    Attributes:
        heartbeat_interval: Period of the outbound heartbeat driver (ms)
        reconnect_delay: Delay before a replacement socket is created (ms)
        connection_timeout: How long the handshake may stay in LIMBO (ms)

    Example:
        >>> options = SupervisorOptions(
        ...     heartbeat_interval=15000, reconnect_delay=2000, connection_timeout=15000
        ... )
        >>> options.reconnect_delay_seconds
        2.0

    Raises:
        ConfigurationError: If a duration is not a positive number
    """

    heartbeat_interval: float
    reconnect_delay: float
    connection_timeout: float

    def __post_init__(self) -> None:
        """Validate every duration is a positive number.

        Raises:
            ConfigurationError: If a duration is missing, not numeric or <= 0
        """
        for name in ("heartbeat_interval", "reconnect_delay", "connection_timeout"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(
                    f"{name} must be a number of milliseconds, "
                    f"got {type(value).__name__}"
                )
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")

    @property
    def reconnect_delay_seconds(self) -> float:
        """Reconnect delay in seconds."""
        return self.reconnect_delay / 1000

    def to_dict(self) -> dict:
        """Convert to dictionary (e.g. for diagnostics)."""
        return {
            "heartbeat_interval": self.heartbeat_interval,
            "reconnect_delay": self.reconnect_delay,
            "connection_timeout": self.connection_timeout,
        }
