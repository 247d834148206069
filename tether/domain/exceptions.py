"""Custom exceptions for the tether connection supervisor.

This module defines domain-specific exceptions for the few error conditions
that are surfaced to callers. Transient connection failures are never raised:
they are absorbed by the supervisor and turned into reconnect attempts.
"""


class TetherError(Exception):
    """Base class for all tether errors."""


class AlreadyActiveError(TetherError):
    """Supervisor was activated while already active.

    This is a misuse error: ``activate()`` must be paired with ``shutdown()``
    before it can be called again. It is raised synchronously and leaves the
    supervisor untouched (no state change, no new socket).

    Example:
        >>> supervisor.activate()
        >>> supervisor.activate()
        Traceback (most recent call last):
        ...
        tether.domain.exceptions.AlreadyActiveError: Already active
    """


class TransportError(TetherError):
    """Transport socket could not carry out an operation.

    Raised by socket implementations, e.g. when writing to a socket that is
    not open yet.
    """


class ExchangeAbandonedError(TetherError):
    """Pending request/response exchange was discarded before a response.

    Used to reject completion handles when the caller abandons all
    outstanding exchanges.
    """


class ConfigurationError(TetherError):
    """Supervisor configuration is invalid."""
