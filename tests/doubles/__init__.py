"""Test doubles for unit testing.

Test doubles are fake implementations of interfaces used for testing.
They're faster and more reliable than mocking, and they implement the
actual interface contracts.

Types of test doubles:
- Fake: Lightweight working implementation (e.g., a manual clock)
- Stub: Returns predetermined values
- Spy: Records calls for verification
- Mock: Verifies interactions (use unittest.mock for this)

We primarily use Fakes because they:
- Actually implement the interface
- Can be reused across many tests
- Make timing deterministic (no real sleeps)
- Provide realistic behavior

Example:
    >>> from tests.doubles import FakeScheduler, FakeSocket
    >>> scheduler = FakeScheduler()
    >>> supervisor = ConnectionSupervisor(FakeSocket, ..., scheduler=scheduler)
    >>> supervisor.activate()
    >>> scheduler.advance(15000)
"""

from .fake_command import FakeCommand
from .fake_connection import CLOSE, FakeConnection, FakeConnector
from .fake_scheduler import FakeScheduler, FakeTimerHandle
from .fake_socket import FakeSocket

__all__ = [
    "CLOSE",
    "FakeCommand",
    "FakeConnection",
    "FakeConnector",
    "FakeScheduler",
    "FakeTimerHandle",
    "FakeSocket",
]
