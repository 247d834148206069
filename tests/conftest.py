"""Pytest configuration and fixtures for tether tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to Python path so we can import tether
sys.path.insert(0, str(Path(__file__).parent.parent))

import asyncio

import pytest
from unittest.mock import AsyncMock, Mock

from tether.domain.value_objects import EVENT_STATE_CHANGE, SupervisorOptions
from tether.infrastructure.state_machines import ConnectionSupervisor
from tests.doubles import FakeScheduler, FakeSocket

# Distinct timings so tests can tell the timers apart
HEARTBEAT_INTERVAL = 1000
RECONNECT_DELAY = 500
CONNECTION_TIMEOUT = 2000


@pytest.fixture
def options() -> SupervisorOptions:
    """Return supervisor options with distinct, short timings."""
    return SupervisorOptions(
        heartbeat_interval=HEARTBEAT_INTERVAL,
        reconnect_delay=RECONNECT_DELAY,
        connection_timeout=CONNECTION_TIMEOUT,
    )


@pytest.fixture
def scheduler() -> FakeScheduler:
    """Return a scheduler with a manual clock."""
    return FakeScheduler()


@pytest.fixture
def sockets() -> list:
    """Every FakeSocket created by the socket factory, oldest first."""
    return []


@pytest.fixture
def create_socket(sockets):
    """Socket factory recording the sockets it creates."""

    def factory() -> FakeSocket:
        socket = FakeSocket()
        sockets.append(socket)
        return socket

    return Mock(side_effect=factory)


@pytest.fixture
def handshake() -> AsyncMock:
    """Handshake that confirms the connection immediately."""
    return AsyncMock(return_value=True)


@pytest.fixture
def send_heartbeat() -> Mock:
    return Mock()


@pytest.fixture
def supervisor(create_socket, handshake, send_heartbeat, options, scheduler):
    """Return an inactive supervisor wired to fakes."""
    return ConnectionSupervisor(
        create_socket, handshake, send_heartbeat, options, scheduler
    )


@pytest.fixture
def state_changes(supervisor) -> list:
    """StateChangeEvents dispatched by the supervisor fixture."""
    events = []
    supervisor.add_event_listener(EVENT_STATE_CHANGE, events.append)
    return events


@pytest.fixture
def flush():
    """Return a coroutine function letting spawned tasks run to completion."""

    async def _flush(rounds: int = 5) -> None:
        for _ in range(rounds):
            await asyncio.sleep(0)

    return _flush
