"""Tests for SupervisorOptions value object."""

import pytest
from dataclasses import FrozenInstanceError

from tether.domain.exceptions import ConfigurationError
from tether.domain.value_objects import SupervisorOptions


class TestSupervisorOptionsCreation:
    """Test SupervisorOptions creation and validation."""

    def test_create_valid_options(self):
        """Test creating options with valid durations."""
        options = SupervisorOptions(
            heartbeat_interval=15000, reconnect_delay=2000, connection_timeout=15000
        )
        assert options.heartbeat_interval == 15000
        assert options.reconnect_delay == 2000
        assert options.connection_timeout == 15000

    def test_fractional_durations_allowed(self):
        """Test float milliseconds are accepted."""
        options = SupervisorOptions(0.5, 1.5, 2.5)
        assert options.reconnect_delay == 1.5

    @pytest.mark.parametrize(
        "field", ["heartbeat_interval", "reconnect_delay", "connection_timeout"]
    )
    @pytest.mark.parametrize("value", [0, -1, -0.5])
    def test_non_positive_raises_error(self, field, value):
        """Test that zero and negative durations raise ConfigurationError."""
        kwargs = {
            "heartbeat_interval": 1000,
            "reconnect_delay": 1000,
            "connection_timeout": 1000,
        }
        kwargs[field] = value

        with pytest.raises(ConfigurationError, match=f"{field} must be positive"):
            SupervisorOptions(**kwargs)

    @pytest.mark.parametrize("value", ["1000", None, True])
    def test_non_number_raises_error(self, value):
        """Test that strings, None and booleans are rejected."""
        with pytest.raises(ConfigurationError, match="must be a number"):
            SupervisorOptions(heartbeat_interval=value, reconnect_delay=1, connection_timeout=1)


class TestSupervisorOptionsBehavior:
    """Test SupervisorOptions helpers."""

    def test_cannot_modify(self):
        """Test that options are immutable."""
        options = SupervisorOptions(1000, 2000, 3000)
        with pytest.raises(FrozenInstanceError):
            options.reconnect_delay = 10

    def test_reconnect_delay_seconds(self):
        """Test conversion to seconds."""
        assert SupervisorOptions(1000, 2000, 3000).reconnect_delay_seconds == 2.0

    def test_to_dict(self):
        """Test conversion to dictionary."""
        assert SupervisorOptions(1000, 2000, 3000).to_dict() == {
            "heartbeat_interval": 1000,
            "reconnect_delay": 2000,
            "connection_timeout": 3000,
        }

    def test_equality(self):
        """Test options with equal values are equal."""
        assert SupervisorOptions(1, 2, 3) == SupervisorOptions(1, 2, 3)
        assert SupervisorOptions(1, 2, 3) != SupervisorOptions(1, 2, 4)
