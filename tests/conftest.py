"""Shared pytest configuration and fixtures for the Gsmloc tests."""

import asyncio
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Ensure the project root is in the path for imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from custom_components.gsmloc.modem import (  # noqa: E402
    ModemConnectionError,
    ModemError,
)
from custom_components.gsmloc.models import RawNetworkInfo  # noqa: E402


class FakeModem:
    """Scriptable stand-in for a Gammu modem."""

    def __init__(
        self,
        info=None,
        config_error=None,
        connect_error=None,
        query_error=None,
        disconnect_error=None,
    ):
        self.info = info or RawNetworkInfo(network_code="246 81", lac="1A2B", cid="3F")
        self.config_error = config_error
        self.connect_error = connect_error
        self.query_error = query_error
        self.disconnect_error = disconnect_error
        self.calls = []
        self.connected = False

    def find_config(self):
        self.calls.append("find_config")
        if self.config_error:
            raise self.config_error

    def read_config(self, profile_index):
        self.calls.append(("read_config", profile_index))

    def connect(self, replies):
        self.calls.append(("connect", replies))
        if self.connect_error:
            raise self.connect_error
        self.connected = True

    def is_connected(self):
        return self.connected

    def get_network_info(self):
        self.calls.append("get_network_info")
        if self.query_error:
            raise self.query_error
        return self.info

    def disconnect(self):
        self.calls.append("disconnect")
        self.connected = False
        if self.disconnect_error:
            raise self.disconnect_error


def make_session(body="", status=200, side_effect=None):
    """Build a mock aiohttp session returning a single response."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    resp = MagicMock()
    resp.status = status
    resp.read = AsyncMock(return_value=body)
    session = MagicMock()
    session.get = AsyncMock(return_value=resp, side_effect=side_effect)
    return session


class FakeHass:
    """Minimal hass object running executor jobs on the default executor."""

    def async_add_executor_job(self, target, *args):
        return asyncio.get_running_loop().run_in_executor(None, target, *args)


@pytest.fixture
def fake_modem():
    """Return a modem reporting a working cell."""
    return FakeModem()


@pytest.fixture
def fake_hass():
    """Return a minimal hass object."""
    return FakeHass()


@pytest.fixture
def connection_error():
    """Return a connect failure as raised by the Gammu adapter."""
    return ModemConnectionError("Gammu: No response in specified timeout", 14)


@pytest.fixture
def disconnect_error():
    """Return a disconnect failure."""
    return ModemError("Gammu: Phone is not connected")
