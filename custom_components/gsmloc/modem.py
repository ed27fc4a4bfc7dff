"""Modem access for the Gsmloc integration.

A modem session acquires a single serving cell reading through Gammu. The
Gammu calls are blocking and must be run in the executor.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from enum import Enum
import logging
import os
from pathlib import Path
from typing import Any, Protocol

import gammu

from .const import DEFAULT_CONNECTION, DEFAULT_PROFILE_INDEX, MODEM_REPLIES
from .models import RawNetworkInfo

_LOGGER = logging.getLogger(__name__)


class ModemError(Exception):
    """General modem error."""


class ConfigError(ModemError):
    """Modem configuration missing or unreadable."""


class ModemConnectionError(ModemError):
    """Connecting to the modem failed."""

    def __init__(self, message: str, code: int | None = None) -> None:
        """Initialize the error."""
        super().__init__(message)
        self.code = code


class NetworkInfoError(ModemError):
    """Querying network information failed."""


class ModemState(Enum):
    """Steps of a modem session."""

    IDLE = "idle"
    CONFIGURING = "configuring"
    CONNECTING = "connecting"
    QUERYING_NETWORK_INFO = "querying_network_info"
    DISCONNECTING = "disconnecting"
    FAILED = "failed"


class Modem(Protocol):
    """Blocking interface to a modem."""

    def find_config(self) -> None: ...

    def read_config(self, profile_index: int) -> None: ...

    def connect(self, replies: int) -> None: ...

    def is_connected(self) -> bool: ...

    def get_network_info(self) -> RawNetworkInfo: ...

    def disconnect(self) -> None: ...


def default_config_paths() -> list[Path]:
    """Return the locations Gammu searches for its configuration."""
    paths = []
    if xdg_config := os.environ.get("XDG_CONFIG_HOME"):
        paths.append(Path(xdg_config) / "gammu" / "config")
    home = Path.home()
    paths.extend(
        [
            home / ".config" / "gammu" / "config",
            home / ".gammurc",
            Path("/etc/gammurc"),
        ]
    )
    return paths


def _describe(err: gammu.GSMError) -> tuple[str, int | None]:
    """Return the text and code of a Gammu error."""
    info: Any = err.args[0] if err.args else None
    if isinstance(info, dict):
        return info.get("Text", str(err)), info.get("Code")
    return str(err), None


class GammuModem:
    """Modem driven through python-gammu."""

    def __init__(
        self,
        device: str | None = None,
        connection: str = DEFAULT_CONNECTION,
        config_file: str | None = None,
    ) -> None:
        """Initialize the modem."""
        self._device = device
        self._connection = connection
        self._config_file = config_file
        self._config_path: Path | None = None
        self._state_machine = gammu.StateMachine()
        self._connected = False

    def find_config(self) -> None:
        """Locate the Gammu configuration."""
        if self._device:
            return

        if self._config_file:
            candidates = [Path(self._config_file)]
        else:
            candidates = default_config_paths()

        for path in candidates:
            if path.is_file():
                _LOGGER.debug("Using Gammu configuration %s", path)
                self._config_path = path
                return

        raise ConfigError(
            "No Gammu configuration found in "
            + ", ".join(str(path) for path in candidates)
        )

    def read_config(self, profile_index: int) -> None:
        """Load a configuration profile into the state machine."""
        try:
            if self._device:
                self._state_machine.SetConfig(
                    0, {"Device": self._device, "Connection": self._connection}
                )
            else:
                self._state_machine.ReadConfig(
                    Section=profile_index,
                    Configuration=0,
                    Filename=str(self._config_path) if self._config_path else None,
                )
        except gammu.GSMError as err:
            text, _ = _describe(err)
            raise ConfigError(f"Could not read Gammu configuration: {text}") from err

    def connect(self, replies: int) -> None:
        """Connect to the phone."""
        try:
            self._state_machine.Init(Replies=replies)
        except gammu.GSMError as err:
            text, code = _describe(err)
            raise ModemConnectionError(f"Gammu: {text}", code) from err
        self._connected = True

    def is_connected(self) -> bool:
        """Return whether a connection is established."""
        return self._connected

    def get_network_info(self) -> RawNetworkInfo:
        """Return the serving cell of the phone."""
        try:
            info = self._state_machine.GetNetworkInfo()
        except gammu.GSMError as err:
            text, _ = _describe(err)
            raise NetworkInfoError(f"Gammu: {text}") from err

        try:
            return RawNetworkInfo(
                network_code=info["NetworkCode"],
                lac=info["LAC"],
                cid=info["CID"],
                network_name=info.get("NetworkName"),
            )
        except KeyError as err:
            raise NetworkInfoError(f"Missing {err} in network info") from err

    def disconnect(self) -> None:
        """Terminate the connection."""
        self._connected = False
        try:
            self._state_machine.Terminate()
        except gammu.GSMError as err:
            text, _ = _describe(err)
            raise ModemError(f"Gammu: {text}") from err


class ModemSession:
    """Acquire one serving cell reading per call."""

    def __init__(
        self,
        modem_factory: Callable[[], Modem],
        profile_index: int = DEFAULT_PROFILE_INDEX,
        replies: int = MODEM_REPLIES,
    ) -> None:
        """Initialize the session."""
        self._modem_factory = modem_factory
        self._profile_index = profile_index
        self._replies = replies
        self.state = ModemState.IDLE

    def acquire_cell_identity(self) -> RawNetworkInfo:
        """Connect, query the serving cell and disconnect.

        Raises ModemError (or a subclass) if any step fails.
        """
        try:
            self.state = ModemState.CONFIGURING
            modem = self._modem_factory()
            modem.find_config()
            modem.read_config(self._profile_index)

            with self._connection(modem):
                self.state = ModemState.CONNECTING
                modem.connect(self._replies)

                self.state = ModemState.QUERYING_NETWORK_INFO
                info = modem.get_network_info()
        except ModemError as err:
            _LOGGER.debug("Modem session failed in state %s: %s", self.state.value, err)
            self.state = ModemState.FAILED
            raise
        except gammu.GSMError as err:
            text, _ = _describe(err)
            self.state = ModemState.FAILED
            raise ModemError(f"Gammu: {text}") from err

        self.state = ModemState.IDLE
        _LOGGER.debug("Modem reported cell %s", info)
        return info

    @contextmanager
    def _connection(self, modem: Modem) -> Iterator[Modem]:
        """Disconnect on exit if a connection was established."""
        try:
            yield modem
        finally:
            if modem.is_connected():
                previous_state = self.state
                self.state = ModemState.DISCONNECTING
                try:
                    modem.disconnect()
                except ModemError as err:
                    _LOGGER.debug("Ignoring modem disconnect failure: %s", err)
                self.state = previous_state
