"""Cell based position provider."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from enum import StrEnum
import logging
import time

from homeassistant.core import HomeAssistant

from .api import GsmlocApiError, OpenCellIdApiClient
from .const import ERROR_NOT_AVAILABLE_MESSAGE, MODEM_TIMEOUT
from .modem import ModemError, ModemSession
from .models import PositionResult, ProviderStatus, RawNetworkInfo
from .normalize import NormalizationError, normalize
from .position import synthesize

_LOGGER = logging.getLogger(__name__)


def _log_late_reading(future: asyncio.Future[RawNetworkInfo]) -> None:
    """Log the outcome of a modem reading that finished after its timeout."""
    if future.cancelled():
        return
    if (err := future.exception()) is not None:
        _LOGGER.debug("Timed out modem reading failed: %s", err)
    else:
        _LOGGER.debug("Timed out modem reading finished: %s", future.result())


class ProviderErrorCode(StrEnum):
    """Error codes reported to provider callers."""

    NOT_AVAILABLE = "not_available"


class ProviderError(Exception):
    """Error reported to provider callers."""

    def __init__(self, code: ProviderErrorCode, message: str) -> None:
        """Initialize the error."""
        super().__init__(message)
        self.code = code


class GsmlocProvider:
    """Answer status and position queries from the serving cell.

    No cellular state is kept between requests: every position request
    connects to the modem, looks the cell up and disconnects again.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        session: ModemSession,
        client: OpenCellIdApiClient,
        modem_timeout: float = MODEM_TIMEOUT,
        on_shutdown: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the provider."""
        self._hass = hass
        self._session = session
        self._client = client
        self._modem_timeout = modem_timeout
        self._on_shutdown = on_shutdown
        self._lock = asyncio.Lock()
        self._reading: asyncio.Future[RawNetworkInfo] | None = None
        self._shut_down = False

    def get_status(self) -> ProviderStatus:
        """Return the provider status.

        Modem and network reachability are not probed, so the provider
        always reports itself as available.
        """
        return ProviderStatus.AVAILABLE

    async def async_get_position(self) -> PositionResult:
        """Estimate the current position from the serving cell."""
        timestamp = int(time.time())

        if self._shut_down:
            raise ProviderError(
                ProviderErrorCode.NOT_AVAILABLE, ERROR_NOT_AVAILABLE_MESSAGE
            )

        async with self._lock:
            if self._reading is not None and not self._reading.done():
                _LOGGER.warning("Previous modem reading is still running")
                raise ProviderError(
                    ProviderErrorCode.NOT_AVAILABLE, ERROR_NOT_AVAILABLE_MESSAGE
                )

            stage = "modem"
            try:
                self._reading = self._hass.async_add_executor_job(
                    self._session.acquire_cell_identity
                )
                # The executor thread cannot be cancelled; on timeout it keeps
                # the modem until it returns and blocks further readings.
                async with asyncio.timeout(self._modem_timeout):
                    raw = await asyncio.shield(self._reading)
                stage = "normalize"
                identity = normalize(raw)
                stage = "lookup"
                response = await self._client.async_lookup(identity)
            except TimeoutError as err:
                _LOGGER.warning(
                    "Timed out after %s seconds in %s stage", self._modem_timeout, stage
                )
                self._reading.add_done_callback(_log_late_reading)
                raise ProviderError(
                    ProviderErrorCode.NOT_AVAILABLE, ERROR_NOT_AVAILABLE_MESSAGE
                ) from err
            except (ModemError, NormalizationError, GsmlocApiError) as err:
                _LOGGER.warning("Failed to get cell data in %s stage: %s", stage, err)
                raise ProviderError(
                    ProviderErrorCode.NOT_AVAILABLE, ERROR_NOT_AVAILABLE_MESSAGE
                ) from err

        _LOGGER.debug("Cell %s resolved to %s", identity, response)
        return synthesize(
            timestamp,
            latitude=response.latitude,
            longitude=response.longitude,
            cell=identity,
        )

    def shutdown(self) -> None:
        """Stop serving position requests."""
        self._shut_down = True
        if self._on_shutdown is not None:
            self._on_shutdown()
