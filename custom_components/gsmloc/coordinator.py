"""DataUpdateCoordinator for Gsmloc."""

from __future__ import annotations

from datetime import timedelta
import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.update_coordinator import (
    DataUpdateCoordinator,
    UpdateFailed,
)

from .const import CONF_SCAN_INTERVAL, DEFAULT_SCAN_INTERVAL, DOMAIN
from .models import PositionResult
from .provider import GsmlocProvider, ProviderError

_LOGGER = logging.getLogger(__name__)


class GsmlocCoordinator(DataUpdateCoordinator[PositionResult]):
    """Coordinator polling the cell position provider."""

    config_entry: ConfigEntry

    def __init__(
        self,
        hass: HomeAssistant,
        config_entry: ConfigEntry,
        provider: GsmlocProvider,
    ) -> None:
        """Initialize the coordinator."""
        scan_interval = config_entry.data.get(CONF_SCAN_INTERVAL)
        super().__init__(
            hass,
            _LOGGER,
            name=DOMAIN,
            config_entry=config_entry,
            update_interval=(
                timedelta(seconds=scan_interval)
                if scan_interval
                else DEFAULT_SCAN_INTERVAL
            ),
        )
        self.provider = provider

    async def _async_update_data(self) -> PositionResult:
        """Fetch the latest position from the provider."""
        try:
            return await self.provider.async_get_position()
        except ProviderError as err:
            raise UpdateFailed(f"Error getting cell position: {err}") from err
