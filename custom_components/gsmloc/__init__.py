"""The Gsmloc integration."""

from __future__ import annotations

from functools import partial
import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import Platform
from homeassistant.core import HomeAssistant
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from .api import OpenCellIdApiClient
from .const import (
    API_URL,
    CONF_API_KEY,
    CONF_BASE_URL,
    CONF_CONFIG_FILE,
    CONF_CONNECTION,
    CONF_DEVICE,
    CONF_PROFILE_INDEX,
    DEFAULT_CONNECTION,
    DEFAULT_PROFILE_INDEX,
    DOMAIN,
)
from .coordinator import GsmlocCoordinator
from .modem import GammuModem, ModemSession
from .provider import GsmlocProvider

_LOGGER = logging.getLogger(__name__)

PLATFORMS = [Platform.BINARY_SENSOR, Platform.DEVICE_TRACKER, Platform.SENSOR]


def build_modem_session(data: dict) -> ModemSession:
    """Create a modem session from config entry data."""
    modem_factory = partial(
        GammuModem,
        device=data.get(CONF_DEVICE) or None,
        connection=data.get(CONF_CONNECTION, DEFAULT_CONNECTION),
        config_file=data.get(CONF_CONFIG_FILE) or None,
    )
    return ModemSession(
        modem_factory,
        profile_index=data.get(CONF_PROFILE_INDEX, DEFAULT_PROFILE_INDEX),
    )


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up Gsmloc from a config entry."""
    client = OpenCellIdApiClient(
        session=async_get_clientsession(hass),
        base_url=entry.data.get(CONF_BASE_URL, API_URL),
        api_key=entry.data.get(CONF_API_KEY) or None,
    )

    def _shutdown() -> None:
        _LOGGER.debug("Stopping position updates for %s", entry.title)
        hass.async_create_task(coordinator.async_shutdown())

    provider = GsmlocProvider(
        hass, build_modem_session(entry.data), client, on_shutdown=_shutdown
    )

    coordinator = GsmlocCoordinator(hass, entry, provider)
    await coordinator.async_config_entry_first_refresh()

    hass.data.setdefault(DOMAIN, {})
    hass.data[DOMAIN][entry.entry_id] = coordinator

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if unload_ok:
        coordinator: GsmlocCoordinator = hass.data[DOMAIN].pop(entry.entry_id)
        coordinator.provider.shutdown()
    return unload_ok
