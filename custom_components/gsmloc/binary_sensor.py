"""Binary sensor platform for Gsmloc."""

from __future__ import annotations

from homeassistant.components.binary_sensor import (
    BinarySensorDeviceClass,
    BinarySensorEntity,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN
from .coordinator import GsmlocCoordinator
from .entity import GsmlocEntity
from .models import ProviderStatus


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Gsmloc binary sensors from a config entry."""
    coordinator: GsmlocCoordinator = hass.data[DOMAIN][config_entry.entry_id]
    async_add_entities([GsmlocStatusSensor(coordinator)])


class GsmlocStatusSensor(GsmlocEntity, BinarySensorEntity):
    """Binary sensor reporting whether the provider is available."""

    _attr_device_class = BinarySensorDeviceClass.CONNECTIVITY
    _attr_entity_category = EntityCategory.DIAGNOSTIC
    _attr_translation_key = "provider_status"

    def __init__(self, coordinator: GsmlocCoordinator) -> None:
        """Initialize the binary sensor."""
        super().__init__(coordinator)
        self._attr_unique_id = f"gsmloc_{coordinator.config_entry.entry_id}_status"

    @property
    def available(self) -> bool:
        """Status does not depend on the last position update."""
        return True

    @property
    def is_on(self) -> bool:
        """Return true if the provider is available."""
        return self.coordinator.provider.get_status() == ProviderStatus.AVAILABLE
