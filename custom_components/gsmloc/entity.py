"""Base entity for the Gsmloc integration."""

from __future__ import annotations

from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DOMAIN
from .coordinator import GsmlocCoordinator


class GsmlocEntity(CoordinatorEntity[GsmlocCoordinator]):
    """Base class for Gsmloc entities."""

    _attr_has_entity_name = True

    def __init__(self, coordinator: GsmlocCoordinator) -> None:
        """Initialize the entity."""
        super().__init__(coordinator)
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, coordinator.config_entry.entry_id)},
            name=coordinator.config_entry.title,
            manufacturer="Gammu",
            model="GSM modem",
        )
