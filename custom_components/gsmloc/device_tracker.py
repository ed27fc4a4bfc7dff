"""Device tracker platform for Gsmloc."""

from __future__ import annotations

from typing import Any

from homeassistant.components.device_tracker import SourceType, TrackerEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.util import dt as dt_util

from .const import (
    ATTR_ACCURACY_LEVEL,
    ATTR_CID,
    ATTR_LAC,
    ATTR_MCC,
    ATTR_MNC,
    ATTR_TIMESTAMP,
    DOMAIN,
)
from .coordinator import GsmlocCoordinator
from .entity import GsmlocEntity
from .models import PositionFields


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the Gsmloc device tracker from a config entry."""
    coordinator: GsmlocCoordinator = hass.data[DOMAIN][config_entry.entry_id]
    async_add_entities([GsmlocTracker(coordinator)])


class GsmlocTracker(GsmlocEntity, TrackerEntity):
    """Represent the position of the serving cell."""

    _attr_name = None

    def __init__(self, coordinator: GsmlocCoordinator) -> None:
        """Initialize the tracker entity."""
        super().__init__(coordinator)
        self._attr_unique_id = f"gsmloc_{coordinator.config_entry.entry_id}"

    @property
    def source_type(self) -> SourceType:
        """Return the source type."""
        return SourceType.GPS

    @property
    def latitude(self) -> float | None:
        """Return latitude value of the device."""
        data = self.coordinator.data
        if data is None or not data.fields & PositionFields.LATITUDE:
            return None
        return data.latitude

    @property
    def longitude(self) -> float | None:
        """Return longitude value of the device."""
        data = self.coordinator.data
        if data is None or not data.fields & PositionFields.LONGITUDE:
            return None
        return data.longitude

    @property
    def location_accuracy(self) -> float:
        """Return the location accuracy of the device."""
        return 0

    @property
    def extra_state_attributes(self) -> dict[str, Any] | None:
        """Return additional state attributes."""
        data = self.coordinator.data
        if data is None:
            return None

        attrs: dict[str, Any] = {
            ATTR_ACCURACY_LEVEL: data.accuracy.name.lower(),
            ATTR_TIMESTAMP: dt_util.utc_from_timestamp(data.timestamp).isoformat(),
        }
        if (cell := data.cell) is not None:
            attrs[ATTR_MCC] = cell.mcc
            attrs[ATTR_MNC] = cell.mnc
            attrs[ATTR_LAC] = cell.lac
            attrs[ATTR_CID] = cell.cid

        return attrs
