"""Sensor platform for Gsmloc."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorEntityDescription,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN
from .coordinator import GsmlocCoordinator
from .entity import GsmlocEntity
from .models import AccuracyLevel, PositionResult


@dataclass(frozen=True, kw_only=True)
class GsmlocSensorEntityDescription(SensorEntityDescription):
    """Describe a Gsmloc sensor entity."""

    value_fn: Callable[[PositionResult], int | str | None]


SENSOR_DESCRIPTIONS: tuple[GsmlocSensorEntityDescription, ...] = (
    GsmlocSensorEntityDescription(
        key="accuracy",
        translation_key="accuracy",
        device_class=SensorDeviceClass.ENUM,
        options=[level.name.lower() for level in AccuracyLevel],
        value_fn=lambda data: data.accuracy.name.lower(),
    ),
    GsmlocSensorEntityDescription(
        key="network_code",
        translation_key="network_code",
        entity_category=EntityCategory.DIAGNOSTIC,
        value_fn=lambda data: f"{data.cell.mcc} {data.cell.mnc}" if data.cell else None,
    ),
    GsmlocSensorEntityDescription(
        key="location_area_code",
        translation_key="location_area_code",
        entity_category=EntityCategory.DIAGNOSTIC,
        value_fn=lambda data: data.cell.lac if data.cell else None,
    ),
    GsmlocSensorEntityDescription(
        key="cell_id",
        translation_key="cell_id",
        entity_category=EntityCategory.DIAGNOSTIC,
        value_fn=lambda data: data.cell.cid if data.cell else None,
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Gsmloc sensors from a config entry."""
    coordinator: GsmlocCoordinator = hass.data[DOMAIN][config_entry.entry_id]
    async_add_entities(
        GsmlocSensor(coordinator, description) for description in SENSOR_DESCRIPTIONS
    )


class GsmlocSensor(GsmlocEntity, SensorEntity):
    """Represent a Gsmloc sensor."""

    entity_description: GsmlocSensorEntityDescription

    def __init__(
        self,
        coordinator: GsmlocCoordinator,
        description: GsmlocSensorEntityDescription,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator)
        self.entity_description = description
        self._attr_unique_id = (
            f"gsmloc_{coordinator.config_entry.entry_id}_{description.key}"
        )

    @property
    def native_value(self) -> int | str | None:
        """Return the sensor value."""
        if self.coordinator.data is None:
            return None
        return self.entity_description.value_fn(self.coordinator.data)
