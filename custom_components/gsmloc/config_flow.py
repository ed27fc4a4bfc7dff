"""Config flow for Gsmloc integration."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import voluptuous as vol
from homeassistant.config_entries import ConfigFlow, ConfigFlowResult

from . import build_modem_session
from .const import (
    API_URL,
    CONF_API_KEY,
    CONF_BASE_URL,
    CONF_CONFIG_FILE,
    CONF_CONNECTION,
    CONF_DEVICE,
    CONF_PROFILE_INDEX,
    CONF_SCAN_INTERVAL,
    DEFAULT_CONNECTION,
    DEFAULT_PROFILE_INDEX,
    DEFAULT_SCAN_INTERVAL,
    DOMAIN,
    MODEM_TIMEOUT,
)
from .modem import ConfigError, ModemError
from .normalize import NormalizationError, normalize

_LOGGER = logging.getLogger(__name__)

STEP_USER_DATA_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_DEVICE, default=""): str,
        vol.Optional(CONF_CONNECTION, default=DEFAULT_CONNECTION): str,
        vol.Optional(CONF_CONFIG_FILE, default=""): str,
        vol.Optional(CONF_PROFILE_INDEX, default=DEFAULT_PROFILE_INDEX): vol.All(
            vol.Coerce(int), vol.Range(min=0)
        ),
        vol.Optional(CONF_BASE_URL, default=API_URL): str,
        vol.Optional(CONF_API_KEY, default=""): str,
        vol.Optional(
            CONF_SCAN_INTERVAL, default=int(DEFAULT_SCAN_INTERVAL.total_seconds())
        ): vol.All(vol.Coerce(int), vol.Range(min=60)),
    }
)


class GsmlocConfigFlow(ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Gsmloc."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Configure the modem and the lookup service."""
        errors: dict[str, str] = {}

        if user_input is not None:
            unique_id = (
                f"{user_input[CONF_DEVICE] or user_input[CONF_CONFIG_FILE] or 'gammurc'}"
                f"_{user_input[CONF_PROFILE_INDEX]}"
            )
            await self.async_set_unique_id(unique_id)
            self._abort_if_unique_id_configured()

            session = build_modem_session(user_input)
            try:
                async with asyncio.timeout(MODEM_TIMEOUT):
                    raw = await self.hass.async_add_executor_job(
                        session.acquire_cell_identity
                    )
                identity = normalize(raw)
            except ConfigError:
                errors["base"] = "no_config"
            except (ModemError, TimeoutError):
                errors["base"] = "cannot_connect"
            except NormalizationError:
                errors["base"] = "invalid_cell"
            except Exception:  # noqa: BLE001
                _LOGGER.exception("Unexpected exception while reading the modem")
                errors["base"] = "unknown"
            else:
                _LOGGER.debug("Modem reports cell %s", identity)
                title = raw.network_name or f"GSM {identity.mcc} {identity.mnc}"
                return self.async_create_entry(title=title, data=user_input)

        return self.async_show_form(
            step_id="user",
            data_schema=self.add_suggested_values_to_schema(
                STEP_USER_DATA_SCHEMA, user_input or {}
            ),
            errors=errors,
        )
