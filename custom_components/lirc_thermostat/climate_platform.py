"""LIRC Thermostat climate platform setup functions."""

from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from homeassistant.components.climate import PLATFORM_SCHEMA
from homeassistant.const import CONF_NAME
from homeassistant.core import HomeAssistant
from homeassistant.helpers import config_validation as cv, entity_platform
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.typing import ConfigType, DiscoveryInfoType

from .climate_entity import LircThermostatEntity
from .climate_lirc import LircClient
from .climate_model import CommandConfig, DisplayUnits, ThermostatMode
from .const import (
    ATTR_DISPLAY_UNITS,
    CONF_AUTO_TEMPS_COMMANDS,
    CONF_CONFIG_FILE,
    CONF_COOL_TEMPS_COMMANDS,
    CONF_DEBOUNCE_TIME,
    CONF_DEVICE,
    CONF_HEAT_TEMPS_COMMANDS,
    CONF_IRRECORD,
    CONF_IRSEND,
    CONF_LIRC,
    CONF_LIRC_COMMANDS,
    CONF_LIRC_CONF,
    CONF_LIRC_DRIVER,
    CONF_LIRC_PID,
    CONF_LIRCD,
    CONF_MAX_TEMP,
    CONF_MIN_TEMP,
    CONF_REMOTE,
    CONF_STATE_COMMANDS,
    CONF_TEMPLATE,
    CONF_TMP_DIR,
    CONF_UNIQUE_ID,
    DEFAULT_CONFIG_FILE,
    DEFAULT_DEBOUNCE_TIME,
    DEFAULT_DEVICE,
    DEFAULT_IRSEND,
    DEFAULT_LIRC_CONF,
    DEFAULT_LIRC_DRIVER,
    DEFAULT_LIRC_PID,
    DEFAULT_MAX_TEMP,
    DEFAULT_MIN_TEMP,
    DEFAULT_NAME,
    DEFAULT_TMP_DIR,
    SERVICE_SET_DISPLAY_UNITS,
)

_LOGGER = logging.getLogger(__name__)

LIRC_COMMANDS_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_LIRCD): cv.string,
        vol.Optional(CONF_IRRECORD): cv.string,
        vol.Optional(CONF_IRSEND, default=DEFAULT_IRSEND): cv.string,
    }
)

LIRC_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_REMOTE): cv.string,
        vol.Optional(CONF_LIRC_COMMANDS, default={}): LIRC_COMMANDS_SCHEMA,
        vol.Optional(CONF_LIRC_DRIVER, default=DEFAULT_LIRC_DRIVER): cv.string,
        vol.Optional(CONF_LIRC_CONF, default=DEFAULT_LIRC_CONF): cv.string,
        vol.Optional(CONF_LIRC_PID, default=DEFAULT_LIRC_PID): cv.string,
        vol.Optional(CONF_DEVICE, default=DEFAULT_DEVICE): cv.string,
        vol.Optional(CONF_TMP_DIR, default=DEFAULT_TMP_DIR): cv.string,
        vol.Optional(CONF_CONFIG_FILE, default=DEFAULT_CONFIG_FILE): cv.string,
    }
)


def _mode_name_keys(value: Any) -> Any:
    """Restore the ``OFF`` key, which YAML 1.1 loads as ``False``."""
    if not isinstance(value, dict):
        return value
    return {
        ThermostatMode.OFF.name if key is False else key: command
        for key, command in value.items()
    }


STATE_COMMANDS_SCHEMA = vol.All(
    _mode_name_keys,
    vol.Schema({vol.Optional(mode.name): cv.string for mode in ThermostatMode}),
)

TEMPS_COMMANDS_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_TEMPLATE): cv.string,
        vol.Coerce(int): cv.string,
    }
)

PLATFORM_SCHEMA = PLATFORM_SCHEMA.extend(
    {
        vol.Required(CONF_LIRC): LIRC_SCHEMA,
        vol.Optional(CONF_NAME, default=DEFAULT_NAME): cv.string,
        vol.Optional(CONF_UNIQUE_ID): cv.string,
        vol.Optional(CONF_DEBOUNCE_TIME, default=DEFAULT_DEBOUNCE_TIME): cv.positive_int,
        vol.Optional(CONF_MIN_TEMP, default=DEFAULT_MIN_TEMP): vol.Coerce(float),
        vol.Optional(CONF_MAX_TEMP, default=DEFAULT_MAX_TEMP): vol.Coerce(float),
        vol.Optional(CONF_STATE_COMMANDS): STATE_COMMANDS_SCHEMA,
        vol.Optional(CONF_HEAT_TEMPS_COMMANDS): TEMPS_COMMANDS_SCHEMA,
        vol.Optional(CONF_COOL_TEMPS_COMMANDS): TEMPS_COMMANDS_SCHEMA,
        vol.Optional(CONF_AUTO_TEMPS_COMMANDS): TEMPS_COMMANDS_SCHEMA,
    }
)

SET_DISPLAY_UNITS_SCHEMA = {
    vol.Required(ATTR_DISPLAY_UNITS): vol.All(
        vol.Coerce(int), vol.In([unit.value for unit in DisplayUnits])
    ),
}


async def async_setup_platform(
    hass: HomeAssistant,
    config: ConfigType,
    async_add_entities: AddEntitiesCallback,
    discovery_info: DiscoveryInfoType | None = None,
) -> None:
    """Set up a LIRC Thermostat entity from YAML."""

    if config[CONF_MIN_TEMP] >= config[CONF_MAX_TEMP]:
        _LOGGER.error(
            "min_temp (%s) must be below max_temp (%s); skipping %s",
            config[CONF_MIN_TEMP],
            config[CONF_MAX_TEMP],
            config[CONF_NAME],
        )
        return

    lirc_config = config[CONF_LIRC]
    _LOGGER.debug("Initializing %s with config: %s", config[CONF_NAME], config)

    async_add_entities(
        [
            LircThermostatEntity(
                hass=hass,
                name=config[CONF_NAME],
                unique_id=config.get(CONF_UNIQUE_ID),
                commands=CommandConfig.from_config(config),
                lirc_client=LircClient(
                    hass,
                    lirc_config,
                    hass.config.path(lirc_config[CONF_CONFIG_FILE]),
                ),
                debounce_time=config[CONF_DEBOUNCE_TIME],
                min_temp=config[CONF_MIN_TEMP],
                max_temp=config[CONF_MAX_TEMP],
            )
        ]
    )

    platform = entity_platform.async_get_current_platform()
    platform.async_register_entity_service(
        SERVICE_SET_DISPLAY_UNITS,
        SET_DISPLAY_UNITS_SCHEMA,
        "async_set_display_units",
    )
