"""LIRC Thermostat climate entity."""

from __future__ import annotations

import logging
from typing import Any

from homeassistant.components.climate import ClimateEntity
from homeassistant.components.climate.const import ClimateEntityFeature, HVACMode
from homeassistant.const import ATTR_TEMPERATURE, UnitOfTemperature
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.device_registry import DeviceInfo

from .climate_controller import ThermostatController
from .climate_dispatch import DebouncedDispatcher, async_scheduler
from .climate_lirc import LircClient
from .climate_model import (
    CommandConfig,
    SetResult,
    ThermostatMode,
    TrackableSetting,
)
from .const import (
    ATTR_DISPLAY_UNITS,
    ATTR_PENDING_COMMAND,
    ATTR_PENDING_SETTING,
    ATTR_PENDING_STATUS,
    ATTR_PENDING_VALUE,
    ATTR_TARGET_MODE,
    DEFAULT_DEBOUNCE_TIME,
    DEFAULT_MAX_TEMP,
    DEFAULT_MIN_TEMP,
    DEFAULT_TEMP_STEP,
    DOMAIN,
    MANUFACTURER,
    MODEL,
    VERSION,
)

_LOGGER = logging.getLogger(__name__)

_MODE_TO_HVAC: dict[ThermostatMode, HVACMode] = {
    ThermostatMode.OFF: HVACMode.OFF,
    ThermostatMode.HEAT: HVACMode.HEAT,
    ThermostatMode.COOL: HVACMode.COOL,
    ThermostatMode.AUTO: HVACMode.AUTO,
}
_HVAC_TO_MODE: dict[HVACMode, ThermostatMode] = {
    hvac: mode for mode, hvac in _MODE_TO_HVAC.items()
}


class LircThermostatEntity(ClimateEntity):
    """Virtual thermostat that drives an infrared remote through LIRC."""

    _attr_should_poll = False
    _attr_hvac_modes = list(_MODE_TO_HVAC.values())
    _attr_supported_features = (
        ClimateEntityFeature.TARGET_TEMPERATURE
        | ClimateEntityFeature.TURN_ON
        | ClimateEntityFeature.TURN_OFF
    )
    _attr_temperature_unit = UnitOfTemperature.CELSIUS
    _attr_target_temperature_step = DEFAULT_TEMP_STEP

    def __init__(
        self,
        hass: HomeAssistant,
        name: str,
        unique_id: str | None,
        commands: CommandConfig,
        lirc_client: LircClient,
        debounce_time: float = DEFAULT_DEBOUNCE_TIME,
        min_temp: float = DEFAULT_MIN_TEMP,
        max_temp: float = DEFAULT_MAX_TEMP,
    ) -> None:
        self.hass = hass
        self._attr_name = name
        self._attr_unique_id = unique_id
        self._attr_min_temp = min_temp
        self._attr_max_temp = max_temp
        if unique_id:
            self._attr_device_info = DeviceInfo(
                identifiers={(DOMAIN, unique_id)},
                name=name,
                manufacturer=MANUFACTURER,
                model=MODEL,
                sw_version=VERSION,
            )
        self._lirc = lirc_client
        self._dispatcher = DebouncedDispatcher(self._send_command, async_scheduler(hass))
        self._controller = ThermostatController(
            commands,
            self._dispatcher,
            debounce_time,
            on_commit=self._handle_commit,
        )
        self._last_non_off_mode: ThermostatMode | None = None

    @property
    def controller(self) -> ThermostatController:
        return self._controller

    async def async_added_to_hass(self) -> None:
        """Start the transport once the entity is registered."""

        await super().async_added_to_hass()
        await self._lirc.async_start()

    async def async_will_remove_from_hass(self) -> None:
        """Drop any pending command and stop the transport."""

        await super().async_will_remove_from_hass()
        self._dispatcher.shutdown()
        await self._lirc.async_stop()

    @callback
    def _send_command(self, command: str) -> None:
        self.hass.async_create_task(self._lirc.async_send(command))

    @callback
    def _handle_commit(self, setting: TrackableSetting, value: Any) -> None:
        if setting is TrackableSetting.MODE and value != ThermostatMode.OFF:
            self._last_non_off_mode = ThermostatMode(value)
        self.async_write_ha_state()

    @property
    def hvac_mode(self) -> HVACMode | None:
        return _MODE_TO_HVAC.get(self._controller.current_mode)

    @property
    def current_temperature(self) -> float | None:
        return self._controller.current_temperature

    @property
    def target_temperature(self) -> float | None:
        return self._controller.target_temperature

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        pending = self._controller.pending_request
        return {
            ATTR_DISPLAY_UNITS: int(self._controller.display_units),
            ATTR_TARGET_MODE: _MODE_TO_HVAC.get(self._controller.target_mode),
            ATTR_PENDING_SETTING: pending.setting.attr_key if pending else None,
            ATTR_PENDING_VALUE: pending.value if pending else None,
            ATTR_PENDING_COMMAND: pending.command if pending else None,
            ATTR_PENDING_STATUS: pending.status.value if pending else None,
        }

    async def async_set_hvac_mode(self, hvac_mode: HVACMode) -> None:
        """Request a new HVAC mode; it applies once the command is sent."""
        try:
            mode = _HVAC_TO_MODE[HVACMode(hvac_mode)]
        except (KeyError, ValueError):
            _LOGGER.error("The hvac_mode '%s' is not supported", hvac_mode)
            return
        self._async_handle_result(self._controller.set_target_mode(mode))

    async def async_set_temperature(self, **kwargs: Any) -> None:
        temperature = kwargs.get(ATTR_TEMPERATURE)
        if temperature is None:
            _LOGGER.warning(
                "Set temperature called without a temperature for %s", self.entity_id
            )
            return
        self._async_handle_result(self._controller.set_target_temperature(temperature))

    async def async_turn_on(self) -> None:
        """Turn on into the last committed non-off mode."""
        await self.async_set_hvac_mode(
            _MODE_TO_HVAC[self._last_non_off_mode or ThermostatMode.HEAT]
        )

    async def async_turn_off(self) -> None:
        await self.async_set_hvac_mode(HVACMode.OFF)

    async def async_set_display_units(self, display_units: int) -> None:
        """Handle the set_display_units entity service."""
        self._async_handle_result(self._controller.set_display_units(display_units))

    @callback
    def _async_handle_result(self, result: SetResult) -> None:
        if not result.ok:
            _LOGGER.debug(
                "Request on %s not dispatched: %s", self.entity_id, result.outcome.value
            )
            return
        self.async_write_ha_state()
