"""Thermostat state model for LIRC Thermostat."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .climate_dispatch import DebouncedDispatcher
from .climate_model import (
    CommandConfig,
    DisplayUnits,
    PendingRequest,
    SetOutcome,
    SetResult,
    ThermostatMode,
    TrackableSetting,
    _coerce_int,
    _coerce_mode,
    _coerce_temperature,
)
from .const import DEFAULT_DEBOUNCE_TIME, DEFAULT_TEMPERATURE

_LOGGER = logging.getLogger(__name__)


class ThermostatController:
    """Own thermostat state and turn set requests into debounced commands.

    ``current_*`` and ``target_*`` both move only when a command is actually
    sent; until then the request lives in ``pending_request``.
    """

    def __init__(
        self,
        commands: CommandConfig,
        dispatcher: DebouncedDispatcher,
        debounce_time: float = DEFAULT_DEBOUNCE_TIME,
        on_commit: Callable[[TrackableSetting, Any], None] | None = None,
    ) -> None:
        self._commands = commands
        self._dispatcher = dispatcher
        self._debounce_time = debounce_time or DEFAULT_DEBOUNCE_TIME
        self._on_commit = on_commit
        self.current_mode = ThermostatMode.OFF
        self.target_mode = ThermostatMode.OFF
        self.current_temperature: float = DEFAULT_TEMPERATURE
        self.target_temperature: float = DEFAULT_TEMPERATURE
        self.display_units: DisplayUnits | int = DisplayUnits.FAHRENHEIT
        self._pending_request: PendingRequest | None = None

    @property
    def pending_request(self) -> PendingRequest | None:
        return self._pending_request

    # ---- mode ----

    def get_current_mode(self) -> ThermostatMode:
        _LOGGER.info("Getting current heating cooling state: %s", self.current_mode)
        return self.current_mode

    def get_target_mode(self) -> ThermostatMode:
        _LOGGER.info("Getting target heating cooling state: %s", self.target_mode)
        return self.target_mode

    def set_target_mode(self, value: Any) -> SetResult:
        _LOGGER.info("Setting target heating cooling state to: %s", value)
        if self._commands.state_commands is None:
            _LOGGER.error("state_commands config not found")
            return SetResult(SetOutcome.CONFIG_MISSING)

        mode = _coerce_mode(value)
        command = self._commands.state_command(mode) if mode is not None else None
        if command is None:
            _LOGGER.debug("Target state command not found for %s", value)
            return SetResult(SetOutcome.COMMAND_NOT_FOUND)

        _LOGGER.info("State command: %s", command)
        return self._request(TrackableSetting.MODE, mode, command)

    # ---- temperature ----

    def get_current_temperature(self) -> float:
        _LOGGER.info("Getting current temperature: %s", self.current_temperature)
        return self.current_temperature

    def get_target_temperature(self) -> float:
        _LOGGER.info("Getting target temperature: %s", self.target_temperature)
        return self.target_temperature

    def set_target_temperature(self, value: Any) -> SetResult:
        _LOGGER.info("Setting target temperature to: %s", value)
        if self.current_mode == ThermostatMode.OFF:
            return SetResult(SetOutcome.DEVICE_OFF)

        temps_commands = self._commands.temperature_commands(self.current_mode)
        if temps_commands is None:
            _LOGGER.error(
                "%s_temps_commands config not found", self.current_mode.name.lower()
            )
            return SetResult(SetOutcome.CONFIG_MISSING)

        command = temps_commands.resolve(value)
        if command is None:
            _LOGGER.debug("Temperature set command not found for %s", value)
            return SetResult(SetOutcome.COMMAND_NOT_FOUND)

        _LOGGER.info("Temperature command: %s", command)
        return self._request(
            TrackableSetting.TEMPERATURE, _coerce_temperature(value), command
        )

    # ---- display units ----

    def get_display_units(self) -> DisplayUnits | int:
        _LOGGER.info("Getting temperature display units: %s", self.display_units)
        return self.display_units

    def set_display_units(self, value: Any) -> SetResult:
        _LOGGER.info("Setting temperature display units to: %s", value)
        number = _coerce_int(value)
        if number is None:
            _LOGGER.warning("Ignoring non-numeric display units: %s", value)
            return SetResult(SetOutcome.APPLIED)
        try:
            self.display_units = DisplayUnits(number)
        except ValueError:
            self.display_units = number
        return SetResult(SetOutcome.APPLIED)

    # ---- two-phase requests ----

    def _request(
        self, setting: TrackableSetting, value: Any, command: str
    ) -> SetResult:
        request = PendingRequest(setting=setting, value=value, command=command)
        self._pending_request = request
        self._dispatcher.dispatch(
            command,
            self._debounce_time,
            on_complete=lambda: self._commit(request),
            on_superseded=request.supersede,
        )
        return SetResult(SetOutcome.DISPATCHED, command)

    def _commit(self, request: PendingRequest) -> None:
        setting = request.setting
        setattr(self, setting.current_attr, request.value)
        setattr(self, setting.target_attr, request.value)
        request.commit()
        _LOGGER.debug("%s committed: %s", setting.label, request.value)
        if self._on_commit:
            self._on_commit(setting, request.value)
