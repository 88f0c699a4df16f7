"""Shared LIRC thermostat model/types/helpers."""

from __future__ import annotations

import math
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

from .const import (
    CONF_AUTO_TEMPS_COMMANDS,
    CONF_COOL_TEMPS_COMMANDS,
    CONF_HEAT_TEMPS_COMMANDS,
    CONF_STATE_COMMANDS,
    CONF_TEMPLATE,
    TEMPLATE_PLACEHOLDER,
)


class ThermostatMode(IntEnum):
    """Heating/cooling state, numbered as HomeKit numbers it."""

    OFF = 0
    HEAT = 1
    COOL = 2
    AUTO = 3


class DisplayUnits(IntEnum):
    """Temperature display unit preference."""

    CELSIUS = 0
    FAHRENHEIT = 1


class TrackableSetting(Enum):
    """Settings whose changes travel through the debounced dispatcher."""

    # fmt: off
    #              attr_key        current_attr            target_attr            label
    MODE        = ("mode",         "current_mode",         "target_mode",         "Mode")
    TEMPERATURE = ("temperature",  "current_temperature",  "target_temperature",  "Temperature")
    # fmt: on

    def __init__(
        self,
        attr_key: str,
        current_attr: str,
        target_attr: str,
        label: str,
    ) -> None:
        self.attr_key = attr_key
        self.current_attr = current_attr
        self.target_attr = target_attr
        self.label = label


class RequestStatus(Enum):
    """Lifecycle of a set request."""

    REQUESTED = "requested"
    COMMITTED = "committed"
    SUPERSEDED = "superseded"


class SetOutcome(Enum):
    """How a set operation ended."""

    DISPATCHED = "dispatched"
    APPLIED = "applied"
    DEVICE_OFF = "device_off"
    CONFIG_MISSING = "config_missing"
    COMMAND_NOT_FOUND = "command_not_found"


@dataclass(frozen=True)
class SetResult:
    """Outcome of a set operation, plus the command it dispatched."""

    outcome: SetOutcome
    command: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome in (SetOutcome.DISPATCHED, SetOutcome.APPLIED)


@dataclass
class PendingRequest:
    """A set request travelling from requested to committed (or superseded)."""

    setting: TrackableSetting
    value: Any
    command: str
    status: RequestStatus = RequestStatus.REQUESTED
    requested_at: float = field(default_factory=time.monotonic)

    def commit(self) -> None:
        self.status = RequestStatus.COMMITTED

    def supersede(self) -> None:
        self.status = RequestStatus.SUPERSEDED


@dataclass(frozen=True)
class TemperatureCommands:
    """Temperature-to-command table for one active mode."""

    template: str | None = None
    commands: Mapping[int, str] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: Mapping[Any, Any] | None) -> TemperatureCommands | None:
        if config is None:
            return None
        commands: dict[int, str] = {}
        for key, command in config.items():
            if key == CONF_TEMPLATE:
                continue
            number = _coerce_int(key)
            if number is not None and command:
                commands[number] = command
        return cls(template=config.get(CONF_TEMPLATE) or None, commands=commands)

    def resolve(self, value: Any) -> str | None:
        """Return the command for *value*; a template wins over an exact entry."""
        temp_num = _coerce_int(value)
        if temp_num is None:
            return None
        if self.template:
            return self.template.replace(TEMPLATE_PLACEHOLDER, str(temp_num), 1)
        return self.commands.get(temp_num) or None


@dataclass(frozen=True)
class CommandConfig:
    """Command tables, built once from configuration."""

    state_commands: Mapping[str, str] | None = None
    heat_temps_commands: TemperatureCommands | None = None
    cool_temps_commands: TemperatureCommands | None = None
    auto_temps_commands: TemperatureCommands | None = None

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> CommandConfig:
        state_commands = config.get(CONF_STATE_COMMANDS)
        return cls(
            state_commands=dict(state_commands) if state_commands is not None else None,
            heat_temps_commands=TemperatureCommands.from_config(
                config.get(CONF_HEAT_TEMPS_COMMANDS)
            ),
            cool_temps_commands=TemperatureCommands.from_config(
                config.get(CONF_COOL_TEMPS_COMMANDS)
            ),
            auto_temps_commands=TemperatureCommands.from_config(
                config.get(CONF_AUTO_TEMPS_COMMANDS)
            ),
        )

    def state_command(self, mode: ThermostatMode) -> str | None:
        if not self.state_commands:
            return None
        return self.state_commands.get(mode.name) or None

    def temperature_commands(self, mode: ThermostatMode) -> TemperatureCommands | None:
        """Return the temperature table for an active mode (None for OFF)."""
        return {
            ThermostatMode.HEAT: self.heat_temps_commands,
            ThermostatMode.COOL: self.cool_temps_commands,
            ThermostatMode.AUTO: self.auto_temps_commands,
        }.get(mode)


def _coerce_mode(value: Any) -> ThermostatMode | None:
    number = _coerce_temperature(value)
    if number is None or not number.is_integer():
        return None
    try:
        return ThermostatMode(int(number))
    except ValueError:
        return None


def _coerce_temperature(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _coerce_int(value: Any) -> int | None:
    """Truncate *value* toward zero, or None when it is not a finite number."""
    number = _coerce_temperature(value)
    if number is None:
        return None
    return math.trunc(number)
