"""Shared fixtures for lirc_thermostat tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from homeassistant.core import HomeAssistant

from custom_components.lirc_thermostat.climate import (
    CommandConfig,
    DebouncedDispatcher,
    LircClient,
    LircThermostatEntity,
    ThermostatController,
)
from custom_components.lirc_thermostat.const import (
    CONF_AUTO_TEMPS_COMMANDS,
    CONF_COOL_TEMPS_COMMANDS,
    CONF_HEAT_TEMPS_COMMANDS,
    CONF_STATE_COMMANDS,
)

# ── Default command tables ─────────────────────────────────────────────

STATE_COMMANDS: dict[str, str] = {
    "OFF": "CMD_OFF",
    "HEAT": "CMD_HEAT",
    "COOL": "CMD_COOL",
    "AUTO": "CMD_AUTO",
}

DEFAULT_COMMANDS: dict[str, Any] = {
    CONF_STATE_COMMANDS: STATE_COMMANDS,
    CONF_HEAT_TEMPS_COMMANDS: {"template": "SET_TEMP_{tempNum}"},
    CONF_COOL_TEMPS_COMMANDS: {20: "COOL_20", 21: "COOL_21", 22: "COOL_22"},
    CONF_AUTO_TEMPS_COMMANDS: {"template": "AUTO_{tempNum}", 22: "AUTO_EXACT_22"},
}

DEBOUNCE_MS = 50


# ── Virtual clock ──────────────────────────────────────────────────────


@dataclass
class _Timer:
    due: float
    action: Callable[[], None]
    cancelled: bool = False


class VirtualScheduler:
    """Scheduler whose timers only fire when the test advances time."""

    def __init__(self) -> None:
        self.now = 0.0
        self._timers: list[_Timer] = []

    def __call__(self, delay: float, action: Callable[[], None]) -> Callable[[], None]:
        timer = _Timer(due=self.now + delay, action=action)
        self._timers.append(timer)

        def _cancel() -> None:
            timer.cancelled = True

        return _cancel

    @property
    def pending(self) -> int:
        return sum(1 for timer in self._timers if not timer.cancelled)

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [t for t in self._timers if not t.cancelled and t.due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.due)
            self._timers.remove(timer)
            self.now = timer.due
            timer.action()
        self.now = target


# ── Fixtures ───────────────────────────────────────────────────────────


@pytest.fixture
def scheduler() -> VirtualScheduler:
    return VirtualScheduler()


@pytest.fixture
def sent() -> list[str]:
    """Commands handed to the transport, in order."""
    return []


@pytest.fixture
def dispatcher(scheduler: VirtualScheduler, sent: list[str]) -> DebouncedDispatcher:
    return DebouncedDispatcher(sent.append, scheduler)


@pytest.fixture
def make_controller(dispatcher: DebouncedDispatcher):
    """Factory fixture: build a ThermostatController on the virtual clock."""

    def _make(
        commands: dict[str, Any] | None = None,
        debounce_time: float = DEBOUNCE_MS,
        **kwargs: Any,
    ) -> ThermostatController:
        return ThermostatController(
            CommandConfig.from_config(DEFAULT_COMMANDS if commands is None else commands),
            dispatcher,
            debounce_time,
            **kwargs,
        )

    return _make


@pytest.fixture
def lirc_client() -> MagicMock:
    client = MagicMock(spec=LircClient)
    client.async_start = AsyncMock()
    client.async_stop = AsyncMock()
    client.async_send = AsyncMock(return_value=True)
    return client


@pytest.fixture
def make_entity(hass: HomeAssistant, lirc_client: MagicMock):
    """Factory fixture: build a LircThermostatEntity for unit-level tests.

    The entity is NOT added to hass; state writes are stubbed out.
    """

    def _make(**overrides: Any) -> LircThermostatEntity:
        defaults: dict[str, Any] = {
            "hass": hass,
            "name": "Test Thermostat",
            "unique_id": "test_thermostat_uid",
            "commands": CommandConfig.from_config(DEFAULT_COMMANDS),
            "lirc_client": lirc_client,
            "debounce_time": DEBOUNCE_MS,
        }
        defaults.update(overrides)
        entity = LircThermostatEntity(**defaults)
        entity.async_write_ha_state = MagicMock()
        return entity

    return _make
