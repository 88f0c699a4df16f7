"""Debounced infrared command dispatch for LIRC Thermostat."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable
from dataclasses import dataclass

from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.event import async_call_later

_LOGGER = logging.getLogger(__name__)

# (delay_seconds, action) -> cancel
Scheduler = Callable[[float, Callable[[], None]], Callable[[], None]]


def async_scheduler(hass: HomeAssistant) -> Scheduler:
    """Build a scheduler backed by Home Assistant's event loop timers."""

    def _schedule(delay: float, action: Callable[[], None]) -> Callable[[], None]:
        @callback
        def _fire(_now: datetime.datetime) -> None:
            action()

        return async_call_later(hass, delay, _fire)

    return _schedule


@dataclass
class _PendingDispatch:
    command: str
    delay_ms: float
    on_complete: Callable[[], None] | None
    on_superseded: Callable[[], None] | None
    cancel: Callable[[], None] | None = None


class DebouncedDispatcher:
    """Send only the last command requested within a quiet window.

    Each new request cancels the one still waiting; the cancelled request
    never transmits and its ``on_complete`` is dropped. When the window
    closes the command goes to ``send`` and then ``on_complete`` runs.
    """

    def __init__(self, send: Callable[[str], None], scheduler: Scheduler) -> None:
        self._send = send
        self._scheduler = scheduler
        self._pending: _PendingDispatch | None = None

    @property
    def pending_command(self) -> str | None:
        return self._pending.command if self._pending else None

    def dispatch(
        self,
        command: str,
        delay_ms: float,
        on_complete: Callable[[], None] | None = None,
        on_superseded: Callable[[], None] | None = None,
    ) -> None:
        """Schedule *command* after *delay_ms*, replacing any pending one."""
        previous = self._cancel_pending()
        if previous is not None:
            _LOGGER.debug(
                "Command %s superseded by %s before it was sent",
                previous.command,
                command,
            )
            if previous.on_superseded:
                previous.on_superseded()

        pending = _PendingDispatch(
            command=command,
            delay_ms=delay_ms,
            on_complete=on_complete,
            on_superseded=on_superseded,
        )
        self._pending = pending
        pending.cancel = self._scheduler(
            max(delay_ms, 0) / 1000, lambda: self._fire(pending)
        )

    def shutdown(self) -> None:
        """Drop a pending dispatch without sending it or calling back."""
        if self._cancel_pending() is not None:
            _LOGGER.debug("Dropped pending command on shutdown")

    def _cancel_pending(self) -> _PendingDispatch | None:
        previous = self._pending
        self._pending = None
        if previous is not None and previous.cancel is not None:
            previous.cancel()
        return previous

    def _fire(self, pending: _PendingDispatch) -> None:
        if self._pending is not pending:
            return
        self._pending = None
        _LOGGER.debug(
            "Sending command %s after %sms debounce", pending.command, pending.delay_ms
        )
        self._send(pending.command)
        if pending.on_complete:
            pending.on_complete()
