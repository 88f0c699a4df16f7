"""LIRC transport for LIRC Thermostat."""

from __future__ import annotations

import asyncio
import json
import logging
import os
from typing import Any

from homeassistant.core import HomeAssistant

from .const import (
    CONF_DEVICE,
    CONF_IRSEND,
    CONF_LIRC_COMMANDS,
    CONF_LIRC_CONF,
    CONF_LIRC_DRIVER,
    CONF_LIRC_PID,
    CONF_LIRCD,
    CONF_REMOTE,
    DEFAULT_DEVICE,
    DEFAULT_IRSEND,
    DEFAULT_LIRC_CONF,
    DEFAULT_LIRC_DRIVER,
    DEFAULT_LIRC_PID,
)

_LOGGER = logging.getLogger(__name__)


class LircClient:
    """Send commands through ``irsend`` and optionally supervise ``lircd``.

    Transmission is fire-and-forget from the thermostat's point of view:
    failures are logged here and never reported back.
    """

    def __init__(self, hass: HomeAssistant, config: dict[str, Any], config_path: str) -> None:
        self.hass = hass
        self._config = config
        self._config_path = config_path
        commands = config.get(CONF_LIRC_COMMANDS) or {}
        self._lircd: str | None = commands.get(CONF_LIRCD)
        self._irsend: str = commands.get(CONF_IRSEND) or DEFAULT_IRSEND
        self._remote: str = config[CONF_REMOTE]
        self._daemon: asyncio.subprocess.Process | None = None
        self._monitor_task: asyncio.Task | None = None

    @property
    def config_path(self) -> str:
        return self._config_path

    async def async_start(self) -> None:
        """Persist the LIRC configuration and start ``lircd`` if configured."""

        try:
            await self.hass.async_add_executor_job(self._write_config)
        except OSError as err:
            _LOGGER.error("Unable to write %s: %s", self._config_path, err)
        if not self._lircd:
            return

        args = [
            self._lircd,
            "--nodaemon",
            f"--driver={self._config.get(CONF_LIRC_DRIVER, DEFAULT_LIRC_DRIVER)}",
            f"--device={self._config.get(CONF_DEVICE, DEFAULT_DEVICE)}",
            f"--pidfile={self._config.get(CONF_LIRC_PID, DEFAULT_LIRC_PID)}",
            self._config.get(CONF_LIRC_CONF, DEFAULT_LIRC_CONF),
        ]
        try:
            self._daemon = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as err:
            _LOGGER.error("Unable to start %s: %s", self._lircd, err)
            return

        self._monitor_task = self.hass.async_create_background_task(
            self._async_monitor_daemon(self._daemon), "lirc_thermostat lircd monitor"
        )

    async def async_stop(self) -> None:
        """Stop a ``lircd`` started by :meth:`async_start`."""

        daemon, self._daemon = self._daemon, None
        if daemon is not None and daemon.returncode is None:
            daemon.terminate()
            await daemon.wait()
        if self._monitor_task and not self._monitor_task.done():
            self._monitor_task.cancel()
        self._monitor_task = None

    async def async_send(self, command: str) -> bool:
        """Transmit *command* once. Returns True when ``irsend`` exits cleanly."""

        try:
            process = await asyncio.create_subprocess_exec(
                self._irsend,
                "SEND_ONCE",
                self._remote,
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await process.communicate()
        except OSError as err:
            _LOGGER.error("Unable to run %s for %s: %s", self._irsend, command, err)
            return False

        if stdout:
            _LOGGER.info(stdout.decode(errors="replace").strip())
        if stderr:
            _LOGGER.info("irsend output stderr: %s", stderr.decode(errors="replace").strip())
        if process.returncode != 0:
            _LOGGER.warning(
                "irsend exited with code %s while sending %s",
                _format_exit_code(process.returncode),
                command,
            )
            return False
        return True

    def _write_config(self) -> None:
        directory = os.path.dirname(self._config_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self._config_path, "w", encoding="utf-8") as file:
            json.dump(self._config, file)

    async def _async_monitor_daemon(self, process: asyncio.subprocess.Process) -> None:
        await asyncio.gather(
            _async_forward_stream(process.stdout, "%s"),
            _async_forward_stream(process.stderr, "lircd output stderr: %s"),
        )
        code = await process.wait()
        _LOGGER.info("lircd exited with code %s", _format_exit_code(code))


async def _async_forward_stream(stream: asyncio.StreamReader | None, message: str) -> None:
    if stream is None:
        return
    while line := await stream.readline():
        _LOGGER.info(message, line.decode(errors="replace").rstrip())


def _format_exit_code(code: int | None) -> str:
    return str(code) if code is not None else "(unknown)"
