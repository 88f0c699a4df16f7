"""LIRC Thermostat climate platform facade.

Home Assistant loads this module as the climate platform entrypoint.
Implementation is split across:
- climate_platform.py (schema + setup entrypoint)
- climate_entity.py (Home Assistant entity adapter)
- climate_controller.py (thermostat state model)
- climate_dispatch.py (debounced command dispatch)
- climate_lirc.py (LIRC transport)
"""

from .climate_controller import ThermostatController
from .climate_dispatch import DebouncedDispatcher, Scheduler, async_scheduler
from .climate_entity import LircThermostatEntity
from .climate_lirc import LircClient
from .climate_model import (
    CommandConfig,
    DisplayUnits,
    PendingRequest,
    RequestStatus,
    SetOutcome,
    SetResult,
    TemperatureCommands,
    ThermostatMode,
    TrackableSetting,
    _coerce_int,
    _coerce_mode,
    _coerce_temperature,
)
from .climate_platform import PLATFORM_SCHEMA, async_setup_platform
