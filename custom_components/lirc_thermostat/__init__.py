"""The LIRC Thermostat integration."""
