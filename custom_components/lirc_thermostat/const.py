"""Constants for the LIRC Thermostat integration."""

DOMAIN = "lirc_thermostat"

DEFAULT_NAME = "LIRC Thermostat"
MANUFACTURER = "homebridge lirc thermostat"
MODEL = "RaspberryPI LIRC Thermostat"
VERSION = "1.0.0"

CONF_UNIQUE_ID = "unique_id"
CONF_DEBOUNCE_TIME = "debounce_time"
CONF_MIN_TEMP = "min_temp"
CONF_MAX_TEMP = "max_temp"
CONF_STATE_COMMANDS = "state_commands"
CONF_HEAT_TEMPS_COMMANDS = "heat_temps_commands"
CONF_COOL_TEMPS_COMMANDS = "cool_temps_commands"
CONF_AUTO_TEMPS_COMMANDS = "auto_temps_commands"
CONF_TEMPLATE = "template"

CONF_LIRC = "lirc"
CONF_LIRC_COMMANDS = "commands"
CONF_LIRCD = "lircd"
CONF_IRRECORD = "irrecord"
CONF_IRSEND = "irsend"
CONF_LIRC_DRIVER = "lirc_driver"
CONF_LIRC_CONF = "lirc_conf"
CONF_LIRC_PID = "lirc_pid"
CONF_DEVICE = "device"
CONF_TMP_DIR = "tmp_dir"
CONF_REMOTE = "remote"
CONF_CONFIG_FILE = "config_file"

# Milliseconds, matching the unit used in the YAML configuration.
DEFAULT_DEBOUNCE_TIME = 1000
DEFAULT_TEMPERATURE = 10.0
DEFAULT_MIN_TEMP = 10.0
DEFAULT_MAX_TEMP = 38.0
DEFAULT_TEMP_STEP = 1.0

DEFAULT_IRSEND = "irsend"
DEFAULT_LIRC_DRIVER = "default"
DEFAULT_LIRC_CONF = "/etc/lirc/lircd.conf"
DEFAULT_LIRC_PID = "/var/run/lirc/lircd.pid"
DEFAULT_DEVICE = "/dev/lirc0"
DEFAULT_TMP_DIR = "/tmp"
DEFAULT_CONFIG_FILE = "lirc_thermostat.json"

TEMPLATE_PLACEHOLDER = "{tempNum}"

ATTR_DISPLAY_UNITS = "display_units"
ATTR_TARGET_MODE = "target_mode"
ATTR_PENDING_SETTING = "pending_setting"
ATTR_PENDING_VALUE = "pending_value"
ATTR_PENDING_COMMAND = "pending_command"
ATTR_PENDING_STATUS = "pending_status"

SERVICE_SET_DISPLAY_UNITS = "set_display_units"
