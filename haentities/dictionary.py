"""String constants shared by the discovery serializer and the entities."""

# components
COMPONENT_BINARY_SENSOR = "binary_sensor"
COMPONENT_BUTTON = "button"
COMPONENT_CAMERA = "camera"
COMPONENT_COVER = "cover"
COMPONENT_DEVICE_TRACKER = "device_tracker"
COMPONENT_DEVICE_AUTOMATION = "device_automation"
COMPONENT_LOCK = "lock"
COMPONENT_NUMBER = "number"
COMPONENT_SELECT = "select"
COMPONENT_SENSOR = "sensor"
COMPONENT_SWITCH = "switch"
COMPONENT_TAG = "tag"
COMPONENT_SCENE = "scene"
COMPONENT_FAN = "fan"
COMPONENT_LIGHT = "light"
COMPONENT_CLIMATE = "climate"

# decorators
SERIALIZER_SLASH = "/"
JSON_DATA_PREFIX = "{"
JSON_DATA_SUFFIX = "}"
JSON_PROPERTY_PREFIX = '"'
JSON_PROPERTY_SUFFIX = '":'
JSON_ESCAPE_CHAR = '"'
JSON_PROPERTIES_SEPARATOR = ","
JSON_ARRAY_PREFIX = "["
JSON_ARRAY_SUFFIX = "]"
SERIALIZER_UNDERSCORE = "_"

# properties
DEVICE_IDENTIFIERS_PROPERTY = "ids"
DEVICE_MANUFACTURER_PROPERTY = "mf"
DEVICE_MODEL_PROPERTY = "mdl"
DEVICE_SOFTWARE_VERSION_PROPERTY = "sw"
NAME_PROPERTY = "name"
UNIQUE_ID_PROPERTY = "uniq_id"
DEVICE_PROPERTY = "dev"
DEVICE_CLASS_PROPERTY = "dev_cla"
ICON_PROPERTY = "ic"
RETAIN_PROPERTY = "ret"
SOURCE_TYPE_PROPERTY = "src_type"
ENCODING_PROPERTY = "e"
OPTIMISTIC_PROPERTY = "opt"
AUTOMATION_TYPE_PROPERTY = "atype"
TYPE_PROPERTY = "type"
SUBTYPE_PROPERTY = "stype"
FORCE_UPDATE_PROPERTY = "frc_upd"
UNIT_OF_MEASUREMENT_PROPERTY = "unit_of_meas"
VALUE_TEMPLATE_PROPERTY = "val_tpl"
OPTIONS_PROPERTY = "options"
MIN_PROPERTY = "min"
MAX_PROPERTY = "max"
STEP_PROPERTY = "step"
MODE_PROPERTY = "mode"
COMMAND_TEMPLATE_PROPERTY = "cmd_tpl"
SPEED_RANGE_MAX_PROPERTY = "spd_rng_max"
SPEED_RANGE_MIN_PROPERTY = "spd_rng_min"
BRIGHTNESS_SCALE_PROPERTY = "bri_scl"
MIN_MIREDS_PROPERTY = "min_mirs"
MAX_MIREDS_PROPERTY = "max_mirs"
TEMPERATURE_UNIT_PROPERTY = "temp_unit"
MIN_TEMP_PROPERTY = "min_temp"
MAX_TEMP_PROPERTY = "max_temp"
TEMP_STEP_PROPERTY = "temp_step"
FAN_MODES_PROPERTY = "fan_modes"
SWING_MODES_PROPERTY = "swing_modes"
MODES_PROPERTY = "modes"
TEMPERATURE_COMMAND_TEMPLATE_PROPERTY = "temp_cmd_tpl"
PAYLOAD_ON_PROPERTY = "pl_on"

# topics
CONFIG_TOPIC = "config"
AVAILABILITY_TOPIC = "avty_t"
TOPIC = "t"
STATE_TOPIC = "stat_t"
COMMAND_TOPIC = "cmd_t"
POSITION_TOPIC = "pos_t"
PERCENTAGE_STATE_TOPIC = "pct_stat_t"
PERCENTAGE_COMMAND_TOPIC = "pct_cmd_t"
BRIGHTNESS_COMMAND_TOPIC = "bri_cmd_t"
BRIGHTNESS_STATE_TOPIC = "bri_stat_t"
COLOR_TEMPERATURE_COMMAND_TOPIC = "clr_temp_cmd_t"
COLOR_TEMPERATURE_STATE_TOPIC = "clr_temp_stat_t"
CURRENT_TEMPERATURE_TOPIC = "curr_temp_t"
ACTION_TOPIC = "act_t"
AUX_COMMAND_TOPIC = "aux_cmd_t"
AUX_STATE_TOPIC = "aux_stat_t"
POWER_COMMAND_TOPIC = "pow_cmd_t"
FAN_MODE_COMMAND_TOPIC = "fan_mode_cmd_t"
FAN_MODE_STATE_TOPIC = "fan_mode_stat_t"
SWING_MODE_COMMAND_TOPIC = "swing_mode_cmd_t"
SWING_MODE_STATE_TOPIC = "swing_mode_stat_t"
MODE_COMMAND_TOPIC = "mode_cmd_t"
MODE_STATE_TOPIC = "mode_stat_t"
TEMPERATURE_COMMAND_TOPIC = "temp_cmd_t"
TEMPERATURE_STATE_TOPIC = "temp_stat_t"
RGB_COMMAND_TOPIC = "rgb_cmd_t"
RGB_STATE_TOPIC = "rgb_stat_t"

# misc
ONLINE = "online"
OFFLINE = "offline"
STATE_ON = "ON"
STATE_OFF = "OFF"
STATE_LOCKED = "LOCKED"
STATE_UNLOCKED = "UNLOCKED"
STATE_NONE = "None"
TRUE = "true"
FALSE = "false"
HOME = "home"
NOT_HOME = "not_home"
TRIGGER = "trigger"
MODE_BOX = "box"
MODE_SLIDER = "slider"

# covers
CLOSED_STATE = "closed"
CLOSING_STATE = "closing"
OPEN_STATE = "open"
OPENING_STATE = "opening"
STOPPED_STATE = "stopped"

# commands
OPEN_COMMAND = "OPEN"
CLOSE_COMMAND = "CLOSE"
STOP_COMMAND = "STOP"
LOCK_COMMAND = "LOCK"
UNLOCK_COMMAND = "UNLOCK"

# device tracker
GPS_TYPE = "gps"
ROUTER_TYPE = "router"
BLUETOOTH_TYPE = "bluetooth"
BLUETOOTH_LE_TYPE = "bluetooth_le"

# camera
ENCODING_BASE64 = "b64"

# trigger
BUTTON_SHORT_PRESS_TYPE = "button_short_press"
BUTTON_SHORT_RELEASE_TYPE = "button_short_release"
BUTTON_LONG_PRESS_TYPE = "button_long_press"
BUTTON_LONG_RELEASE_TYPE = "button_long_release"
BUTTON_DOUBLE_PRESS_TYPE = "button_double_press"
BUTTON_TRIPLE_PRESS_TYPE = "button_triple_press"
BUTTON_QUADRUPLE_PRESS_TYPE = "button_quadruple_press"
BUTTON_QUINTUPLE_PRESS_TYPE = "button_quintuple_press"
TURN_ON_SUBTYPE = "turn_on"
TURN_OFF_SUBTYPE = "turn_off"
BUTTON_1_SUBTYPE = "button_1"
BUTTON_2_SUBTYPE = "button_2"
BUTTON_3_SUBTYPE = "button_3"
BUTTON_4_SUBTYPE = "button_4"
BUTTON_5_SUBTYPE = "button_5"
BUTTON_6_SUBTYPE = "button_6"

# actions
ACTION_OFF = "off"
ACTION_HEATING = "heating"
ACTION_COOLING = "cooling"
ACTION_DRYING = "drying"
ACTION_IDLE = "idle"
ACTION_FAN = "fan"

# fan modes
FAN_MODE_AUTO = "auto"
FAN_MODE_LOW = "low"
FAN_MODE_MEDIUM = "medium"
FAN_MODE_HIGH = "high"

# swing modes
SWING_MODE_ON = "on"
SWING_MODE_OFF = "off"

# HVAC modes
MODE_AUTO = "auto"
MODE_OFF = "off"
MODE_COOL = "cool"
MODE_HEAT = "heat"
MODE_DRY = "dry"
MODE_FAN_ONLY = "fan_only"

# other
HEX_MAP = "0123456789abcdef"

# value templates
VALUE_TEMPLATE_FLOAT_P1 = "{{int(float(value)*10**1)}}"
VALUE_TEMPLATE_FLOAT_P2 = "{{int(float(value)*10**2)}}"
VALUE_TEMPLATE_FLOAT_P3 = "{{int(float(value)*10**3)}}"
TEMPERATURE_UNIT_C = "C"
TEMPERATURE_UNIT_F = "F"