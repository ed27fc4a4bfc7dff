"""Constants for the Gsmloc integration."""

from datetime import timedelta

DOMAIN = "gsmloc"

API_URL = "http://www.opencellid.org/cell/get"
API_TIMEOUT = 30

# Attribute paths into the OpenCelliD <rsp><cell .../></rsp> document
LATITUDE_PATH = "/rsp/cell/@lat"
LONGITUDE_PATH = "/rsp/cell/@lon"

# Gammu may block for tens of seconds when a configured phone is absent
MODEM_TIMEOUT = 60
MODEM_REPLIES = 3

CONF_DEVICE = "device"
CONF_CONNECTION = "connection"
CONF_CONFIG_FILE = "config_file"
CONF_PROFILE_INDEX = "profile_index"
CONF_BASE_URL = "base_url"
CONF_API_KEY = "api_key"
CONF_SCAN_INTERVAL = "scan_interval"

DEFAULT_CONNECTION = "at"
DEFAULT_PROFILE_INDEX = 0
DEFAULT_SCAN_INTERVAL = timedelta(minutes=10)

ERROR_NOT_AVAILABLE_MESSAGE = "cell data unavailable"

ATTR_MCC = "mcc"
ATTR_MNC = "mnc"
ATTR_LAC = "lac"
ATTR_CID = "cid"
ATTR_ACCURACY_LEVEL = "accuracy_level"
ATTR_TIMESTAMP = "timestamp"
