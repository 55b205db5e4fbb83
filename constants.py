"""Application-wide constants.

Marketplace rules that operators may tune (receiver phone pattern, timezone,
numeric coercion) live in config.Settings.
"""

# Load statuses
LOAD_AVAILABLE = "available"
LOAD_IN_PROGRESS = "in_progress"
LOAD_COMPLETED = "completed"

# Statuses counted as active on dashboards
ACTIVE_STATUSES = [LOAD_AVAILABLE, LOAD_IN_PROGRESS]

# Load defaults
DEFAULT_BODY_TYPE = "flatbed"
DEFAULT_LOAD_TYPE = "general"

# Geography
EARTH_RADIUS_KM = 6371

# Known cities: key -> (display name, latitude, longitude)
SAUDI_CITIES = {
    "riyadh": ("Riyadh", 24.7136, 46.6753),
    "jeddah": ("Jeddah", 21.5433, 39.1728),
    "mecca": ("Mecca", 21.3891, 39.8579),
    "medina": ("Medina", 24.5247, 39.5692),
    "dammam": ("Dammam", 26.4207, 50.0888),
    "khobar": ("Khobar", 26.2172, 50.1971),
    "tabuk": ("Tabuk", 28.3835, 36.5662),
    "hail": ("Hail", 27.5114, 41.7208),
    "abha": ("Abha", 18.2164, 42.5053),
    "jizan": ("Jizan", 16.8894, 42.5706),
    "najran": ("Najran", 17.4917, 44.1322),
    "buraidah": ("Buraidah", 26.3260, 43.9750),
    "taif": ("Taif", 21.4418, 40.5078),
    "jubail": ("Jubail", 27.0000, 49.6111),
    "yanbu": ("Yanbu", 24.0232, 38.1900),
    "arar": ("Arar", 30.9833, 41.0167),
    "sakaka": ("Sakaka", 29.9697, 40.2064),
    "al_bahah": ("Al Bahah", 20.0129, 41.4677),
}

# Validation limits
MAX_CITY_NAME_LENGTH = 100
MAX_NAME_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 1000
MAX_BID_MESSAGE_LENGTH = 500
MAX_PLATE_NUMBER_LENGTH = 20
MIN_TRUCK_MODEL_YEAR = 1950

# Date formats
DATE_FORMAT_ISO = "%Y-%m-%d"
DATETIME_FORMAT_DISPLAY = "%Y-%m-%d %H:%M"
