import string
from enum import StrEnum


class Shortcode:
    """Shortcode generation parameters."""

    ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits  # [a-zA-Z0-9], 62 characters
    LENGTH = 6  # 62**6 ~ 5.68e10 possible shortcodes
    MAX_RETRIES = 10  # Extra attempts on collision before giving up


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        PROJECT_ROOT = 'PROJECT_ROOT'
        LOG_LEVEL = 'LOG_LEVEL'


# Fallback public base URL when neither config nor event provide one
DEFAULT_BASE_URL = 'http://localhost:8080'

# Path prefix under which short URLs are served
SHORT_URL_PATH_PREFIX = '/s/'

# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
