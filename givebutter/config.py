# =============================================================================
# givebutter/config.py  —  API location and credential lookup
# =============================================================================
#
# The API key is read from the environment every time a request is built.
# It is never stored at import time, so a process started without the key
# keeps running and each tool call reports the same, diagnosable error.
# =============================================================================

import logging
import os

from givebutter.errors import MissingCredentialError

API_BASE_URL = "https://api.givebutter.com/v1"
API_KEY_ENV = "GIVEBUTTER_API_KEY"
LOG_LEVEL_ENV = "GIVEBUTTER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def get_api_key() -> str:
    """Return the Givebutter API key from the environment.

    Raises:
        MissingCredentialError: if the variable is unset or blank.
    """
    api_key = os.environ.get(API_KEY_ENV, "").strip()
    if not api_key:
        raise MissingCredentialError(f"{API_KEY_ENV} environment variable is required")
    return api_key


def get_log_level() -> str:
    """Log level name from the environment; unknown names fall back to INFO."""
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    if level not in logging.getLevelNamesMapping():
        return DEFAULT_LOG_LEVEL
    return level
