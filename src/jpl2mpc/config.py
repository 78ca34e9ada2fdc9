"""Configuration: log level and Horizons batch URL from environment."""

import os

LOG_LEVEL_ENV = 'JPL2MPC_LOG'
DEFAULT_HORIZONS_BATCH_URL = 'https://ssd.jpl.nasa.gov/horizons_batch.cgi'


def get_log_level(default: str = 'WARNING') -> str:
    """Return log level name (JPL2MPC_LOG env var if valid, else default).

    Returns:
        One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
    """
    level = os.environ.get(LOG_LEVEL_ENV, '').strip().upper()
    if level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        return level
    return default


def get_horizons_batch_url() -> str:
    """Return Horizons batch interface URL (HORIZONS_BATCH_URL env var or default).

    Returns:
        URL string without query.
    """
    return os.environ.get('HORIZONS_BATCH_URL', DEFAULT_HORIZONS_BATCH_URL)
