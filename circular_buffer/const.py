"""Constants for the circular buffer."""

import logging
import os

logger = logging.getLogger(__name__)

EVICTION_LOG_INTERVAL_ENV = "CIRCULAR_BUFFER_EVICTION_LOG_INTERVAL"
FALLBACK_EVICTION_LOG_INTERVAL = 1000


def _positive_int_from_env(name: str, fallback: int) -> int:
    """Read a positive integer from the environment.

    Unset, non-integer and non-positive values fall back to ``fallback`` so a
    bad environment never breaks buffer construction.
    """
    raw_value = os.getenv(name)
    if raw_value is None:
        return fallback

    try:
        value = int(raw_value)
    except ValueError:
        value = 0

    if value <= 0:
        logger.warning(
            "Ignoring %s=%r, expected a positive integer; using %d",
            name,
            raw_value,
            fallback,
        )
        return fallback
    return value


# Log the first eviction and then every Nth one.
DEFAULT_EVICTION_LOG_INTERVAL = _positive_int_from_env(
    EVICTION_LOG_INTERVAL_ENV, FALLBACK_EVICTION_LOG_INTERVAL
)

CONFIG_ENCODING = "utf-8"
