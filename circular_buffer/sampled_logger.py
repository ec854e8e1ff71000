"""Sampled logger for high-frequency log messages.

Provides utilities to reduce log spam by only logging at configurable intervals.
"""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


def make_sampled_logger(
    log_format: str,
    log_interval: int = 1000,
    target_logger: logging.Logger | None = None,
    level: int = logging.INFO,
) -> Callable[..., None]:
    """Create a sampled logger that logs the first and every Nth occurrence.

    Args:
        log_format: Format string for the log message. First placeholder receives
                    the occurrence count, remaining placeholders receive
                    format_args.
        log_interval: Log every Nth occurrence (default 1000)
        target_logger: Logger instance to use (default: module logger)
        level: Log level to use (default: INFO)

    Returns:
        A function: (count, *format_args) -> None
    """
    _logger = target_logger or logger

    def log_sampled(count: int, *format_args: object) -> None:
        if count == 1 or count % log_interval == 0:
            _logger.log(level, log_format, count, *format_args)

    return log_sampled
