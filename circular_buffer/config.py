"""Pydantic configuration model and YAML loader for ring buffers."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from circular_buffer.const import CONFIG_ENCODING, DEFAULT_EVICTION_LOG_INTERVAL
from circular_buffer.exceptions import ConfigLoadError, ConfigValidationError

logger = logging.getLogger(__name__)


class RingBufferConfig(BaseModel):
    """Configuration options for a ring buffer instance.

    Attributes:
        capacity: number of slots allocated at construction.
        eviction_log_interval: log the first eviction and then every Nth one.
    """

    model_config = ConfigDict(extra="forbid")

    capacity: StrictInt = Field(gt=0)
    eviction_log_interval: StrictInt = Field(
        default=DEFAULT_EVICTION_LOG_INTERVAL, gt=0, validate_default=True
    )


def _format_validation_errors(exc: ValidationError) -> list[str]:
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "config"
        errors.append(f"{location}: {error['msg']}")
    return errors


def load_config(path: Path | str) -> RingBufferConfig:
    """Load a ring buffer configuration from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        The validated configuration.

    Raises:
        ConfigLoadError: If the file is missing, is not valid YAML, or does not
            contain a mapping.
        ConfigValidationError: If the mapping does not describe a valid config.
    """
    config_path = Path(path)

    try:
        with config_path.open("r", encoding=CONFIG_ENCODING) as config_file:
            config_data = yaml.safe_load(config_file) or {}
    except FileNotFoundError as exc:
        raise ConfigLoadError(f"Config file {str(config_path)!r} not found.") from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(
            f"Config file {str(config_path)!r} is not valid YAML: {exc}"
        ) from exc

    if not isinstance(config_data, dict):
        raise ConfigLoadError(
            f"Config file {str(config_path)!r} must contain a mapping, "
            f"got {type(config_data).__name__}."
        )

    try:
        config = RingBufferConfig.model_validate(config_data)
    except ValidationError as exc:
        raise ConfigValidationError(_format_validation_errors(exc)) from exc

    logger.debug("Loaded ring buffer config from %s: %s", config_path, config)
    return config


def dump_config(config: RingBufferConfig, path: Path | str) -> None:
    """Write a ring buffer configuration to a YAML file."""
    with Path(path).open("w", encoding=CONFIG_ENCODING) as config_file:
        yaml.safe_dump(config.model_dump(), config_file)
