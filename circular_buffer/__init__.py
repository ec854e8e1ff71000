from .config import RingBufferConfig, dump_config, load_config
from .exceptions import (
    BufferEmptyError,
    BufferOverflowError,
    CircularBufferError,
    ConfigLoadError,
    ConfigValidationError,
    InvalidCapacityError,
)
from .ring_buffer import RingBuffer

__version__ = "1.0.0"

__all__ = [
    "RingBuffer",
    "RingBufferConfig",
    "load_config",
    "dump_config",
    "CircularBufferError",
    "BufferEmptyError",
    "BufferOverflowError",
    "InvalidCapacityError",
    "ConfigLoadError",
    "ConfigValidationError",
]
