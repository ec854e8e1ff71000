"""Exception classes for the circular buffer."""


class CircularBufferError(Exception):
    """Base error for circular buffer operations."""


class BufferEmptyError(CircularBufferError):
    """Raised when reading from a buffer with no occupied slots."""


class BufferOverflowError(CircularBufferError):
    """Raised when writing to a buffer with no empty slots."""


class InvalidCapacityError(CircularBufferError, ValueError):
    """Raised when a buffer capacity is not a positive integer."""


class ConfigLoadError(CircularBufferError):
    """Raised when a buffer config file cannot be loaded."""


class ConfigValidationError(CircularBufferError):
    """Raised when a buffer config fails validation.

    ``errors`` keeps one ``"<field>: <message>"`` line per failed field.
    """

    def __init__(self, errors: list[str]) -> None:
        super().__init__("\n".join(errors))
        self.errors = errors
