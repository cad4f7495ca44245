from typing import Optional


class EncodingError(ValueError):
    """Base class for every error raised while marshalling to a map."""


class InvalidInputError(EncodingError):
    pass


class UnsupportedTypeError(EncodingError, TypeError):
    def __init__(self, message: str, kind: Optional[str] = None):
        super().__init__(message)
        self.kind = kind


class ConversionError(EncodingError):
    """
    Raised when a single entry cannot be stringified.
    The original UnsupportedTypeError is available as __cause__.
    """

    def __init__(self, key: str, cause: Exception):
        super().__init__(f"failed to convert field {key}: {cause}")
        self.key = key
        self.cause = cause
