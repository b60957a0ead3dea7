"""Domain-specific exceptions for command-line option parsing."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Why an option was rejected."""

    NOT_A_NUMBER = "not-a-number"
    NUMBER_OUT_OF_RANGE = "number-out-of-range"
    VALUE_OUT_OF_RANGE = "value-out-of-range"
    INVALID_FORMAT = "invalid-format"
    WRONG_TOKEN_COUNT = "wrong-token-count"
    MISSING_VALUE = "missing-value"
    UNKNOWN_TOKEN = "unknown-token"
    UNKNOWN_VALUE = "unknown-value"
    FILENAME_TOO_LONG = "filename-too-long"
    EMPTY_NOTE = "empty-note"
    USAGE = "usage"


class OptionError(ValueError):
    """Raised when user-provided options fail validation."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        option: Optional[str] = None,
        argument: Optional[str] = None,
    ):
        if option:
            message = f"option --{option}: {message}"
        super().__init__(message)
        self.kind = kind
        self.option = option
        self.argument = argument


class ParserExit(Exception):
    """Raised after help or version output has been printed."""

    def __init__(self, status: int = 0, message: Optional[str] = None):
        super().__init__(message or f"exit status {status}")
        self.status = status
