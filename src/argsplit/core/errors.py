"""Exceptions and classification outcomes."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path


class Outcome(IntEnum):
    """Result of classifying a command line.

    The value is the exit status a caller is expected to use.
    """

    OK = 0
    USER = 1
    FATAL = 2


class ArgsplitError(Exception):
    """Base exception for argsplit errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UserError(ArgsplitError):
    """Caller-correctable misuse of the command line."""


class SeparatorError(UserError):
    """Raised when the separator follows a positional argument."""

    def __init__(self, separator: str, last_positional: str):
        super().__init__(
            f"Double dash ('{separator}') cannot be specified after the "
            f"positional argument ('{last_positional}')."
        )
        self.separator = separator
        self.last_positional = last_positional


class FatalError(ArgsplitError):
    """Unrecoverable failure while classifying."""


class AllocationError(FatalError):
    """Raised when storage for an array cannot be obtained."""

    def __init__(self, what: str = "array"):
        super().__init__(f"Unable to allocate memory for {what}.")
        self.what = what


class CapacityError(FatalError):
    """Raised when an array cannot hold another item."""

    def __init__(self, capacity: int):
        super().__init__(f"Array capacity exhausted ({capacity} items).")
        self.capacity = capacity


class ArrayReleasedError(ArgsplitError):
    """Raised when an array is used after release()."""

    def __init__(self):
        super().__init__("Array storage has already been released")


class ConfigError(ArgsplitError):
    """Raised when a configuration file is malformed."""

    def __init__(self, path: Path | str | None, message: str):
        full_message = "Invalid config"
        if path:
            full_message += f" in {path}"
        full_message += f": {message}"
        super().__init__(full_message)
        self.path = path
