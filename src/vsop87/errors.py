"""Exceptions raised while building a VSOP87 model."""

from pathlib import Path
from typing import Optional, Union


class Vsop87Error(Exception):
    """Base class for all vsop87 errors."""


class ConfigurationError(Vsop87Error, ValueError):
    """Invalid construction parameters, detected before any file is read."""


class CoefficientFileError(Vsop87Error, OSError):
    """A coefficient file is missing or cannot be read."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class FormatError(Vsop87Error, ValueError):
    """A coefficient file does not follow the fixed-width record layout.

    Attributes:
        path: File being parsed, when known
        line_number: 1-based number of the offending line
        reason: Human readable cause
    """

    def __init__(
        self, line_number: int, reason: str, path: Optional[Union[str, Path]] = None
    ):
        self.path = Path(path) if path is not None else None
        self.line_number = line_number
        self.reason = reason
        location = f"{self.path}, line {line_number}" if self.path else f"Line {line_number}"
        super().__init__(f"{location}: {reason}")


class CheckFileError(FormatError):
    """The reference check file is malformed."""
