"""
Error kinds raised by memory file handles.
"""

from typing import Optional


class MemoryFileError(Exception):
    """Base class for all memory file errors."""


class InvalidArgumentError(MemoryFileError, TypeError, ValueError):
    """Raised when an operation receives an argument of the wrong type or value."""


class SeekOutOfRangeError(MemoryFileError, ValueError):
    """Raised when a seek target falls outside the buffer."""

    def __init__(self, target: int, length: int, message: Optional[str] = None) -> None:
        self.target = target
        self.length = length
        super().__init__(message or f"seek target {target} outside [0, {length}]")
