"""
In-memory file handles with read, write, seek and size semantics over a byte buffer.
"""

from .core import EOF, MemoryFile, open
from .errors import InvalidArgumentError, MemoryFileError, SeekOutOfRangeError

__version__ = "0.1.0"

__all__ = [
    'EOF',
    'MemoryFile',
    'open',
    'MemoryFileError',
    'InvalidArgumentError',
    'SeekOutOfRangeError'
]
