"""
Memory file module providing file-handle semantics over an in-memory byte buffer.
"""

import logging
import math
from typing import Any, Final, Iterator, List, Optional, Union

from ..errors import InvalidArgumentError, SeekOutOfRangeError
from ..utils.hex_utils import find_pattern, hexdump
from ..utils.scan import (
    FORMAT_COUNT,
    FORMAT_LINE,
    FORMAT_NUMBER,
    find_line_end,
    parse_format,
    scan_number
)
from .highlight import HexdumpHighlighter

logger = logging.getLogger(__name__)

EOF: Final[None] = None

DEFAULT_MODE: Final[str] = 'r'
APPEND_MODE: Final[str] = 'a'
VALID_MODES: Final[str] = 'rwa'
NUMBER_FORMAT: Final[str] = '%.14g'
WHENCE_VALUES: Final[tuple] = ('set', 'cur', 'end')

BYTES_TYPES: Final[tuple] = (bytes, bytearray, memoryview)

ReadResult = Union[bytes, int, float, None]


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _encode_value(value: Any) -> bytes:
    """Convert a write argument into the bytes it stands for."""

    if isinstance(value, BYTES_TYPES):
        return bytes(value)

    if _is_integer(value):
        try:
            return str(value).encode('ascii')
        except ValueError:
            # beyond the digit limit, and beyond the range of a double
            return (NUMBER_FORMAT % (math.inf if value > 0 else -math.inf)).encode('ascii')

    if isinstance(value, float):
        return (NUMBER_FORMAT % value).encode('ascii')

    raise InvalidArgumentError(
        f"write expects bytes or a number, got {type(value).__name__}"
    )


class MemoryFile:
    """
    A file handle whose contents live in a private, growable byte buffer.

    The handle keeps a cursor in [0, length]. Reads always honour the cursor.
    Writes go to the cursor in 'r'/'w' mode and to the end of the buffer in
    'a' mode, where the cursor is left where it was.
    """

    def __init__(self, initial_data: Optional[bytes] = None, mode: Optional[str] = None) -> None:
        if initial_data is not None and not isinstance(initial_data, BYTES_TYPES):
            raise InvalidArgumentError(
                f"initial data must be bytes, got {type(initial_data).__name__}"
            )

        if mode is not None and not isinstance(mode, str):
            raise InvalidArgumentError(f"mode must be a string, got {type(mode).__name__}")

        flag = (mode or DEFAULT_MODE)[:1]
        if flag not in VALID_MODES:
            flag = DEFAULT_MODE

        self._data = bytearray(initial_data or b'')
        self._pos = 0
        self._mode = flag
        self._highlighter: Optional[HexdumpHighlighter] = None

    @property
    def position(self) -> int:
        """Current cursor offset."""
        return self._pos

    @property
    def length(self) -> int:
        """Number of bytes held by the buffer."""
        return len(self._data)

    @property
    def mode(self) -> str:
        """The effective open mode: 'r', 'w' or 'a'."""
        return self._mode

    @property
    def append_mode(self) -> bool:
        """True if writes always go to the end of the buffer."""
        return self._mode == APPEND_MODE

    def read(self, *specs: Union[int, str]) -> List[ReadResult]:
        """
        Read values from the cursor according to a list of format specifiers.

        Args:
            specs: Byte counts or the formats "*l" (line), "*n" (number) and
                   "*a" (all). With no specifiers a single line is read.

        Returns:
            List[ReadResult]: One result per evaluated specifier. A specifier
            that hits the end of the buffer, or a number read that finds no
            number, yields EOF and ends the list.

        Raises:
            InvalidArgumentError: If any specifier is not a valid format
        """

        formats = [parse_format(spec) for spec in specs] or [parse_format('*l')]

        results: List[ReadResult] = []
        for kind, count in formats:
            if kind == FORMAT_COUNT:
                value = self._read_count(count)
            elif kind == FORMAT_LINE:
                value = self._read_line()
            elif kind == FORMAT_NUMBER:
                value = self._read_number()
            else:
                value = self._read_all()

            results.append(value)
            if value is EOF:
                break

        return results

    def _read_count(self, count: int) -> Optional[bytes]:
        if self._pos >= len(self._data):
            return EOF

        end = min(self._pos + count, len(self._data))
        chunk = bytes(self._data[self._pos:end])
        self._pos = end
        return chunk

    def _read_line(self) -> Optional[bytes]:
        if self._pos >= len(self._data):
            return EOF

        end, next_pos = find_line_end(self._data, self._pos)
        line = bytes(self._data[self._pos:end])
        self._pos = next_pos
        return line

    def _read_number(self) -> Optional[Union[int, float]]:
        scanned = scan_number(self._data, self._pos)
        if scanned is None:
            logger.debug("No number at offset %d", self._pos)
            return EOF

        value, self._pos = scanned
        return value

    def _read_all(self) -> bytes:
        chunk = bytes(self._data[self._pos:])
        self._pos = len(self._data)
        return chunk

    def write(self, *values: Union[bytes, int, float]) -> bool:
        """
        Write byte strings and numbers to the buffer.

        Numbers are written as decimal text. In append mode the bytes go to
        the end of the buffer and the cursor does not move.

        Raises:
            InvalidArgumentError: If a value is neither bytes nor a number.
            Nothing is written in that case.
        """

        payload = b''.join(_encode_value(value) for value in values)

        start = len(self._data) if self.append_mode else self._pos
        end = start + len(payload)
        self._data[start:end] = payload

        if not self.append_mode:
            self._pos = end

        return True

    def seek(self, whence: str = 'cur', offset: int = 0) -> int:
        """
        Move the cursor and return its new offset.

        Args:
            whence: 'set' (from the start), 'cur' (from the cursor) or
                    'end' (from the end of the buffer)
            offset: Signed distance from the origin

        Raises:
            InvalidArgumentError: For an unknown whence or a non-integer offset
            SeekOutOfRangeError: If the target is outside [0, length]. The
                                 cursor is left unchanged.
        """

        if whence not in WHENCE_VALUES:
            raise InvalidArgumentError(f"invalid whence {whence!r}")

        if not _is_integer(offset):
            raise InvalidArgumentError(f"seek offset must be an integer, got {type(offset).__name__}")

        if whence == 'set':
            target = offset
        elif whence == 'cur':
            target = self._pos + offset
        else:
            target = len(self._data) + offset

        if not 0 <= target <= len(self._data):
            logger.debug("Rejected seek to %d (length %d)", target, len(self._data))
            raise SeekOutOfRangeError(target, len(self._data))

        self._pos = target
        return self._pos

    def tell(self) -> int:
        """Return the cursor offset."""

        return self._pos

    def size(self, new_size: Optional[int] = None) -> int:
        """
        Get or change the length of the buffer.

        Args:
            new_size: If given, truncate or zero-extend the buffer to this
                      length and pull the cursor back inside it

        Returns:
            int: The length before any change
        """

        old_size = len(self._data)
        if new_size is None:
            return old_size

        if not _is_integer(new_size) or new_size < 0:
            raise InvalidArgumentError(f"size must be a non-negative integer, got {new_size!r}")

        if new_size == 0:
            self.close()
            return old_size

        if new_size < old_size:
            del self._data[new_size:]
        else:
            self._data.extend(bytes(new_size - old_size))

        self._pos = min(self._pos, new_size)
        logger.debug("Resized buffer from %d to %d bytes", old_size, new_size)

        return old_size

    def close(self) -> bool:
        """Discard the contents and release the storage. The handle stays usable."""

        self._data = bytearray()
        self._pos = 0
        logger.debug("Buffer reset")

        return True

    def flush(self) -> bool:
        """Nothing to flush; kept for file-handle compatibility."""

        return True

    def setvbuf(self, mode: Optional[str] = None, size: Optional[int] = None) -> bool:
        """Buffering has no meaning in memory; kept for file-handle compatibility."""

        return True

    def lines(self) -> Iterator[bytes]:
        """Yield successive lines from the cursor until the buffer is exhausted."""

        while True:
            line = self._read_line()
            if line is EOF:
                return
            yield line

    def to_bytes(self) -> bytes:
        """Return a copy of the whole buffer without moving the cursor."""

        return bytes(self._data)

    def find(self, pattern: bytes, start: Optional[int] = None) -> Optional[int]:
        """
        Find the next occurrence of a byte pattern without moving the cursor.

        Args:
            pattern: Bytes to look for
            start: Offset to search from, defaulting to the cursor

        Returns:
            The offset of the match or None
        """

        if not isinstance(pattern, BYTES_TYPES):
            raise InvalidArgumentError(f"pattern must be bytes, got {type(pattern).__name__}")

        if start is None:
            start = self._pos
        elif not _is_integer(start) or start < 0:
            raise InvalidArgumentError(f"find start must be a non-negative integer, got {start!r}")

        return find_pattern(self._data, bytes(pattern), start)

    def hexdump(self, highlight: bool = False) -> str:
        """Render the buffer as a canonical hex dump, optionally colorized."""

        dump = hexdump(self._data)
        if not highlight:
            return dump

        if self._highlighter is None:
            self._highlighter = HexdumpHighlighter()

        return self._highlighter.highlight(dump)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __iter__(self) -> Iterator[bytes]:
        return self.lines()

    def __enter__(self) -> 'MemoryFile':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<MemoryFile mode={self._mode!r} position={self._pos} length={len(self._data)}>"


def open(initial_data: Optional[bytes] = None, mode: Optional[str] = None) -> MemoryFile:
    """Open a memory file over a copy of initial_data."""

    return MemoryFile(initial_data, mode)
