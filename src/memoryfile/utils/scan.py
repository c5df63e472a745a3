"""
Byte scanners used by memory file reads.
"""

import re
from typing import Final, Optional, Tuple, Union

from ..errors import InvalidArgumentError

LINE_TERMINATOR: Final[int] = ord('\n')
WHITESPACE: Final[bytes] = b' \t\n\v\f\r'

FORMAT_LINE: Final[str] = 'line'
FORMAT_NUMBER: Final[str] = 'number'
FORMAT_ALL: Final[str] = 'all'
FORMAT_COUNT: Final[str] = 'count'

FORMAT_LETTERS: Final[dict] = {
    'l': FORMAT_LINE,
    'n': FORMAT_NUMBER,
    'a': FORMAT_ALL,
}

NUMBER_PATTERN: Final[re.Pattern] = re.compile(
    rb'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?'
)

ReadSpec = Tuple[str, int]


def parse_format(spec: Union[int, str]) -> ReadSpec:
    """
    Turn a read specifier into a (kind, count) pair.

    Strings are matched on their first letter after an optional leading '*',
    so "*l", "l" and "line" all select line mode.

    Args:
        spec: A non-negative byte count or a format string

    Returns:
        ReadSpec: The format kind and, for FORMAT_COUNT, the byte count

    Raises:
        InvalidArgumentError: If the specifier is not a known format
    """

    if isinstance(spec, bool):
        raise InvalidArgumentError("invalid format")

    if isinstance(spec, int):
        if spec < 0:
            raise InvalidArgumentError("invalid format")
        return FORMAT_COUNT, spec

    if isinstance(spec, str):
        letters = spec[1:] if spec.startswith('*') else spec
        kind = FORMAT_LETTERS.get(letters[:1])
        if kind is not None:
            return kind, 0

    raise InvalidArgumentError("invalid format")


def find_line_end(data: bytearray, start: int) -> Tuple[int, int]:
    """
    Locate the end of the line beginning at start.

    Returns:
        Tuple[int, int]: End of the line content and the offset just past the
        terminator (equal when the line runs to the end of data)
    """

    end = data.find(LINE_TERMINATOR, start)
    if end < 0:
        return len(data), len(data)

    return end, end + 1


def skip_whitespace(data: bytearray, start: int) -> int:
    """Return the first offset at or after start that is not whitespace."""

    pos = start
    while pos < len(data) and data[pos] in WHITESPACE:
        pos += 1

    return pos


def scan_number(data: bytearray, start: int) -> Optional[Tuple[Union[int, float], int]]:
    """
    Parse the longest decimal literal at start, after skipping whitespace.

    Args:
        data: Buffer to scan
        start: Offset to begin at

    Returns:
        The parsed value and the offset just past the literal, or None if no
        literal is present
    """

    pos = skip_whitespace(data, start)
    match = NUMBER_PATTERN.match(data, pos)
    if not match:
        return None

    literal = match.group()
    if b'.' in literal or b'e' in literal or b'E' in literal:
        return float(literal), match.end()

    try:
        return int(literal), match.end()
    except ValueError:
        # too many digits for int conversion; parse as a double instead
        return float(literal), match.end()
