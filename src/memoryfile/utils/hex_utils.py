"""
Utility functions for rendering and searching buffer contents.
"""

from typing import Final, List, Optional, Tuple

BYTES_PER_LINE: Final[int] = 16
GROUP_SIZE: Final[int] = 8


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}x}"


def get_byte_range(data: bytes, start: int, length: int) -> Tuple[bytes, int]:
    """
    Get a range of bytes and the actual number of bytes returned.

    Args:
        data (bytes): Source bytes
        start (int): Starting offset
        length (int): Number of bytes to get

    Returns:
        Tuple[bytes, int]: The bytes and actual length returned
    """

    start = min(start, len(data))
    end = min(start + length, len(data))
    return bytes(data[start:end]), end - start


def find_pattern(data: bytes, pattern: bytes, start: int = 0) -> Optional[int]:
    """
    Find the next occurrence of a byte pattern.

    Args:
        data (bytes): Data to search in
        pattern (bytes): Pattern to search for
        start (int): Starting position for search

    Returns:
        int: Position of pattern or None if not found
    """

    try:
        return data.index(pattern, start)
    except ValueError:
        pass

    return None


def to_ascii(chunk: bytes) -> str:
    """Printable ASCII rendering of a chunk, with '.' for everything else."""

    return ''.join(chr(b) if 32 <= b <= 126 else '.' for b in chunk)


def hexdump_line(offset: int, chunk: bytes) -> str:
    """
    Render one line of a canonical hex dump.

    Args:
        offset (int): Offset of the first byte in the chunk
        chunk (bytes): Up to BYTES_PER_LINE bytes

    Returns:
        str: Offset, two groups of hex bytes and the ASCII column
    """

    first = ' '.join(f"{b:02x}" for b in chunk[:GROUP_SIZE])
    second = ' '.join(f"{b:02x}" for b in chunk[GROUP_SIZE:BYTES_PER_LINE])
    group_width = GROUP_SIZE * 3 - 1

    return (f"{format_offset(offset)}  {first:<{group_width}}  "
            f"{second:<{group_width}}  |{to_ascii(chunk)}|")


def hexdump(data: bytes) -> str:
    """
    Render data in the style of `hexdump -C`.

    The last line holds the total length, so empty data renders as an
    empty string.
    """

    if not data:
        return ""

    lines: List[str] = []
    for offset in range(0, len(data), BYTES_PER_LINE):
        chunk, _ = get_byte_range(data, offset, BYTES_PER_LINE)
        lines.append(hexdump_line(offset, chunk))

    lines.append(format_offset(len(data)))
    return '\n'.join(lines)
