"""
Utility package for memory file support functions.
"""

from .hex_utils import (
    format_offset,
    get_byte_range,
    find_pattern,
    hexdump,
    hexdump_line
)
from .scan import parse_format, find_line_end, scan_number

__all__ = [
    'format_offset',
    'get_byte_range',
    'find_pattern',
    'hexdump',
    'hexdump_line',
    'parse_format',
    'find_line_end',
    'scan_number'
]
