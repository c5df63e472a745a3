"""
Core package for in-memory file handles.

This package implements the MemoryFile class, a file handle backed by a
private byte buffer with a cursor, and the HexdumpHighlighter used to render
buffer contents for a terminal.
"""

from .memory_file import EOF, MemoryFile, open
from .highlight import HexdumpHighlighter

__all__ = ['EOF', 'MemoryFile', 'open', 'HexdumpHighlighter']
