"""
Hex dump highlighting for memory file contents using Pygments.
"""

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers.hexdump import HexdumpLexer


class HexdumpHighlighter:
    """Colorizes canonical hex dumps for terminal output."""

    def __init__(self, bg: str = 'dark') -> None:
        self.lexer = HexdumpLexer()
        self.formatter = TerminalFormatter(bg=bg)

    def highlight(self, dump: str) -> str:
        """
        Colorize a whole hex dump with ANSI escape sequences.

        Args:
            dump: Text produced by hex_utils.hexdump

        Returns:
            The colorized dump, without a trailing newline
        """

        if not dump:
            return ""

        return highlight(dump, self.lexer, self.formatter).rstrip('\n')
