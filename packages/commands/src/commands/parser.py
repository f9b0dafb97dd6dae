"""
Command Line Parsing

Splits raw input into tokens. No quoting or escaping is supported:
tokens are separated by runs of whitespace.
"""

from typing import List, Optional

from .constants import COMMAND_PREFIX


def tokenize(line: str) -> List[str]:
    """
    Split a command line into tokens.

    Examples:
        'warp set  home' -> ['warp', 'set', 'home']
        '   ' -> []
    """
    return line.split()


def split_command_line(line: str, prefix: str = COMMAND_PREFIX) -> Optional[List[str]]:
    """
    Tokenize a chat line if it is a command.

    Returns None for ordinary chat (no prefix, or nothing after it) so the
    caller can pass the line on unchanged. A prefix in the middle of a
    sentence is never treated as a command.
    """
    stripped = line.strip()
    if not stripped.startswith(prefix):
        return None

    tokens = tokenize(stripped[len(prefix):])
    return tokens or None
