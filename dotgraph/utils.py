import re
from typing import Iterable

from . import config as cfg

_SLASHED = re.compile("['\"\\\\\x00]")
_SPECIALS = re.compile("'|\"|\x00|\\\\(?![" + re.escape(cfg.ESCAPE_LETTERS) + "])")


def _slash(match: "re.Match") -> str:
    char = match.group(0)
    return "\\0" if char == "\x00" else "\\" + char


def addslashes(value: str) -> str:
    """Quote single quotes, double quotes, backslashes and NUL with a backslash."""
    return _SLASHED.sub(_slash, value)


def encode_specials(value: str) -> str:
    """Escape quotes and NUL but keep Graphviz escape sequences such as ``\\l`` intact.

    A backslash is only doubled when it does not already start one of the
    escString sequences (``\\N``, ``\\G``, ``\\l``, ...).
    """
    return _SPECIALS.sub(lambda m: "\\" + m.group(0), value)


def quote_id(name: str) -> str:
    return f'"{addslashes(name)}"'


def block(head: str, lines: Iterable[str]) -> str:
    """Format a statement followed by a bracketed list, one entry per line."""
    body = "\n".join(lines)
    return f"{head} [\n{body}\n]"
