"""Regex search over source lines with optional ANSI highlighting."""

import re

from .errors import InvalidPattern

HIGHLIGHT_START = "\033[1;31m"
HIGHLIGHT_END = "\033[0m"


def compile_pattern(pattern: str, ignore_case: bool = False) -> re.Pattern:
    flags = re.IGNORECASE if ignore_case else 0
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise InvalidPattern(pattern, str(e)) from e


def grep_lines(
    lines: list[str],
    pattern: str,
    ignore_case: bool = False,
    color: bool = False,
) -> tuple[set[int], dict[int, str]]:
    """Return matching line indices and, with color, highlighted copies."""
    regex = compile_pattern(pattern, ignore_case)

    found: set[int] = set()
    highlights: dict[int, str] = {}
    for i, line in enumerate(lines):
        if not regex.search(line):
            continue
        found.add(i)
        if color:
            highlights[i] = regex.sub(
                lambda m: f"{HIGHLIGHT_START}{m.group(0)}{HIGHLIGHT_END}", line
            )
    return found, highlights
