"""
Position-based pattern rewriting shared by the directive expanders
"""

import re
from typing import Callable, List


def pattern_rewrite(pattern: re.Pattern, text: str, replacer: Callable[[re.Match], str]) -> str:
    """
    Rewrite every match of pattern in a single forward scan

    Unmatched spans are copied verbatim, each match is replaced by
    replacer(match), and the trailing tail is appended. Output is never
    re-scanned, so a replacement can't be matched again, and identical
    directive text at two positions is rewritten independently.

    Args:
        pattern: Compiled directive pattern
        text: Input string
        replacer: Function producing the replacement for one match

    Returns:
        Rewritten string (text itself if nothing matched)
    """
    parts: List[str] = []
    cursor = 0

    for match in pattern.finditer(text):
        parts.append(text[cursor:match.start()])
        parts.append(replacer(match))
        cursor = match.end()

    if cursor == 0:
        return text

    parts.append(text[cursor:])
    return ''.join(parts)
