"""
Hex color expander

Rewrites fixed &#RRGGBB directives into the client's extended-color escape:
one marker + 'x' announcing an RGB color, then marker + digit for each of
the six hex digits.

Example:
    >>> hexCodes_translate("&#1A2B3C")
    '§x§1§A§2§B§3§C'
"""

import re
from typing import Optional

from ..models.markup import HexDirective
from .log import LOG
from .rewrite import pattern_rewrite


HEX_PATTERN = re.compile(r'&#([A-Fa-f0-9]{6})')


def hexDigits_escape(digits: str, color_char: Optional[str] = None) -> str:
    """
    Build the extended-color escape for six hex digits

    Args:
        digits: Six hex digits, emitted in order and case as given
        color_char: Escape marker (default: appsettings.color_char)

    Returns:
        14-character escape, e.g. '§x§f§f§0§0§0§0'
    """
    if color_char is None:
        from ..config import appsettings
        color_char = appsettings.color_char

    return color_char + 'x' + ''.join(color_char + digit for digit in digits)


def hexCodes_translate(text: str) -> str:
    """
    Replace every &#RRGGBB directive with its escape sequence

    Text outside matched spans passes through unchanged. Malformed
    directives (fewer than six hex digits) are left literal.

    Args:
        text: Input string

    Returns:
        String with hex directives expanded
    """
    from ..config import appsettings

    def directive_expand(match: re.Match) -> str:
        directive = HexDirective(digits=match.group(1), position=match.start())
        LOG(f"Hex directive #{directive.digits} at {directive.position}", level=3)
        return hexDigits_escape(directive.digits, appsettings.color_char)

    return pattern_rewrite(HEX_PATTERN, text, directive_expand)
