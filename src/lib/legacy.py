"""
Legacy color code translation

Maps alternate-prefix codes such as &c or &l onto the client's native
escape (§c, §l). Unknown codes are left untouched.
"""

import re
from typing import Optional


LEGACY_CODES = "0123456789AaBbCcDdEeFfKkLlMmNnOoRrXx"


def alternateCodes_translate(alt_char: str, text: str, color_char: Optional[str] = None) -> str:
    """
    Translate alternate color codes to native escapes

    Every alt_char immediately followed by a known code character becomes
    color_char plus the lowercased code.

    Args:
        alt_char: Prefix used in the source text (usually '&')
        text: Input string
        color_char: Native escape marker (default: appsettings.color_char)

    Returns:
        Translated string

    Example:
        >>> alternateCodes_translate('&', "&cRed &Lbold &zkept")
        '§cRed §lbold &zkept'
    """
    if color_char is None:
        from ..config import appsettings
        color_char = appsettings.color_char

    chars = list(text)
    for i in range(len(chars) - 1):
        if chars[i] == alt_char and chars[i + 1] in LEGACY_CODES:
            chars[i] = color_char
            chars[i + 1] = chars[i + 1].lower()

    return ''.join(chars)


def codes_strip(text: str, color_char: Optional[str] = None) -> str:
    """
    Remove native escapes (including the §x§R§R§G§G§B§B form) from text

    Example:
        >>> codes_strip("§x§f§f§0§0§0§0A§lB")
        'AB'
    """
    if color_char is None:
        from ..config import appsettings
        color_char = appsettings.color_char

    pattern = re.compile(re.escape(color_char) + r'[0-9A-FK-ORXa-fk-orx]')
    return pattern.sub('', text)
