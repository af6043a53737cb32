"""
Gradient expander

Turns <GRADIENT:RRGGBB>text</GRADIENT:RRGGBB> spans into per-character
color escapes interpolated between the two tag colors.

Style markers (&l, &o, &n, &k) inside a span would be split apart by the
per-character colors, so they are lifted out of the text first and their
escapes re-emitted after every character's color.

Example:
    >>> gradients_translate("<GRADIENT:FF0000>AB</GRADIENT:0000FF>")
    '§x§f§f§0§0§0§0A§x§0§0§0§0§f§fB'

The open and close colors are independent; the tags don't have to match.
Spans are processed left to right, nesting is not supported, and a tag
without its partner on the same line is passed through verbatim.
"""

import re
from typing import List, Optional

from ..models.color import Color
from ..models.markup import ExtractedModifiers, GradientDirective, StyleModifier
from .hexcolor import hexDigits_escape
from .interpolate import gradientColors_compute
from .log import LOG
from .rewrite import pattern_rewrite


GRADIENT_PATTERN = re.compile(
    r'<GRADIENT:([0-9A-Fa-f]{6})>(.*?)</GRADIENT:([0-9A-Fa-f]{6})>'
)


def modifiers_extract(content: str, alt_char: str = "&") -> ExtractedModifiers:
    """
    Detect style markers in content and strip all of their occurrences

    Detection and stripping use the same literal markers, so a marker is
    either both recorded and removed or left alone.

    Args:
        content: Raw gradient content
        alt_char: Prefix character of the markers

    Returns:
        ExtractedModifiers with modifiers in detection order
        (bold, italic, underline, obfuscate) and the cleaned text

    Example:
        Input: "&nHe&nllo"
        Output: ExtractedModifiers(modifiers=[StyleModifier.UNDERLINE], remaining="Hello")
    """
    modifiers: List[StyleModifier] = [
        modifier for modifier in StyleModifier if modifier.marker(alt_char) in content
    ]

    remaining = content
    for modifier in modifiers:
        remaining = remaining.replace(modifier.marker(alt_char), '')

    return ExtractedModifiers(modifiers=modifiers, remaining=remaining)


def gradient_render(
    directive: GradientDirective,
    color_char: Optional[str] = None,
    alt_char: Optional[str] = None,
) -> str:
    """
    Render one gradient directive to its replacement text

    For each character of the cleaned content emits the character's color
    escape, then the escape of every detected modifier, then the character.

    Args:
        directive: Parsed gradient span
        color_char: Escape marker (default: appsettings.color_char)
        alt_char: Source marker prefix (default: appsettings.alt_color_char)

    Returns:
        Replacement text; empty if the content held only style markers
    """
    from ..config import appsettings

    color_char = color_char or appsettings.color_char
    alt_char = alt_char or appsettings.alt_color_char

    extracted = modifiers_extract(directive.content, alt_char)
    text = extracted.remaining
    colors = gradientColors_compute(directive.start, directive.end, len(text))
    modifier_escapes = ''.join(modifier.escape(color_char) for modifier in extracted.modifiers)

    return ''.join(
        hexDigits_escape(color.hex, color_char) + modifier_escapes + char
        for color, char in zip(colors, text)
    )


def gradients_translate(text: str) -> str:
    """
    Expand every gradient directive in text

    Matches are rewritten by position in one forward scan; text outside
    directive spans is copied unchanged.

    Args:
        text: Input string

    Returns:
        String with gradient directives replaced by colorized text
    """
    def directive_expand(match: re.Match) -> str:
        directive = GradientDirective(
            start=Color.hex_parse(match.group(1)),
            end=Color.hex_parse(match.group(3)),
            content=match.group(2),
        )
        LOG(
            f"Gradient #{directive.start.hex} -> #{directive.end.hex} "
            f"over {len(directive.content)} chars at {match.start()}",
            level=3,
        )
        return gradient_render(directive)

    return pattern_rewrite(GRADIENT_PATTERN, text, directive_expand)
