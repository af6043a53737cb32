"""
Markup-specific data models

Type-safe structures for the directive expanders and their return values.
"""

from enum import Enum
from dataclasses import dataclass
from typing import List

from .color import Color


class StyleModifier(Enum):
    """
    Inline style modifiers preserved across gradient expansion

    Each value is the code letter shared by the source marker (&l) and the
    client escape (§l). Declaration order is the detection order.
    """
    BOLD = "l"
    ITALIC = "o"
    UNDERLINE = "n"
    OBFUSCATE = "k"     # a.k.a. "magic"

    def marker(self, alt_char: str = "&") -> str:
        """Source-text marker, e.g. '&l'"""
        return f"{alt_char}{self.value}"

    def escape(self, color_char: str = "§") -> str:
        """Client escape code, e.g. '§l'"""
        return f"{color_char}{self.value}"


@dataclass
class GradientDirective:
    """
    One matched <GRADIENT:RRGGBB>content</GRADIENT:RRGGBB> span

    Built from a regex match and consumed immediately to produce its
    replacement text.

    Attributes:
        start: Color of the first character
        end: Color of the last character
        content: Raw text between the tags, style markers included

    Example:
        For "<GRADIENT:FF0000>&lHi</GRADIENT:0000FF>":
        GradientDirective(
            start=Color(255, 0, 0),
            end=Color(0, 0, 255),
            content="&lHi"
        )
    """
    start: Color
    end: Color
    content: str


@dataclass
class HexDirective:
    """
    One matched &#RRGGBB occurrence

    Attributes:
        digits: The six hex digits, case as written in the source
        position: Character position of the '&' in the source
    """
    digits: str
    position: int


@dataclass
class ExtractedModifiers:
    """
    Result of detecting and stripping style markers from gradient content

    Attributes:
        modifiers: Detected modifiers, in detection order
        remaining: Content with every occurrence of every detected marker removed

    Example:
        Input: "&l&oHi&l"
        Result: ExtractedModifiers(
            modifiers=[StyleModifier.BOLD, StyleModifier.ITALIC],
            remaining="Hi"
        )
    """
    modifiers: List[StyleModifier]
    remaining: str
