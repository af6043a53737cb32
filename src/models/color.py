"""
Color value model

An immutable RGB triple with 8-bit channels. Invalid channel values are
rejected here, so every later stage can trust its input.
"""

from dataclasses import dataclass
from typing import Tuple


CHANNEL_MIN = 0
CHANNEL_MAX = 255


@dataclass(frozen=True)
class Color:
    """
    RGB color with integer channels in 0..255

    Attributes:
        red: Red channel
        green: Green channel
        blue: Blue channel

    Example:
        >>> Color.hex_parse("FF8000")
        Color(red=255, green=128, blue=0)
        >>> Color(255, 128, 0).hex
        'ff8000'
    """
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name, value in zip(("red", "green", "blue"), self.channels):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Color channel '{name}' must be an int, got {value!r}")
            if not CHANNEL_MIN <= value <= CHANNEL_MAX:
                raise ValueError(
                    f"Color channel '{name}' out of range "
                    f"({CHANNEL_MIN}-{CHANNEL_MAX}): {value}"
                )

    @classmethod
    def hex_parse(cls, digits: str) -> "Color":
        """
        Build a Color from six hex digits (no leading '#', any case)

        Raises:
            ValueError: If digits is not exactly six hex characters
        """
        if len(digits) != 6:
            raise ValueError(f"Expected 6 hex digits, got '{digits}'")
        value = int(digits, 16)
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @property
    def channels(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    @property
    def hex(self) -> str:
        return f"{self.red:02x}{self.green:02x}{self.blue:02x}"
