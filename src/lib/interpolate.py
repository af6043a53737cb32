"""
Linear color interpolation for gradients

Computes one color per character position between a start and an end color.
Channels move independently in whole steps; the step size uses truncating
integer division, so the last position is pinned to the end color.
"""

from typing import List

from ..models.color import Color, CHANNEL_MIN, CHANNEL_MAX


def channel_clamp(value: int) -> int:
    return max(CHANNEL_MIN, min(CHANNEL_MAX, value))


def gradientColors_compute(start: Color, end: Color, steps: int) -> List[Color]:
    """
    Compute the color sequence of a gradient

    For each channel:
        magnitude = |start - end|
        delta     = magnitude // (steps - 1)
        direction = +1 if start < end else -1
        color[i]  = start + i * delta * direction   (clamped to 0..255)

    Args:
        start: Color of position 0
        end: Color of position steps - 1
        steps: Number of colors to produce

    Returns:
        List of exactly max(steps, 0) colors. A single step yields [start]
        without any division.

    Example:
        >>> gradientColors_compute(Color(255, 0, 0), Color(0, 0, 255), 3)
        [Color(red=255, green=0, blue=0), Color(red=128, green=0, blue=127),
         Color(red=0, green=0, blue=255)]
    """
    if steps <= 0:
        return []
    if steps == 1:
        return [start]

    deltas = []
    directions = []
    for a, b in zip(start.channels, end.channels):
        deltas.append(abs(a - b) // (steps - 1))
        directions.append(1 if a < b else -1)

    colors = []
    for i in range(steps - 1):
        channels = [
            channel_clamp(a + i * delta * direction)
            for a, delta, direction in zip(start.channels, deltas, directions)
        ]
        colors.append(Color(*channels))
    colors.append(end)

    return colors
