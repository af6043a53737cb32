"""
Color interpolation tests

Tests step computation, direction per channel, the single-step path and
endpoint exactness.
"""

import pytest

from huedown.lib.interpolate import gradientColors_compute
from huedown.models.color import Color


RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)
BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


class TestColorModel:
    """Test the Color value type"""

    def test_hex_parse_upper_and_lower(self):
        """Hex digits parse case-insensitively"""
        assert Color.hex_parse("FF8000") == Color(255, 128, 0)
        assert Color.hex_parse("ff8000") == Color(255, 128, 0)

    def test_hex_renders_lowercase(self):
        """hex property is six lowercase digits"""
        assert Color(255, 10, 0).hex == "ff0a00"

    def test_channel_out_of_range_rejected(self):
        """Channels outside 0-255 raise ValueError"""
        with pytest.raises(ValueError, match="out of range"):
            Color(256, 0, 0)
        with pytest.raises(ValueError, match="out of range"):
            Color(0, -1, 0)

    def test_hex_parse_wrong_length(self):
        """Anything other than six digits is rejected"""
        with pytest.raises(ValueError):
            Color.hex_parse("FFF")

    def test_color_is_immutable(self):
        """Colors are frozen"""
        color = Color(1, 2, 3)
        with pytest.raises(AttributeError):
            color.red = 5


class TestStepCounts:
    """Test the length of the produced sequence"""

    @pytest.mark.parametrize("steps", [1, 2, 3, 7, 40])
    def test_length_matches_steps(self, steps):
        """Sequence has exactly `steps` entries"""
        assert len(gradientColors_compute(RED, BLUE, steps)) == steps

    def test_zero_steps_is_empty(self):
        """No characters, no colors"""
        assert gradientColors_compute(RED, BLUE, 0) == []

    def test_single_step_is_start(self):
        """One step returns the start color without dividing by zero"""
        assert gradientColors_compute(RED, BLUE, 1) == [RED]


class TestEndpoints:
    """Test that both ends of the gradient are exact"""

    def test_two_steps_are_endpoints(self):
        """Two steps degenerate to exactly start and end"""
        assert gradientColors_compute(RED, BLUE, 2) == [RED, BLUE]

    @pytest.mark.parametrize("steps", [2, 3, 4, 6, 11, 100])
    def test_first_and_last_exact(self, steps):
        """First entry is start, last entry is end"""
        colors = gradientColors_compute(Color(12, 200, 99), Color(250, 3, 100), steps)
        assert colors[0] == Color(12, 200, 99)
        assert colors[-1] == Color(250, 3, 100)

    def test_last_pinned_when_division_truncates(self):
        """255 over 2 intervals truncates to 127 per step, last is still end"""
        colors = gradientColors_compute(BLACK, WHITE, 3)
        assert colors[1] == Color(127, 127, 127)
        assert colors[2] == WHITE


class TestInterpolation:
    """Test intermediate colors"""

    def test_red_to_blue_three_steps(self):
        """Channels move in opposite directions"""
        colors = gradientColors_compute(RED, BLUE, 3)
        assert colors == [RED, Color(128, 0, 127), BLUE]

    def test_even_division(self):
        """0 -> 200 over 5 steps moves 50 per step"""
        colors = gradientColors_compute(Color(0, 0, 0), Color(200, 0, 0), 5)
        assert [c.red for c in colors] == [0, 50, 100, 150, 200]

    def test_descending_channel(self):
        """200 -> 0 over 5 steps moves -50 per step"""
        colors = gradientColors_compute(Color(200, 0, 0), Color(0, 0, 0), 5)
        assert [c.red for c in colors] == [200, 150, 100, 50, 0]

    def test_equal_channel_stays_constant(self):
        """A channel with no magnitude never moves"""
        colors = gradientColors_compute(Color(10, 77, 0), Color(90, 77, 0), 9)
        assert all(c.green == 77 for c in colors)

    def test_more_steps_than_magnitude(self):
        """Delta truncates to zero; middle colors stay at start"""
        colors = gradientColors_compute(Color(0, 0, 0), Color(3, 0, 0), 10)
        assert [c.red for c in colors[:-1]] == [0] * 9
        assert colors[-1] == Color(3, 0, 0)

    def test_identical_endpoints(self):
        """Same start and end yields a flat gradient"""
        colors = gradientColors_compute(WHITE, WHITE, 4)
        assert colors == [WHITE] * 4
