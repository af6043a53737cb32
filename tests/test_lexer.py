"""
Markup lexer tests
"""

from pygments.token import Keyword, Name, Number, Punctuation, Text

from huedown.lib.lexer import HuedownLexer, get_lexer


def tokens(source: str):
    """Non-whitespace tokens produced for source"""
    return [
        (token, value)
        for token, value in get_lexer().get_tokens(source)
        if value.strip()
    ]


class TestLexer:
    """Test token classification"""

    def test_gradient_tags(self):
        """Open and close tags are tagged, colors are hex numbers"""
        result = tokens("<GRADIENT:FF0000>Hi</GRADIENT:0000FF>")
        assert (Name.Tag, "GRADIENT") in result
        assert (Number.Hex, "FF0000") in result
        assert (Number.Hex, "0000FF") in result
        assert (Punctuation, "</") in result
        assert (Text, "Hi") in result

    def test_hex_color(self):
        assert tokens("&#1A2B3C") == [(Number.Hex, "&#1A2B3C")]

    def test_legacy_color_code(self):
        assert tokens("&c") == [(Keyword, "&c")]

    def test_style_code(self):
        assert tokens("&l") == [(Name.Decorator, "&l")]

    def test_placeholder(self):
        assert tokens("%entity_name%") == [(Name.Variable, "%entity_name%")]

    def test_lone_specials_are_text(self):
        """Stray <, & and % are plain text"""
        assert all(token is Text for token, _ in tokens("a < b & c 5%"))

    def test_lexer_metadata(self):
        assert "huedown" in HuedownLexer.aliases
