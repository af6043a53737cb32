"""
Custom Pygments lexer for huedown markup

Highlights the directives decorate() understands, so a message can be
previewed before it is resolved.

Token types:
- Name.Tag: Gradient open/close tags (<GRADIENT:FF0000>, </GRADIENT:0000FF>)
- Number.Hex: Hex color directives (&#1A2B3C)
- Keyword: Legacy color codes (&c, &4)
- Name.Decorator: Legacy style codes (&l, &o, &n, &k, &m, &r)
- Name.Variable: Placeholders (%entity_name%)
- Text: Everything else
"""

from pygments.lexer import RegexLexer, bygroups
from pygments.token import Text, Punctuation, Name, Keyword, Number


class HuedownLexer(RegexLexer):
    """
    Lexer for huedown markup

    Example:
        <GRADIENT:FF0000>&lHi</GRADIENT:0000FF> &#1A2B3C%entity_name%

    Tokens:
        <GRADIENT:FF0000> → Name.Tag
        &l → Name.Decorator
        Hi → Text
        </GRADIENT:0000FF> → Name.Tag
        &#1A2B3C → Number.Hex
        %entity_name% → Name.Variable
    """

    name = 'Huedown'
    aliases = ['huedown', 'hd']
    filenames = ['*.hd']

    tokens = {
        'root': [
            # Gradient tags
            (r'(</?)(GRADIENT)(:)([0-9A-Fa-f]{6})(>)',
             bygroups(Punctuation, Name.Tag, Punctuation, Number.Hex, Punctuation)),

            # Hex colors
            (r'&#[0-9A-Fa-f]{6}', Number.Hex),

            # Legacy color codes
            (r'&[0-9A-Fa-f]', Keyword),

            # Legacy style codes
            (r'&[K-Ok-oRr]', Name.Decorator),

            # Placeholders
            (r'%[A-Za-z0-9_]+%', Name.Variable),

            # Everything else is text
            (r'[^<&%]+', Text),
            (r'.', Text),
        ],
    }


def get_lexer() -> HuedownLexer:
    """
    Get the HuedownLexer instance

    Returns:
        HuedownLexer instance ready for use with Pygments
    """
    return HuedownLexer()
