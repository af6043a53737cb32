"""
Decoration pipeline

decorate() runs the markup stages in a fixed order, each consuming the full
string produced by the previous one:

    1. gradients      <GRADIENT:RRGGBB>..</GRADIENT:RRGGBB>  (only if the gate allows)
    2. placeholders   %identifier%
    3. hex colors     &#RRGGBB
    4. legacy codes   &c, &l, ...

Gradients go first so the colors they emit are plain hex escapes by the
time the later stages run; hex expansion goes before legacy translation so
the '&' of '&#' is still there to match.

Every stage is total: a malformed directive doesn't match its pattern and
stays in the output as literal text.
"""

from typing import Any, Callable, Optional

from .gradient import gradients_translate
from .hexcolor import hexCodes_translate
from .legacy import alternateCodes_translate
from .log import LOG
from .placeholders import registry_default


PlaceholderResolver = Callable[[str, Optional[Any]], str]
CapabilityGate = Callable[[], bool]
LegacyTranslator = Callable[[str, str], str]


def decorate(
    message: str,
    context: Any = None,
    *,
    resolver: Optional[PlaceholderResolver] = None,
    gate: Optional[CapabilityGate] = None,
    translator: Optional[LegacyTranslator] = None,
) -> str:
    """
    Resolve all markup in a message

    Args:
        message: Source text
        context: Optional requesting entity for placeholders
        resolver: Placeholder stage (default: the shared PlaceholderRegistry)
        gate: Gradient capability predicate (default: appsettings.gradients_supported)
        translator: Legacy code stage (default: alternateCodes_translate)

    Returns:
        Fully decorated text

    Example:
        >>> decorate("&#1A2B3C&lHi")
        '§x§1§A§2§B§3§C§lHi'
    """
    from ..config import appsettings

    resolver = resolver or registry_default()
    gate = gate or appsettings.gradients_supported
    translator = translator or alternateCodes_translate

    text = message

    if gate():
        text = gradients_translate(text)
        LOG("Gradient stage applied", level=3)
    else:
        LOG("Gradients unsupported by host, stage skipped", level=2)

    text = resolver(text, context)
    text = hexCodes_translate(text)
    text = translator(appsettings.alt_color_char, text)

    return text
