"""
huedown - Text-first color markup resolver

Resolves gradient tags, hex colors, placeholders and legacy color codes
into client escape sequences.
"""

__version__ = "1.0.0"
__author__ = "Rudolph Pienaar"
__email__ = "rudolph.pienaar@gmail.com"

from .decorator import decorate
from .stringify import stringify, prefix_remove
from .placeholders import PlaceholderRegistry, PlaceholderError
from .log import LOG, state_connectToLogger

__all__ = [
    "decorate",
    "stringify",
    "prefix_remove",
    "PlaceholderRegistry",
    "PlaceholderError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
