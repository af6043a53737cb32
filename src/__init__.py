"""
huedown - Text-first color markup resolver

Turns gradient tags, hex colors, placeholders and legacy & codes into
client color escape sequences.
"""

__version__ = "1.0.0"
__author__ = "Rudolph Pienaar"
__email__ = "rudolph.pienaar@gmail.com"

from .lib import (
    decorate,
    stringify,
    prefix_remove,
    PlaceholderRegistry,
    PlaceholderError,
    LOG,
    state_connectToLogger,
)

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
