"""
Models package for huedown

Contains data structures and type definitions for the decoration pipeline.
"""

from .state import ProgramState, pipeline
from .color import Color
from .markup import StyleModifier, GradientDirective, HexDirective, ExtractedModifiers
from .placeholders import PlaceholderSpec, EntityRef

__all__ = [
    "ProgramState",
    "pipeline",
    "Color",
    "StyleModifier",
    "GradientDirective",
    "HexDirective",
    "ExtractedModifiers",
    "PlaceholderSpec",
    "EntityRef",
]
