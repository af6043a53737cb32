"""
Display formatting of arbitrary values

stringify() turns placeholder values (and anything else a caller wants to
show) into text. Values are first classified into a closed set of kinds and
then formatted by kind, so every kind has exactly one formatting rule.
"""

from collections.abc import Collection, Mapping
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """Kinds of values stringify() distinguishes"""
    NONE = "none"
    INTEGER = "integer"
    TEXT = "text"
    FLOAT = "float"
    COLLECTION = "collection"
    OTHER = "other"


def valueKind_classify(value: Any) -> ValueKind:
    """
    Classify a value for stringify()

    bool is an int subclass but displays as a word, so it falls under OTHER.
    Strings, bytes and mappings are collections too, but are not joined
    element-wise.
    """
    if value is None:
        return ValueKind.NONE
    if isinstance(value, bool):
        return ValueKind.OTHER
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, Collection) and not isinstance(value, (bytes, bytearray, Mapping)):
        return ValueKind.COLLECTION
    return ValueKind.OTHER


def number_format(value: float) -> str:
    """
    Format a float with two decimals, dropping a trailing '.00'

    Example:
        >>> number_format(3.14159)
        '3.14'
        >>> number_format(2.0)
        '2'
    """
    formatted = f"{value:.2f}"
    if formatted.endswith(".00"):
        formatted = formatted[:-3]
    if formatted == "-0":
        formatted = "0"
    return formatted


def stringify(value: Any) -> str:
    """
    Convert a value to display text

    Args:
        value: Anything

    Returns:
        - None: "null"
        - int: plain decimal
        - str: the string itself
        - float: number_format()
        - collections: elements stringified recursively, joined with ", "
        - anything else: str(value)

    Example:
        >>> stringify([1, 2.5, ["a", None]])
        '1, 2.50, a, null'
    """
    match valueKind_classify(value):
        case ValueKind.NONE:
            return "null"
        case ValueKind.INTEGER:
            return str(int(value))
        case ValueKind.TEXT:
            return value
        case ValueKind.FLOAT:
            return number_format(value)
        case ValueKind.COLLECTION:
            return ", ".join(stringify(element) for element in value)
        case ValueKind.OTHER:
            return str(value)


def prefix_remove(text: str, prefix: str) -> str:
    """Remove prefix from the start of text, if present"""
    if prefix and text.startswith(prefix):
        return text[len(prefix):]
    return text
