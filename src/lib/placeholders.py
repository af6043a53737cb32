"""
Placeholder registry and resolver

Maps %identifier% tokens to values, optionally computed for a requesting
entity. Used as the default placeholder stage of decorate().

Placeholder files are YAML mappings of identifier to static value:

    server_name: Lobby
    max_players: 64
    motd_colors: [red, gold]
"""

import re
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml

from ..models.placeholders import PlaceholderSpec
from .log import LOG
from .rewrite import pattern_rewrite
from .stringify import stringify


IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z0-9_]+$')


class PlaceholderError(Exception):
    """Raised when a placeholder definition or file is invalid"""
    pass


class PlaceholderRegistry:
    """
    Registry of placeholder specifications

    Maps identifiers to PlaceholderSpec objects and resolves tokens in text.
    """

    def __init__(self, delimiter: Optional[str] = None) -> None:
        """
        Initialize the registry and register the built-in placeholders

        Args:
            delimiter: Character around identifiers (default: appsettings.placeholder_delimiter)
        """
        if delimiter is None:
            from ..config import appsettings
            delimiter = appsettings.placeholder_delimiter

        self.delimiter = delimiter
        self.specs: Dict[str, PlaceholderSpec] = {}
        self.pattern = re.compile(
            re.escape(delimiter) + r'([A-Za-z0-9_]+)' + re.escape(delimiter)
        )
        self.entityPlaceholders_register()

    def register(self, spec: PlaceholderSpec) -> None:
        """
        Register a placeholder specification

        Raises:
            PlaceholderError: If the identifier can't appear in a token
        """
        if not IDENTIFIER_PATTERN.match(spec.identifier):
            raise PlaceholderError(f"Invalid placeholder identifier: '{spec.identifier}'")
        self.specs[spec.identifier] = spec

    def get(self, identifier: str) -> Optional[PlaceholderSpec]:
        """Get a placeholder specification by identifier"""
        return self.specs.get(identifier)

    def placeholders_list(self) -> list[PlaceholderSpec]:
        """All registered placeholders, sorted by identifier"""
        return [self.specs[key] for key in sorted(self.specs)]

    def static_register(self, identifier: str, value: Any, description: str = "") -> None:
        """Register a placeholder with a fixed value"""
        self.register(PlaceholderSpec(
            identifier=identifier,
            handler=lambda context: value,
            description=description or f"Static value of {identifier}",
            examples=[f"{self.delimiter}{identifier}{self.delimiter}"],
        ))

    def entityPlaceholders_register(self) -> None:
        """Register built-in placeholders that read the requesting entity"""

        def attribute_reader(attribute: str) -> Callable[[Any], Any]:
            """Factory for handlers reading one attribute of the context"""
            def handler(context: Any) -> Any:
                return getattr(context, attribute, "")
            return handler

        self.register(PlaceholderSpec(
            identifier='entity_name',
            handler=attribute_reader('name'),
            requires_context=True,
            description='Name of the requesting entity',
            examples=[f'Hello {self.delimiter}entity_name{self.delimiter}!'],
        ))

    def placeholders_translate(self, text: str, context: Any = None) -> str:
        """
        Resolve every registered token in text

        Tokens are replaced in a single forward scan; unknown tokens stay
        literal, and context-requiring tokens resolve to "" without a context.

        Args:
            text: Input string
            context: Optional requesting entity

        Returns:
            String with registered placeholders substituted

        Example:
            >>> from huedown.models import EntityRef
            >>> registry = PlaceholderRegistry()
            >>> registry.placeholders_translate("Hi %entity_name%", EntityRef("Steve"))
            'Hi Steve'
        """
        def token_resolve(match: re.Match) -> str:
            spec = self.specs.get(match.group(1))
            if spec is None:
                return match.group(0)
            value = stringify(spec.value_get(context))
            LOG(f"Placeholder {match.group(0)} -> '{value}'", level=3)
            return value

        return pattern_rewrite(self.pattern, text, token_resolve)

    def __call__(self, text: str, context: Any = None) -> str:
        return self.placeholders_translate(text, context)

    @classmethod
    def fromYaml_load(cls, path: Path, delimiter: Optional[str] = None) -> "PlaceholderRegistry":
        """
        Build a registry with the static placeholders of a YAML file

        Args:
            path: YAML file with a top-level mapping
            delimiter: Token delimiter (default: appsettings.placeholder_delimiter)

        Returns:
            PlaceholderRegistry with built-ins plus the file's entries

        Raises:
            PlaceholderError: If the file can't be read or isn't a mapping
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise PlaceholderError(f"Failed to parse {path}: {e}")
        except OSError as e:
            raise PlaceholderError(f"Failed to load {path}: {e}")

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise PlaceholderError(f"{path} must contain a mapping of identifier: value")

        registry = cls(delimiter)
        for identifier, value in data.items():
            registry.static_register(str(identifier), value)
        LOG(f"Loaded {len(data)} placeholders from {path}", level=2)

        return registry


_default_registry: Optional[PlaceholderRegistry] = None


def registry_default() -> PlaceholderRegistry:
    """Shared registry used by decorate() when no resolver is given"""
    global _default_registry
    if _default_registry is None:
        _default_registry = PlaceholderRegistry()
    return _default_registry
