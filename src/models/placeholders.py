"""
Placeholder specification and context models

Defines the structure of registered placeholders and the minimal entity
reference used as resolution context.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List


@dataclass
class EntityRef:
    """
    Requesting entity a placeholder may be resolved against

    Any object can be passed as a context; this is the one the CLI builds.

    Attributes:
        name: Display name of the entity
        attributes: Free-form extra values
    """
    name: str
    attributes: Dict[str, str] = field(default_factory=dict)


@dataclass
class PlaceholderSpec:
    """
    Specification for a %placeholder% token

    Attributes:
        identifier: Token name without delimiters (e.g. "entity_name")
        handler: Value function (context) -> Any, stringified on output
        requires_context: Resolve to "" when no context is given
        description: Human-readable description
        examples: Example usage strings
    """
    identifier: str
    handler: Callable[[Any], Any]
    requires_context: bool = False
    description: str = ""
    examples: List[str] = field(default_factory=list)

    def value_get(self, context: Any = None) -> Any:
        """
        Evaluate the handler for a context

        Returns:
            The handler's value, or "" if the spec needs a context and
            none was supplied
        """
        if self.requires_context and context is None:
            return ""
        return self.handler(context)
