"""Static registry of project templates.

The registry is assembled once at import time and has no mutation API.
Keys keep their declaration order, which is also the display order and
decides the default template (the first key).
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from ..errors import TemplateNotFoundError
from .blueprints import BASIC, EXPRESS, TYPESCRIPT_BASIC, TYPESCRIPT_EXPRESS
from .templates import TemplateDescriptor


class TemplateRegistry:
    """Read-only mapping from template key to ``TemplateDescriptor``."""

    def __init__(self, templates: Mapping[str, TemplateDescriptor]) -> None:
        if not templates:
            raise ValueError("a template registry needs at least one template")
        self._templates: Mapping[str, TemplateDescriptor] = MappingProxyType(dict(templates))

    def lookup(self, key: str) -> TemplateDescriptor:
        """Return the descriptor registered under *key*.

        Raises:
            TemplateNotFoundError: If *key* is not registered.
        """
        try:
            return self._templates[key]
        except KeyError:
            raise TemplateNotFoundError(key, self.list_keys()) from None

    def list_keys(self) -> list[str]:
        """Return every template key in declaration order."""
        return list(self._templates)

    def items(self) -> list[tuple[str, TemplateDescriptor]]:
        return list(self._templates.items())

    @property
    def default_key(self) -> str:
        """The first declared key, used when no template is requested."""
        return next(iter(self._templates))

    def __contains__(self, key: object) -> bool:
        return key in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)


REGISTRY = TemplateRegistry(
    {
        "basic": BASIC,
        "express": EXPRESS,
        "typescript-basic": TYPESCRIPT_BASIC,
        "typescript-express": TYPESCRIPT_EXPRESS,
    }
)
