"""Language-keyed path template registry.

The registry is compiled once from configuration and never mutated
afterwards, so a single instance may be shared across threads.

Contract:
- Inputs: Mapping of language key to template string, repository descriptors
- Outputs: Destination path strings
- Side Effects: Reads the current user's home directory for a leading "~"
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from ..models import RepoDescriptor
from ..storage.paths import get_user_home
from .template import PathTemplate

logger = logging.getLogger(__name__)

DEFAULT_KEY = "default"
BUILTIN_TEMPLATE = PathTemplate.compile("~/src/{host}/{owner}/{name}")


class TemplateRegistry:
    """Immutable set of compiled path templates keyed by lower-cased language."""

    __slots__ = ("_templates",)

    def __init__(self, templates: Mapping[str, PathTemplate]) -> None:
        self._templates: Mapping[str, PathTemplate] = MappingProxyType(
            {key.lower(): template for key, template in templates.items()}
        )

    @classmethod
    def build(cls, templates: Mapping[str, str]) -> TemplateRegistry:
        """Compile every template string into a registry.

        Args:
            templates: Template strings by language key (any case)

        Returns:
            Registry with lower-cased keys

        Raises:
            TemplateCompileError: On the first template that fails to compile
        """
        compiled: dict[str, PathTemplate] = {}
        for key, text in templates.items():
            lowered = key.lower()
            if lowered in compiled:
                logger.warning(f"Path template key '{key}' duplicates '{lowered}', later entry wins")
            compiled[lowered] = PathTemplate.compile(text, language_key=key)

        logger.debug(f"Compiled {len(compiled)} path templates: {sorted(compiled)}")
        return cls(compiled)

    @property
    def templates(self) -> Mapping[str, PathTemplate]:
        """Read-only view of compiled templates."""
        return self._templates

    def lookup(self, language_key: str | None) -> PathTemplate:
        """Select the template for a language.

        Falls back to the "default" entry, then to the built-in template.
        """
        if language_key:
            template = self._templates.get(language_key.lower())
            if template is not None:
                return template
        template = self._templates.get(DEFAULT_KEY)
        if template is not None:
            return template
        return BUILTIN_TEMPLATE

    def resolve(self, language_key: str | None, descriptor: RepoDescriptor) -> str:
        """Compute the destination path for a repository.

        A single leading "~" is replaced with the user's home directory;
        any other "~" is left as literal text.

        Args:
            language_key: Main language of the repository (may be empty)
            descriptor: Repository descriptor with defaults applied

        Returns:
            Destination path

        Raises:
            TemplateExecutionError: If the template references an unknown field
            HomeDirectoryError: If the path starts with "~" and home is unknown
        """
        template = self.lookup(language_key)
        path = template.execute(descriptor.template_fields(), language_key=language_key or "")

        if path.startswith("~"):
            path = str(get_user_home()) + path[1:]

        logger.debug(f"Resolved path for {descriptor.url} (language '{language_key}'): {path}")
        return path


def resolve_path(language_key: str | None, descriptor: RepoDescriptor, registry: TemplateRegistry) -> str:
    """Resolve a destination path using ``registry``.

    See ``TemplateRegistry.resolve``.
    """
    return registry.resolve(language_key, descriptor)
