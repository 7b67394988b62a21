"""Compiled path templates.

Templates use ``str.format`` named fields, e.g. ``~/src/{host}/{owner}/{name}``.
Only bare identifiers are accepted as field names; attribute access,
indexing, conversions and format specs are rejected at compile time.
``{{`` and ``}}`` produce literal braces.
"""

from __future__ import annotations

import string
from collections.abc import Mapping
from dataclasses import dataclass

from ..errors import TemplateCompileError
from ..errors import TemplateExecutionError

_FORMATTER = string.Formatter()


@dataclass(frozen=True)
class PathTemplate:
    """Immutable compiled path template.

    Attributes:
        text: Source template string
        segments: Pairs of (literal text, field name or None)
    """

    text: str
    segments: tuple[tuple[str, str | None], ...]

    @classmethod
    def compile(cls, text: str, language_key: str | None = None) -> PathTemplate:
        """Compile a template string.

        In contrast to ``str.format``, an empty string is not a valid template.

        Args:
            text: Template source
            language_key: Registry key, included in error messages

        Returns:
            Compiled template

        Raises:
            TemplateCompileError: If the template is empty or malformed
        """
        if not text:
            raise TemplateCompileError(text, "cannot create PathTemplate from an empty string", language_key)

        try:
            parsed = list(_FORMATTER.parse(text))
        except ValueError as e:
            raise TemplateCompileError(text, str(e), language_key) from e

        segments: list[tuple[str, str | None]] = []
        for literal, field, format_spec, conversion in parsed:
            if field is None:
                segments.append((literal, None))
                continue
            if not field.isidentifier():
                raise TemplateCompileError(text, f"invalid field name '{{{field}}}'", language_key)
            if conversion or format_spec:
                raise TemplateCompileError(text, f"conversions and format specs are not supported in '{{{field}}}'", language_key)
            segments.append((literal, field))

        return cls(text=text, segments=tuple(segments))

    @property
    def fields(self) -> frozenset[str]:
        """Field names referenced by this template."""
        return frozenset(field for _, field in self.segments if field is not None)

    def execute(self, values: Mapping[str, str], language_key: str = "") -> str:
        """Substitute field values into the template.

        Args:
            values: Field values by name
            language_key: Registry key, included in error messages

        Returns:
            Rendered string

        Raises:
            TemplateExecutionError: If a referenced field is not in ``values``
        """
        parts: list[str] = []
        for literal, field in self.segments:
            parts.append(literal)
            if field is None:
                continue
            try:
                parts.append(values[field])
            except KeyError:
                raise TemplateExecutionError(language_key, field) from None
        return "".join(parts)
