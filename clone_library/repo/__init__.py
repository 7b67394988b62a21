"""Repository identifier handling.

Public Interface:
    - parse_identifier: Parse a raw identifier into a partial descriptor
    - apply_defaults: Fill host and scheme from configured defaults
    - parse_repository: Parse and apply defaults in one step
"""

from __future__ import annotations

from collections.abc import Mapping

from ..models import RepoDescriptor
from .defaults import apply_defaults
from .parser import parse_identifier


def parse_repository(raw: str, default_host: str, default_schemes: Mapping[str, str]) -> RepoDescriptor:
    """Parse an identifier and fill in its defaults.

    Raises:
        ParseError: If owner or name is empty

    Example:
        >>> repo = parse_repository("microhod/clone", "github.com", {"github.com": "git@"})
        >>> repo.url
        'git@github.com:microhod/clone'
    """
    return apply_defaults(parse_identifier(raw), default_host, default_schemes)


__all__ = [
    "apply_defaults",
    "parse_identifier",
    "parse_repository",
]
