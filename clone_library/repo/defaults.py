"""Default host and scheme resolution for parsed descriptors."""

from __future__ import annotations

from collections.abc import Mapping

from ..models import SSH_SCHEME
from ..models import RepoDescriptor
from .parser import SSH_USER

FALLBACK_SCHEME = "https://"
DEFAULT_SCHEME_KEY = "default"


def apply_defaults(
    descriptor: RepoDescriptor,
    default_host: str,
    default_schemes: Mapping[str, str],
) -> RepoDescriptor:
    """Fill empty host and scheme from configured defaults.

    Values already present on the descriptor are never overwritten, so
    applying defaults twice is a no-op.

    Scheme precedence (first non-empty wins):
    1. scheme parsed from the identifier
    2. ``default_schemes[host]``
    3. ``default_schemes["default"]``
    4. ``"https://"``

    Args:
        descriptor: Parsed descriptor (owner and name set)
        default_host: Host used when the identifier carried none
        default_schemes: Scheme per host, plus an optional "default" entry

    Returns:
        New descriptor with host and scheme populated
    """
    host = descriptor.host or default_host
    scheme = (
        descriptor.scheme
        or default_schemes.get(host)
        or default_schemes.get(DEFAULT_SCHEME_KEY)
        or FALLBACK_SCHEME
    )
    user = descriptor.user
    if not user and scheme == SSH_SCHEME:
        user = SSH_USER

    return descriptor.model_copy(update={"host": host, "scheme": scheme, "user": user})
