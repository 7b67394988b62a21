"""Repository identifier parsing.

Accepted shapes:
- git@github.com:microhod/clone
- https://github.com/microhod/clone
- github.com/microhod/clone
- microhod/clone

Only slash and colon segmentation is performed. Whitespace, trailing
slashes and ``.git`` suffixes are kept as typed.
"""

from __future__ import annotations

import logging

from ..errors import ParseError
from ..models import SSH_SCHEME
from ..models import RepoDescriptor

logger = logging.getLogger(__name__)

SSH_USER = "git"
SCHEME_SEPARATOR = "://"


def parse_identifier(raw: str) -> RepoDescriptor:
    """Parse a repository identifier into a partial descriptor.

    Host and scheme may be empty on the result; see ``apply_defaults``.

    Args:
        raw: Identifier as typed by the user

    Returns:
        Descriptor with non-empty owner and name

    Raises:
        ParseError: If owner or name is empty

    Examples:
        >>> parse_identifier("git@github.com:microhod/clone").url
        'git@github.com:microhod/clone'

        >>> parse_identifier("microhod/clone").host
        ''
    """
    scheme = ""
    user = ""
    remainder = raw

    if raw.startswith(SSH_SCHEME):
        scheme = SSH_SCHEME
        user = SSH_USER
        # Only the host/path colon is normalised; later colons stay as typed
        remainder = raw[len(SSH_SCHEME) :].replace(":", "/", 1)
    else:
        prefix, separator, rest = raw.partition(SCHEME_SEPARATOR)
        if separator:
            scheme = f"{prefix}{SCHEME_SEPARATOR}"
            remainder = rest

    host = owner = name = ""
    parts = remainder.split("/")
    if len(parts) > 2:
        host, owner, name = parts[0], parts[1], parts[2]
    elif len(parts) > 1:
        owner, name = parts[0], parts[1]
    else:
        name = parts[0]

    if not owner or not name:
        raise ParseError(raw)

    logger.debug(f"Parsed '{raw}': scheme={scheme!r} host={host!r} owner={owner!r} name={name!r}")
    return RepoDescriptor(raw=raw, scheme=scheme, user=user, host=host, owner=owner, name=name)
