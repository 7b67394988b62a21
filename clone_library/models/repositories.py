"""Repository descriptor model.

A descriptor is the structured result of parsing a repository identifier
such as ``git@github.com:microhod/clone`` or ``microhod/clone``.
"""

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import computed_field

SSH_SCHEME = "git@"
"""SSH shorthand marker. Descriptors with this scheme use ``host:owner/name`` URLs."""


class RepoDescriptor(BaseModel):
    """Parsed repository identifier.

    Instances are immutable. Filling in defaults produces a new descriptor,
    so ``url`` can never drift from the fields it is derived from.

    Attributes:
        raw: Original input string, kept for error messages
        scheme: Protocol marker ("git@", "<word>://" or "")
        user: SSH user ("git" for SSH shorthand, otherwise "")
        host: Host segment (e.g., "github.com"), empty until defaults are applied
        owner: Owner segment (e.g., "microhod")
        name: Repository name segment (e.g., "clone")

    Example:
        >>> repo = RepoDescriptor(raw="x", scheme="git@", host="github.com", owner="microhod", name="clone")
        >>> repo.url
        'git@github.com:microhod/clone'
    """

    model_config = ConfigDict(frozen=True)

    raw: str = ""
    scheme: str = ""
    user: str = ""
    host: str = ""
    owner: str = ""
    name: str = ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        """Canonical clone URL derived from scheme, host, owner and name."""
        if self.scheme == SSH_SCHEME:
            return f"{self.scheme}{self.host}:{self.owner}/{self.name}"
        return f"{self.scheme}{self.host}/{self.owner}/{self.name}"

    def template_fields(self) -> dict[str, str]:
        """Fields addressable by name from path templates."""
        return {
            "url": self.url,
            "scheme": self.scheme,
            "user": self.user,
            "host": self.host,
            "owner": self.owner,
            "name": self.name,
        }
