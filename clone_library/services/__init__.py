"""External collaborators: language lookup and git invocation."""

from .git import CloneResult
from .git import GitCloner
from .language import GitHubLanguageProvider
from .language import LanguageProvider
from .language import NullLanguageProvider

__all__ = [
    "CloneResult",
    "GitCloner",
    "GitHubLanguageProvider",
    "LanguageProvider",
    "NullLanguageProvider",
]
