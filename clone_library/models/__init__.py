"""Models for clone library."""

from .repositories import SSH_SCHEME
from .repositories import RepoDescriptor

__all__ = [
    "SSH_SCHEME",
    "RepoDescriptor",
]
