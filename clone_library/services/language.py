"""Main language lookup for repositories.

The main language selects which path template a repository is cloned into.
Only GitHub exposes a languages endpoint; every other host yields "".
"""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from ..errors import LanguageLookupError
from ..models import RepoDescriptor

logger = logging.getLogger(__name__)

GITHUB_HOST = "github.com"
GITHUB_API_URL = "https://api.github.com"


class LanguageProvider(Protocol):
    """Anything that can name the main language of a repository."""

    def main_language(self, descriptor: RepoDescriptor) -> str: ...


class NullLanguageProvider:
    """Provider that never knows the language, so the default template applies."""

    def main_language(self, descriptor: RepoDescriptor) -> str:
        return ""


class GitHubLanguageProvider:
    """Looks up the main language through the GitHub REST API."""

    def __init__(
        self,
        api_url: str = GITHUB_API_URL,
        timeout: float = 5.0,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize provider.

        Args:
            api_url: Base URL of the GitHub REST API
            timeout: Request timeout in seconds
            client: Optional preconfigured client (used by tests)
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    def main_language(self, descriptor: RepoDescriptor) -> str:
        """Get the lower-cased language with the most bytes of code.

        Args:
            descriptor: Repository with defaults applied

        Returns:
            Language key, or "" for non-GitHub hosts and repositories with no languages

        Raises:
            LanguageLookupError: If the API request or response decoding fails
        """
        if descriptor.host != GITHUB_HOST:
            logger.debug(f"No language lookup for host {descriptor.host}")
            return ""

        url = f"{self.api_url}/repos/{descriptor.owner}/{descriptor.name}/languages"
        languages = self._fetch(url)
        language = _largest(languages).lower()
        logger.debug(f"Main language for {descriptor.owner}/{descriptor.name}: {language or '<none>'}")
        return language

    def _fetch(self, url: str) -> dict[str, int]:
        try:
            if self._client is not None:
                response = self._client.get(url, timeout=self.timeout)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = client.get(url)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            raise LanguageLookupError(url, str(e)) from e
        except ValueError as e:
            raise LanguageLookupError(url, f"invalid JSON response: {e}") from e

        if not isinstance(data, dict):
            raise LanguageLookupError(url, f"unexpected response: {data!r}")
        return data


def _largest(languages: dict[str, int]) -> str:
    """Return the key with the largest positive count; first listed wins ties."""
    best = ""
    best_count = 0
    for language, count in languages.items():
        if isinstance(count, int) and count > best_count:
            best = language
            best_count = count
    return best
