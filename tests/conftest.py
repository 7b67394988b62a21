"""Shared pytest fixtures for clone test suite.

Provides fixtures for:
- Isolated home and config directories
- Sample repository descriptors
"""

from pathlib import Path

import pytest

from clone_library.models import RepoDescriptor

_CLONE_ENV_VARS = [
    "CLONE_CONFIG",
    "CLONE_HOME",
    "CLONE_DEFAULT_HOST",
    "CLONE_DEFAULT_SCHEMES",
    "CLONE_PATH_TEMPLATES",
    "CLONE_LOG_LEVEL",
    "CLONE_GITHUB_API_URL",
    "CLONE_LANGUAGE_LOOKUP_TIMEOUT",
]


@pytest.fixture(autouse=True)
def clean_clone_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove CLONE_* variables so the developer's environment can't leak into tests."""
    for name in _CLONE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temporary directory.

    Path.home() reads HOME on POSIX, so resolved "~" paths land here.

    Example:
        >>> def test_home(fake_home):
        ...     assert Path.home() == fake_home
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def mock_config_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point CLONE_HOME at a temporary config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("CLONE_HOME", str(config_dir))
    return config_dir


@pytest.fixture
def github_repo() -> RepoDescriptor:
    """Descriptor for git@github.com:microhod/clone with defaults applied."""
    return RepoDescriptor(
        raw="microhod/clone",
        scheme="git@",
        user="git",
        host="github.com",
        owner="microhod",
        name="clone",
    )


@pytest.fixture
def full_repo() -> RepoDescriptor:
    """Descriptor with a distinct value in every template field."""
    return RepoDescriptor(
        raw="scheme://host/owner/repo",
        scheme="scheme://",
        user="user",
        host="host",
        owner="owner",
        name="repo",
    )
