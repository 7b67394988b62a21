"""Path resolution for clone storage locations.

This module provides the current user's home directory and the location of
the clone configuration directory.

Contract:
- Inputs: Environment variables (CLONE_HOME, HOME)
- Outputs: Resolved Path objects
- Side Effects: None
"""

import os
from pathlib import Path

from ..errors import HomeDirectoryError


def get_user_home() -> Path:
    """Get the home directory of the running user.

    Returns:
        Path to the user's home directory

    Raises:
        HomeDirectoryError: If the home directory cannot be determined
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeDirectoryError(f"could not get current user: {e}") from e


def get_config_dir() -> Path:
    """Get configuration directory.

    Returns:
        Path to config directory ($CLONE_HOME, default ~/.config/clone)
    """
    env_override: str | None = os.environ.get("CLONE_HOME")
    if env_override is not None:
        return Path(env_override).expanduser().resolve()

    return get_user_home() / ".config" / "clone"
