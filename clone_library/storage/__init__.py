"""Storage module for clone_library.

Public Interface:
    - get_user_home: Get the running user's home directory
    - get_config_dir: Get configuration directory
"""

from .paths import get_config_dir
from .paths import get_user_home

__all__ = [
    "get_user_home",
    "get_config_dir",
]
