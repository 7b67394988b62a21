"""Configuration loading for clone.

This module handles loading configuration from a YAML (or JSON) file
and environment variables.

Contract:
- Inputs: Config file path, CLONE_CONFIG and CLONE_* environment variables
- Outputs: CloneSettings objects
- Side Effects: create_default_config writes the config file
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError
from pydantic_settings import SettingsError

from ..errors import HomeDirectoryError
from ..storage.paths import get_config_dir
from .settings import CloneSettings

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CLONE_CONFIG"

# camelCase keys from JSON configs, including the historical misspelling
_KEY_ALIASES = {
    "defaultHost": "default_host",
    "defaultSchemes": "default_schemes",
    "defaultProtocols": "default_schemes",
    "defaultProtocals": "default_schemes",
    "pathTemplates": "path_templates",
    "logLevel": "log_level",
    "githubApiUrl": "github_api_url",
    "languageLookupTimeout": "language_lookup_timeout",
}

DEFAULT_CONFIG = """# clone configuration
# Environment variables (CLONE_DEFAULT_HOST, CLONE_PATH_TEMPLATES, ...) override this file.

# Host used for identifiers without one, e.g. "microhod/clone"
default_host: "github.com"

# Scheme per host; "default" applies to every other host
default_schemes:
  github.com: "git@"
  default: "https://"

# Destination per main language; "default" applies to every other language
# Fields: {url} {scheme} {user} {host} {owner} {name}
# A leading ~ is replaced with your home directory
path_templates:
  go: "~/go/src/{host}/{owner}/{name}"
  default: "~/src/{host}/{owner}/{name}"

log_level: "WARNING"
"""


def get_config_path() -> Path:
    """Get path to config file.

    Returns:
        $CLONE_CONFIG if set, otherwise config.yaml in the config dir

    Example:
        >>> config_path = get_config_path()
        >>> assert config_path.suffix in (".yaml", ".yml", ".json") or "CLONE_CONFIG" in os.environ
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return get_config_dir() / "config.yaml"


def create_default_config(config_path: Path | None = None) -> Path:
    """Create default config file if it doesn't exist.

    Args:
        config_path: Optional config file path (default: get_config_path())

    Returns:
        Path of the config file
    """
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists():
        logger.debug(f"Config file already exists: {config_path}")
        return config_path

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    logger.info(f"Created default config: {config_path}")
    return config_path


def _normalize_keys(data: dict) -> dict:
    return {_KEY_ALIASES.get(key, key): value for key, value in data.items()}


def load_config(config_path: Path | None = None) -> CloneSettings:
    """Load clone configuration from file and environment.

    Environment variables take precedence over file settings. A missing or
    broken config source never prevents startup. Invalid CLONE_* variables
    are ignored in favour of the file, and an invalid file in favour of the
    built-in defaults, each with a logged warning.

    Args:
        config_path: Optional config file path (default: get_config_path())

    Returns:
        Validated settings

    Example:
        >>> settings = load_config()
        >>> assert isinstance(settings, CloneSettings)
    """
    if config_path is None:
        try:
            config_path = get_config_path()
        except HomeDirectoryError as e:
            logger.warning(f"Cannot locate config file: {e}")
            logger.info("Using default settings and environment variables")

    file_settings: dict = {}
    if config_path is not None and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise ValueError(f"expected a mapping, got {type(loaded).__name__}")
            file_settings = _normalize_keys(loaded)
            logger.debug(f"Loaded config from {config_path}")
        except (OSError, yaml.YAMLError, ValueError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            logger.info("Using default settings and environment variables")
    elif config_path is not None:
        logger.debug(f"No config file at {config_path}, using defaults")

    settings = _build_settings(file_settings, config_path)

    logger.debug(
        f"Configuration loaded: default_host={settings.default_host}, "
        f"templates={sorted(settings.path_templates)}"
    )
    return settings


def _build_settings(file_settings: dict, config_path: Path | None) -> CloneSettings:
    """Validate file values with env overrides, dropping whichever source is invalid.

    model_validate bypasses the environment, unlike CloneSettings(...).
    """
    # Only pass file values that don't have corresponding env vars
    filtered = {}
    for key, value in file_settings.items():
        env_key = f"CLONE_{key.upper()}"
        if env_key not in os.environ:
            filtered[key] = value

    try:
        return CloneSettings(**filtered)
    except (ValidationError, SettingsError) as e:
        logger.warning(f"Invalid configuration from CLONE_* environment or {config_path}: {e}")
        logger.info("Ignoring CLONE_* environment variables")

    try:
        return CloneSettings.model_validate(file_settings)
    except ValidationError as e:
        logger.warning(f"Invalid config values in {config_path}: {e}")
        logger.info("Using default settings")

    return CloneSettings.model_validate({})
