"""Settings model for clone.

Contract:
- Inputs: Environment variables, YAML files
- Outputs: Validated settings objects
- Side Effects: None (read-only)
"""

from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


def _default_schemes() -> dict[str, str]:
    return {
        "github.com": "git@",
        "default": "https://",
    }


def _default_path_templates() -> dict[str, str]:
    return {
        "go": "~/go/src/{host}/{owner}/{name}",
        "default": "~/src/{host}/{owner}/{name}",
    }


class CloneSettings(BaseSettings):
    """Configuration for clone.

    Attributes:
        default_host: Host used when the identifier has none (default: github.com)
        default_schemes: Scheme per host, with a "default" entry for other hosts
        path_templates: Destination template per language, with a "default" entry
        log_level: Logging level (default: WARNING)
        github_api_url: Base URL of the GitHub REST API
        language_lookup_timeout: Seconds to wait for the language lookup

    Example:
        >>> settings = CloneSettings()
        >>> assert settings.default_host == "github.com"
        >>> assert settings.default_schemes["github.com"] == "git@"
    """

    model_config = SettingsConfigDict(
        env_prefix="CLONE_",
        case_sensitive=False,
        extra="ignore",
    )

    default_host: str = "github.com"
    default_schemes: dict[str, str] = Field(default_factory=_default_schemes)
    path_templates: dict[str, str] = Field(default_factory=_default_path_templates)
    log_level: str = "WARNING"

    github_api_url: str = "https://api.github.com"
    language_lookup_timeout: float = Field(default=5.0, gt=0)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level name so it matches the logging module."""
        return v.upper()
