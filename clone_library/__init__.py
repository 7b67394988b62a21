"""Clone library layer.

Parses repository identifiers and resolves clone destinations from
language-keyed path templates.

Public Interface:
    Modules:
    - models: Repository descriptor
    - repo: Identifier parsing and default resolution
    - paths: Path template engine
    - config: Configuration loading
    - storage: Home and config directories
    - services: Language lookup and git invocation
"""

from .errors import CloneError
from .errors import HomeDirectoryError
from .errors import ParseError
from .errors import TemplateCompileError
from .errors import TemplateExecutionError
from .models import RepoDescriptor
from .paths import TemplateRegistry
from .paths import resolve_path
from .repo import parse_repository

__all__ = [
    "CloneError",
    "HomeDirectoryError",
    "ParseError",
    "RepoDescriptor",
    "TemplateCompileError",
    "TemplateExecutionError",
    "TemplateRegistry",
    "parse_repository",
    "resolve_path",
]
