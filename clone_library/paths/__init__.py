"""Path template engine.

Public Interface:
    - PathTemplate: Compiled template
    - TemplateRegistry: Language-keyed registry with fallback
    - resolve_path: Resolve a destination path for a descriptor
"""

from .registry import BUILTIN_TEMPLATE
from .registry import DEFAULT_KEY
from .registry import TemplateRegistry
from .registry import resolve_path
from .template import PathTemplate

__all__ = [
    "BUILTIN_TEMPLATE",
    "DEFAULT_KEY",
    "PathTemplate",
    "TemplateRegistry",
    "resolve_path",
]
