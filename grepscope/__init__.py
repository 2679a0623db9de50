"""Structure-aware grep context for source files."""

from .models import ContextOptions
from .tree import (
    GrepScopeError,
    InvalidPattern,
    TreeContext,
    UnsupportedFileType,
    build_context,
    filename_to_lang,
)

__version__ = "0.1.0"

__all__ = [
    "ContextOptions",
    "GrepScopeError",
    "InvalidPattern",
    "TreeContext",
    "UnsupportedFileType",
    "build_context",
    "filename_to_lang",
]
