from .errors import GrepScopeError, InvalidPattern, UnsupportedFileType
from .languages import filename_to_lang
from .tree_context import TreeContext, build_context

__all__ = [
    "GrepScopeError",
    "InvalidPattern",
    "TreeContext",
    "UnsupportedFileType",
    "build_context",
    "filename_to_lang",
]
