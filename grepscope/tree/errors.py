"""Errors raised while building or querying a TreeContext."""


class GrepScopeError(ValueError):
    """Base class for grepscope failures."""


class UnsupportedFileType(GrepScopeError):
    """Raised when no tree-sitter grammar resolves for a filename."""

    def __init__(self, filename: str):
        super().__init__(f"Unrecognized or unsupported file type ({filename})")
        self.filename = filename


class InvalidPattern(GrepScopeError):
    """Raised when a search pattern does not compile."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
