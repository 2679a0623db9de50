"""Filename to tree-sitter grammar resolution and parsing."""

import logging
from pathlib import Path

from tree_sitter_language_pack import get_parser

from .errors import UnsupportedFileType

logger = logging.getLogger(__name__)

# Extension -> grammar name understood by tree-sitter-language-pack
EXTENSION_LANGUAGES = {
    ".py": "python", ".pyi": "python",
    ".js": "javascript", ".mjs": "javascript", ".cjs": "javascript", ".jsx": "javascript",
    ".ts": "typescript", ".tsx": "tsx",
    ".go": "go", ".java": "java", ".rs": "rust",
    ".rb": "ruby", ".php": "php", ".cs": "csharp",
    ".c": "c", ".h": "c",
    ".cpp": "cpp", ".cc": "cpp", ".cxx": "cpp", ".hpp": "cpp",
    ".swift": "swift", ".kt": "kotlin", ".scala": "scala",
    ".sh": "bash", ".bash": "bash",
    ".yaml": "yaml", ".yml": "yaml",
    ".json": "json", ".toml": "toml",
    ".tf": "hcl", ".tfvars": "hcl", ".hcl": "hcl",
}

FILENAME_LANGUAGES = {
    "Dockerfile": "dockerfile",
    "Makefile": "make",
    "makefile": "make",
    "GNUmakefile": "make",
}


def filename_to_lang(filename: str) -> str | None:
    """Return the grammar name for a filename, or None if unknown."""
    path = Path(filename)
    if path.name in FILENAME_LANGUAGES:
        return FILENAME_LANGUAGES[path.name]
    return EXTENSION_LANGUAGES.get(path.suffix.lower())


def parse_source(filename: str, source: bytes):
    """Parse source with the grammar for filename and return the tree."""
    lang = filename_to_lang(filename)
    if lang is None:
        raise UnsupportedFileType(filename)

    try:
        parser = get_parser(lang)
    except Exception as e:
        # includes grammar downloads that fail
        logger.warning(f"Grammar {lang} unavailable for {filename}: {e}")
        raise UnsupportedFileType(filename) from e

    return lang, parser.parse(source)
