"""TreeContext: structural grep context for a single source file."""

import logging
from typing import Iterable, Optional, Union

from ..models import ContextOptions
from .expander import ContextExpander
from .indexer import index_tree
from .languages import parse_source
from .matcher import grep_lines
from .renderer import render

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split on newlines; a trailing newline adds no empty last line."""
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def _decode(source: Union[bytes, str]) -> str:
    if isinstance(source, bytes):
        return source.decode("utf-8", errors="replace")
    return source


class TreeContext:
    """Index a parsed file once, then grep, expand and render against it.

    ``root`` is the root node of a syntax tree over ``source``. Pass the
    owning ``tree`` too when the caller does not keep it alive itself.
    """

    def __init__(
        self,
        filename: str,
        source: Union[bytes, str],
        root,
        options: Optional[ContextOptions] = None,
        tree=None,
    ):
        self.filename = filename
        self.options = options or ContextOptions()
        self.tree = tree

        self.lines = split_lines(_decode(source))
        # one extra slot past the last line
        self.num_lines = len(self.lines) + 1

        self.index = index_tree(root, self.num_lines, self.options.header_max)
        self.expander = ContextExpander(self.lines, self.index, self.options)
        self.output_lines: dict[int, str] = {}

        logger.debug(f"Indexed {filename}: {len(self.lines)} lines")
        if self.options.verbose:
            for row in self.index.scope_trace(self.lines):
                logger.info(row)

    @property
    def lines_of_interest(self) -> frozenset[int]:
        return frozenset(self.expander.lines_of_interest)

    @property
    def show_lines(self) -> frozenset[int]:
        return frozenset(self.expander.show_lines)

    def grep(self, pattern: str, ignore_case: bool = False) -> set[int]:
        """Return lines matching pattern; with color, remember highlights."""
        found, highlights = grep_lines(self.lines, pattern, ignore_case, self.options.color)
        self.output_lines.update(highlights)
        return found

    def add_lines_of_interest(self, line_nums: Iterable[int]):
        self.expander.add_lines_of_interest(line_nums)

    def add_context(self):
        self.expander.add_context()

    def format(self) -> str:
        return render(
            self.lines,
            self.expander.show_lines,
            self.expander.lines_of_interest,
            self.output_lines,
            self.options,
        )


def build_context(
    filename: str,
    source: Union[bytes, str],
    options: Optional[ContextOptions] = None,
) -> TreeContext:
    """Parse source with the grammar for filename and index it.

    Raises UnsupportedFileType when no grammar matches the filename.
    """
    raw = source.encode("utf-8") if isinstance(source, str) else source
    lang, tree = parse_source(filename, raw)
    logger.debug(f"Parsed {filename} as {lang}")
    return TreeContext(filename, raw, tree.root_node, options, tree=tree)
