"""Grow a sparse set of lines of interest into the lines worth showing."""

import logging
from typing import Iterable, Optional

from ..models import ContextOptions
from .indexer import ScopeIndex, node_size, walk_nodes

logger = logging.getLogger(__name__)

# Scopes smaller than this are shown whole by the child preview
SMALL_SCOPE_LINES = 5

# Child preview budget: ~10% of the scope, between 5 and 25 lines
MIN_PREVIEW_LINES = 5
MAX_PREVIEW_LINES = 25
PREVIEW_FRACTION = 0.10


def preview_budget(size: int) -> int:
    computed = int(size * PREVIEW_FRACTION + 0.5)
    return max(MIN_PREVIEW_LINES, min(MAX_PREVIEW_LINES, computed))


class ContextExpander:
    """Holds the line selection state for one file.

    ``expanded_lines`` is the working set built by the expansion passes;
    ``show_lines`` is that set after gap closing and is what gets rendered.
    """

    def __init__(self, lines: list[str], index: ScopeIndex, options: ContextOptions):
        self.lines = lines
        self.index = index
        self.options = options
        self.num_lines = index.num_lines

        self.lines_of_interest: set[int] = set()
        self.expanded_lines: set[int] = set()
        self.show_lines: set[int] = set()
        self.done_parent_scopes: set[int] = set()
        self.done_child_scopes: set[int] = set()

    def add_lines_of_interest(self, line_nums: Iterable[int]):
        self.lines_of_interest.update(line_nums)

    def add_context(self):
        if not self.lines_of_interest:
            return

        self.expanded_lines.update(self.lines_of_interest)

        pad = self.options.loi_pad
        if pad > 0:
            for line in self.lines_of_interest:
                self._show_range(line - pad, line + pad + 1)

        if self.options.last_line:
            bottom_line = self.num_lines - 2
            if bottom_line >= 0:
                self.expanded_lines.add(bottom_line)
                self.add_parent_scopes(bottom_line)

        if self.options.parent_context:
            for line in sorted(self.lines_of_interest):
                self.add_parent_scopes(line)

        if self.options.child_context:
            for line in sorted(self.lines_of_interest):
                self.add_child_context(line)

        if self.options.margin > 0:
            self._show_range(0, self.options.margin)

        self.show_lines = self.close_small_gaps(self.expanded_lines)
        logger.debug(
            f"Expanded {len(self.lines_of_interest)} lines of interest "
            f"to {len(self.show_lines)} shown lines"
        )

    def _show_range(self, start: int, end: int):
        start = max(start, 0)
        end = min(end, len(self.lines))
        self.expanded_lines.update(range(start, end))

    def add_parent_scopes(self, line: int, stop_at: Optional[int] = None) -> bool:
        """Reveal the header of every scope enclosing ``line``.

        With ``stop_at``, stop once ``expanded_lines`` holds that many
        lines and return False; the interrupted line is not marked done.
        """
        pending = [line]
        while pending:
            i = pending.pop()
            if not 0 <= i < self.num_lines or i in self.done_parent_scopes:
                continue

            for scope_line in sorted(self.index.scopes[i]):
                head_start, head_end = self.index.header[scope_line]
                if head_start > 0 or self.options.show_top_of_file_parent_scope:
                    for shown in range(head_start, min(head_end, len(self.lines))):
                        if shown in self.expanded_lines:
                            continue
                        if stop_at is not None and len(self.expanded_lines) >= stop_at:
                            return False
                        self.expanded_lines.add(shown)

                if self.options.last_line:
                    pending.append(self.index.last_line_of_scope(scope_line))

            self.done_parent_scopes.add(i)
        return True

    def add_child_context(self, line: int):
        """Preview the structure of the scope starting at ``line``."""
        if not 0 <= line < self.num_lines or line in self.done_child_scopes:
            return
        nodes = self.index.nodes[line]
        if not nodes:
            return
        self.done_child_scopes.add(line)

        last_line = self.index.last_line_of_scope(line)
        size = last_line - line
        if size < SMALL_SCOPE_LINES:
            self._show_range(line, last_line + 1)
            return

        children = []
        for node in nodes:
            children.extend(walk_nodes(node))
        # stable: equal spans keep pre-order
        children.sort(key=node_size, reverse=True)

        stop_at = len(self.expanded_lines) + preview_budget(size)
        for child in children:
            if len(self.expanded_lines) >= stop_at:
                break
            if not self.add_parent_scopes(child.start_point[0], stop_at=stop_at):
                break

    def close_small_gaps(self, lines_to_show: set[int]) -> set[int]:
        """Fill one-line gaps and keep trailing blank lines with their block."""
        closed = set(lines_to_show)
        sorted_show = sorted(lines_to_show)

        for curr, nxt in zip(sorted_show, sorted_show[1:]):
            if nxt - curr == 2:
                closed.add(curr + 1)

        for i, line in enumerate(self.lines):
            if i not in closed:
                continue
            if line.strip() and i < self.num_lines - 2 and i + 1 < len(self.lines):
                if not self.lines[i + 1].strip():
                    closed.add(i + 1)

        return closed
