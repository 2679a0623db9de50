"""Scope index construction over hand-built trees."""

from __future__ import annotations

import unittest

from grepscope import ContextOptions, TreeContext
from grepscope.tree.indexer import index_tree, walk_nodes
from grepscope.tree.tree_context import split_lines
from tests.fakes import FakeNode


def sample_tree() -> FakeNode:
    return FakeNode(
        0, 6,
        FakeNode(
            1, 5,
            FakeNode(1, 1, kind="name"),
            FakeNode(2, 5, FakeNode(2, 2), FakeNode(3, 4), kind="body"),
            kind="function",
        ),
        FakeNode(6, 6, kind="expr"),
        kind="module",
    )


class SplitLinesTests(unittest.TestCase):
    def test_trailing_newline_adds_no_line(self) -> None:
        self.assertEqual(split_lines("a\nb\n"), ["a", "b"])
        self.assertEqual(split_lines("a\nb"), ["a", "b"])

    def test_empty_text(self) -> None:
        self.assertEqual(split_lines(""), [])

    def test_blank_lines_are_kept(self) -> None:
        self.assertEqual(split_lines("a\n\n\nb\n"), ["a", "", "", "b"])


class ScopeIndexTests(unittest.TestCase):
    def setUp(self) -> None:
        self.index = index_tree(sample_tree(), num_lines=8, header_max=10)

    def test_walk_is_pre_order(self) -> None:
        kinds = [node.kind for node in walk_nodes(sample_tree())]
        self.assertEqual(kinds, ["module", "function", "name", "body", "node", "node", "expr"])

    def test_nodes_grouped_by_start_line(self) -> None:
        kinds = [node.kind for node in self.index.nodes[1]]
        self.assertEqual(kinds, ["function", "name"])
        self.assertEqual(self.index.nodes[7], [])

    def test_scope_membership(self) -> None:
        self.assertEqual(self.index.scopes[3], {0, 1, 2, 3})
        self.assertEqual(self.index.scopes[4], {0, 1, 2, 3})
        self.assertEqual(self.index.scopes[6], {0, 6})

    def test_zero_size_node_registers_its_own_line(self) -> None:
        self.assertIn(6, self.index.scopes[6])
        self.assertEqual(self.index.header[6], (6, 7))

    def test_header_uses_largest_span(self) -> None:
        self.assertEqual(self.index.header[0], (0, 6))
        self.assertEqual(self.index.header[1], (1, 5))
        self.assertEqual(self.index.header[2], (2, 5))

    def test_larger_span_wins_even_when_visited_later(self) -> None:
        root = FakeNode(0, 9, FakeNode(1, 2, FakeNode(1, 7)))
        index = index_tree(root, num_lines=11, header_max=10)
        self.assertEqual(index.header[1], (1, 7))

    def test_header_clamped_to_header_max(self) -> None:
        index = index_tree(sample_tree(), num_lines=8, header_max=2)
        self.assertEqual(index.header[1], (1, 3))
        self.assertEqual(index.header[3], (3, 4))
        for start, end in index.header:
            self.assertLessEqual(end - start, 2)

    def test_non_owner_lines_get_default_header(self) -> None:
        self.assertEqual(self.index.header[7], (7, 8))

    def test_last_line_of_scope(self) -> None:
        self.assertEqual(self.index.last_line_of_scope(1), 5)
        self.assertEqual(self.index.last_line_of_scope(7), 7)

    def test_rows_past_the_end_are_clipped(self) -> None:
        index = index_tree(FakeNode(0, 40, FakeNode(30, 35)), num_lines=5, header_max=10)
        self.assertEqual(len(index.scopes), 5)
        self.assertEqual(index.scopes[4], {0})

    def test_scope_trace(self) -> None:
        lines = [f"line {i}" for i in range(7)]
        rows = self.index.scope_trace(lines)
        self.assertEqual(len(rows), 7)
        self.assertTrue(rows[0].startswith("[0]"))
        self.assertTrue(rows[3].endswith("  3 line 3"))


class VerboseTraceTests(unittest.TestCase):
    def test_verbose_logs_scope_trace(self) -> None:
        source = "".join(f"line {i}\n" for i in range(7))
        with self.assertLogs("grepscope.tree.tree_context", "INFO") as logs:
            TreeContext("sample.py", source, sample_tree(), ContextOptions(verbose=True))
        self.assertEqual(len(logs.records), 7)
        self.assertTrue(logs.records[3].getMessage().endswith("  3 line 3"))

    def test_quiet_by_default(self) -> None:
        with self.assertNoLogs("grepscope.tree.tree_context", "INFO"):
            TreeContext("sample.py", "line 0\n", sample_tree(), ContextOptions())


if __name__ == "__main__":
    unittest.main()
