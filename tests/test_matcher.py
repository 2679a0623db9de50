"""Pattern matching and highlighting."""

from __future__ import annotations

import unittest

from grepscope import ContextOptions, InvalidPattern, TreeContext
from grepscope.tree.matcher import grep_lines
from tests.fakes import FakeNode

LINES = ["def foo():", "    return Foo.bar(foo)", "baz = 1"]


class GrepLinesTests(unittest.TestCase):
    def test_case_sensitive_by_default(self) -> None:
        found, highlights = grep_lines(LINES, "Foo")
        self.assertEqual(found, {1})
        self.assertEqual(highlights, {})

    def test_ignore_case(self) -> None:
        found, _ = grep_lines(LINES, "FOO", ignore_case=True)
        self.assertEqual(found, {0, 1})

    def test_color_wraps_every_match(self) -> None:
        _, highlights = grep_lines(LINES, "foo", ignore_case=True, color=True)
        self.assertEqual(
            highlights[1],
            "    return \033[1;31mFoo\033[0m.bar(\033[1;31mfoo\033[0m)",
        )
        self.assertNotIn(2, highlights)

    def test_invalid_pattern(self) -> None:
        with self.assertRaises(InvalidPattern) as ctx:
            grep_lines(LINES, "foo(")
        self.assertIsInstance(ctx.exception, ValueError)
        self.assertEqual(ctx.exception.pattern, "foo(")


class TreeContextGrepTests(unittest.TestCase):
    def setUp(self) -> None:
        source = "\n".join(LINES) + "\n"
        self.tc = TreeContext("sample.py", source, FakeNode(0, 2), ContextOptions(color=True))

    def test_grep_does_not_mark_lines_of_interest(self) -> None:
        found = self.tc.grep("baz")
        self.assertEqual(found, {2})
        self.assertEqual(self.tc.lines_of_interest, frozenset())
        self.assertIn(2, self.tc.output_lines)

    def test_failed_grep_leaves_state_alone(self) -> None:
        self.tc.grep("foo")
        before = dict(self.tc.output_lines)
        with self.assertRaises(InvalidPattern):
            self.tc.grep("[unclosed")
        self.assertEqual(self.tc.output_lines, before)


if __name__ == "__main__":
    unittest.main()
