"""Per-line structural index built from a tree-sitter syntax tree.

For every line the index records which scopes contain it, the header
interval of the scope that starts there, and the syntax nodes that start
on it. Nodes only need ``start_point``, ``end_point`` (row first) and
``named_children``, so any tree-sitter node works.
"""

from dataclasses import dataclass, field


def node_rows(node) -> tuple[int, int]:
    return node.start_point[0], node.end_point[0]


def node_size(node) -> int:
    start_line, end_line = node_rows(node)
    return end_line - start_line


def walk_nodes(node) -> list:
    """Return node and all its named descendants in pre-order."""
    out = []
    stack = [node]
    while stack:
        current = stack.pop()
        out.append(current)
        stack.extend(reversed(current.named_children))
    return out


@dataclass
class ScopeIndex:
    """Scope membership, header intervals and nodes, keyed by line."""
    num_lines: int
    scopes: list[set[int]] = field(default_factory=list)
    header: list[tuple[int, int]] = field(default_factory=list)
    nodes: list[list] = field(default_factory=list)

    def last_line_of_scope(self, line: int) -> int:
        if not 0 <= line < self.num_lines or not self.nodes[line]:
            return line
        return max(node.end_point[0] for node in self.nodes[line])

    def scope_trace(self, lines: list[str]) -> list[str]:
        """Human-readable dump of each line's scopes, for debugging."""
        scope_strs = [str(sorted(self.scopes[i])) for i in range(len(lines))]
        width = max((len(s) for s in scope_strs), default=0)
        return [
            f"{scope_str:<{width}} {i:3d} {line}"
            for i, (scope_str, line) in enumerate(zip(scope_strs, lines))
        ]


def index_tree(root, num_lines: int, header_max: int) -> ScopeIndex:
    """Walk the tree once and build the structural index.

    When several multi-line nodes start on the same line, the one with the
    largest span supplies the header; on equal spans the first node met in
    pre-order keeps it.
    """
    index = ScopeIndex(
        num_lines=num_lines,
        scopes=[set() for _ in range(num_lines)],
        nodes=[[] for _ in range(num_lines)],
    )
    candidates: dict[int, tuple[int, int, int]] = {}

    for node in walk_nodes(root):
        start_line, end_line = node_rows(node)
        if not 0 <= start_line < num_lines:
            continue
        index.nodes[start_line].append(node)

        size = end_line - start_line
        if size > 0:
            best = candidates.get(start_line)
            if best is None or size > best[0]:
                candidates[start_line] = (size, start_line, end_line)

        for line in range(start_line, min(end_line, num_lines - 1) + 1):
            index.scopes[line].add(start_line)

    for i in range(num_lines):
        if i not in candidates:
            index.header.append((i, i + 1))
            continue
        size, head_start, head_end = candidates[i]
        if size > header_max:
            head_end = head_start + header_max
        index.header.append((head_start, head_end))

    return index
