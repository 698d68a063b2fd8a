"""Document visitor and tree checks for wrapdoc.

Provides a base visitor class with match-based dispatch, plus helpers
built on it that producers can use before handing a tree to the renderer.

Example: collect all group ids:

    class GroupCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.ids: list[int] = []

        def visit_group(self, node: Group) -> None:
            self.ids.append(node.id)

    collector = GroupCollector()
    collector.visit(doc)

Visitors walk in the same pre-order the renderer uses: a node is visited
before its children, and both branches of an IfWrap are walked (wrapped
first).

Thread Safety:
    Visitors may accumulate mutable state. Create a new visitor per thread.

"""

from collections import Counter

from wrapdoc.errors import DocumentError
from wrapdoc.nodes import (
    Group,
    IfWrap,
    Indent,
    Line,
    Node,
    Nodes,
    SpaceOrLine,
    Text,
    Unicode,
)


class BaseVisitor[T]:
    """Base document visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    def visit_group(self, node: Group) -> T:
        return self.visit_default(node)

    def visit_nodes(self, node: Nodes) -> T:
        return self.visit_default(node)

    def visit_indent(self, node: Indent) -> T:
        return self.visit_default(node)

    def visit_if_wrap(self, node: IfWrap) -> T:
        return self.visit_default(node)

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_unicode(self, node: Unicode) -> T:
        return self.visit_default(node)

    def visit_space_or_line(self, node: SpaceOrLine) -> T:
        return self.visit_default(node)

    def visit_line(self, node: Line) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        match node:
            case Group():
                return self.visit_group(node)
            case Nodes():
                return self.visit_nodes(node)
            case Indent():
                return self.visit_indent(node)
            case IfWrap():
                return self.visit_if_wrap(node)
            case Text():
                return self.visit_text(node)
            case Unicode():
                return self.visit_unicode(node)
            case SpaceOrLine():
                return self.visit_space_or_line(node)
            case Line():
                return self.visit_line(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        match node:
            case Group(children=children) | Nodes(children=children) | Indent(children=children):
                for child in children:
                    self.visit(child)
            case IfWrap(wrapped=wrapped, flat=flat):
                self.visit(wrapped)
                self.visit(flat)
            case _:
                pass  # Leaf nodes: no children


class _NodeCounter(BaseVisitor[None]):
    def __init__(self) -> None:
        self.count = 0

    def visit_default(self, node: Node) -> None:
        self.count += 1


class _GroupIdCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.ids: list[int] = []

    def visit_group(self, node: Group) -> None:
        self.ids.append(node.id)


class _WellFormedChecker(BaseVisitor[None]):
    """Track group ids and IfWrap references in render order."""

    def __init__(self) -> None:
        self.seen: Counter[int] = Counter()
        self.early: set[int] = set()
        self.references: set[int] = set()

    def visit_group(self, node: Group) -> None:
        self.seen[node.id] += 1

    def visit_if_wrap(self, node: IfWrap) -> None:
        self.references.add(node.group_id)
        if node.group_id not in self.seen:
            self.early.add(node.group_id)


def count_nodes(node: Node) -> int:
    """Count every node in the tree, including both IfWrap branches."""
    counter = _NodeCounter()
    counter.visit(node)
    return counter.count


def collect_group_ids(node: Node) -> list[int]:
    """Return Group ids in render order (duplicates included)."""
    collector = _GroupIdCollector()
    collector.visit(node)
    return collector.ids


def check_well_formed(node: Node) -> None:
    """Verify the producer-side guarantees the renderer relies on.

    Checks that group ids are unique, that every IfWrap references a group
    in the tree, and that each such group is reached before the IfWrap in
    render order (so its decision has been made).

    Raises:
        DocumentError: Listing every offending id
    """
    checker = _WellFormedChecker()
    checker.visit(node)

    duplicates = tuple(sorted(gid for gid, n in checker.seen.items() if n > 1))
    unknown = tuple(sorted(checker.references - set(checker.seen)))
    early = tuple(sorted(checker.early - set(unknown)))
    if not (duplicates or unknown or early):
        return

    problems = []
    if duplicates:
        problems.append(f"duplicate group ids {list(duplicates)}")
    if unknown:
        problems.append(f"IfWrap references unknown group ids {list(unknown)}")
    if early:
        problems.append(f"IfWrap reached before its group for ids {list(early)}")
    raise DocumentError(
        "Document is not well-formed: " + "; ".join(problems),
        duplicate_ids=duplicates,
        unknown_ids=unknown,
        early_ids=early,
    )


__all__ = [
    "BaseVisitor",
    "check_well_formed",
    "collect_group_ids",
    "count_nodes",
]
