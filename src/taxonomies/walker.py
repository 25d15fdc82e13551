"""Depth-first walker over parent-linked term lists.

The walker owns ordering and depth. A visitor receives four callbacks per
traversal and decides what, if anything, to emit for each:

    on_node_start(term, depth, args)
    on_level_start(depth)           # before the first child of a node
    ...children at depth + 1...
    on_level_end(depth)             # after the last child
    on_node_end(term, depth)

max_depth follows the usual tree-walker convention: 0 walks the whole
tree, -1 renders every term flat at depth 0, and N > 0 limits output to
N levels.
"""

import logging
from typing import Iterable, Optional, Protocol

from .schemas import RenderArgs, Term

logger = logging.getLogger(__name__)


class TreeVisitor(Protocol):
    """Callbacks invoked by walk_terms()."""

    def on_level_start(self, depth: int) -> None:
        ...

    def on_level_end(self, depth: int) -> None:
        ...

    def on_node_start(self, term: Term, depth: int, args: RenderArgs) -> None:
        ...

    def on_node_end(self, term: Term, depth: int) -> None:
        ...


def _root_parent(term: Term) -> Optional[int]:
    return term.parent or None


def walk_terms(
    terms: Iterable[Term],
    visitor: TreeVisitor,
    args: Optional[RenderArgs] = None,
    max_depth: int = 0,
) -> None:
    """Walk terms depth-first, calling the visitor's hooks in pre/post order.

    Args:
        terms: Terms in display order. Siblings keep this order.
        visitor: Receives the node and level callbacks.
        args: Render context passed to every on_node_start call.
        max_depth: 0 = unlimited, -1 = flat, N > 0 = at most N levels.
    """
    terms = list(terms)
    if args is None:
        args = RenderArgs()

    if max_depth < -1 or not terms:
        return

    # Flat display: no nesting at all
    if max_depth == -1:
        for term in terms:
            visitor.on_node_start(term, 0, args)
            visitor.on_node_end(term, 0)
        return

    # Group by parent, keeping input order among siblings
    children: dict[Optional[int], list[Term]] = {}
    for term in terms:
        children.setdefault(_root_parent(term), []).append(term)

    # If nothing is a root, treat the first term's parent as the root
    root_parent: Optional[int] = None
    if root_parent not in children:
        root_parent = _root_parent(terms[0])

    visited: set[int] = set()
    for term in children.get(root_parent, []):
        _visit(term, children, visitor, args, max_depth, 0, visited)

    # Orphans: terms whose parent never showed up in the input
    if max_depth == 0:
        orphans = [t for t in terms if t.id not in visited]
        if orphans:
            logger.debug(f"Rendering {len(orphans)} orphaned terms at top level")
        for term in orphans:
            visited.add(term.id)
            visitor.on_node_start(term, 0, args)
            visitor.on_node_end(term, 0)


def _visit(
    term: Term,
    children: dict[Optional[int], list[Term]],
    visitor: TreeVisitor,
    args: RenderArgs,
    max_depth: int,
    depth: int,
    visited: set[int],
) -> None:
    visited.add(term.id)
    visitor.on_node_start(term, depth, args)

    if max_depth == 0 or depth + 1 < max_depth:
        level_open = False
        for child in children.get(term.id, []):
            # Parent cycles
            if child.id in visited:
                continue
            if not level_open:
                visitor.on_level_start(depth)
                level_open = True
            _visit(child, children, visitor, args, max_depth, depth + 1, visited)
        if level_open:
            visitor.on_level_end(depth)

    visitor.on_node_end(term, depth)
