#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/ast/transforms.py
"""Tree rewriting passes applied before rendering.

Markdown parsers tend to produce redundant wrapper nodes: an extra Root
around nested block content, or a generic SuperNode around a single inline
child. :func:`normalize_tree` removes those wrappers so the renderer sees a
simplified tree. :func:`classify_line_breaks` decides once per document
whether each line break is hard or soft by looking at the source text.

Both passes rewrite the tree in place and return the root for chaining.

"""

from __future__ import annotations

import logging
from typing import Optional

from md2adoc.ast.nodes import Node, Root, Simple, SuperNode, get_node_children
from md2adoc.constants import HARD_LINE_BREAK_MARKDOWN

logger = logging.getLogger(__name__)


def _unwrap(child: Node) -> Optional[Node]:
    """Return the node that replaces ``child``, or None if it is dropped."""
    while True:
        if isinstance(child, Root):
            if not child.children:
                return None
            child = child.children[0]
        elif type(child) is SuperNode and len(child.children) == 1:
            child = child.children[0]
        else:
            return child


def normalize_tree(root: Node) -> Node:
    """Collapse redundant single-child wrappers throughout the tree.

    For every child ``c`` of every node:

    - a nested ``Root`` is replaced by its own first child
    - a plain ``SuperNode`` with exactly one child is replaced by that child

    Replacement repeats until neither rule applies, so running the pass a
    second time leaves the tree unchanged.

    Parameters
    ----------
    root : Node
        Tree to normalize (usually a Root)

    Returns
    -------
    Node
        The same root object, rewritten in place

    """
    children = get_node_children(root)
    index = 0
    while index < len(children):
        replacement = _unwrap(children[index])
        if replacement is None:
            del children[index]
            continue
        children[index] = replacement
        normalize_tree(replacement)
        index += 1
    return root


def is_hard_line_break(source: str, span: tuple[int, int]) -> bool:
    """Check whether the source text at ``span`` is a Markdown hard break.

    A hard break is two trailing spaces followed by a newline.

    Parameters
    ----------
    source : str
        Original Markdown source
    span : tuple of (int, int)
        Start and end offsets of the line-break token

    Returns
    -------
    bool
        True if the spanned text starts with two spaces and a newline

    """
    start, end = span
    return source[start:end].startswith(HARD_LINE_BREAK_MARKDOWN)


def classify_line_breaks(root: Node, source: Optional[str]) -> Node:
    """Set ``Simple.hard`` on every line-break node that has a source span.

    Nodes without a span, or any node when ``source`` is None, keep the
    value their parser assigned.

    Parameters
    ----------
    root : Node
        Tree to update
    source : str or None
        Original Markdown source the spans refer to

    Returns
    -------
    Node
        The same root object

    """
    if source is None:
        return root

    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Simple) and node.kind == "line_break" and node.source_span is not None:
            node.hard = is_hard_line_break(source, node.source_span)
        stack.extend(get_node_children(node))
    return root


def prepare_tree(root: Node, source: Optional[str] = None) -> Node:
    """Run every pre-render pass over ``root``.

    Parameters
    ----------
    root : Node
        Tree to prepare
    source : str or None, default = None
        Original Markdown source, used for line-break classification

    Returns
    -------
    Node
        The prepared root

    """
    normalize_tree(root)
    classify_line_breaks(root, source)
    logger.debug("Prepared document tree (source text %s)", "available" if source is not None else "not available")
    return root


__all__ = ["normalize_tree", "classify_line_breaks", "is_hard_line_break", "prepare_tree"]
