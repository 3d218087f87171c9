#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/ast/utils.py
"""Utility functions for working with document tree nodes.

Functions
---------
extract_text : Extract plain text from a node or list of nodes
normalize_key : Normalize a reference label for case/whitespace-insensitive lookup

Examples
--------
Extract the label of a reference:

    >>> from md2adoc.ast import StrongEmphasis, Text
    >>> from md2adoc.ast.utils import extract_text
    >>> extract_text([Text(text="My "), StrongEmphasis(is_strong=True, children=[Text(text="Key")])])
    'My Key'

"""

from __future__ import annotations

from typing import Union

from md2adoc.ast.nodes import AnchorLink, InlineCode, Node, SpecialText, Text, get_node_children

_KEY_WHITESPACE = str.maketrans("", "", " \t\n")


def extract_text(node_or_nodes: Union[Node, list[Node]]) -> str:
    """Extract plain text from a node or list of nodes.

    Text, SpecialText, InlineCode and AnchorLink content is concatenated in
    document order without separators; markup is dropped.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from

    Returns
    -------
    str
        Concatenated text content

    """
    if isinstance(node_or_nodes, list):
        return "".join(extract_text(node) for node in node_or_nodes)

    node = node_or_nodes
    if isinstance(node, (Text, SpecialText, InlineCode, AnchorLink)):
        return node.text
    return "".join(extract_text(child) for child in get_node_children(node))


def normalize_key(key: str) -> str:
    """Normalize a reference key.

    Spaces, tabs and newlines are removed and the result is lower-cased, so
    ``"My Key"`` and ``"my\\nkey"`` map to the same entry.

    Parameters
    ----------
    key : str
        Raw label text

    Returns
    -------
    str
        Normalized key

    """
    return key.translate(_KEY_WHITESPACE).lower()


__all__ = ["extract_text", "normalize_key"]
