#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/ast/__init__.py
"""Document tree for md2adoc.

This package holds the node model, the visitor base class and the passes
that prepare a tree for rendering.

Examples
--------
Build a small document by hand:

    >>> from md2adoc.ast import Header, Paragraph, Root, StrongEmphasis, Text
    >>> doc = Root(children=[
    ...     Header(level=1, children=[Text(text="Title")]),
    ...     Paragraph(children=[
    ...         Text(text="Hello "),
    ...         StrongEmphasis(is_strong=True, children=[Text(text="world")]),
    ...     ]),
    ... ])

"""

from md2adoc.ast.nodes import (
    AbbreviationDefinition,
    Alignment,
    AnchorLink,
    BlockQuote,
    BulletList,
    Definition,
    DefinitionList,
    DefinitionTerm,
    Header,
    HtmlBlock,
    Image,
    ImageKind,
    InlineCode,
    InlineHtml,
    Link,
    LinkKind,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    QuoteKind,
    Quoted,
    ReferenceDefinition,
    Root,
    Simple,
    SimpleKind,
    SpecialText,
    Strikethrough,
    StrongEmphasis,
    SuperNode,
    Table,
    TableBody,
    TableCaption,
    TableCell,
    TableColumn,
    TableHeader,
    TableRow,
    Text,
    Verbatim,
    get_node_children,
)
from md2adoc.ast.transforms import classify_line_breaks, normalize_tree, prepare_tree
from md2adoc.ast.utils import extract_text, normalize_key
from md2adoc.ast.visitors import NodeVisitor

__all__ = [
    "AbbreviationDefinition",
    "Alignment",
    "AnchorLink",
    "BlockQuote",
    "BulletList",
    "Definition",
    "DefinitionList",
    "DefinitionTerm",
    "Header",
    "HtmlBlock",
    "Image",
    "ImageKind",
    "InlineCode",
    "InlineHtml",
    "Link",
    "LinkKind",
    "ListItem",
    "Node",
    "NodeVisitor",
    "OrderedList",
    "Paragraph",
    "QuoteKind",
    "Quoted",
    "ReferenceDefinition",
    "Root",
    "Simple",
    "SimpleKind",
    "SpecialText",
    "Strikethrough",
    "StrongEmphasis",
    "SuperNode",
    "Table",
    "TableBody",
    "TableCaption",
    "TableCell",
    "TableColumn",
    "TableHeader",
    "TableRow",
    "Text",
    "Verbatim",
    "classify_line_breaks",
    "extract_text",
    "get_node_children",
    "normalize_key",
    "normalize_tree",
    "prepare_tree",
]
