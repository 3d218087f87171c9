#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/ast/nodes.py
"""Node classes for the Markdown document tree.

This module defines the closed set of node kinds consumed by the AsciiDoc
renderer. The tree is produced once by a Markdown front end, simplified by
the normalizer and then walked once by the renderer.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.
Container nodes keep their ordered children in a ``children`` list.

Block-level nodes:
    - Root, SuperNode, Header, Paragraph, BlockQuote, Verbatim
    - BulletList, OrderedList, ListItem
    - Table, TableHeader, TableBody, TableRow, TableCell, TableCaption, TableColumn
    - DefinitionList, DefinitionTerm, Definition
    - HtmlBlock, ReferenceDefinition, AbbreviationDefinition

Inline nodes:
    - Text, SpecialText, InlineCode, InlineHtml
    - StrongEmphasis, Strikethrough, Quoted, Simple
    - Link, Image, AnchorLink

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal, Optional

Alignment = Literal["left", "center", "right"]
LinkKind = Literal["auto", "explicit", "reference", "wiki", "mail"]
ImageKind = Literal["explicit", "reference"]
QuoteKind = Literal["double", "single", "double_angle"]
SimpleKind = Literal[
    "apostrophe",
    "ellipsis",
    "emdash",
    "endash",
    "horizontal_rule",
    "line_break",
    "nbsp",
]


class Node(ABC):
    """Base class for all document tree nodes.

    All nodes support the visitor pattern through :meth:`accept`.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Container / Block-level Nodes
# ============================================================================


@dataclass
class Root(Node):
    """Root of a parsed document.

    Reference and abbreviation definitions live directly in ``children``
    next to the regular block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level nodes in document order

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this root."""
        return visitor.visit_root(self)


@dataclass
class SuperNode(Node):
    """Generic grouping node without markup of its own.

    Parsers wrap runs of inline content (e.g. the text of a tight list item)
    in a SuperNode. Single-child SuperNodes are removed by the normalizer.

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this grouping node."""
        return visitor.visit_super_node(self)


@dataclass
class Header(Node):
    """Section header.

    Parameters
    ----------
    level : int
        Header level from 1 to 6
    children : list of Node, default = empty list
        Inline content of the header

    Raises
    ------
    ValueError
        If level is outside 1..6

    """

    level: int
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate the header level."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Header level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this header."""
        return visitor.visit_header(self)


@dataclass
class Paragraph(Node):
    """Paragraph of inline content."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class BlockQuote(Node):
    """Block quotation containing block-level children."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class BulletList(Node):
    """Unordered list whose children are ListItem nodes."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this bullet list."""
        return visitor.visit_bullet_list(self)


@dataclass
class OrderedList(Node):
    """Ordered list whose children are ListItem nodes."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this ordered list."""
        return visitor.visit_ordered_list(self)


@dataclass
class ListItem(Node):
    """Single item of a bullet or ordered list."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class Verbatim(Node):
    """Fenced or indented code block.

    Parameters
    ----------
    text : str
        Literal block content
    language : str or None, default = None
        Language tag from the fence info string, if any

    """

    text: str
    language: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_verbatim(self)


@dataclass
class HtmlBlock(Node):
    """Raw HTML block taken verbatim from the source."""

    text: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this HTML block."""
        return visitor.visit_html_block(self)


@dataclass
class ReferenceDefinition(Node):
    """Link/image reference definition (``[label]: url "title"``).

    Only ever a direct child of Root; never rendered.

    Parameters
    ----------
    url : str
        Target URL
    title : str or None, default = None
        Optional title
    children : list of Node, default = empty list
        Label content used as the lookup key

    """

    url: str
    title: Optional[str] = None
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this definition."""
        return visitor.visit_reference_definition(self)


@dataclass
class AbbreviationDefinition(Node):
    """Abbreviation definition (``*[HTML]: Hyper Text Markup Language``).

    Only ever a direct child of Root; never rendered.

    Parameters
    ----------
    children : list of Node, default = empty list
        The abbreviation text, matched verbatim in body text
    expansion : list of Node, default = empty list
        The expansion shown as the abbreviation title

    """

    children: list[Node] = field(default_factory=list)
    expansion: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this definition."""
        return visitor.visit_abbreviation_definition(self)


@dataclass
class DefinitionList(Node):
    """Definition list made of DefinitionTerm and Definition children."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this definition list."""
        return visitor.visit_definition_list(self)


@dataclass
class DefinitionTerm(Node):
    """Term of a definition list."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this term."""
        return visitor.visit_definition_term(self)


@dataclass
class Definition(Node):
    """Definition text belonging to the preceding DefinitionTerm."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this definition."""
        return visitor.visit_definition(self)


# ============================================================================
# Table Nodes
# ============================================================================


@dataclass
class TableColumn(Node):
    """Column specification of a table.

    Parameters
    ----------
    alignment : {'left', 'center', 'right'} or None, default = None
        Column alignment; None when the source did not specify one

    """

    alignment: Optional[Alignment] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this column."""
        return visitor.visit_table_column(self)


@dataclass
class Table(Node):
    """Table with column specifications.

    ``columns`` is the authoritative column count. Children are TableHeader,
    TableBody and, optionally, TableCaption nodes.

    Parameters
    ----------
    columns : list of TableColumn, default = empty list
        One entry per column, in column order
    children : list of Node, default = empty list
        Header, body and caption sections

    """

    columns: list[TableColumn] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


@dataclass
class TableHeader(Node):
    """Header section of a table (rows of header cells)."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table header."""
        return visitor.visit_table_header(self)


@dataclass
class TableBody(Node):
    """Body section of a table."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table body."""
        return visitor.visit_table_body(self)


@dataclass
class TableRow(Node):
    """Row of table cells."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline cell content
    col_span : int, default = 1
        Number of columns the cell spans

    Raises
    ------
    ValueError
        If col_span is less than 1

    """

    children: list[Node] = field(default_factory=list)
    col_span: int = 1

    def __post_init__(self) -> None:
        """Validate the column span."""
        if self.col_span < 1:
            raise ValueError(f"TableCell col_span must be >= 1, got {self.col_span}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self)


@dataclass
class TableCaption(Node):
    """Caption of a table."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table caption."""
        return visitor.visit_table_caption(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text content."""

    text: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass
class SpecialText(Node):
    """Text that must be escaped on output (``&``, ``<``, ``>``, quotes)."""

    text: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this special text."""
        return visitor.visit_special_text(self)


@dataclass
class InlineCode(Node):
    """Inline code span."""

    text: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code span."""
        return visitor.visit_inline_code(self)


@dataclass
class InlineHtml(Node):
    """Raw inline HTML."""

    text: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline HTML."""
        return visitor.visit_inline_html(self)


@dataclass
class StrongEmphasis(Node):
    """Strong (bold) or emphasis (italic) run.

    Parameters
    ----------
    is_strong : bool
        True for strong, False for emphasis
    is_closed : bool, default = True
        False when the source never closed the run
    chars : str, default = ""
        The opening delimiter characters as written in the source
    children : list of Node, default = empty list
        Inline content

    """

    is_strong: bool
    is_closed: bool = True
    chars: str = ""
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis run."""
        return visitor.visit_strong_emphasis(self)


@dataclass
class Strikethrough(Node):
    """Strikethrough text."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strikethrough."""
        return visitor.visit_strikethrough(self)


@dataclass
class Quoted(Node):
    """Smart-quoted inline content."""

    kind: QuoteKind
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this quoted run."""
        return visitor.visit_quoted(self)


@dataclass
class Simple(Node):
    """Single-token node (typographic characters, rules and breaks).

    Parameters
    ----------
    kind : SimpleKind
        Which token this node stands for
    source_span : tuple of (int, int) or None, default = None
        Start/end offsets of the token in the original source text
    hard : bool, default = False
        For line breaks only: True for a hard break. Filled in once by
        :func:`md2adoc.ast.transforms.classify_line_breaks` when the source
        text is available.

    """

    kind: SimpleKind
    source_span: Optional[tuple[int, int]] = None
    hard: bool = False

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this token."""
        return visitor.visit_simple(self)


@dataclass
class Link(Node):
    """Hyperlink.

    Parameters
    ----------
    kind : LinkKind
        How the link was written in the source
    url : str, default = ""
        Target URL. For auto, mail and wiki links this is the link text as
        written (address, e-mail address or page name).
    title : str or None, default = None
        Optional title
    reference_key : list of Node or None, default = None
        Explicit reference key of a reference link (``[text][key]``)
    separator_space : str or None, default = None
        Whitespace between ``[text]`` and ``[key]`` of a reference link;
        None when the source had no second bracket pair
    children : list of Node, default = empty list
        Link text

    """

    kind: LinkKind
    url: str = ""
    title: Optional[str] = None
    reference_key: Optional[list[Node]] = None
    separator_space: Optional[str] = None
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image reference.

    Parameters
    ----------
    kind : ImageKind
        Explicit (``![alt](src)``) or reference (``![alt][key]``) image
    url : str, default = ""
        Image source for explicit images
    title : str or None, default = None
        Optional title
    reference_key : list of Node or None, default = None
        Explicit reference key of a reference image
    separator_space : str or None, default = None
        Whitespace between ``![alt]`` and ``[key]``
    children : list of Node, default = empty list
        Alternative text

    """

    kind: ImageKind
    url: str = ""
    title: Optional[str] = None
    reference_key: Optional[list[Node]] = None
    separator_space: Optional[str] = None
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


@dataclass
class AnchorLink(Node):
    """Anchor generated for a header (rendered as its text only)."""

    name: str
    text: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this anchor."""
        return visitor.visit_anchor_link(self)


def get_node_children(node: Node) -> list[Node]:
    """Return the children of a node, or an empty list for leaf nodes.

    Parameters
    ----------
    node : Node
        Node whose children are requested

    Returns
    -------
    list of Node
        The node's own ``children`` list (not a copy)

    """
    children = getattr(node, "children", None)
    if isinstance(children, list):
        return children
    return []


__all__ = [
    "Alignment",
    "LinkKind",
    "ImageKind",
    "QuoteKind",
    "SimpleKind",
    "Node",
    "Root",
    "SuperNode",
    "Header",
    "Paragraph",
    "BlockQuote",
    "BulletList",
    "OrderedList",
    "ListItem",
    "Verbatim",
    "HtmlBlock",
    "ReferenceDefinition",
    "AbbreviationDefinition",
    "DefinitionList",
    "DefinitionTerm",
    "Definition",
    "TableColumn",
    "Table",
    "TableHeader",
    "TableBody",
    "TableRow",
    "TableCell",
    "TableCaption",
    "Text",
    "SpecialText",
    "InlineCode",
    "InlineHtml",
    "StrongEmphasis",
    "Strikethrough",
    "Quoted",
    "Simple",
    "Link",
    "Image",
    "AnchorLink",
    "get_node_children",
]
