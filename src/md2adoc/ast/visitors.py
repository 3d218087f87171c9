#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/ast/visitors.py
"""Visitor pattern implementation for document tree traversal.

This module provides the visitor base class used by the renderer. Each node
class calls exactly one ``visit_*`` method from its ``accept`` method, so a
visitor that implements every abstract method handles the whole closed node
set. Anything else reaches :meth:`NodeVisitor.generic_visit`.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from md2adoc.ast.nodes import (
    AbbreviationDefinition,
    AnchorLink,
    BlockQuote,
    BulletList,
    Definition,
    DefinitionList,
    DefinitionTerm,
    Header,
    HtmlBlock,
    Image,
    InlineCode,
    InlineHtml,
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Quoted,
    ReferenceDefinition,
    Root,
    Simple,
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
)


class NodeVisitor(ABC):
    """Abstract base class for document tree visitors.

    Subclasses implement one ``visit_*`` method per node kind; a visitor
    missing any of them cannot be instantiated. Nodes outside the closed
    node set dispatch to :meth:`generic_visit`.

    """

    # Containers

    @abstractmethod
    def visit_root(self, node: Root) -> Any:
        """Visit a Root node."""
        pass

    @abstractmethod
    def visit_super_node(self, node: SuperNode) -> Any:
        """Visit a generic grouping node."""
        pass

    @abstractmethod
    def visit_header(self, node: Header) -> Any:
        """Visit a Header node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_bullet_list(self, node: BulletList) -> Any:
        """Visit a BulletList node."""
        pass

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_verbatim(self, node: Verbatim) -> Any:
        """Visit a Verbatim (code block) node."""
        pass

    @abstractmethod
    def visit_html_block(self, node: HtmlBlock) -> Any:
        """Visit an HtmlBlock node."""
        pass

    @abstractmethod
    def visit_reference_definition(self, node: ReferenceDefinition) -> Any:
        """Visit a ReferenceDefinition node."""
        pass

    @abstractmethod
    def visit_abbreviation_definition(self, node: AbbreviationDefinition) -> Any:
        """Visit an AbbreviationDefinition node."""
        pass

    @abstractmethod
    def visit_definition_list(self, node: DefinitionList) -> Any:
        """Visit a DefinitionList node."""
        pass

    @abstractmethod
    def visit_definition_term(self, node: DefinitionTerm) -> Any:
        """Visit a DefinitionTerm node."""
        pass

    @abstractmethod
    def visit_definition(self, node: Definition) -> Any:
        """Visit a Definition node."""
        pass

    # Tables

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_column(self, node: TableColumn) -> Any:
        """Visit a TableColumn node."""
        pass

    @abstractmethod
    def visit_table_header(self, node: TableHeader) -> Any:
        """Visit a TableHeader node."""
        pass

    @abstractmethod
    def visit_table_body(self, node: TableBody) -> Any:
        """Visit a TableBody node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_table_caption(self, node: TableCaption) -> Any:
        """Visit a TableCaption node."""
        pass

    # Inline

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_special_text(self, node: SpecialText) -> Any:
        """Visit a SpecialText node."""
        pass

    @abstractmethod
    def visit_inline_code(self, node: InlineCode) -> Any:
        """Visit an InlineCode node."""
        pass

    @abstractmethod
    def visit_inline_html(self, node: InlineHtml) -> Any:
        """Visit an InlineHtml node."""
        pass

    @abstractmethod
    def visit_strong_emphasis(self, node: StrongEmphasis) -> Any:
        """Visit a StrongEmphasis node."""
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""
        pass

    @abstractmethod
    def visit_quoted(self, node: Quoted) -> Any:
        """Visit a Quoted node."""
        pass

    @abstractmethod
    def visit_simple(self, node: Simple) -> Any:
        """Visit a Simple node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_anchor_link(self, node: AnchorLink) -> Any:
        """Visit an AnchorLink node."""
        pass

    def generic_visit(self, node: Node) -> Any:
        """Fallback for node kinds outside the closed node set.

        The default implementation does nothing but can be overridden.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None
