#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/renderers/asciidoc.py
"""AsciiDoc rendering from the Markdown document tree.

This module provides the AsciiDocRenderer class which walks a document tree
once and produces AsciiDoc text. Rendering happens in three steps:

1. the tree is normalized and line breaks are classified
   (:func:`md2adoc.ast.transforms.prepare_tree`)
2. reference and abbreviation definitions are collected from the root
3. the tree is rendered into a :class:`~md2adoc.renderers.printer.Printer`,
   then runs of blank lines are collapsed and the result is trimmed

Block constructs surround themselves with blank lines generously; the final
blank-line collapse turns those into single separators.

"""

from __future__ import annotations

import logging
import re
from typing import Optional, Union
from urllib.parse import quote_plus

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
from md2adoc.ast.transforms import prepare_tree
from md2adoc.ast.utils import extract_text
from md2adoc.ast.visitors import NodeVisitor
from md2adoc.constants import (
    BLOCKQUOTE_FENCE_CHAR,
    BLOCKQUOTE_FENCE_STEP,
    BULLET_LIST_MARKER,
    COLUMN_ALIGNMENT_SPECS,
    DEFINITION_INDENT,
    FUN_KEYWORD_LANGUAGE,
    HTML_LANGUAGE,
    LISTING_DELIMITER,
    ORDERED_LIST_MARKER,
    QUOTE_CHARS,
    SEMICOLON_LANGUAGE,
    SIMPLE_NODE_TEXT,
    TABLE_DELIMITER,
    THEMATIC_BREAK,
)
from md2adoc.exceptions import UnsupportedNodeError
from md2adoc.options.asciidoc import AsciiDocRendererOptions
from md2adoc.renderers.base import BaseRenderer, CaptureMixin
from md2adoc.renderers.printer import Printer
from md2adoc.utils.abbreviations import substitute_abbreviations
from md2adoc.utils.decorators import debug_timer
from md2adoc.utils.escape import quote_if_needed
from md2adoc.utils.html_tables import convert_html_table, is_html_table
from md2adoc.utils.references import ReferenceCollector

logger = logging.getLogger(__name__)

_BLANK_LINE_RUN_RE = re.compile(r"^[ \t]*\r?\n{2,}", re.MULTILINE)


def collapse_blank_lines(text: str) -> str:
    """Collapse runs of blank lines into a single blank line and trim.

    Parameters
    ----------
    text : str
        Rendered text

    Returns
    -------
    str
        Text with at most one consecutive blank line, without leading or
        trailing whitespace

    """
    return _BLANK_LINE_RUN_RE.sub("\n", text).strip()


class AsciiDocRenderer(NodeVisitor, CaptureMixin, BaseRenderer):
    """Render a Markdown document tree to AsciiDoc text.

    The renderer keeps per-render state (output buffer, list nesting,
    blockquote depth, table context and the definition tables) and resets it
    at the start of every :meth:`render_to_string` call, so one instance can
    render several documents one after another.

    Parameters
    ----------
    options : AsciiDocRendererOptions or None, default = None
        AsciiDoc rendering options

    Examples
    --------
        >>> from md2adoc.ast import Header, Paragraph, Root, StrongEmphasis, Text
        >>> doc = Root(children=[
        ...     Header(level=1, children=[Text(text="Title")]),
        ...     Paragraph(children=[
        ...         Text(text="Hello "),
        ...         StrongEmphasis(is_strong=True, children=[Text(text="world")]),
        ...     ]),
        ... ])
        >>> print(AsciiDocRenderer().render_to_string(doc))
        = Title
        <BLANKLINE>
        Hello *world*

    """

    def __init__(self, options: AsciiDocRendererOptions | None = None):
        """Initialize the AsciiDoc renderer with options."""
        BaseRenderer._validate_options_type(options, AsciiDocRendererOptions, "asciidoc")
        options = options or AsciiDocRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: AsciiDocRendererOptions = options
        self._reset()

    def _reset(self) -> None:
        self.printer = Printer()
        self._references = ReferenceCollector()
        self._parents: list[Node] = []
        self._list_marker = ""
        self._list_level = 0
        self._blockquote_level = 0
        self._current_table: Optional[Table] = None
        self._current_column = 0
        self._in_table_header = False

    def render_to_string(self, root: Root, source: Optional[str] = None) -> str:
        """Render a document tree to an AsciiDoc string.

        The tree is normalized in place before rendering.

        Parameters
        ----------
        root : Root
            The document to render
        source : str or None, default = None
            Markdown source the tree was parsed from. Needed to tell hard
            line breaks from soft ones when the parser recorded source spans.

        Returns
        -------
        str
            AsciiDoc text without leading or trailing whitespace

        Raises
        ------
        UnsupportedNodeError
            If the tree contains a node the renderer does not know

        """
        self._reset()
        with debug_timer(logger, "AsciiDoc rendering"):
            if isinstance(root, Node):
                prepare_tree(root, source)
            self._visit(root)
            result = collapse_blank_lines(self.printer.text())
        self.printer = Printer()
        return result

    # ------------------------------------------------------------------
    # Traversal helpers
    # ------------------------------------------------------------------

    def _visit(self, node: Node) -> None:
        if not isinstance(node, Node):
            self.generic_visit(node)
            return
        node.accept(self)

    def _visit_children(self, node: Node) -> None:
        """Visit the children of ``node`` with ``node`` as their parent."""
        self._parents.append(node)
        try:
            for child in node.children:
                self._visit(child)
        finally:
            self._parents.pop()

    def _render_children_to_string(self, node: Node) -> str:
        self._parents.append(node)
        try:
            return self._render_to_string(node.children)
        finally:
            self._parents.pop()

    @property
    def _parent(self) -> Optional[Node]:
        return self._parents[-1] if self._parents else None

    def generic_visit(self, node: object) -> None:
        """Reject nodes outside the supported node set.

        Raises
        ------
        UnsupportedNodeError
            Always

        """
        raise UnsupportedNodeError(node)

    # ------------------------------------------------------------------
    # Document and definitions
    # ------------------------------------------------------------------

    def visit_root(self, node: Root) -> None:
        """Collect definitions, then render the remaining children."""
        self._references = ReferenceCollector().collect(node, self._render_to_string)
        self._visit_children(node)

    def visit_super_node(self, node: SuperNode) -> None:
        """Render a grouping node's children."""
        self._visit_children(node)

    def visit_reference_definition(self, node: ReferenceDefinition) -> None:
        """Reference definitions produce no output."""
        pass

    def visit_abbreviation_definition(self, node: AbbreviationDefinition) -> None:
        """Abbreviation definitions produce no output."""
        pass

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def visit_header(self, node: Header) -> None:
        """Render a header as ``=`` repeated ``level`` times."""
        self.printer.println().println()
        self.printer.print("=" * node.level + " ")
        self._visit_children(node)
        self.printer.println().println()

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a paragraph surrounded by blank lines.

        The first paragraph of a list item stays on the marker line.
        """
        if not self._is_list_item_text(node):
            self.printer.println().println()
        self._visit_children(node)
        self.printer.println().println()

    def _is_list_item_text(self, node: Node) -> bool:
        if self._list_level == 0:
            return False
        parent = self._parent
        return isinstance(parent, ListItem) and bool(parent.children) and parent.children[0] is node

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a block quote between ``_`` fences.

        Each nesting level widens the fence by four characters so that inner
        fences never close an outer quote.
        """
        self.printer.println().println()
        self._blockquote_level += BLOCKQUOTE_FENCE_STEP
        fence = BLOCKQUOTE_FENCE_CHAR * self._blockquote_level
        try:
            self.printer.print(fence).println()
            self._visit_children(node)
            self.printer.println().println()
            self.printer.print(fence)
        finally:
            self._blockquote_level -= BLOCKQUOTE_FENCE_STEP
        self.printer.println()

    def visit_bullet_list(self, node: BulletList) -> None:
        """Render a bullet list."""
        self._visit_list(node, BULLET_LIST_MARKER)

    def visit_ordered_list(self, node: OrderedList) -> None:
        """Render an ordered list."""
        self._visit_list(node, ORDERED_LIST_MARKER)

    def _visit_list(self, node: Union[BulletList, OrderedList], marker: str) -> None:
        previous_marker = self._list_marker
        self._list_marker = marker
        self._list_level += 1
        try:
            self._visit_children(node)
        finally:
            self._list_level -= 1
            self._list_marker = previous_marker

    def visit_list_item(self, node: ListItem) -> None:
        """Render a list item as the list marker repeated once per nesting level."""
        self.printer.println()
        self.printer.print(self._list_marker * self._list_level + " ")
        self._visit_children(node)

    def visit_verbatim(self, node: Verbatim) -> None:
        """Render a code block as a ``----`` listing with an optional source style."""
        language = node.language
        if (language is None or not language.strip()) and self.options.auto_detect_language:
            language = self._detect_language(node.text)

        self.printer.println()
        if language:
            self.printer.print(f"[source,{language}]")
        self.printer.println().print(LISTING_DELIMITER).println()
        self.printer.print(node.text)
        if not node.text.endswith("\n"):
            self.printer.print("\n")
        self.printer.print(LISTING_DELIMITER)
        self.printer.println().println()

    def _detect_language(self, text: str) -> str:
        """Guess the language of an unlabeled code block.

        The checks run in a fixed order and the first match wins.
        """
        if text.startswith("<"):
            language = HTML_LANGUAGE
        elif text.endswith(";"):
            language = SEMICOLON_LANGUAGE
        elif "fun " in text:
            language = FUN_KEYWORD_LANGUAGE
        else:
            language = self.options.default_language
        logger.debug(f"Guessed code block language: {language}")
        return language

    def visit_html_block(self, node: HtmlBlock) -> None:
        """Render a raw HTML block.

        HTML tables are converted to AsciiDoc tables. Other HTML is passed
        through or dropped depending on ``html_block_mode``.
        """
        text = node.text
        if not text:
            return

        self.printer.println()
        if is_html_table(text):
            self.printer.print(convert_html_table(text)).println()
        elif self.options.html_block_mode == "pass-through":
            self.printer.print(text.rstrip("\n")).println()
        else:
            logger.debug("Dropped non-table HTML block")

    def visit_definition_list(self, node: DefinitionList) -> None:
        """Render a definition list."""
        self.printer.println()
        self._visit_children(node)

    def visit_definition_term(self, node: DefinitionTerm) -> None:
        """Render a term followed by ``::``; its definition is indented."""
        self._visit_children(node)
        self.printer.indent(DEFINITION_INDENT)
        self.printer.print("::").println()

    def visit_definition(self, node: Definition) -> None:
        """Render a definition and end the term's indentation."""
        self._visit_children(node)
        if self.printer.indentation > 0:
            self.printer.indent(-DEFINITION_INDENT)
        self.printer.println()

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def visit_table(self, node: Table) -> None:
        """Render a table between ``|===`` delimiters.

        A ``[cols=...]`` line is emitted only when at least one column has
        an explicit alignment. Captions become a block title line.
        """
        previous_table = self._current_table
        self._current_table = node
        self._parents.append(node)

        try:
            captions = [child for child in node.children if isinstance(child, TableCaption)]
            for caption in captions:
                self._visit(caption)

            self.printer.println()
            if any(column.alignment is not None for column in node.columns):
                spec = ",".join(COLUMN_ALIGNMENT_SPECS[column.alignment] for column in node.columns)
                self.printer.print(f'[cols="{spec}"]').println()

            self.printer.print(TABLE_DELIMITER)
            for child in node.children:
                if not isinstance(child, TableCaption):
                    self._visit(child)
            self.printer.println().print(TABLE_DELIMITER).println()
        finally:
            self._parents.pop()
            self._current_table = previous_table

        logger.debug(f"Rendered table with {len(node.columns)} columns")

    def visit_table_caption(self, node: TableCaption) -> None:
        """Render a table caption as an AsciiDoc block title (``.Caption``)."""
        self.printer.println().print(".")
        self._visit_children(node)

    def visit_table_column(self, node: TableColumn) -> None:
        """Column specifications produce no cell output."""
        pass

    def visit_table_header(self, node: TableHeader) -> None:
        """Render the header rows of a table."""
        previous = self._in_table_header
        self._in_table_header = True
        try:
            self._visit_children(node)
        finally:
            self._in_table_header = previous

    def visit_table_body(self, node: TableBody) -> None:
        """Render the body rows of a table."""
        self._visit_children(node)

    def visit_table_row(self, node: TableRow) -> None:
        """Render a row on its own line; a header row is followed by a blank line."""
        self._current_column = 0
        self.printer.println()
        self._visit_children(node)
        if self._in_table_header:
            self.printer.println()

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a cell as ``|`` followed by its content.

        The column index is clamped to the last declared column, so cells
        past the declared width (e.g. after a wide ``colspan``) reuse the
        last column.
        """
        columns = self._current_table.columns if self._current_table is not None else []
        if columns:
            self._visit(columns[min(self._current_column, len(columns) - 1)])

        if self.printer.is_empty() or self.printer.ends_with("\n") or self.printer.ends_with(" "):
            self.printer.print("|")
        else:
            self.printer.print(" |")
        if node.col_span > 1:
            self.printer.print(f' colspan="{node.col_span}"')
        self._visit_children(node)

        self._current_column += node.col_span

    # ------------------------------------------------------------------
    # Inline
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render text, annotating abbreviations when any are defined."""
        if self._references.abbreviations:
            self.printer.print(
                substitute_abbreviations(
                    node.text, self._references.abbreviations, self.options.abbreviation_collision
                )
            )
        else:
            self.printer.print(node.text)

    def visit_special_text(self, node: SpecialText) -> None:
        """Render special characters entity-encoded."""
        self.printer.print_encoded(node.text)

    def visit_inline_code(self, node: InlineCode) -> None:
        """Render inline code in backticks."""
        self.printer.print("`").print_encoded(node.text).print("`")

    def visit_inline_html(self, node: InlineHtml) -> None:
        """Render inline HTML unchanged."""
        self.printer.print(node.text)

    def visit_anchor_link(self, node: AnchorLink) -> None:
        """Render a header anchor as its text."""
        self.printer.print(node.text)

    def visit_strong_emphasis(self, node: StrongEmphasis) -> None:
        """Render ``*strong*`` or ``_emphasis_``.

        An unclosed run prints its opening characters as plain text.
        """
        if node.is_closed:
            token = "*" if node.is_strong else "_"
            self.printer.print(token)
            self._visit_children(node)
            self.printer.print(token)
        else:
            self.printer.print(node.chars)
            self._visit_children(node)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render strikethrough with the ``line-through`` role."""
        self.printer.print("[line-through]#")
        self._visit_children(node)
        self.printer.print("#")

    def visit_quoted(self, node: Quoted) -> None:
        """Render smart quotes around the children."""
        opening, closing = QUOTE_CHARS[node.kind]
        self.printer.print(opening)
        self._visit_children(node)
        self.printer.print(closing)

    def visit_simple(self, node: Simple) -> None:
        """Render typographic characters, thematic breaks and line breaks."""
        if node.kind in SIMPLE_NODE_TEXT:
            self.printer.print(SIMPLE_NODE_TEXT[node.kind])
        elif node.kind == "horizontal_rule":
            self.printer.println().println().print(THEMATIC_BREAK)
        elif node.kind == "line_break":
            if node.hard:
                self.printer.print(" +")
            self.printer.println()
        else:
            raise UnsupportedNodeError(node, f"Don't know how to handle simple node kind {node.kind!r}")

    # ------------------------------------------------------------------
    # Links and images
    # ------------------------------------------------------------------

    def visit_link(self, node: Link) -> None:
        """Render a link.

        Explicit and resolved reference links whose text already is an
        ``image:`` macro (an image inside the link) are printed unchanged.
        """
        if node.kind == "explicit":
            text = self._render_children_to_string(node)
            if text.startswith("image:"):
                self.printer.print(text)
            else:
                self._print_link(node.url, text)
        elif node.kind == "reference":
            text = self._render_children_to_string(node)
            target = self._references.lookup(self._reference_label(node))
            if target is None:
                self._print_unresolved_reference("", node, text)
            elif text.startswith("image:"):
                self.printer.print(text)
            else:
                self._print_link(target.url, text)
        elif node.kind == "auto":
            self._print_link(node.url, node.url)
        elif node.kind == "mail":
            self._print_link(f"mailto:{node.url}", node.url)
        elif node.kind == "wiki":
            href = "./" + quote_plus(node.url.replace(" ", "-")) + ".html"
            self._print_link(href, node.url)
        else:
            raise UnsupportedNodeError(node, f"Don't know how to handle link kind {node.kind!r}")

    def visit_image(self, node: Image) -> None:
        """Render an image macro.

        An image directly inside a link carries the link target as its
        ``link=`` attribute.
        """
        text = self._render_children_to_string(node)

        if node.kind == "reference":
            target = self._references.lookup(self._reference_label(node))
            if target is None:
                self._print_unresolved_reference("!", node, text)
                return
            url = target.url
        else:
            url = node.url

        link_href = self._enclosing_link_href()
        if link_href is not None:
            self.printer.print(f"image:{url}[")
            if text:
                self.printer.print(quote_if_needed(text) + ",")
            self.printer.print(f"link={link_href}]")
        else:
            self.printer.print(f"image:{url}[{quote_if_needed(text)}]")

    def _enclosing_link_href(self) -> Optional[str]:
        """Return the target of the link directly containing the current node."""
        parent = self._parent
        if not isinstance(parent, Link):
            return None
        if parent.kind == "explicit":
            return parent.url
        if parent.kind == "reference":
            target = self._references.lookup(self._reference_label(parent))
            return target.url if target is not None else None
        return None

    @staticmethod
    def _reference_label(node: Union[Link, Image]) -> str:
        if node.reference_key is not None:
            return extract_text(node.reference_key)
        return extract_text(node.children)

    def _print_unresolved_reference(self, prefix: str, node: Union[Link, Image], text: str) -> None:
        """Print an undefined reference back as bracket text."""
        logger.debug(f"Unresolved reference: {self._reference_label(node)!r}")
        self.printer.print(f"{prefix}[{text}]")
        if node.separator_space is not None:
            self.printer.print(node.separator_space + "[")
            if node.reference_key is not None:
                self.printer.print(self._render_to_string(node.reference_key))
            self.printer.print("]")

    def _print_link(self, uri: str, text: str) -> None:
        """Print a link to ``uri``.

        ``#anchor`` targets become cross references. Targets without a
        scheme get the ``link:`` macro prefix. The text is printed in
        brackets unless it equals the printed target.
        """
        if uri.startswith("#"):
            self.printer.print(f"<<{uri[1:]},{text}>>")
            return

        if "://" not in uri:
            uri = "link:" + uri
        self.printer.print(uri)
        if uri != text:
            self.printer.print(f"[{quote_if_needed(text)}]")


__all__ = ["AsciiDocRenderer", "collapse_blank_lines"]
