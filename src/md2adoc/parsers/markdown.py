#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/parsers/markdown.py
"""Markdown to document tree conversion.

This module builds the renderer's document tree from Markdown text using
mistune. mistune produces a token stream (``renderer=None``); the
:class:`MarkdownParser` maps every token to a node of :mod:`md2adoc.ast`.

Definitions are kept in the tree: link reference definitions and
abbreviation definitions (``*[HTML]: Hyper Text Markup Language``) are read
back from mistune's parser environment and appended to the root as
ReferenceDefinition and AbbreviationDefinition nodes.

"""

from __future__ import annotations

import logging
from typing import Any, Union

from md2adoc.ast import (
    AbbreviationDefinition,
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
    ReferenceDefinition,
    Root,
    Simple,
    Strikethrough,
    StrongEmphasis,
    SuperNode,
    Table,
    TableBody,
    TableCell,
    TableColumn,
    TableHeader,
    TableRow,
    Text,
    Verbatim,
)
from md2adoc.constants import DEPS_MARKDOWN, HARD_LINE_BREAK_MARKDOWN
from md2adoc.exceptions import ParsingError
from md2adoc.options.markdown import MarkdownParserOptions
from md2adoc.parsers.base import BaseParser
from md2adoc.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

_ALIGNMENTS = ("left", "center", "right")


def _parse_linebreak(inline: Any, m: Any, state: Any) -> int:
    # Same as mistune's rule, but the token keeps the matched text
    state.append_token({"type": "linebreak", "raw": m.group(0)})
    return m.end()


class MarkdownParser(BaseParser):
    r"""Convert Markdown to a document tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = MarkdownParser()
        >>> root = parser.parse("# Hello\n\nThis is **bold**.")
        >>> [type(child).__name__ for child in root.children]
        ['Header', 'Paragraph']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: Union[str, bytes]) -> Root:
        """Parse Markdown text into a document tree.

        Parameters
        ----------
        input_data : str or bytes
            Markdown text

        Returns
        -------
        Root
            Document root. Reference and abbreviation definitions follow the
            block content.

        Raises
        ------
        ParsingError
            If mistune fails on the input
        DependencyError
            If mistune is not installed

        """
        markdown_content = self._load_text_content(input_data)

        import mistune
        from mistune.plugins.abbr import REF_ABBR, parse_ref_abbr

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_definition_lists:
            plugins.append("def_list")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)
        if self.options.parse_abbreviations:
            # Only the definition rule; occurrences are annotated by the renderer
            markdown.block.register("ref_abbr", REF_ABBR, parse_ref_abbr, before="paragraph")
        markdown.inline.register("linebreak", None, _parse_linebreak)

        try:
            tokens, state = markdown.parse(markdown_content)
        except Exception as e:
            raise ParsingError(f"Failed to parse Markdown: {e}", parsing_stage="tokenize", original_error=e) from e

        children = self._process_tokens(tokens if isinstance(tokens, list) else [])

        env = state.env
        if self.options.parse_reference_definitions:
            children.extend(self._reference_definitions(env.get("ref_links") or {}))
        if self.options.parse_abbreviations:
            children.extend(self._abbreviation_definitions(env.get("ref_abbrs") or {}))

        logger.debug(f"Parsed Markdown into {len(children)} top-level nodes")
        return Root(children=children)

    # ------------------------------------------------------------------
    # Definitions
    # ------------------------------------------------------------------

    @staticmethod
    def _reference_definitions(ref_links: dict[str, dict[str, Any]]) -> list[Node]:
        definitions: list[Node] = []
        for key, data in ref_links.items():
            label = data.get("label") or key
            definitions.append(
                ReferenceDefinition(url=data.get("url", ""), title=data.get("title"), children=[Text(text=label)])
            )
        return definitions

    @staticmethod
    def _abbreviation_definitions(ref_abbrs: dict[str, str]) -> list[Node]:
        return [
            AbbreviationDefinition(children=[Text(text=abbr)], expansion=[Text(text=expansion)] if expansion else [])
            for abbr, expansion in ref_abbrs.items()
        ]

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of block tokens into nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single block token; returns None for tokens without output."""
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type == "paragraph":
            return Paragraph(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_text":
            # Text of a tight list item or definition: inline content without paragraph spacing
            return SuperNode(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return Simple(kind="horizontal_rule")
        elif token_type == "block_html":
            return HtmlBlock(text=token.get("raw", ""))
        elif token_type == "def_list":
            return self._process_definition_list(token)

        if token_type != "blank_line":
            logger.debug(f"Skipping unhandled Markdown token: {token_type}")
        return None

    def _process_heading(self, token: dict[str, Any]) -> Header:
        attrs = token.get("attrs") or {}
        level = attrs.get("level", 1)
        if not isinstance(level, int) or not 1 <= level <= 6:
            level = 1
        return Header(level=level, children=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> Verbatim:
        """Process a fenced or indented code block.

        The language is the first word of the fence info string.
        """
        attrs = token.get("attrs") or {}
        info = (attrs.get("info") or "").strip()
        language = info.split(maxsplit=1)[0] if info else None
        return Verbatim(text=token.get("raw", ""), language=language)

    def _process_list(self, token: dict[str, Any]) -> Union[BulletList, OrderedList]:
        attrs = token.get("attrs") or {}
        items: list[Node] = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") == "list_item"
        ]
        if attrs.get("ordered", False):
            return OrderedList(children=items)
        return BulletList(children=items)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process a table token.

        Column alignments come from the header cells.
        """
        columns: list[TableColumn] = []
        sections: list[Node] = []

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                cells = section.get("children", [])
                for cell in cells:
                    align = (cell.get("attrs") or {}).get("align")
                    columns.append(TableColumn(alignment=align if align in _ALIGNMENTS else None))
                sections.append(TableHeader(children=[TableRow(children=self._process_table_cells(cells))]))
            elif section_type == "table_body":
                rows: list[Node] = [
                    TableRow(children=self._process_table_cells(row.get("children", [])))
                    for row in section.get("children", [])
                ]
                sections.append(TableBody(children=rows))

        return Table(columns=columns, children=sections)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[Node]:
        return [TableCell(children=self._process_inline_tokens(cell.get("children", []))) for cell in cell_tokens]

    def _process_definition_list(self, token: dict[str, Any]) -> DefinitionList:
        """Process a definition list into alternating terms and definitions."""
        children: list[Node] = []
        for child in token.get("children", []):
            child_type = child.get("type", "")
            if child_type == "def_list_head":
                children.append(DefinitionTerm(children=self._process_inline_tokens(child.get("children", []))))
            elif child_type == "def_list_item":
                children.append(Definition(children=self._process_tokens(child.get("children", []))))
        return DefinitionList(children=children)

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens into nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "strikethrough": self._handle_strikethrough_token,
            "inline_html": self._handle_inline_html_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)
        logger.debug(f"Skipping unhandled inline Markdown token: {token_type}")
        return None

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        return Text(text=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> StrongEmphasis:
        return StrongEmphasis(
            is_strong=True, chars="**", children=self._process_inline_tokens(token.get("children", []))
        )

    def _handle_emphasis_token(self, token: dict[str, Any]) -> StrongEmphasis:
        return StrongEmphasis(
            is_strong=False, chars="*", children=self._process_inline_tokens(token.get("children", []))
        )

    def _handle_codespan_token(self, token: dict[str, Any]) -> InlineCode:
        return InlineCode(text=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle a link token.

        Autolinks arrive as links whose only child is the URL (or, for
        e-mail autolinks, the address behind ``mailto:``). Links resolved
        through a reference definition carry a ``label``.
        """
        attrs = token.get("attrs") or {}
        url = attrs.get("url", "")
        title = attrs.get("title")
        raw_children = token.get("children", [])
        children = self._process_inline_tokens(raw_children)

        if len(raw_children) == 1 and raw_children[0].get("type") == "text":
            text = raw_children[0].get("raw", "")
            if text == url:
                return Link(kind="auto", url=url, children=children)
            if url == f"mailto:{text}":
                return Link(kind="mail", url=text, children=children)

        if "label" in token and self.options.parse_reference_definitions:
            return Link(
                kind="reference",
                url=url,
                title=title,
                reference_key=[Text(text=token["label"])],
                separator_space="",
                children=children,
            )
        return Link(kind="explicit", url=url, title=title, children=children)

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        attrs = token.get("attrs") or {}
        children = self._process_inline_tokens(token.get("children", []))
        if "label" in token and self.options.parse_reference_definitions:
            return Image(
                kind="reference",
                url=attrs.get("url", ""),
                title=attrs.get("title"),
                reference_key=[Text(text=token["label"])],
                separator_space="",
                children=children,
            )
        return Image(kind="explicit", url=attrs.get("url", ""), title=attrs.get("title"), children=children)

    def _handle_linebreak_token(self, token: dict[str, Any]) -> Simple:
        # Hard only for exactly two spaces before the newline
        raw = token.get("raw", HARD_LINE_BREAK_MARKDOWN)
        return Simple(kind="line_break", hard=raw.startswith(HARD_LINE_BREAK_MARKDOWN))

    def _handle_softbreak_token(self, token: dict[str, Any]) -> Simple:
        return Simple(kind="line_break", hard=False)

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_inline_html_token(self, token: dict[str, Any]) -> InlineHtml:
        return InlineHtml(text=token.get("raw", ""))


def markdown_to_tree(markdown_content: Union[str, bytes], options: MarkdownParserOptions | None = None) -> Root:
    r"""Convert Markdown text to a document tree.

    Parameters
    ----------
    markdown_content : str or bytes
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Root
        Document tree

    Examples
    --------
    >>> root = markdown_to_tree("# Hello\\n\\nWorld")
    >>> len(root.children)
    2

    """
    return MarkdownParser(options).parse(markdown_content)


__all__ = ["MarkdownParser", "markdown_to_tree"]
