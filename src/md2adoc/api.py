#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/api.py
"""Public entry points for Markdown to AsciiDoc conversion.

Functions
---------
render_asciidoc : Render an already-parsed document tree
convert_markdown : Parse Markdown text and render it

Options can be passed as options objects or as keyword arguments named
after option fields; keyword arguments override fields of a passed object.

"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Optional, TypeVar, Union

from md2adoc.ast import Root
from md2adoc.options.asciidoc import AsciiDocRendererOptions
from md2adoc.options.base import CloneFrozenMixin
from md2adoc.options.markdown import MarkdownParserOptions
from md2adoc.parsers.markdown import MarkdownParser
from md2adoc.renderers.asciidoc import AsciiDocRenderer

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=CloneFrozenMixin)


def _field_names(options_class: type) -> set[str]:
    return {field.name for field in fields(options_class)}


def _create_options_from_kwargs(
    options_class: type[OptionsT],
    options: Optional[OptionsT],
    options_type_name: str,
    **kwargs: Any,
) -> OptionsT:
    """Build an options object from an optional base object and keyword arguments.

    Parameters
    ----------
    options_class : type
        Options class to instantiate
    options : options object or None
        Base options; copied with the keyword arguments applied
    options_type_name : str
        Name of the options type for logging (e.g., "parser" or "renderer")
    **kwargs
        Option field values

    Returns
    -------
    options object
        New options instance

    """
    option_names = _field_names(options_class)
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    missing = [k for k in kwargs if k not in valid_kwargs]
    if missing:
        logger.debug(f"Skipping unknown {options_type_name} options: {missing}")

    if options is not None:
        return options.create_updated(**valid_kwargs) if valid_kwargs else options
    return options_class(**valid_kwargs)


def _split_kwargs_for_parser_and_renderer(kwargs: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split keyword arguments between parser and renderer options.

    Raises
    ------
    TypeError
        If a keyword is not a field of either options class

    """
    parser_fields = _field_names(MarkdownParserOptions)
    renderer_fields = _field_names(AsciiDocRendererOptions)

    parser_kwargs = {k: v for k, v in kwargs.items() if k in parser_fields}
    renderer_kwargs = {k: v for k, v in kwargs.items() if k in renderer_fields}
    unmatched = [k for k in kwargs if k not in parser_fields and k not in renderer_fields]
    if unmatched:
        raise TypeError(f"Unknown conversion options: {', '.join(sorted(unmatched))}")
    return parser_kwargs, renderer_kwargs


def render_asciidoc(
    root: Root,
    source: Optional[str] = None,
    options: AsciiDocRendererOptions | None = None,
    **kwargs: Any,
) -> str:
    """Render a Markdown document tree to AsciiDoc.

    Parameters
    ----------
    root : Root
        Parsed document tree. It is normalized in place.
    source : str or None, default = None
        Markdown source the tree was parsed from, used to classify line
        breaks that carry source spans
    options : AsciiDocRendererOptions or None, default = None
        Renderer options
    **kwargs
        Renderer option fields overriding ``options``

    Returns
    -------
    str
        AsciiDoc text, trimmed

    Raises
    ------
    UnsupportedNodeError
        If the tree contains a node kind the renderer cannot handle
    InvalidOptionsError
        If ``options`` is not an AsciiDocRendererOptions

    Examples
    --------
        >>> from md2adoc.ast import Paragraph, Root, Text
        >>> render_asciidoc(Root(children=[Paragraph(children=[Text(text="Hi")])]))
        'Hi'

    """
    AsciiDocRenderer._validate_options_type(options, AsciiDocRendererOptions, "asciidoc")
    if kwargs:
        options = _create_options_from_kwargs(AsciiDocRendererOptions, options, "renderer", **kwargs)
    return AsciiDocRenderer(options).render_to_string(root, source)


def convert_markdown(
    markdown: Union[str, bytes, None],
    options: AsciiDocRendererOptions | None = None,
    parser_options: MarkdownParserOptions | None = None,
    **kwargs: Any,
) -> Union[str, bytes, None]:
    """Convert Markdown text to AsciiDoc.

    ``None`` and blank input are returned unchanged so that optional
    description fields can be passed through without checks.

    Parameters
    ----------
    markdown : str, bytes or None
        Markdown text
    options : AsciiDocRendererOptions or None, default = None
        Renderer options
    parser_options : MarkdownParserOptions or None, default = None
        Markdown front-end options
    **kwargs
        Parser or renderer option fields, routed by name

    Returns
    -------
    str, bytes or None
        AsciiDoc text, or the input itself when it is None or blank

    Raises
    ------
    TypeError
        If a keyword argument is not an option field
    DependencyError
        If mistune (or, for HTML tables, BeautifulSoup) is not installed

    Examples
    --------
        >>> print(convert_markdown("# Title\\n\\nHello **world**"))
        = Title
        <BLANKLINE>
        Hello *world*

    """
    if markdown is None:
        return None
    text = markdown.decode("utf-8-sig", errors="replace") if isinstance(markdown, bytes) else markdown
    if not text.strip():
        return markdown

    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(kwargs)
    MarkdownParser._validate_options_type(parser_options, MarkdownParserOptions, "markdown")
    if parser_kwargs:
        parser_options = _create_options_from_kwargs(MarkdownParserOptions, parser_options, "parser", **parser_kwargs)

    root = MarkdownParser(parser_options).parse(text)
    return render_asciidoc(root, text, options, **renderer_kwargs)


__all__ = ["convert_markdown", "render_asciidoc"]
