"""md2adoc - Markdown to AsciiDoc conversion.

md2adoc renders a Markdown document tree as AsciiDoc markup. A mistune-based
front end builds the tree from Markdown text; the renderer handles headers,
lists, block quotes, code listings with language guessing, tables (including
raw HTML tables), links and reference links, images inside links and
abbreviations.

Examples
--------
Convert Markdown text:

    >>> from md2adoc import convert_markdown
    >>> print(convert_markdown("# Title\\n\\nHello **world**"))
    = Title
    <BLANKLINE>
    Hello *world*

Render a tree built by another front end:

    >>> from md2adoc import render_asciidoc
    >>> from md2adoc.ast import Header, Root, Text
    >>> render_asciidoc(Root(children=[Header(level=2, children=[Text(text="Usage")])]))
    '== Usage'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2adoc requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from md2adoc.api import convert_markdown, render_asciidoc
from md2adoc.exceptions import (
    DependencyError,
    InvalidOptionsError,
    MalformedInputError,
    Md2AdocError,
    ParsingError,
    RenderingError,
    UnsupportedNodeError,
    ValidationError,
)
from md2adoc.options import AsciiDocRendererOptions, MarkdownParserOptions
from md2adoc.utils.abbreviations import substitute_abbreviations
from md2adoc.utils.html_tables import convert_html_table

__all__ = [
    "AsciiDocRendererOptions",
    "DependencyError",
    "InvalidOptionsError",
    "MalformedInputError",
    "MarkdownParserOptions",
    "Md2AdocError",
    "ParsingError",
    "RenderingError",
    "UnsupportedNodeError",
    "ValidationError",
    "__version__",
    "convert_html_table",
    "convert_markdown",
    "render_asciidoc",
    "substitute_abbreviations",
]
