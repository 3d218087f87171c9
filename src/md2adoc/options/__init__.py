#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2adoc.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy.
"""

from md2adoc.options.asciidoc import AsciiDocRendererOptions
from md2adoc.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2adoc.options.markdown import MarkdownParserOptions

__all__ = [
    "AsciiDocRendererOptions",
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownParserOptions",
]
