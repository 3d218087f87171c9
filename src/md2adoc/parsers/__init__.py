#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Front ends that build the document tree from source text."""

from md2adoc.parsers.base import BaseParser
from md2adoc.parsers.markdown import MarkdownParser, markdown_to_tree

__all__ = ["BaseParser", "MarkdownParser", "markdown_to_tree"]
