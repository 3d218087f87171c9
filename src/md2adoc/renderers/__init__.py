#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning a document tree into output text."""

from md2adoc.renderers.asciidoc import AsciiDocRenderer, collapse_blank_lines
from md2adoc.renderers.base import BaseRenderer, CaptureMixin
from md2adoc.renderers.printer import Printer

__all__ = ["AsciiDocRenderer", "BaseRenderer", "CaptureMixin", "Printer", "collapse_blank_lines"]
