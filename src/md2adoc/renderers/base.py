#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/renderers/base.py
"""Base classes for document tree renderers.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import BufferedIOBase, RawIOBase
from pathlib import Path
from typing import IO, Callable, Optional, Union

from md2adoc.ast.nodes import Node, Root
from md2adoc.exceptions import InvalidOptionsError
from md2adoc.options.base import BaseRendererOptions
from md2adoc.renderers.printer import Printer


class BaseRenderer(ABC):
    """Abstract base class for tree renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, root: Root, source: Optional[str] = None) -> str:
        """Render the tree to a string.

        Parameters
        ----------
        root : Root
            Document tree to render
        source : str or None, default = None
            Original Markdown source the tree was parsed from

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render(self, root: Root, output: Union[str, Path, IO[str], IO[bytes]], source: Optional[str] = None) -> None:
        """Render the tree and write it to a file path or stream.

        Binary streams receive UTF-8 encoded text.

        Parameters
        ----------
        root : Root
            Document tree to render
        output : str, Path, IO[str] or IO[bytes]
            Output destination
        source : str or None, default = None
            Original Markdown source

        """
        self.write_text_output(self.render_to_string(root, source), output)

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[str], IO[bytes]]) -> None:
        """Write rendered text to a file path or a text/binary stream.

        Raises
        ------
        TypeError
            If output is not a path or a writable stream

        """
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
        elif isinstance(output, (BufferedIOBase, RawIOBase)) or "b" in getattr(output, "mode", ""):
            output.write(text.encode("utf-8"))
        elif hasattr(output, "write"):
            output.write(text)
        else:
            raise TypeError(f"Unsupported output type: {type(output).__name__}")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )


class CaptureMixin:
    """Mixin that renders nodes into a temporary printer.

    Some output depends on the rendered text of a node's children (link
    text, image alt text, abbreviation expansions). ``_render_to_string``
    swaps in a fresh :class:`Printer`, renders the nodes and restores the
    previous printer even if rendering fails.

    The implementing class must have a ``printer`` attribute and a
    ``_visit(node)`` method.

    """

    printer: Printer
    _visit: Callable[[Node], None]

    def _render_to_string(self, nodes: list[Node]) -> str:
        """Render a list of nodes to text without touching the main output.

        Parameters
        ----------
        nodes : list of Node
            Nodes to render

        Returns
        -------
        str
            Rendered text

        """
        saved_printer = self.printer
        self.printer = Printer()
        try:
            for node in nodes:
                self._visit(node)
            return self.printer.text()
        finally:
            self.printer = saved_printer


__all__ = ["BaseRenderer", "CaptureMixin"]
