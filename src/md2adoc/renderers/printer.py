#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/renderers/printer.py
"""Append-only output buffer used by the AsciiDoc renderer."""

from __future__ import annotations

from md2adoc.utils.escape import encode_entities


class Printer:
    """Accumulates rendered text and tracks the current indentation.

    ``println`` starts a new line: it emits a newline (unless nothing has
    been written yet) followed by ``indent`` spaces. Indentation only affects
    text written after a ``println``.

    Examples
    --------
        >>> p = Printer()
        >>> p.println().print("a").println().println().print("b").text()
        'a\\n\\nb'

    """

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0
        self.indentation = 0

    def print(self, text: str) -> Printer:
        """Append text as-is."""
        if text:
            self._parts.append(text)
            self._length += len(text)
        return self

    def print_encoded(self, text: str) -> Printer:
        """Append text with ``&``, ``<``, ``>`` and ``"`` entity-encoded."""
        return self.print(encode_entities(text))

    def println(self) -> Printer:
        """Start a new line at the current indentation."""
        if self._length:
            self.print("\n")
        return self.print(" " * self.indentation)

    def indent(self, delta: int) -> Printer:
        """Change the indentation by ``delta`` spaces."""
        self.indentation = max(0, self.indentation + delta)
        return self

    def ends_with(self, suffix: str) -> bool:
        """Return True if the buffer currently ends with ``suffix``."""
        if not self._parts:
            return False
        tail = self._parts[-1]
        if len(tail) < len(suffix):
            tail = self.text()
        return tail.endswith(suffix)

    def is_empty(self) -> bool:
        """Return True if nothing has been written."""
        return self._length == 0

    def text(self) -> str:
        """Return the accumulated text."""
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def __len__(self) -> int:
        return self._length


__all__ = ["Printer"]
