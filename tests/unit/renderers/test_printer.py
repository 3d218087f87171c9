#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_printer.py
"""Unit tests for the output buffer."""

import pytest

from md2adoc.renderers.printer import Printer


@pytest.mark.unit
class TestPrinter:
    """Test Printer behavior."""

    def test_println_on_empty_buffer_adds_nothing(self):
        printer = Printer()
        printer.println().println()
        assert printer.text() == ""
        assert printer.is_empty()

    def test_println_adds_newline_after_text(self):
        printer = Printer().print("a").println().print("b")
        assert printer.text() == "a\nb"

    def test_indentation_applies_after_println(self):
        printer = Printer().print("term")
        printer.indent(2)
        printer.print("::").println().print("definition")
        assert printer.text() == "term::\n  definition"

    def test_indent_clamped_at_zero(self):
        printer = Printer().indent(-4)
        assert printer.indentation == 0

    def test_print_encoded(self):
        assert Printer().print_encoded('<a href="x">&</a>').text() == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"

    def test_print_empty_string_is_noop(self):
        printer = Printer().print("")
        assert printer.is_empty()
        assert len(printer) == 0

    def test_ends_with(self):
        printer = Printer()
        assert not printer.ends_with("\n")
        printer.print("ab").print("c")
        assert printer.ends_with("c")
        assert printer.ends_with("bc")
        assert not printer.ends_with("\n")

    def test_ends_with_spanning_parts(self):
        printer = Printer().print("x\n").print(" ")
        assert printer.ends_with("\n ")

    def test_length_tracks_text(self):
        printer = Printer().print("abc").println().print("d")
        assert len(printer) == len(printer.text()) == 5
