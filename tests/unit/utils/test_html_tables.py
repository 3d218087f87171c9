#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_html_tables.py
"""Unit tests for raw HTML table conversion."""

import pytest

from md2adoc.exceptions import MalformedInputError
from md2adoc.utils.html_tables import convert_html_table, is_html_table


@pytest.mark.unit
class TestIsHtmlTable:
    """Test table detection."""

    def test_table_prefix(self):
        assert is_html_table('<table class="x"><tr><td>1</td></tr></table>')

    def test_other_html(self):
        assert not is_html_table("<div><table></table></div>")

    def test_leading_whitespace_not_a_table(self):
        assert not is_html_table("  <table></table>")


@pytest.mark.unit
class TestConvertHtmlTable:
    """Test HTML table to AsciiDoc conversion."""

    def test_header_and_body_rows(self):
        html = "<table><tr><th>Name</th><th>Value</th></tr><tr><td>a</td><td>1</td></tr></table>"
        assert convert_html_table(html) == "|===\n|Name |Value\n\n|a |1\n|===\n"

    def test_inline_formatting(self):
        html = (
            "<table><tr>"
            "<td><code>x()</code></td><td><b>bold</b></td><td><strong>s</strong></td>"
            "<td><i>it</i></td><td><em>em</em></td>"
            "</tr></table>"
        )
        assert convert_html_table(html) == "|===\n|`x()` |*bold* |*s* |_it_ |_em_\n|===\n"

    def test_anchor_cell(self):
        html = '<table><tr><td><a href="http://example.com">site</a></td></tr></table>'
        assert convert_html_table(html) == "|===\n|http://example.com[site]\n|===\n"

    def test_last_formatted_child_wins(self):
        html = "<table><tr><td><b>first</b> and <i>second</i></td></tr></table>"
        assert convert_html_table(html) == "|===\n|_second_\n|===\n"

    def test_colspan(self):
        html = '<table><tr><td colspan="3">wide</td><td>x</td></tr></table>'
        assert convert_html_table(html) == '|===\n| colspan="3"wide |x\n|===\n'

    def test_invalid_colspan_ignored(self):
        html = '<table><tr><td colspan="many">a</td></tr></table>'
        assert convert_html_table(html) == "|===\n|a\n|===\n"

    def test_whitespace_collapsed(self):
        html = "<table>\n  <tr>\n    <td>\n  spaced   out\n</td>\n  </tr>\n</table>"
        assert convert_html_table(html) == "|===\n|spaced out\n|===\n"

    def test_tbody_rows_included(self):
        html = "<table><thead><tr><th>H</th></tr></thead><tbody><tr><td>b</td></tr></tbody></table>"
        assert convert_html_table(html) == "|===\n|H\n\n|b\n|===\n"

    def test_non_table_raises(self):
        with pytest.raises(MalformedInputError, match="No table found"):
            convert_html_table("<p>not a table</p>")
