#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/utils/html_tables.py
"""Conversion of raw HTML tables to AsciiDoc tables.

Markdown documents sometimes embed tables as raw HTML. This module turns the
first ``<table>`` of such a fragment into an AsciiDoc ``|===`` table.

Each ``<tr>`` produces up to two lines: its ``<th>`` cells followed by a
blank line, then its ``<td>`` cells. A cell keeps only its own text, except
that a ``code``, ``b``/``strong``, ``i``/``em`` or ``a`` child element
replaces it with that child's text wrapped in AsciiDoc inline markup. When a
cell has several such children, the last one wins.

"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from md2adoc.constants import DEPS_HTML, HTML_INLINE_FORMATS, TABLE_DELIMITER
from md2adoc.exceptions import MalformedInputError
from md2adoc.utils.decorators import requires_dependencies

if TYPE_CHECKING:
    from bs4.element import Tag

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def is_html_table(html: str) -> bool:
    """Return True if ``html`` starts with a table opening tag."""
    return html.startswith("<table")


def _own_text(element: Tag) -> str:
    """Return the element's direct text with whitespace collapsed."""
    from bs4.element import Comment, NavigableString

    pieces = [
        str(child)
        for child in element.children
        if isinstance(child, NavigableString) and not isinstance(child, Comment)
    ]
    return _WHITESPACE_RE.sub(" ", "".join(pieces)).strip()


def _format_cell(cell: Tag) -> str:
    """Format a cell's content with basic inline markup."""
    result = _own_text(cell)

    for child in cell.find_all(recursive=False):
        if child.name in HTML_INLINE_FORMATS:
            prefix, suffix = HTML_INLINE_FORMATS[child.name]
            result = f"{prefix}{_own_text(child)}{suffix}"
        elif child.name == "a":
            result = f"{child.get('href', '')}[{_own_text(child)}]"

    return result


def _col_span(cell: Tag) -> int:
    try:
        return int(cell.get("colspan", 1))
    except (TypeError, ValueError):
        return 1


def _build_row(row: Tag, cell_tag: str) -> str:
    """Build one pipe-delimited AsciiDoc row from the row's ``cell_tag`` cells."""
    parts = []
    for cell in row.find_all(cell_tag):
        marker = "|"
        span = _col_span(cell)
        if span > 1:
            marker = f'| colspan="{span}"'
        parts.append(f"{marker}{_format_cell(cell)} ")
    return "".join(parts).strip()


@requires_dependencies("html-table", DEPS_HTML)
def convert_html_table(html: str) -> str:
    """Convert the first table of an HTML fragment to an AsciiDoc table.

    Parameters
    ----------
    html : str
        HTML fragment starting with ``<table``

    Returns
    -------
    str
        AsciiDoc table wrapped in ``|===`` lines, ending with a newline

    Raises
    ------
    MalformedInputError
        If ``html`` does not start with ``<table``
    DependencyError
        If BeautifulSoup is not installed

    Examples
    --------
        >>> print(convert_html_table("<table><tr><th>A</th></tr><tr><td><b>x</b></td></tr></table>"), end="")
        |===
        |A
        <BLANKLINE>
        |*x*
        |===

    """
    if not is_html_table(html):
        preview = html[:40] + ("..." if len(html) > 40 else "")
        raise MalformedInputError(f"No table found in HTML: {preview}", input_text=html)

    from bs4 import BeautifulSoup

    soup = BeautifulSoup(html, "html.parser")
    table = soup.find("table")

    lines = [TABLE_DELIMITER, "\n"]
    rows = table.find_all("tr") if table is not None else []
    for row in rows:
        lines.append(_build_row(row, "th"))
        if row.find("th") is not None:
            lines.append("\n")
        lines.append(_build_row(row, "td"))
        lines.append("\n")
    lines.append(TABLE_DELIMITER)
    lines.append("\n")

    logger.debug(f"Converted HTML table with {len(rows)} rows")
    return "".join(lines)


__all__ = ["convert_html_table", "is_html_table"]
