#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/utils/escape.py
"""Text escaping utilities for AsciiDoc output.

"""

from __future__ import annotations

import html


def encode_entities(text: str) -> str:
    """Encode ``&``, ``<``, ``>`` and ``"`` as HTML entities.

    Single quotes are left alone; AsciiDoc treats them as ordinary text.

    Parameters
    ----------
    text : str
        Text to encode

    Returns
    -------
    str
        Encoded text

    Examples
    --------
        >>> encode_entities('a < b & "c"')
        'a &lt; b &amp; &quot;c&quot;'

    """
    if not text:
        return text

    return html.escape(text, quote=False).replace('"', "&quot;")


def quote_if_needed(text: str | None) -> str:
    """Wrap text for use inside an AsciiDoc macro attribute list.

    A comma would start a new positional attribute in ``link:url[text]`` or
    ``image:src[alt]``, so text containing one is wrapped in double quotes.

    Parameters
    ----------
    text : str or None
        Link text or alt text

    Returns
    -------
    str
        The text, quoted if it contains a comma; empty for None

    """
    if not text:
        return ""
    if "," in text:
        return f'"{text}"'
    return text


__all__ = ["encode_entities", "quote_if_needed"]
