#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/constants.py
"""Constants and default values shared across md2adoc.

Option defaults live here so that options classes, the renderer and the
tests agree on a single value.

"""

from __future__ import annotations

from typing import Literal

# Markdown hard line break: two trailing spaces before the newline
HARD_LINE_BREAK_MARKDOWN = "  \n"

# Language guessing for unlabeled code blocks. The rule order is part of the
# output contract: html, then java, then kotlin, then the fallback.
HTML_LANGUAGE = "html"
SEMICOLON_LANGUAGE = "java"
FUN_KEYWORD_LANGUAGE = "kotlin"
DEFAULT_FALLBACK_LANGUAGE = "groovy"

# AsciiDoc markup
TABLE_DELIMITER = "|==="
LISTING_DELIMITER = "----"
THEMATIC_BREAK = "'''"
BLOCKQUOTE_FENCE_CHAR = "_"
BLOCKQUOTE_FENCE_STEP = 4
BULLET_LIST_MARKER = "*"
ORDERED_LIST_MARKER = "."
DEFINITION_INDENT = 2

COLUMN_ALIGNMENT_SPECS = {None: "<", "left": "<", "right": ">", "center": "^"}

SIMPLE_NODE_TEXT = {
    "apostrophe": "'",
    "ellipsis": "…",
    "emdash": "—",
    "endash": "–",
    "nbsp": "{nbsp}",
}

QUOTE_CHARS = {
    "double": ('"', '"'),
    "single": ("'", "'"),
    "double_angle": ("«", "»"),
}

# HTML table conversion: child tag -> (prefix, suffix)
HTML_INLINE_FORMATS = {
    "code": ("`", "`"),
    "b": ("*", "*"),
    "strong": ("*", "*"),
    "i": ("_", "_"),
    "em": ("_", "_"),
}

HtmlBlockMode = Literal["pass-through", "drop"]
HTML_BLOCK_MODES: tuple[str, ...] = ("pass-through", "drop")

AbbreviationCollision = Literal["longest", "last"]
ABBREVIATION_COLLISION_POLICIES: tuple[str, ...] = ("longest", "last")

DEFAULT_AUTO_DETECT_LANGUAGE = True
DEFAULT_LANGUAGE = DEFAULT_FALLBACK_LANGUAGE
DEFAULT_HTML_BLOCK_MODE: HtmlBlockMode = "pass-through"
DEFAULT_ABBREVIATION_COLLISION: AbbreviationCollision = "longest"

DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_DEFINITION_LISTS = True
DEFAULT_PARSE_ABBREVIATIONS = True
DEFAULT_PARSE_REFERENCE_DEFINITIONS = True

# Optional third-party dependencies: (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0")]
