#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2adoc/options/markdown.py
"""Configuration options for the Markdown front end."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2adoc.constants import (
    DEFAULT_PARSE_ABBREVIATIONS,
    DEFAULT_PARSE_DEFINITION_LISTS,
    DEFAULT_PARSE_REFERENCE_DEFINITIONS,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
)
from md2adoc.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-tree parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Parse GFM pipe tables.
    parse_strikethrough : bool, default True
        Parse ``~~strikethrough~~`` spans.
    parse_definition_lists : bool, default True
        Parse ``Term`` / ``: definition`` lists.
    parse_abbreviations : bool, default True
        Extract ``*[ABBR]: expansion`` definitions.
    parse_reference_definitions : bool, default True
        Keep link reference definitions as ReferenceDefinition nodes.

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse GFM pipe tables", "cli_name": "no-parse-tables", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse ~~strikethrough~~ spans", "cli_name": "no-parse-strikethrough"},
    )
    parse_definition_lists: bool = field(
        default=DEFAULT_PARSE_DEFINITION_LISTS,
        metadata={"help": "Parse definition lists", "cli_name": "no-parse-definition-lists"},
    )
    parse_abbreviations: bool = field(
        default=DEFAULT_PARSE_ABBREVIATIONS,
        metadata={"help": "Extract *[ABBR]: expansion definitions", "importance": "core"},
    )
    parse_reference_definitions: bool = field(
        default=DEFAULT_PARSE_REFERENCE_DEFINITIONS,
        metadata={"help": "Keep link reference definitions in the tree", "importance": "advanced"},
    )
