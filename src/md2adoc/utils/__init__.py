#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Helper modules used by the md2adoc renderer and parser."""

from md2adoc.utils.abbreviations import find_abbreviation_matches, substitute_abbreviations
from md2adoc.utils.escape import encode_entities, quote_if_needed
from md2adoc.utils.html_tables import convert_html_table, is_html_table
from md2adoc.utils.references import ReferenceCollector, ReferenceTarget, is_definition

__all__ = [
    "ReferenceCollector",
    "ReferenceTarget",
    "convert_html_table",
    "encode_entities",
    "find_abbreviation_matches",
    "is_definition",
    "is_html_table",
    "quote_if_needed",
    "substitute_abbreviations",
]
