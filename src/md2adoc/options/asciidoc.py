#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2adoc/options/asciidoc.py
"""Configuration options for AsciiDoc rendering.

This module defines the options class for converting a Markdown document
tree into AsciiDoc text.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md2adoc.constants import (
    ABBREVIATION_COLLISION_POLICIES,
    DEFAULT_ABBREVIATION_COLLISION,
    DEFAULT_AUTO_DETECT_LANGUAGE,
    DEFAULT_HTML_BLOCK_MODE,
    DEFAULT_LANGUAGE,
    HTML_BLOCK_MODES,
    AbbreviationCollision,
    HtmlBlockMode,
)
from md2adoc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class AsciiDocRendererOptions(BaseRendererOptions):
    """Configuration options for tree-to-AsciiDoc rendering.

    Parameters
    ----------
    auto_detect_language : bool, default True
        Guess a ``[source,...]`` language for code blocks without a language
        tag. The guess looks at the block content in a fixed order: leading
        ``<`` means html, a trailing ``;`` means java, ``fun `` means kotlin,
        anything else gets ``default_language``.
    default_language : str, default "groovy"
        Language used when auto-detection finds no better match.
    html_block_mode : {"pass-through", "drop"}, default "pass-through"
        What to do with raw HTML blocks that are not tables:
        - "pass-through": emit the HTML unchanged
        - "drop": leave it out of the output
        HTML tables are always converted to AsciiDoc tables.
    abbreviation_collision : {"longest", "last"}, default "longest"
        Which abbreviation wins when two different abbreviations match at the
        same position of a text:
        - "longest": the longest abbreviation
        - "last": the one defined last in the document

    """

    auto_detect_language: bool = field(
        default=DEFAULT_AUTO_DETECT_LANGUAGE,
        metadata={"help": "Guess a source language for unlabeled code blocks", "importance": "core"},
    )
    default_language: str = field(
        default=DEFAULT_LANGUAGE,
        metadata={"help": "Fallback language for unlabeled code blocks", "importance": "advanced"},
    )
    html_block_mode: HtmlBlockMode = field(
        default=DEFAULT_HTML_BLOCK_MODE,
        metadata={
            "help": "How to handle raw HTML blocks that are not tables: pass-through or drop",
            "choices": HTML_BLOCK_MODES,
            "importance": "security",
        },
    )
    abbreviation_collision: AbbreviationCollision = field(
        default=DEFAULT_ABBREVIATION_COLLISION,
        metadata={
            "help": "Winner when two abbreviations match at the same offset: longest or last defined",
            "choices": ABBREVIATION_COLLISION_POLICIES,
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate AsciiDoc renderer options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.html_block_mode not in HTML_BLOCK_MODES:
            raise ValueError(f"html_block_mode must be one of {HTML_BLOCK_MODES}, got {self.html_block_mode!r}")

        if self.abbreviation_collision not in ABBREVIATION_COLLISION_POLICIES:
            raise ValueError(
                f"abbreviation_collision must be one of {ABBREVIATION_COLLISION_POLICIES}, "
                f"got {self.abbreviation_collision!r}"
            )

        if not self.default_language or any(ch.isspace() or ch in ",]" for ch in self.default_language):
            raise ValueError(f"default_language must be a non-empty language identifier, got {self.default_language!r}")
