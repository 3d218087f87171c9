#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/parsers/base.py
"""Base class for front ends that build a document tree from source text."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Union

from md2adoc.ast import Root
from md2adoc.exceptions import InvalidOptionsError
from md2adoc.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Union[str, bytes]) -> Root:
        """Parse source text into a document tree.

        Parameters
        ----------
        input_data : str or bytes
            Source text; bytes are decoded as UTF-8

        Returns
        -------
        Root
            Document tree

        """
        pass

    @staticmethod
    def _load_text_content(input_data: Union[str, bytes]) -> str:
        """Return the input as text, decoding bytes as UTF-8."""
        if isinstance(input_data, bytes):
            return input_data.decode("utf-8-sig", errors="replace")
        return input_data
