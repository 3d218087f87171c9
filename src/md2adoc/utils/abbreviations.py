#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/utils/abbreviations.py
"""Abbreviation substitution for body text.

Occurrences of a defined abbreviation are wrapped in an inline
``<abbr title="expansion">ABBR</abbr>`` tag. Only whole-word occurrences are
wrapped: the characters directly before and after a match must not be ASCII
letters or digits, so ``API`` matches in ``"Our API"`` but not in
``"MyAPIX"``.

"""

from __future__ import annotations

import logging
from typing import Mapping

from md2adoc.constants import ABBREVIATION_COLLISION_POLICIES, AbbreviationCollision
from md2adoc.utils.escape import encode_entities

logger = logging.getLogger(__name__)


def _is_word_char(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def find_abbreviation_matches(
    text: str, abbreviations: Mapping[str, str], collision: AbbreviationCollision = "longest"
) -> dict[int, str]:
    """Find every whole-word abbreviation occurrence in ``text``.

    Each key is searched with repeated ``str.find`` calls. When two keys
    match at the same offset the ``collision`` policy picks one:

    - ``"longest"``: the longer key wins; equal lengths go to the key that
      comes later in the mapping
    - ``"last"``: the key that comes later in the mapping wins

    Parameters
    ----------
    text : str
        Text to search
    abbreviations : Mapping[str, str]
        Abbreviation to expansion, in definition order
    collision : {"longest", "last"}, default "longest"
        Same-offset collision policy

    Returns
    -------
    dict[int, str]
        Start offset to matched abbreviation, sorted by offset

    Raises
    ------
    ValueError
        If ``collision`` is not a known policy

    """
    if collision not in ABBREVIATION_COLLISION_POLICIES:
        raise ValueError(f"collision must be one of {ABBREVIATION_COLLISION_POLICIES}, got {collision!r}")

    matches: dict[int, str] = {}
    for abbr in abbreviations:
        if not abbr:
            continue

        start = text.find(abbr)
        while start != -1:
            end = start + len(abbr)
            before_ok = start == 0 or not _is_word_char(text[start - 1])
            after_ok = end >= len(text) or not _is_word_char(text[end])
            if before_ok and after_ok:
                current = matches.get(start)
                if current is None or collision == "last" or len(abbr) >= len(current):
                    matches[start] = abbr
            start = text.find(abbr, end)

    return dict(sorted(matches.items()))


def substitute_abbreviations(
    text: str, abbreviations: Mapping[str, str], collision: AbbreviationCollision = "longest"
) -> str:
    """Wrap whole-word abbreviation occurrences in ``<abbr>`` tags.

    The output is built by walking the matches in offset order. A match that
    starts inside text already consumed by an earlier match is skipped.
    Literal text around the matches is entity-encoded; text without any
    match is returned unchanged.

    Parameters
    ----------
    text : str
        Plain text
    abbreviations : Mapping[str, str]
        Abbreviation to expansion. An empty expansion omits the ``title``
        attribute.
    collision : {"longest", "last"}, default "longest"
        Same-offset collision policy, see :func:`find_abbreviation_matches`

    Returns
    -------
    str
        Text with inline abbreviation markup

    Examples
    --------
        >>> substitute_abbreviations("Our API is REST; MyAPIX is not.", {"API": "Application Programming Interface"})
        'Our <abbr title="Application Programming Interface">API</abbr> is REST; MyAPIX is not.'

    """
    if not text or not abbreviations:
        return text

    matches = find_abbreviation_matches(text, abbreviations, collision)
    if not matches:
        return text

    parts: list[str] = []
    position = 0
    for start, abbr in matches.items():
        if start < position:
            logger.debug(f"Skipping overlapping abbreviation {abbr!r} at offset {start}")
            continue
        parts.append(encode_entities(text[position:start]))
        expansion = abbreviations[abbr]
        if expansion:
            parts.append(f'<abbr title="{encode_entities(expansion)}">')
        else:
            parts.append("<abbr>")
        parts.append(encode_entities(abbr))
        parts.append("</abbr>")
        position = start + len(abbr)
    parts.append(encode_entities(text[position:]))

    return "".join(parts)


__all__ = ["find_abbreviation_matches", "substitute_abbreviations"]
