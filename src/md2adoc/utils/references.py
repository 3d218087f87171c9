#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/utils/references.py
"""Collection of reference and abbreviation definitions.

Reference links (``[text][key]``) and abbreviations can be used before they
are defined, so the renderer reads all definitions from the root before it
renders anything. Definitions only ever appear as direct children of the
root; nested definitions are not collected.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from md2adoc.ast.nodes import AbbreviationDefinition, Node, ReferenceDefinition, Root
from md2adoc.ast.utils import extract_text, normalize_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceTarget:
    """Resolved target of a link or image reference.

    Parameters
    ----------
    url : str
        Target URL
    title : str or None, default = None
        Optional title

    """

    url: str
    title: Optional[str] = None


def is_definition(node: Node) -> bool:
    """Return True for nodes that define references or abbreviations."""
    return isinstance(node, (ReferenceDefinition, AbbreviationDefinition))


class ReferenceCollector:
    """Lookup tables for reference and abbreviation definitions.

    Reference labels are matched case- and whitespace-insensitively.
    Abbreviations are matched verbatim. For both tables a later definition
    replaces an earlier one with the same key.

    Attributes
    ----------
    references : dict[str, ReferenceTarget]
        Normalized label to target
    abbreviations : dict[str, str]
        Abbreviation to rendered expansion, in definition order

    """

    def __init__(self) -> None:
        self.references: dict[str, ReferenceTarget] = {}
        self.abbreviations: dict[str, str] = {}

    def collect(self, root: Root, render_children: Callable[[list[Node]], str]) -> ReferenceCollector:
        """Populate both tables from the direct children of ``root``.

        Parameters
        ----------
        root : Root
            Document root
        render_children : callable
            Renders a list of nodes to a string; used for abbreviation
            expansions, which may contain markup

        Returns
        -------
        ReferenceCollector
            self, for chaining

        """
        pending_abbreviations: list[tuple[str, str]] = []

        for child in root.children:
            if isinstance(child, ReferenceDefinition):
                key = normalize_key(extract_text(child.children))
                self.references[key] = ReferenceTarget(url=child.url, title=child.title)
            elif isinstance(child, AbbreviationDefinition):
                pending_abbreviations.append((extract_text(child.children), render_children(child.expansion)))

        # Expansions are rendered before any abbreviation is registered so
        # that no expansion is itself abbreviation-substituted.
        for abbr, expansion in pending_abbreviations:
            self.abbreviations.pop(abbr, None)
            self.abbreviations[abbr] = expansion

        logger.debug(
            f"Collected {len(self.references)} reference definitions and {len(self.abbreviations)} abbreviations"
        )
        return self

    def lookup(self, label: str) -> Optional[ReferenceTarget]:
        """Find the target for a reference label.

        Parameters
        ----------
        label : str
            Label text as written in the reference

        Returns
        -------
        ReferenceTarget or None
            The target, or None if the label is not defined

        """
        return self.references.get(normalize_key(label))


__all__ = ["ReferenceCollector", "ReferenceTarget", "is_definition"]
