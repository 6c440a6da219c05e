"""
================================================================================
Candidate Resolver
================================================================================

First-match resolution over an ordered list of candidate locators.

    - Candidates are tried strictly in order, once each, with no waiting
    - The first candidate matching at least one element wins
    - "Nothing matched" is a normal outcome (None), or an explicit
      ElementNotFoundError via ``require_first_resolvable``
    - Fallback usage is recorded for maintenance insights

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from loguru import logger

from .exceptions import ElementNotFoundError
from .locator import Locator
from .probes import ElementProbe


@dataclass
class LocatorHealth:
    """
    Records a resolution that needed a fallback candidate.

    Attributes:
        element_name: Human-readable element name
        primary: The preferred (first) candidate
        fallback: The candidate that actually resolved
        fallback_index: Position of ``fallback`` in the candidate list
    """
    element_name: str
    primary: Locator
    fallback: Locator
    fallback_index: int


class CandidateResolver:
    """
    Picks the first resolvable locator among several alternatives.

    Usage:
        >>> resolver = CandidateResolver(probe)
        >>> resolver.first_resolvable([Locator.test_id("save"), Locator.id("save-btn")])
        Locator(strategy='id', value='save-btn')
        >>> resolver.xpath_finder("//nav//a[1]", "//header//a[1]")
        '//header//a[1]'
    """

    def __init__(self, probe: ElementProbe):
        self.probe = probe
        self._fallback_used: Dict[str, LocatorHealth] = {}

    def first_resolvable(
        self,
        candidates: Iterable[Locator],
        element_name: Optional[str] = None,
    ) -> Optional[Locator]:
        """
        Return the first candidate that currently matches an element.

        Args:
            candidates: Locators in order of preference
            element_name: Optional name used for logging and the health report

        Returns:
            Winning Locator, or None if no candidate matched
        """
        candidates = list(candidates)
        for index, candidate in enumerate(candidates):
            if not self.probe.is_located(candidate):
                continue

            if index > 0:
                name = element_name or str(candidates[0])
                self._fallback_used[name] = LocatorHealth(
                    element_name=name,
                    primary=candidates[0],
                    fallback=candidate,
                    fallback_index=index,
                )
                logger.warning(f"⚠️ Element '{name}' used fallback #{index}: {candidate}")
            else:
                logger.debug(f"✅ Resolved: {candidate}")
            return candidate

        logger.debug(f"No candidate matched among {len(candidates)} locators")
        return None

    def require_first_resolvable(
        self,
        candidates: Iterable[Locator],
        element_name: Optional[str] = None,
    ) -> Locator:
        """
        Like ``first_resolvable`` but signals "no candidate matched" explicitly.

        Raises:
            ElementNotFoundError: When no candidate matches
        """
        candidates = list(candidates)
        found = self.first_resolvable(candidates, element_name=element_name)
        if found is None:
            display_name = element_name or "element"
            tried = "\n".join(f"  - {c}" for c in candidates) or "  (no candidates)"
            raise ElementNotFoundError(
                f"No candidate matched for '{display_name}':\n{tried}"
            )
        return found

    def xpath_finder(self, *xpaths: str) -> Optional[str]:
        """
        Search XPath expressions in order.

        Returns:
            First XPath that matches an element, or None
        """
        found = self.first_resolvable(Locator.xpath(x) for x in xpaths)
        return found.value if found else None

    def get_health_report(self) -> str:
        """
        Render the elements that resolved through a fallback.

        Returns:
            Formatted report string
        """
        if not self._fallback_used:
            return "✅ All elements resolved through their primary locator."

        report_lines: List[str] = [
            "⚠️ Locator Health Report - Fallbacks Used:",
            "",
        ]
        for name, health in self._fallback_used.items():
            report_lines.extend([
                f"  [{name}]",
                f"    Primary: {health.primary}",
                f"    Used #{health.fallback_index}: {health.fallback}",
                "",
            ])
        return "\n".join(report_lines)


__all__ = [
    "CandidateResolver",
    "LocatorHealth",
]
