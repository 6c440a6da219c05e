"""
================================================================================
Element Probes
================================================================================

Stateless read-only predicates over an element or a Locator.

Each predicate has two entry points:
    - ``is_<x>(element)``           operates on a resolved ElementHandle
    - ``is_located_<x>(locator)``   resolves against the Session, then delegates

Probes never retry and never raise for a missing element: absence and stale
handles are reported as ``False``. A closed page/browser is a genuine driver
fault and propagates.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from loguru import logger
from playwright._impl._errors import TargetClosedError
from playwright.sync_api import ElementHandle
from playwright.sync_api import Error as PlaywrightError

from .locator import Locator
from .session import Session


T = TypeVar("T")


def _fold_stale(read: Callable[[], T], default: T) -> T:
    """Run a driver read, mapping stale handle or navigation errors to ``default``."""
    try:
        return read()
    except TargetClosedError:
        raise
    except PlaywrightError as e:
        logger.trace(f"Stale element reference ignored: {e}")
        return default


class ElementProbe:
    """
    Presence, visibility, text and read-only checks.

    Usage:
        >>> probe = ElementProbe(session)
        >>> probe.is_located(Locator.id("save"))
        True
        >>> probe.is_readonly(session.find_element(Locator.name("email")))
        False
    """

    def __init__(self, session: Session):
        self.session = session

    # =========================================================================
    # Resolved Elements
    # =========================================================================

    @staticmethod
    def is_present(element: Optional[ElementHandle]) -> bool:
        """True if the handle still points at a node attached to the document."""
        if element is None:
            return False
        return bool(_fold_stale(lambda: element.evaluate("node => node.isConnected"), False))

    @staticmethod
    def is_visible(element: Optional[ElementHandle]) -> bool:
        """Driver visibility computation (layout and CSS)."""
        if element is None:
            return False
        return bool(_fold_stale(element.is_visible, False))

    @staticmethod
    def has_any_text(element: Optional[ElementHandle]) -> bool:
        """True if the rendered text, trimmed, is non-empty."""
        if element is None:
            return False
        text = _fold_stale(element.inner_text, "")
        return bool(text and text.strip())

    @staticmethod
    def is_readonly(element: Optional[ElementHandle]) -> bool:
        """
        Read-only flag of an element.

        ``readonly`` is an HTML boolean attribute: any present value (including
        ``""`` and ``"false"``) makes the element read-only. Only an absent
        attribute reads as editable.
        """
        if element is None:
            return False
        return _fold_stale(lambda: element.get_attribute("readonly"), None) is not None

    # =========================================================================
    # Locators
    # =========================================================================

    def is_located(self, locator: Locator) -> bool:
        """True if ``locator`` matches at least one element right now."""
        return len(_fold_stale(lambda: self.session.find_elements(locator), [])) > 0

    def _find(self, locator: Locator) -> Optional[ElementHandle]:
        # A navigation can destroy the execution context mid-lookup
        return _fold_stale(lambda: self.session.find_element(locator), None)

    def is_located_visible(self, locator: Locator) -> bool:
        return self.is_visible(self._find(locator))

    def is_located_with_text(self, locator: Locator) -> bool:
        return self.has_any_text(self._find(locator))

    def is_located_readonly(self, locator: Locator) -> bool:
        return self.is_readonly(self._find(locator))


__all__ = [
    "ElementProbe",
]
