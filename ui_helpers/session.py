"""
================================================================================
Browser Session
================================================================================

Thin wrapper over a Playwright BrowserContext that gives helper code a
driver-style view of the browser:

    - every open Page in the context is a window handle
    - exactly one handle is "active"; lookups and scripts target it
    - switching the active handle brings that page to the front

The context itself (launch, close, storage state) is owned by the caller.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, List, Optional

from loguru import logger
from playwright.sync_api import BrowserContext, ElementHandle, Page

from .exceptions import UIHelperError
from .locator import Locator


class Session:
    """
    Driver-style facade over a Playwright BrowserContext.

    Usage:
        >>> session = Session.from_page(page)
        >>> session.find_elements(Locator.tag_name("a"))
        [...]
        >>> session.switch_to_window(session.window_handles[1])
    """

    def __init__(
        self,
        context: BrowserContext,
        page: Optional[Page] = None,
    ):
        """
        Initialize session.

        Args:
            context: Playwright BrowserContext owning the windows
            page: Initially active page. Defaults to the first open page.
        """
        self.context = context
        if page is None and context.pages:
            page = context.pages[0]
        self._active: Optional[Page] = page

    @classmethod
    def from_page(cls, page: Page) -> "Session":
        """Build a session whose active window is ``page``."""
        return cls(page.context, page)

    # =========================================================================
    # Window Handles
    # =========================================================================

    @property
    def window_handles(self) -> List[Page]:
        """Snapshot of the currently open pages, in context order."""
        return list(self.context.pages)

    @property
    def active_page(self) -> Optional[Page]:
        """Active page, or None if no page was ever active."""
        return self._active

    @property
    def current_window_handle(self) -> Page:
        """
        Active page.

        Raises:
            UIHelperError: When the session has no active page
        """
        if self._active is None:
            raise UIHelperError("Session has no active window")
        return self._active

    @property
    def page(self) -> Page:
        """Alias of ``current_window_handle``."""
        return self.current_window_handle

    @property
    def current_url(self) -> str:
        return self.current_window_handle.url

    def switch_to_window(self, handle: Page) -> None:
        """
        Make ``handle`` the active window.

        Args:
            handle: One of ``window_handles``
        """
        self._active = handle
        handle.bring_to_front()
        logger.trace(f"Switched active window: {handle.url}")

    # =========================================================================
    # Element Lookup
    # =========================================================================

    def find_elements(self, locator: Locator) -> List[ElementHandle]:
        """All elements matching ``locator`` on the active page (may be empty)."""
        return self.page.query_selector_all(locator.selector)

    def find_element(self, locator: Locator) -> Optional[ElementHandle]:
        """First element matching ``locator``, or None."""
        return self.page.query_selector(locator.selector)

    # =========================================================================
    # Script Execution
    # =========================================================================

    def execute_script(self, script: str, arg: Any = None) -> Any:
        """
        Evaluate a JavaScript expression or function on the active page.

        Args:
            script: Expression or function source
            arg: Optional argument (may contain ElementHandles)

        Returns:
            Deserialized result of the evaluation
        """
        return self.page.evaluate(script, arg)


__all__ = [
    "Session",
]
