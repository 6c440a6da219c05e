"""
================================================================================
Alert Tracking
================================================================================

Playwright delivers alert/confirm/prompt dialogs as ``dialog`` events instead
of a blocking "switch to alert" call. AlertTracker listens on every page of
the session's context and keeps the most recent unanswered dialog so tests
can query, accept or dismiss it. Closing the page that raised it drops it.

Note:
    While a listener is registered Playwright does not auto-dismiss dialogs.
    A pending dialog blocks page scripts until it is accepted or dismissed,
    so only create a tracker in tests that handle alerts.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

from loguru import logger
from playwright.sync_api import Dialog, Page

from .exceptions import NoAlertPresentError
from .session import Session


class AlertTracker:
    """
    Records pending dialogs across all pages of a session.

    Usage:
        >>> alerts = AlertTracker(session)
        >>> page.click("#delete")
        >>> alerts.get_alert_text()
        'Really delete?'
        >>> alerts.accept_alert()
    """

    def __init__(self, session: Session):
        self.session = session
        self._pending: Optional[Dialog] = None
        self._pending_page: Optional[Page] = None

        for page in session.window_handles:
            self.watch(page)
        session.context.on("page", self.watch)

    def watch(self, page: Page) -> None:
        """Start recording dialogs raised by ``page``."""
        page.on("dialog", lambda dialog: self._on_dialog(page, dialog))
        page.on("close", self._on_close)

    def _on_dialog(self, page: Page, dialog: Dialog) -> None:
        logger.debug(f"Dialog opened ({dialog.type}): {dialog.message}")
        self._pending = dialog
        self._pending_page = page

    def _on_close(self, page: Page) -> None:
        if self._pending is not None and self._pending_page is page:
            logger.debug(f"Dialog gone with its page: {self._pending.message}")
            self._clear()

    def _clear(self) -> None:
        self._pending = None
        self._pending_page = None

    def _take(self) -> Dialog:
        if self._pending is None:
            raise NoAlertPresentError("No alert is present")
        dialog = self._pending
        self._clear()
        return dialog

    def is_alert_present(self) -> bool:
        return self._pending is not None

    def get_alert_text(self) -> str:
        """
        Message of the pending dialog.

        Raises:
            NoAlertPresentError: When no dialog is pending
        """
        if self._pending is None:
            raise NoAlertPresentError("No alert is present")
        return self._pending.message

    def accept_alert(self, prompt_text: Optional[str] = None) -> None:
        """Accept the pending dialog, optionally answering a prompt."""
        dialog = self._take()
        if prompt_text is None:
            dialog.accept()
        else:
            dialog.accept(prompt_text)
        logger.debug(f"Accepted dialog: {dialog.message}")

    def dismiss_alert(self) -> None:
        """Dismiss (cancel) the pending dialog."""
        dialog = self._take()
        dialog.dismiss()
        logger.debug(f"Dismissed dialog: {dialog.message}")


__all__ = [
    "AlertTracker",
]
