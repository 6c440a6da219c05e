"""
================================================================================
Window Selector
================================================================================

Switch the session's active window to the one whose URL contains a given
substring.

Algorithm:
    1. Settle: poll (bounded, cancellable) for the window count to change,
       so a window opened just before the call has time to register.
    2. Snapshot the handles. With more than one, remember the origin
       (currently active) handle.
    3. Switch to each handle in order and stop at the first whose URL
       contains the substring and, when an origin was recorded, is not the
       origin.
    4. No match: by default the last iterated handle stays active.
       NoMatchPolicy.RESTORE_ORIGIN switches back to the origin instead.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import threading
import time
from enum import Enum
from typing import Optional

from loguru import logger
from playwright.sync_api import Page

from .session import Session


DEFAULT_SETTLE_TIMEOUT = 2.0
DEFAULT_SETTLE_INTERVAL = 0.1


class NoMatchPolicy(str, Enum):
    """Where the active window ends when no handle matched."""
    LAST_ITERATED = "last_iterated"
    RESTORE_ORIGIN = "restore_origin"


class WindowSelector:
    """
    URL-substring based window switching.

    Usage:
        >>> selector = WindowSelector(session)
        >>> page.click("a[target=_blank]")
        >>> selector.switch_to_window_containing("/checkout")
    """

    def __init__(
        self,
        session: Session,
        settle_timeout: float = DEFAULT_SETTLE_TIMEOUT,
        settle_interval: float = DEFAULT_SETTLE_INTERVAL,
        no_match_policy: NoMatchPolicy = NoMatchPolicy.LAST_ITERATED,
    ):
        """
        Initialize window selector.

        Args:
            session: Session whose active window is switched
            settle_timeout: Upper bound in seconds for the settle poll (0 disables it)
            settle_interval: Seconds between window-count checks while settling
            no_match_policy: Where to end when nothing matches
        """
        self.session = session
        self.settle_timeout = settle_timeout
        self.settle_interval = settle_interval
        self.no_match_policy = NoMatchPolicy(no_match_policy)
        self._cancel = threading.Event()

    def cancel_settle(self) -> None:
        """
        End a running settle poll early.

        Cancelling is a no-op for the selection itself: it proceeds with the
        handles open at that moment.
        """
        self._cancel.set()

    def _settle(self) -> None:
        """Wait up to ``settle_timeout`` for the window count to change."""
        baseline = len(self.session.window_handles)
        deadline = time.monotonic() + self.settle_timeout
        try:
            while True:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return
                if self._cancel.wait(min(self.settle_interval, remaining)):
                    logger.debug("Window settle cancelled")
                    return
                if len(self.session.window_handles) != baseline:
                    return
        finally:
            self._cancel.clear()

    def switch_to_window_containing(self, url_substring: str) -> Optional[Page]:
        """
        Switch the active window to the first one whose URL contains ``url_substring``.

        Args:
            url_substring: Part of the target window's URL

        Returns:
            The page left active, or None when no window is open
        """
        self._settle()

        handles = self.session.window_handles
        if not handles:
            logger.warning(f"No open windows while looking for '{url_substring}'")
            return None

        origin = self.session.active_page if len(handles) > 1 else None

        matched = False
        for handle in handles:
            self.session.switch_to_window(handle)
            if url_substring in self.session.current_url and (origin is None or handle != origin):
                matched = True
                break

        if not matched and origin is not None and self.no_match_policy is NoMatchPolicy.RESTORE_ORIGIN:
            self.session.switch_to_window(origin)

        active = self.session.active_page
        if matched:
            logger.info(f"Switched to window containing '{url_substring}': {active.url}")
        else:
            logger.warning(
                f"No window URL contains '{url_substring}'; "
                f"active window is {active.url} ({self.no_match_policy.value})"
            )
        return active


__all__ = [
    "WindowSelector",
    "NoMatchPolicy",
    "DEFAULT_SETTLE_TIMEOUT",
    "DEFAULT_SETTLE_INTERVAL",
]
