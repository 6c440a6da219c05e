"""
================================================================================
UI Helpers Facade
================================================================================

One object per browser session bundling every helper:

    - Presence / visibility / text / read-only checks
    - Waits for elements, invisibility and page load
    - First-match locator resolution
    - Window switching by URL substring
    - Pointer, keyboard, scroll and zoom actions
    - Highlighting, screenshots and alerts

Element operations accept either a Locator or a resolved ElementHandle and
dispatch to the matching component entry point.

Usage:
    class CheckoutPage(UIHelpers):
        PAY_BUTTON = Locator.test_id("pay")

        def pay(self) -> None:
            self.wait_for_element(self.PAY_BUTTON)
            self.session.find_element(self.PAY_BUTTON).click()

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

import allure
from playwright.sync_api import ElementHandle, Page

from .actions import ElementActions, Point, Target, ViewportActions
from .alerts import AlertTracker
from .config import HelperSettings
from .locator import Locator
from .probes import ElementProbe
from .resolver import CandidateResolver
from .screenshots import take_screenshot, timestamped_path
from .session import Session
from .waits import ELEMENT_PROFILE, PAGE_PROFILE, WaitConfig, WaitEngine
from .windows import WindowSelector


class UIHelpers:
    """
    Convenience operations for UI test authors.

    Usage:
        >>> helpers = UIHelpers.from_page(page)
        >>> helpers.wait_for_page_load()
        >>> helpers.is_element_visible(Locator.id("banner"))
        True
    """

    def __init__(
        self,
        session: Session,
        settings: Optional[HelperSettings] = None,
    ):
        """
        Initialize helpers.

        Args:
            session: Session wrapping the browser context
            settings: Tunables. Loaded from configuration if not given.
        """
        self.session = session
        self.settings = settings or HelperSettings.from_loader()

        self.probe = ElementProbe(session)
        self.waits = WaitEngine(
            self.probe,
            profiles={
                ELEMENT_PROFILE: WaitConfig(timeout=self.settings.element_timeout),
                PAGE_PROFILE: WaitConfig(timeout=self.settings.page_timeout),
            },
            poll_interval=self.settings.poll_interval,
        )
        self.resolver = CandidateResolver(self.probe)
        self.windows = WindowSelector(
            session,
            settle_timeout=self.settings.settle_timeout,
            settle_interval=self.settings.settle_interval,
            no_match_policy=self.settings.no_match_policy,
        )
        self.element_actions = ElementActions(
            session, highlight_duration=self.settings.highlight_duration
        )
        self.viewport = ViewportActions(session, scroll_step=self.settings.scroll_step)
        self._alerts: Optional[AlertTracker] = None

    @classmethod
    def from_page(
        cls,
        page: Page,
        settings: Optional[HelperSettings] = None,
    ) -> "UIHelpers":
        return cls(Session.from_page(page), settings)

    # =========================================================================
    # Element Checks
    # =========================================================================

    def is_element_present(self, target: Target) -> bool:
        if isinstance(target, Locator):
            return self.probe.is_located(target)
        return self.probe.is_present(target)

    def is_element_visible(self, target: Target) -> bool:
        if isinstance(target, Locator):
            return self.probe.is_located_visible(target)
        return self.probe.is_visible(target)

    def is_any_text_present(self, target: Target) -> bool:
        if isinstance(target, Locator):
            return self.probe.is_located_with_text(target)
        return self.probe.has_any_text(target)

    def is_readonly(self, target: Target) -> bool:
        if isinstance(target, Locator):
            return self.probe.is_located_readonly(target)
        return self.probe.is_readonly(target)

    # =========================================================================
    # Waits
    # =========================================================================

    def wait_for_element(self, target: Target, timeout: Optional[float] = None) -> None:
        """
        Wait until the element is visible.

        Args:
            target: Locator or resolved element
            timeout: Seconds to wait (defaults to the element profile)

        Raises:
            WaitTimeoutError: If the element does not become visible in time
        """
        with allure.step(f"Wait for element: {target}"):
            if isinstance(target, Locator):
                self.waits.wait_for_located(target, timeout)
            else:
                self.waits.wait_for_element(target, timeout)

    def wait_for_element_is_invisible(
        self,
        locator: Locator,
        timeout: Optional[float] = None,
    ) -> None:
        with allure.step(f"Wait for element to disappear: {locator}"):
            self.waits.wait_for_invisible(locator, timeout)

    def wait_for_page_load(self, timeout: Optional[float] = None) -> None:
        with allure.step("Wait for page load"):
            self.waits.wait_for_page_load(timeout)

    # =========================================================================
    # Resolution
    # =========================================================================

    def first_resolvable(
        self,
        candidates: Sequence[Locator],
        element_name: Optional[str] = None,
    ) -> Optional[Locator]:
        return self.resolver.first_resolvable(candidates, element_name=element_name)

    def xpath_finder(self, *xpaths: str) -> Optional[str]:
        return self.resolver.xpath_finder(*xpaths)

    def get_locator_health_report(self) -> str:
        return self.resolver.get_health_report()

    # =========================================================================
    # Windows
    # =========================================================================

    def switch_window(self, url: str) -> Optional[Page]:
        """
        Switch to an open window whose URL contains ``url``.

        Returns:
            The page left active, or None when no window is open
        """
        with allure.step(f"Switch to window containing: {url}"):
            return self.windows.switch_to_window_containing(url)

    # =========================================================================
    # Actions
    # =========================================================================

    def mouseover(self, target: Target) -> None:
        self.element_actions.mouseover(target)

    def drag_and_drop(self, target: Target, x_offset: int, y_offset: int) -> None:
        self.element_actions.drag_and_drop(target, x_offset, y_offset)

    def get_element_position(self, target: Target) -> Point:
        return self.element_actions.get_element_position(target)

    def get_element_position_x(self, target: Target) -> int:
        return self.element_actions.get_element_position_x(target)

    def get_element_position_y(self, target: Target) -> int:
        return self.element_actions.get_element_position_y(target)

    def backspace_input_clear(
        self,
        target: Target,
        number_of_characters: Optional[int] = None,
    ) -> None:
        self.element_actions.backspace_input_clear(target, number_of_characters)

    def highlight_element_permanently(self, target: Target) -> ElementHandle:
        return self.element_actions.highlight_element_permanently(target)

    def highlight_element(self, target: Target, duration: Optional[float] = None) -> None:
        self.element_actions.highlight_element(target, duration)

    def scroll(self, x: int, y: int) -> None:
        self.viewport.scroll(x, y)

    def zoom_plus(self) -> None:
        self.viewport.zoom_plus()

    def zoom_minus(self) -> None:
        self.viewport.zoom_minus()

    # =========================================================================
    # Screenshots
    # =========================================================================

    def take_screenshot(
        self,
        path: Optional[Union[str, Path]] = None,
        name: str = "screenshot",
        full_page: bool = False,
    ) -> Path:
        """
        Capture the active window.

        Args:
            path: Destination file. Defaults to a timestamped file named
                ``name`` under ``settings.screenshot_dir``.
            name: Attachment / file base name
            full_page: Capture full scrollable page

        Returns:
            Path to saved screenshot
        """
        if path is None:
            path = timestamped_path(self.settings.screenshot_dir, name)
        return take_screenshot(self.session.page, path, full_page=full_page, name=name)

    # =========================================================================
    # Alerts
    # =========================================================================

    def watch_alerts(self) -> AlertTracker:
        """
        Start recording dialogs on every page of the session.

        Until this is called (directly or by any alert method) Playwright
        auto-dismisses dialogs. Call it before the action that raises the
        dialog.
        """
        if self._alerts is None:
            self._alerts = AlertTracker(self.session)
        return self._alerts

    @property
    def alerts(self) -> AlertTracker:
        return self.watch_alerts()

    def is_alert_present(self) -> bool:
        return self.alerts.is_alert_present()

    def get_alert_text(self) -> str:
        return self.alerts.get_alert_text()

    def accept_alert(self, prompt_text: Optional[str] = None) -> None:
        self.alerts.accept_alert(prompt_text)

    def dismiss_alert(self) -> None:
        self.alerts.dismiss_alert()


__all__ = [
    "UIHelpers",
]
