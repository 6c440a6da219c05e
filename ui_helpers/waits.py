# ================================================================================
# Wait Engine Module
# ================================================================================
#
# Condition polling with timeouts for UI synchronization.
#
# Key Features:
#   - "Becomes true" and "becomes false" condition families
#   - Fixed-interval polling, never faster than MIN_POLL_INTERVAL
#   - Named timeout profiles ("element" 10s, "page" 60s) passed at construction
#   - WaitTimeoutError naming the condition and the elapsed time
#   - Allure step integration
#
# Usage:
#   waits = WaitEngine(ElementProbe(session))
#   waits.wait_for_located(Locator.id("save"))
#   waits.wait_for_invisible(Locator.css(".spinner"), timeout=30)
#   waits.wait_for_page_load()
#
# ================================================================================

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import allure
from loguru import logger
from playwright.sync_api import ElementHandle

from .exceptions import WaitTimeoutError
from .locator import Locator
from .probes import ElementProbe


ELEMENT_PROFILE = "element"
PAGE_PROFILE = "page"

DEFAULT_POLL_INTERVAL = 0.5
MIN_POLL_INTERVAL = 0.1

# Root document element; the page counts as loaded once it is present
PAGE_ROOT = Locator.tag_name("html")


@dataclass
class WaitConfig:
    """
    Configuration for a family of waits.

    Attributes:
        timeout: Total timeout in seconds
    """
    timeout: float


# Pre-configured timeout profiles
DEFAULT_PROFILES: Dict[str, WaitConfig] = {
    # Element-level waits
    ELEMENT_PROFILE: WaitConfig(timeout=10.0),
    # Full page loads
    PAGE_PROFILE: WaitConfig(timeout=60.0),
}


@dataclass(frozen=True)
class Condition:
    """
    A described predicate polled by the WaitEngine.

    Attributes:
        description: Human-readable description for logs and errors
        check: Zero-argument predicate, evaluated once per poll
        expected: Outcome that satisfies the wait (False for "becomes false")
    """
    description: str
    check: Callable[[], Any]
    expected: bool = True

    def is_met(self, value: Any) -> bool:
        return bool(value) is self.expected


# ================================================================================
# Condition Factories
# ================================================================================

def visibility_of(probe: ElementProbe, element: ElementHandle) -> Condition:
    """Resolved element becomes visible."""
    return Condition(
        description=f"visibility of element {element}",
        check=lambda: probe.is_visible(element),
    )


def visibility_of_element_located(probe: ElementProbe, locator: Locator) -> Condition:
    """First element matched by ``locator`` becomes visible."""
    return Condition(
        description=f"visibility of element located by {locator}",
        check=lambda: probe.is_located_visible(locator),
    )


def invisibility_of_element_located(probe: ElementProbe, locator: Locator) -> Condition:
    """Element located by ``locator`` is absent or hidden."""
    return Condition(
        description=f"invisibility of element located by {locator}",
        check=lambda: probe.is_located_visible(locator),
        expected=False,
    )


def presence_of_element_located(probe: ElementProbe, locator: Locator) -> Condition:
    """``locator`` matches at least one element."""
    return Condition(
        description=f"presence of element located by {locator}",
        check=lambda: probe.is_located(locator),
    )


# ================================================================================
# Wait Engine
# ================================================================================

class WaitEngine:
    """
    Polls conditions until satisfied or a timeout elapses.

    The engine performs no writes against the session: the only reads are
    the condition's own. Exceptions raised by a condition are driver faults
    and propagate unchanged.

    Example:
        waits = WaitEngine(probe, profiles={"element": WaitConfig(5), "page": WaitConfig(30)})
        waits.wait_until(Condition("cart badge shows items", lambda: badge.inner_text() != "0"))
    """

    def __init__(
        self,
        probe: ElementProbe,
        profiles: Optional[Dict[str, WaitConfig]] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize wait engine.

        Args:
            probe: ElementProbe bound to the session to poll
            profiles: Named timeout profiles; must define "element" and "page"
            poll_interval: Seconds between evaluations (clamped to MIN_POLL_INTERVAL)
            clock: Monotonic clock, injectable for tests
            sleep: Sleep function, injectable for tests
        """
        self.probe = probe
        self.profiles = {**DEFAULT_PROFILES, **(profiles or {})}
        self.poll_interval = max(poll_interval, MIN_POLL_INTERVAL)
        self._clock = clock
        self._sleep = sleep

    def timeout_for(self, profile: str) -> float:
        """Default timeout of a named profile."""
        return self.profiles[profile].timeout

    def wait_until(
        self,
        condition: Condition,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        Poll ``condition`` until it reaches its expected outcome.

        The condition is evaluated at least once. The last sleep is clamped to
        the time remaining, so a success right before the deadline is seen.

        Args:
            condition: Condition to poll
            timeout: Seconds to wait. Defaults to the "element" profile.

        Returns:
            The last value returned by the condition

        Raises:
            WaitTimeoutError: If the deadline passes without success
        """
        if timeout is None:
            timeout = self.timeout_for(ELEMENT_PROFILE)

        with allure.step(f"Wait until: {condition.description}"):
            start = self._clock()
            attempt = 0
            logger.debug(f"Starting wait: {condition.description} (timeout={timeout}s)")

            while True:
                attempt += 1
                value = condition.check()
                elapsed = self._clock() - start

                if condition.is_met(value):
                    logger.debug(
                        f"Wait successful after {attempt} attempts "
                        f"({elapsed:.1f}s): {condition.description}"
                    )
                    return value

                if elapsed >= timeout:
                    error = WaitTimeoutError(condition.description, timeout, elapsed)
                    logger.error(str(error))
                    raise error

                self._sleep(min(self.poll_interval, timeout - elapsed))

    # =========================================================================
    # Element Waits
    # =========================================================================

    def wait_for_element(
        self,
        element: ElementHandle,
        timeout: Optional[float] = None,
    ) -> None:
        """Wait until a resolved element is visible."""
        self.wait_until(visibility_of(self.probe, element), timeout)

    def wait_for_located(
        self,
        locator: Locator,
        timeout: Optional[float] = None,
    ) -> None:
        """Wait until the first element matched by ``locator`` is visible."""
        self.wait_until(visibility_of_element_located(self.probe, locator), timeout)

    def wait_for_present(
        self,
        locator: Locator,
        timeout: Optional[float] = None,
    ) -> None:
        """Wait until ``locator`` matches at least one element."""
        self.wait_until(presence_of_element_located(self.probe, locator), timeout)

    def wait_for_invisible(
        self,
        locator: Locator,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Wait until the element located by ``locator`` is absent or hidden.

        Only a Locator is accepted: a resolved handle to a removed node cannot
        be told apart from a hidden one reliably.
        """
        self.wait_until(invisibility_of_element_located(self.probe, locator), timeout)

    # =========================================================================
    # Page Waits
    # =========================================================================

    def wait_for_page_load(self, timeout: Optional[float] = None) -> None:
        """
        Wait until the root document element is present.

        Args:
            timeout: Seconds to wait. Defaults to the "page" profile.
        """
        if timeout is None:
            timeout = self.timeout_for(PAGE_PROFILE)
        self.wait_until(presence_of_element_located(self.probe, PAGE_ROOT), timeout)


__all__ = [
    "WaitEngine",
    "WaitConfig",
    "Condition",
    "DEFAULT_PROFILES",
    "ELEMENT_PROFILE",
    "PAGE_PROFILE",
    "MIN_POLL_INTERVAL",
    "PAGE_ROOT",
    "visibility_of",
    "visibility_of_element_located",
    "invisibility_of_element_located",
    "presence_of_element_located",
]
