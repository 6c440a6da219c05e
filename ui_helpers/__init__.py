"""
================================================================================
UI Helpers
================================================================================

Playwright-based helper layer for UI test authors.

Components:
    - locator: Immutable "how to find an element" descriptors
    - session: Driver-style view of a BrowserContext (windows, active page)
    - probes: Presence, visibility, text and read-only checks
    - waits: Condition polling with named timeout profiles
    - resolver: First-match resolution over candidate locators
    - windows: Window switching by URL substring
    - actions / alerts / screenshots: Pass-through conveniences
    - helpers: UIHelpers facade bundling all of the above

Author: Automation Team
License: MIT
================================================================================
"""

from .exceptions import (
    ConfigurationError,
    ElementNotFoundError,
    NoAlertPresentError,
    ScreenshotError,
    UIHelperError,
    WaitTimeoutError,
)
from .locator import By, Locator
from .session import Session
from .probes import ElementProbe
from .waits import Condition, WaitConfig, WaitEngine
from .resolver import CandidateResolver, LocatorHealth
from .windows import NoMatchPolicy, WindowSelector
from .actions import ElementActions, Point, ViewportActions
from .alerts import AlertTracker
from .screenshots import take_screenshot
from .config import ConfigLoader, HelperSettings, init_logger
from .helpers import UIHelpers

__version__ = "1.0.0"

__all__ = [
    "UIHelpers",
    "Session",
    "Locator",
    "By",
    "ElementProbe",
    "WaitEngine",
    "WaitConfig",
    "Condition",
    "CandidateResolver",
    "LocatorHealth",
    "WindowSelector",
    "NoMatchPolicy",
    "ElementActions",
    "ViewportActions",
    "Point",
    "AlertTracker",
    "take_screenshot",
    "ConfigLoader",
    "HelperSettings",
    "init_logger",
    "UIHelperError",
    "WaitTimeoutError",
    "ElementNotFoundError",
    "NoAlertPresentError",
    "ScreenshotError",
    "ConfigurationError",
]
