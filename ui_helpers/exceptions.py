"""
================================================================================
UI Helper Exceptions
================================================================================

Error taxonomy shared by every helper component.

Not-found is never an exception at the probe/resolver layer: it is expressed
as ``False`` or ``None``. The classes below cover the outcomes that callers
must not overlook.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations


class UIHelperError(Exception):
    """Base class for all helper errors."""
    pass


class WaitTimeoutError(UIHelperError, TimeoutError):
    """
    Raised when a wait condition is not satisfied before its deadline.

    Attributes:
        description: Human-readable description of the condition
        timeout: Configured timeout in seconds
        elapsed: Seconds actually spent waiting
    """

    def __init__(self, description: str, timeout: float, elapsed: float):
        self.description = description
        self.timeout = timeout
        self.elapsed = elapsed
        super().__init__(
            f"Timeout after {elapsed:.1f}s (limit {timeout}s) waiting for: {description}"
        )


class ElementNotFoundError(UIHelperError):
    """Raised when no candidate locator matched, or an action target is missing."""
    pass


class NoAlertPresentError(UIHelperError):
    """Raised when an alert operation is requested but no dialog is pending."""
    pass


class ScreenshotError(UIHelperError):
    """Raised when a screenshot cannot be written to disk."""
    pass


class ConfigurationError(UIHelperError):
    """Raised when configuration loading or validation fails."""
    pass


__all__ = [
    "UIHelperError",
    "WaitTimeoutError",
    "ElementNotFoundError",
    "NoAlertPresentError",
    "ScreenshotError",
    "ConfigurationError",
]
