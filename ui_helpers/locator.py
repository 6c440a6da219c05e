"""
================================================================================
Locator Descriptors
================================================================================

Immutable "how to find an element" descriptors.

A Locator pairs a strategy tag with a selector string and renders itself to
a Playwright selector. It is never resolved on its own: the Session does the
lookup.

Usage:
    >>> Locator.xpath("//button[@id='save']").selector
    "xpath=//button[@id='save']"
    >>> Locator.tag_name("html") == Locator("tag_name", "html")
    True

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


# Strategy tag -> Playwright selector renderer
_RENDERERS: Dict[str, Callable[[str], str]] = {
    "xpath": lambda v: f"xpath={v}",
    "css": lambda v: f"css={v}",
    "tag_name": lambda v: f"css={v}",
    "id": lambda v: f'css=[id="{_quote(v)}"]',
    "name": lambda v: f'css=[name="{_quote(v)}"]',
    "class_name": lambda v: f"css=.{v}",
    "link_text": lambda v: f'css=a:text-is("{_quote(v)}")',
    "partial_link_text": lambda v: f'css=a:has-text("{_quote(v)}")',
    "text": lambda v: f"text={v}",
    "test_id": lambda v: f'css=[data-testid="{_quote(v)}"]',
}

STRATEGIES = tuple(_RENDERERS)


@dataclass(frozen=True)
class Locator:
    """
    Value object describing how to find an element.

    Attributes:
        strategy: One of ``STRATEGIES``
        value: Raw selector for that strategy (XPath, CSS, tag name, ...)
    """
    strategy: str
    value: str

    def __post_init__(self) -> None:
        if self.strategy not in _RENDERERS:
            raise ValueError(
                f"Unknown locator strategy: {self.strategy!r}. "
                f"Expected one of: {', '.join(STRATEGIES)}"
            )
        if not self.value:
            raise ValueError(f"Empty selector for strategy {self.strategy!r}")

    @property
    def selector(self) -> str:
        """Playwright selector string for this locator."""
        return _RENDERERS[self.strategy](self.value)

    def __str__(self) -> str:
        return f"{self.strategy}={self.value}"

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def xpath(cls, value: str) -> "Locator":
        return cls("xpath", value)

    @classmethod
    def css(cls, value: str) -> "Locator":
        return cls("css", value)

    @classmethod
    def tag_name(cls, value: str) -> "Locator":
        return cls("tag_name", value)

    @classmethod
    def id(cls, value: str) -> "Locator":
        return cls("id", value)

    @classmethod
    def name(cls, value: str) -> "Locator":
        return cls("name", value)

    @classmethod
    def class_name(cls, value: str) -> "Locator":
        return cls("class_name", value)

    @classmethod
    def link_text(cls, value: str) -> "Locator":
        return cls("link_text", value)

    @classmethod
    def partial_link_text(cls, value: str) -> "Locator":
        return cls("partial_link_text", value)

    @classmethod
    def text(cls, value: str) -> "Locator":
        return cls("text", value)

    @classmethod
    def test_id(cls, value: str) -> "Locator":
        return cls("test_id", value)


# Selenium-style alias
By = Locator


__all__ = [
    "Locator",
    "By",
    "STRATEGIES",
]
