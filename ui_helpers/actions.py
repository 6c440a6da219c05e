# ================================================================================
# Element Actions Module
# ================================================================================
#
# Pointer, keyboard and viewport pass-throughs on the session's active page.
#
# Every element action accepts either a resolved ElementHandle or a Locator;
# a Locator is resolved once against the active page and a missing element
# raises ElementNotFoundError. Nothing here waits or retries: combine with
# WaitEngine when the element may not be ready yet.
#
# ================================================================================

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional, Union

import allure
from loguru import logger
from playwright.sync_api import ElementHandle

from .exceptions import ElementNotFoundError
from .locator import Locator
from .session import Session


Target = Union[ElementHandle, Locator]

HIGHLIGHT_STYLE = "background: yellow; border: 2px solid red;"
DEFAULT_HIGHLIGHT_DURATION = 3.0
DEFAULT_SCROLL_STEP = 50


@dataclass(frozen=True)
class Point:
    """Element position in CSS pixels, relative to the viewport."""
    x: int
    y: int


def resolve_target(session: Session, target: Target) -> ElementHandle:
    """Return ``target`` as an ElementHandle, resolving a Locator if needed."""
    if not isinstance(target, Locator):
        return target
    element = session.find_element(target)
    if element is None:
        raise ElementNotFoundError(f"No element located by {target}")
    return element


class ElementActions:
    """
    Gestures and introspection on single elements.

    Example:
        actions = ElementActions(session)
        actions.mouseover(Locator.css("nav .menu"))
        actions.drag_and_drop(Locator.id("slider"), 40, 0)
    """

    def __init__(
        self,
        session: Session,
        highlight_duration: float = DEFAULT_HIGHLIGHT_DURATION,
    ):
        self.session = session
        self.highlight_duration = highlight_duration

    @allure.step("Hover element: {target}")
    def mouseover(self, target: Target) -> None:
        """Move the pointer over an element."""
        resolve_target(self.session, target).hover()

    @allure.step("Drag element {target} by ({x_offset}, {y_offset})")
    def drag_and_drop(self, target: Target, x_offset: int, y_offset: int) -> None:
        """
        Press on the element centre, move by an offset and release.

        Args:
            target: Element to drag
            x_offset: Pixels to move right (negative is left)
            y_offset: Pixels to move down (negative is up)
        """
        element = resolve_target(self.session, target)
        box = element.bounding_box()
        if box is None:
            raise ElementNotFoundError(f"Element {target} has no layout box to drag")

        start_x = box["x"] + box["width"] / 2
        start_y = box["y"] + box["height"] / 2
        mouse = self.session.page.mouse
        mouse.move(start_x, start_y)
        mouse.down()
        mouse.move(start_x + x_offset, start_y + y_offset)
        mouse.up()
        logger.debug(f"Dragged {target} by ({x_offset}, {y_offset})")

    def get_element_position(self, target: Target) -> Point:
        """
        Top-left corner of an element.

        Raises:
            ElementNotFoundError: When the element is not rendered
        """
        box = resolve_target(self.session, target).bounding_box()
        if box is None:
            raise ElementNotFoundError(f"Element {target} has no layout box")
        return Point(x=int(box["x"]), y=int(box["y"]))

    def get_element_position_x(self, target: Target) -> int:
        return self.get_element_position(target).x

    def get_element_position_y(self, target: Target) -> int:
        return self.get_element_position(target).y

    @allure.step("Clear input with backspace: {target}")
    def backspace_input_clear(
        self,
        target: Target,
        number_of_characters: Optional[int] = None,
    ) -> None:
        """
        Clear an input by pressing Backspace.

        Presses ``number_of_characters + 1`` times; the count defaults to the
        length of the current input value.
        """
        element = resolve_target(self.session, target)
        if number_of_characters is None:
            number_of_characters = len(element.input_value())
        for _ in range(number_of_characters + 1):
            element.press("Backspace")

    def highlight_element_permanently(self, target: Target) -> ElementHandle:
        """Paint a yellow background and red border on the element."""
        element = resolve_target(self.session, target)
        element.evaluate(
            "(node, style) => node.setAttribute('style', style)",
            HIGHLIGHT_STYLE,
        )
        return element

    @allure.step("Highlight element: {target}")
    def highlight_element(
        self,
        target: Target,
        duration: Optional[float] = None,
    ) -> None:
        """Highlight the element for ``duration`` seconds, then restore its style."""
        element = resolve_target(self.session, target)
        original_style = element.get_attribute("style")
        self.highlight_element_permanently(element)
        time.sleep(self.highlight_duration if duration is None else duration)
        if original_style is None:
            element.evaluate("node => node.removeAttribute('style')")
        else:
            element.evaluate(
                "(node, style) => node.setAttribute('style', style)",
                original_style,
            )


class ViewportActions:
    """Scroll and zoom operations on the active window."""

    def __init__(self, session: Session, scroll_step: int = DEFAULT_SCROLL_STEP):
        self.session = session
        self.scroll_step = scroll_step

    @allure.step("Scroll to ({x}, {y})")
    def scroll(self, x: int, y: int) -> None:
        """
        Scroll horizontally, then vertically, in ``scroll_step`` pixel steps.

        Args:
            x: Horizontal target position
            y: Vertical target position
        """
        for i in range(0, x + 1, self.scroll_step):
            self.session.execute_script("([x, y]) => window.scroll(x, y)", [i, 0])
        for j in range(0, y + 1, self.scroll_step):
            self.session.execute_script("([x, y]) => window.scroll(x, y)", [0, j])

    def zoom_plus(self) -> None:
        """Zoom the current window in one step (Control + NumpadAdd)."""
        self._zoom_chord("NumpadAdd")

    def zoom_minus(self) -> None:
        """Zoom the current window out one step (Control + NumpadSubtract)."""
        self._zoom_chord("NumpadSubtract")

    def _zoom_chord(self, key: str) -> None:
        keyboard = self.session.page.keyboard
        keyboard.down("Control")
        try:
            keyboard.press(key)
        finally:
            keyboard.up("Control")


__all__ = [
    "ElementActions",
    "ViewportActions",
    "Point",
    "Target",
    "resolve_target",
    "HIGHLIGHT_STYLE",
]
