"""
In-memory stand-ins for the Playwright sync API surface used by ui_helpers.

Only the calls the helpers make are modelled. Elements are registered on a
page under the Playwright selector string a Locator renders to.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Union

from playwright.sync_api import Error as PlaywrightError

from ui_helpers import Locator


PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


class FakeClock:
    """Monotonic clock whose sleep advances time instantly."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeElement:
    def __init__(
        self,
        tag: str = "div",
        text: str = "",
        visible: Union[bool, Callable[[], bool]] = True,
        attributes: Optional[Dict[str, str]] = None,
        value: str = "",
        box: Optional[Dict[str, float]] = None,
    ):
        self.tag = tag
        self.text = text
        self._visible = visible
        self.attributes = dict(attributes or {})
        self.value = value
        self.box = box
        self.stale = False
        self.error: Optional[Exception] = None
        self.pressed: List[str] = []
        self.hovered = 0
        self.evaluations: List[Any] = []

    def __repr__(self) -> str:
        return f"<FakeElement {self.tag}>"

    def _check(self) -> None:
        if self.error is not None:
            raise self.error
        if self.stale:
            raise PlaywrightError("Element is not attached to the DOM")

    def evaluate(self, expression: str, arg: Any = None) -> Any:
        self._check()
        self.evaluations.append((expression, arg))
        if "isConnected" in expression:
            return True
        if "removeAttribute('style')" in expression:
            self.attributes.pop("style", None)
        elif "setAttribute('style'" in expression:
            self.attributes["style"] = arg
        return None

    def is_visible(self) -> bool:
        self._check()
        return self._visible() if callable(self._visible) else self._visible

    def inner_text(self) -> str:
        self._check()
        return self.text

    def get_attribute(self, name: str) -> Optional[str]:
        self._check()
        return self.attributes.get(name)

    def input_value(self) -> str:
        self._check()
        return self.value

    def bounding_box(self) -> Optional[Dict[str, float]]:
        self._check()
        return self.box

    def hover(self) -> None:
        self._check()
        self.hovered += 1

    def press(self, key: str) -> None:
        self._check()
        self.pressed.append(key)


class FakeKeyboard:
    def __init__(self):
        self.events: List[tuple] = []

    def down(self, key: str) -> None:
        self.events.append(("down", key))

    def up(self, key: str) -> None:
        self.events.append(("up", key))

    def press(self, key: str) -> None:
        self.events.append(("press", key))


class FakeMouse:
    def __init__(self):
        self.events: List[tuple] = []

    def move(self, x: float, y: float) -> None:
        self.events.append(("move", x, y))

    def down(self) -> None:
        self.events.append(("down",))

    def up(self) -> None:
        self.events.append(("up",))


class FakeDialog:
    def __init__(self, message: str, type: str = "alert"):
        self.message = message
        self.type = type
        self.accepted = False
        self.dismissed = False
        self.prompt_text: Optional[str] = None

    def accept(self, prompt_text: Optional[str] = None) -> None:
        self.accepted = True
        self.prompt_text = prompt_text

    def dismiss(self) -> None:
        self.dismissed = True


class FakePage:
    def __init__(self, url: str = "about:blank", name: str = ""):
        self.url = url
        self.name = name or url
        self.context: Optional["FakeContext"] = None
        self.elements: Dict[str, List[FakeElement]] = {}
        self.keyboard = FakeKeyboard()
        self.mouse = FakeMouse()
        self.evaluations: List[Any] = []
        self.handlers: Dict[str, List[Callable]] = {}
        self.front_count = 0
        self.error: Optional[Exception] = None
        # Raised once each, in order, before any lookup result
        self.transient_errors: List[Exception] = []

    def __repr__(self) -> str:
        return f"<FakePage {self.name}>"

    def add(self, locator: Locator, *elements: FakeElement) -> "FakePage":
        self.elements.setdefault(locator.selector, []).extend(elements)
        return self

    def remove(self, locator: Locator) -> None:
        self.elements.pop(locator.selector, None)

    def query_selector_all(self, selector: str) -> List[FakeElement]:
        if self.transient_errors:
            raise self.transient_errors.pop(0)
        if self.error is not None:
            raise self.error
        return list(self.elements.get(selector, []))

    def query_selector(self, selector: str) -> Optional[FakeElement]:
        found = self.query_selector_all(selector)
        return found[0] if found else None

    def bring_to_front(self) -> None:
        self.front_count += 1

    def evaluate(self, expression: str, arg: Any = None) -> Any:
        self.evaluations.append((expression, arg))
        return None

    def screenshot(self, full_page: bool = False) -> bytes:
        return PNG_BYTES

    def on(self, event: str, handler: Callable) -> None:
        self.handlers.setdefault(event, []).append(handler)

    def emit(self, event: str, payload: Any) -> None:
        for handler in self.handlers.get(event, []):
            handler(payload)


class FakeContext:
    def __init__(self, *pages: FakePage):
        self.pages: List[FakePage] = []
        self.handlers: Dict[str, List[Callable]] = {}
        for page in pages:
            self._attach(page)

    def _attach(self, page: FakePage) -> None:
        page.context = self
        self.pages.append(page)

    def on(self, event: str, handler: Callable) -> None:
        self.handlers.setdefault(event, []).append(handler)

    def open(self, page: FakePage) -> FakePage:
        """Simulate a popup/new tab opening in this context."""
        self._attach(page)
        for handler in self.handlers.get("page", []):
            handler(page)
        return page

    def close(self, page: FakePage) -> None:
        self.pages.remove(page)
        page.emit("close", page)
