import pytest

from testsuites.unit.fakes import FakeContext, FakeElement, FakePage
from ui_helpers import Locator, Session, UIHelperError


def test_defaults_to_first_page():
    first, second = FakePage("https://a.test"), FakePage("https://b.test")
    session = Session(FakeContext(first, second))

    assert session.current_window_handle is first
    assert session.window_handles == [first, second]
    assert session.current_url == "https://a.test"


def test_from_page_uses_page_context():
    first, second = FakePage("https://a.test"), FakePage("https://b.test")
    context = FakeContext(first, second)

    session = Session.from_page(second)

    assert session.context is context
    assert session.page is second


def test_no_active_window_raises():
    session = Session(FakeContext())

    assert session.active_page is None
    assert session.window_handles == []
    with pytest.raises(UIHelperError, match="no active window"):
        session.current_window_handle


def test_switch_brings_page_to_front():
    first, second = FakePage("https://a.test"), FakePage("https://b.test")
    session = Session(FakeContext(first, second))

    session.switch_to_window(second)

    assert session.current_url == "https://b.test"
    assert second.front_count == 1


def test_lookup_targets_active_page(session, page):
    button = FakeElement("button")
    page.add(Locator.id("save"), button)

    assert session.find_element(Locator.id("save")) is button
    assert session.find_elements(Locator.id("save")) == [button]
    assert session.find_element(Locator.id("other")) is None
    assert session.find_elements(Locator.id("other")) == []


def test_window_handles_is_a_snapshot(session, context):
    handles = session.window_handles
    context.open(FakePage("https://popup.test"))

    assert len(handles) == 1
    assert len(session.window_handles) == 2


def test_execute_script_passes_argument(session, page):
    session.execute_script("([x, y]) => window.scroll(x, y)", [0, 50])

    assert page.evaluations == [("([x, y]) => window.scroll(x, y)", [0, 50])]
