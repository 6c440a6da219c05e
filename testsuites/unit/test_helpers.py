import pytest

from testsuites.unit.fakes import FakeContext, FakeDialog, FakeElement, FakePage
from ui_helpers import HelperSettings, Locator, Session, UIHelpers, WaitTimeoutError
from ui_helpers.waits import PAGE_ROOT

BANNER = Locator.id("banner")


@pytest.fixture
def settings(tmp_path):
    return HelperSettings(
        element_timeout=0.2,
        page_timeout=0.3,
        poll_interval=0.1,
        settle_timeout=0,
        highlight_duration=0,
        screenshot_dir=tmp_path / "shots",
    )


@pytest.fixture
def helpers(session, settings):
    return UIHelpers(session, settings)


def test_settings_flow_into_components(helpers):
    assert helpers.waits.timeout_for("element") == 0.2
    assert helpers.waits.timeout_for("page") == 0.3
    assert helpers.waits.poll_interval == 0.1
    assert helpers.windows.settle_timeout == 0
    assert helpers.element_actions.highlight_duration == 0


def test_loads_settings_from_configuration(session):
    assert UIHelpers(session).settings.element_timeout == 10


def test_checks_dispatch_on_target_kind(helpers, page):
    element = FakeElement(text="Sale", attributes={"readonly": "true"})
    page.add(BANNER, element)

    for target in (BANNER, element):
        assert helpers.is_element_present(target) is True
        assert helpers.is_element_visible(target) is True
        assert helpers.is_any_text_present(target) is True
        assert helpers.is_readonly(target) is True

    missing = Locator.id("missing")
    assert helpers.is_element_present(missing) is False
    assert helpers.is_element_visible(missing) is False


def test_wait_for_element_uses_element_profile(helpers):
    with pytest.raises(WaitTimeoutError) as exc_info:
        helpers.wait_for_element(BANNER)

    assert exc_info.value.timeout == 0.2


def test_waits_succeed(helpers, page):
    page.add(BANNER, FakeElement())
    page.add(PAGE_ROOT, FakeElement("html"))

    helpers.wait_for_element(BANNER)
    helpers.wait_for_element(page.query_selector(BANNER.selector))
    helpers.wait_for_element_is_invisible(Locator.css(".spinner"))
    helpers.wait_for_page_load()


def test_page_load_uses_page_profile(helpers):
    with pytest.raises(WaitTimeoutError) as exc_info:
        helpers.wait_for_page_load()

    assert exc_info.value.timeout == 0.3


def test_resolution(helpers, page):
    page.add(Locator.xpath("//b"), FakeElement())

    assert helpers.first_resolvable([Locator.xpath("//a"), Locator.xpath("//b")]) == Locator.xpath("//b")
    assert helpers.xpath_finder("//a", "//b") == "//b"
    assert "Used #1" in helpers.get_locator_health_report()


def test_switch_window(settings):
    a = FakePage("https://shop.example.com/home", name="A")
    b = FakePage("https://shop.example.com/checkout", name="B")
    helpers = UIHelpers(Session(FakeContext(a, b), a), settings)

    assert helpers.switch_window("checkout") is b
    assert helpers.session.page is b


def test_actions_delegate(helpers, page):
    element = FakeElement("input", value="ab", box={"x": 1, "y": 2, "width": 2, "height": 2})
    page.add(BANNER, element)

    helpers.mouseover(BANNER)
    helpers.backspace_input_clear(BANNER)
    helpers.highlight_element(BANNER)
    helpers.scroll(0, 0)
    helpers.zoom_plus()

    assert element.hovered == 1
    assert element.pressed == ["Backspace"] * 3
    assert helpers.get_element_position(BANNER).x == 1
    assert helpers.get_element_position_y(BANNER) == 2
    assert page.keyboard.events[1] == ("press", "NumpadAdd")


def test_take_screenshot_default_location(helpers, settings):
    saved = helpers.take_screenshot(name="home")

    assert saved.parent == settings.screenshot_dir
    assert saved.name.startswith("home_")
    assert saved.exists()


def test_building_helpers_leaves_dialogs_unhandled(helpers, page, context):
    assert "dialog" not in page.handlers
    assert "page" not in context.handlers


def test_alerts(helpers, page):
    assert helpers.watch_alerts() is helpers.alerts
    dialog = FakeDialog("Saved")
    page.emit("dialog", dialog)

    assert helpers.is_alert_present() is True
    assert helpers.get_alert_text() == "Saved"
    helpers.dismiss_alert()
    assert dialog.dismissed is True
    assert helpers.is_alert_present() is False
