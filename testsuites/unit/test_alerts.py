import pytest

from testsuites.unit.fakes import FakeDialog, FakePage
from ui_helpers import AlertTracker, NoAlertPresentError


@pytest.fixture
def alerts(session):
    return AlertTracker(session)


def test_no_alert(alerts):
    assert alerts.is_alert_present() is False
    with pytest.raises(NoAlertPresentError):
        alerts.get_alert_text()
    with pytest.raises(NoAlertPresentError):
        alerts.accept_alert()
    with pytest.raises(NoAlertPresentError):
        alerts.dismiss_alert()


def test_accept_pending_alert(alerts, page):
    dialog = FakeDialog("Really delete?", type="confirm")
    page.emit("dialog", dialog)

    assert alerts.is_alert_present() is True
    assert alerts.get_alert_text() == "Really delete?"

    alerts.accept_alert()

    assert dialog.accepted is True
    assert alerts.is_alert_present() is False


def test_accept_prompt_with_text(alerts, page):
    dialog = FakeDialog("Name?", type="prompt")
    page.emit("dialog", dialog)

    alerts.accept_alert("Ada")

    assert dialog.prompt_text == "Ada"


def test_dismiss_pending_alert(alerts, page):
    dialog = FakeDialog("Leave page?")
    page.emit("dialog", dialog)

    alerts.dismiss_alert()

    assert dialog.dismissed is True
    assert alerts.is_alert_present() is False


def test_watches_pages_opened_later(alerts, context):
    popup = context.open(FakePage("https://pay.example.com"))
    popup.emit("dialog", FakeDialog("Payment failed"))

    assert alerts.get_alert_text() == "Payment failed"


def test_closing_the_page_drops_its_alert(alerts, context, page):
    popup = context.open(FakePage("https://pay.example.com"))
    popup.emit("dialog", FakeDialog("Payment failed"))

    context.close(popup)

    assert alerts.is_alert_present() is False
    with pytest.raises(NoAlertPresentError):
        alerts.get_alert_text()


def test_closing_another_page_keeps_the_alert(alerts, context, page):
    popup = context.open(FakePage("https://pay.example.com"))
    page.emit("dialog", FakeDialog("Unsaved changes"))

    context.close(popup)

    assert alerts.get_alert_text() == "Unsaved changes"
