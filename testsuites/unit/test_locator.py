import pytest

from ui_helpers import By, Locator
from ui_helpers.locator import STRATEGIES


def test_locators_compare_by_value():
    assert Locator.xpath("//a") == Locator("xpath", "//a")
    assert Locator.xpath("//a") != Locator.css("//a")
    assert len({Locator.id("x"), Locator.id("x"), Locator.name("x")}) == 2


def test_locator_is_immutable():
    locator = Locator.tag_name("html")
    with pytest.raises(AttributeError):
        locator.value = "body"


@pytest.mark.parametrize(
    "locator, expected",
    [
        (Locator.xpath("//div[@id='a']"), "xpath=//div[@id='a']"),
        (Locator.tag_name("html"), "css=html"),
        (Locator.id("save"), 'css=[id="save"]'),
        (Locator.test_id("pay"), 'css=[data-testid="pay"]'),
        (Locator.name('q"x'), 'css=[name="q\\"x"]'),
    ],
)
def test_selector_rendering(locator, expected):
    assert locator.selector == expected


def test_unknown_strategy_and_empty_selector_are_rejected():
    with pytest.raises(ValueError, match="Unknown locator strategy"):
        Locator("shadow", "x")
    with pytest.raises(ValueError, match="Empty selector"):
        Locator("css", "")


def test_by_alias_and_strategy_list():
    assert By is Locator
    assert "xpath" in STRATEGIES and "tag_name" in STRATEGIES
    assert str(By.css(".btn")) == "css=.btn"
