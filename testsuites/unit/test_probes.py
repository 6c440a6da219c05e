import pytest
from playwright._impl._errors import TargetClosedError
from playwright.sync_api import Error as PlaywrightError

from testsuites.unit.fakes import FakeElement
from ui_helpers import Locator

FIELD = Locator.name("email")


class TestResolvedElements:

    def test_present_element(self, probe):
        assert probe.is_present(FakeElement()) is True

    def test_stale_element_is_not_present(self, probe):
        element = FakeElement()
        element.stale = True

        assert probe.is_present(element) is False
        assert probe.is_visible(element) is False
        assert probe.has_any_text(element) is False
        assert probe.is_readonly(element) is False

    def test_none_is_never_present(self, probe):
        assert probe.is_present(None) is False
        assert probe.is_visible(None) is False

    def test_closed_browser_propagates(self, probe):
        element = FakeElement()
        element.error = TargetClosedError()

        with pytest.raises(TargetClosedError):
            probe.is_present(element)

    def test_visibility(self, probe):
        assert probe.is_visible(FakeElement(visible=True)) is True
        assert probe.is_visible(FakeElement(visible=False)) is False

    @pytest.mark.parametrize(
        "text, expected",
        [("Checkout", True), ("  total \n", True), ("", False), ("   \n\t", False)],
    )
    def test_has_any_text(self, probe, text, expected):
        assert probe.has_any_text(FakeElement(text=text)) is expected

    @pytest.mark.parametrize(
        "attributes, expected",
        [
            ({}, False),
            ({"readonly": "true"}, True),
            ({"readonly": "TRUE"}, True),
            ({"readonly": ""}, True),
            ({"readonly": "readonly"}, True),
            ({"readonly": "false"}, True),
            ({"readonly": "1"}, True),
        ],
    )
    def test_is_readonly(self, probe, attributes, expected):
        assert probe.is_readonly(FakeElement("input", attributes=attributes)) is expected


class TestLocators:

    def test_missing_locator_reads_false_everywhere(self, probe):
        assert probe.is_located(FIELD) is False
        assert probe.is_located_visible(FIELD) is False
        assert probe.is_located_with_text(FIELD) is False
        assert probe.is_located_readonly(FIELD) is False

    def test_located_checks_use_first_match(self, probe, page):
        page.add(
            FIELD,
            FakeElement("input", text="a@b.c", attributes={"readonly": "true"}),
            FakeElement("input", visible=False),
        )

        assert probe.is_located(FIELD) is True
        assert probe.is_located_visible(FIELD) is True
        assert probe.is_located_with_text(FIELD) is True
        assert probe.is_located_readonly(FIELD) is True

    def test_repeated_checks_are_stable(self, probe, page):
        page.add(FIELD, FakeElement(visible=False))

        assert [probe.is_located(FIELD) for _ in range(3)] == [True] * 3
        assert [probe.is_located_visible(FIELD) for _ in range(3)] == [False] * 3

    def test_lookup_fault_propagates(self, probe, page):
        page.error = TargetClosedError()

        with pytest.raises(TargetClosedError):
            probe.is_located(FIELD)

    def test_navigation_during_lookup_reads_false(self, probe, page):
        page.add(FIELD, FakeElement("input", text="a@b.c", attributes={"readonly": ""}))
        page.error = PlaywrightError(
            "Execution context was destroyed, most likely because of a navigation"
        )

        assert probe.is_located(FIELD) is False
        assert probe.is_located_visible(FIELD) is False
        assert probe.is_located_with_text(FIELD) is False
        assert probe.is_located_readonly(FIELD) is False

        page.error = None
        assert probe.is_located(FIELD) is True
