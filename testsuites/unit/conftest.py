"""
Fixtures shared by the unit tests.
"""

import pytest

from testsuites.unit.fakes import FakeClock, FakeContext, FakePage
from ui_helpers import ElementProbe, Session


@pytest.fixture
def page() -> FakePage:
    return FakePage("https://shop.example.com/home", name="A")


@pytest.fixture
def context(page: FakePage) -> FakeContext:
    return FakeContext(page)


@pytest.fixture
def session(context: FakeContext, page: FakePage) -> Session:
    return Session(context, page)


@pytest.fixture
def probe(session: Session) -> ElementProbe:
    return ElementProbe(session)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
