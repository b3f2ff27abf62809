import pytest

from fakes import BASE_URL, FakePage
from verification.wordle_page import WordlePage


@pytest.fixture
def fake_page():
    return FakePage()


@pytest.fixture
def wordle(fake_page):
    return WordlePage(fake_page, base_url=BASE_URL)
