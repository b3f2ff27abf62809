"""Playwright page objects for driving and verifying the Wordle game."""

from verification.errors import ConfigurationError, WordValidationError
from verification.locators import Selector, WordleLocators
from verification.wordle_page import WordlePage

__all__ = [
    'ConfigurationError',
    'WordValidationError',
    'Selector',
    'WordleLocators',
    'WordlePage',
]
