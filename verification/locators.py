import re
from typing import NamedTuple, Optional

ROLE = 'role'
TEST_ID = 'test_id'
LABEL = 'label'
CSS = 'css'


class Selector(NamedTuple):
    """How to find one element: a strategy, its value, and an optional parent rule."""
    strategy: str
    value: str
    name: Optional[re.Pattern] = None
    parent: Optional[str] = None


# Prefer role and test-id rules; CSS module class names change between deploys.
DEFAULT_SELECTORS = {
    # Modals
    'terms_modal': Selector(CSS, '.purr-blocker-card__content'),
    'terms_continue_button': Selector(ROLE, 'button', re.compile('continue', re.I), parent='terms_modal'),
    'play_button': Selector(TEST_ID, 'Play'),
    'modal_overlay': Selector(TEST_ID, 'modal-overlay'),
    'modal_close_button': Selector(ROLE, 'button', re.compile('close', re.I), parent='modal_overlay'),

    # Game board
    'game_board': Selector(CSS, '.Board-module_board__jeoPS'),
    'board_rows': Selector(CSS, '.Row-module_row__pwpBq', parent='game_board'),

    # Keyboard
    'enter_key': Selector(ROLE, 'button', re.compile('enter', re.I)),

    # Toasts
    'toast_container': Selector(CSS, '#ToastContainer-module_gameToaster__HPkaC'),
}

KEYBOARD_LETTER = Selector(LABEL, 'add {letter}')
ROW_TILE = Selector(TEST_ID, 'tile')


def apply_selector(scope, selector):
    """Run a single selector against a page or locator and return the locator."""
    if selector.strategy == ROLE:
        if selector.name is None:
            return scope.get_by_role(selector.value)
        return scope.get_by_role(selector.value, name=selector.name)
    if selector.strategy == TEST_ID:
        return scope.get_by_test_id(selector.value)
    if selector.strategy == LABEL:
        return scope.get_by_label(selector.value)
    if selector.strategy == CSS:
        return scope.locator(selector.value)
    raise ValueError(f'Unknown selector strategy: {selector.strategy!r}')


class WordleLocators:
    """Resolves locators for the Wordle page. Nothing here waits or clicks."""

    def __init__(self, page, selectors=None):
        self.page = page
        self.selectors = dict(DEFAULT_SELECTORS)
        if selectors:
            self.selectors.update(selectors)

    def resolve(self, name, _seen=()):
        if name in _seen:
            chain = ' -> '.join(_seen + (name,))
            raise ValueError(f'Selector parents form a cycle: {chain}')
        selector = self.selectors[name]
        scope = self.page if selector.parent is None else self.resolve(selector.parent, _seen + (name,))
        return apply_selector(scope, selector)

    @property
    def terms_of_service_modal(self):
        return self.resolve('terms_modal')

    @property
    def terms_of_service_continue_button(self):
        return self.resolve('terms_continue_button')

    @property
    def play_button(self):
        return self.resolve('play_button')

    @property
    def modal_overlay(self):
        return self.resolve('modal_overlay')

    @property
    def modal_close_button(self):
        return self.resolve('modal_close_button')

    @property
    def game_board(self):
        return self.resolve('game_board')

    @property
    def board_rows(self):
        return self.resolve('board_rows')

    @property
    def enter_key(self):
        return self.resolve('enter_key')

    @property
    def toast_container(self):
        return self.resolve('toast_container')

    def keyboard_letter(self, letter):
        """Locator for the on-screen key of `letter`, matched case-insensitively."""
        selector = KEYBOARD_LETTER._replace(value=KEYBOARD_LETTER.value.format(letter=letter.lower()))
        return apply_selector(self.page, selector)

    def row_tiles(self, row):
        """Locator for every tile inside an already resolved row."""
        return apply_selector(row, ROW_TILE)
