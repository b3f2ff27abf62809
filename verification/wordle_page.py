import logging

from playwright.sync_api import TimeoutError as PWTimeoutError
from playwright.sync_api import expect

from verification.config import get_base_url
from verification.errors import WordValidationError
from verification.locators import WordleLocators

logger = logging.getLogger(__name__)

EXPECTED_ROWS = 6
EXPECTED_COLUMNS = 5
EXPECTED_TITLE = 'Wordle — The New York Times'
WORD_LENGTH = 5
TOAST_TIMEOUT_MS = 3000


class WordlePage:
    """Page object for the Wordle game.

    Every method is one game-level step built from locator lookups, clicks and
    waits. Assertions poll through playwright's expect until its timeout;
    nothing is re-attempted after that. A failed wait or assertion propagates
    to the caller and the scenario stops there.
    """

    def __init__(self, page, base_url=None, selectors=None):
        self.page = page
        self.base_url = base_url
        self.locators = WordleLocators(page, selectors)

    def navigate_to_game(self):
        base_url = self.base_url or get_base_url()
        logger.info('Navigating to %s', base_url)
        self.page.goto(base_url)

    def close_terms_of_service_modal(self):
        """Dismiss the terms of service card if this session shows one."""
        modal = self.locators.terms_of_service_modal
        if modal.count() > 0:
            logger.info('Closing terms of service modal')
            self.locators.terms_of_service_continue_button.click()
            modal.wait_for(state='hidden')
        else:
            logger.debug('No terms of service modal, skipping')

    def start_game(self):
        """Click Play, close How to Play, and wait until the overlay is gone."""
        self.locators.play_button.click()
        self.locators.modal_close_button.click()
        self.locators.modal_overlay.wait_for(state='hidden')

    def setup_game(self):
        self.navigate_to_game()
        self.close_terms_of_service_modal()
        self.start_game()
        logger.info('Game ready')

    def verify_page_title(self):
        expect(self.page).to_have_title(EXPECTED_TITLE)

    def verify_board_is_visible(self):
        expect(self.locators.game_board, 'Expected the game board to be visible').to_be_visible()

    def verify_board_dimensions(self):
        """Check the board is EXPECTED_ROWS x EXPECTED_COLUMNS tiles.

        Rows are resolved once; every row with the wrong tile count is reported
        in a single AssertionError.
        """
        board_rows = self.locators.board_rows
        expect(board_rows, f'Expected {EXPECTED_ROWS} board rows').to_have_count(EXPECTED_ROWS)

        bad_rows = []
        for index, row in enumerate(board_rows.all()):
            try:
                expect(self.locators.row_tiles(row)).to_have_count(EXPECTED_COLUMNS)
            except AssertionError as e:
                bad_rows.append(f'row {index}: {e}')
        if bad_rows:
            raise AssertionError('Board rows have the wrong number of tiles:\n' + '\n'.join(bad_rows))

    def enter_word(self, word):
        """Type `word` on the on-screen keyboard and press Enter."""
        letters = word.lower()
        if len(letters) != WORD_LENGTH or not (letters.isascii() and letters.isalpha()):
            raise WordValidationError(f'Word must be {WORD_LENGTH} letters a-z, got: {word!r}')

        logger.info('Entering word %r', letters)
        for letter in letters:
            logger.debug('Clicking key %r', letter)
            self.locators.keyboard_letter(letter).click()
        self.locators.enter_key.click()

    def get_toast_content(self):
        """Wait for the toast and return its ARIA snapshot.

        Raises playwright's TimeoutError if no toast shows within TOAST_TIMEOUT_MS.
        """
        toast = self.locators.toast_container
        toast.wait_for(state='visible', timeout=TOAST_TIMEOUT_MS)
        return toast.aria_snapshot()

    def expect_error_message(self, expected_error):
        toast_content = self.get_toast_content()
        if expected_error not in toast_content:
            raise AssertionError(f'Expected toast to contain {expected_error!r}, got {toast_content!r}')

    def expect_no_error_message(self, unexpected_error):
        """Pass unless a toast shows up containing `unexpected_error`.

        A toast that never appears counts as no error. Only a timeout is read
        that way; other playwright errors still propagate.
        """
        try:
            toast_content = self.get_toast_content()
        except PWTimeoutError:
            logger.info('No toast within %dms, treating as no error', TOAST_TIMEOUT_MS)
            return
        if unexpected_error in toast_content:
            raise AssertionError(f'Expected toast not to contain {unexpected_error!r}, got {toast_content!r}')
