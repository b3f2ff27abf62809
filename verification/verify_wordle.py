
from playwright.sync_api import sync_playwright

from verification.config import get_base_url, is_headless, screenshot_path
from verification.wordle_page import WordlePage


def verify_wordle():
    base_url = get_base_url()

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=is_headless())
        page = browser.new_page()
        wordle = WordlePage(page, base_url=base_url)
        try:
            wordle.setup_game()
            print('Game set up, modals closed')

            wordle.verify_page_title()
            wordle.verify_board_is_visible()
            wordle.verify_board_dimensions()
            print('SUCCESS: Board is visible with 6 rows of 5 tiles')

            # 'aaaaa' is not in the dictionary
            wordle.enter_word('aaaaa')
            wordle.expect_error_message('Not in word list')
            print('SUCCESS: Invalid word rejected')

            page.screenshot(path=screenshot_path('wordle_rejected_word.png'))
            print('Captured rejected word toast')
        except Exception as e:
            print(f'ERROR: {e}')
            page.screenshot(path=screenshot_path('wordle_error.png'))
            raise
        finally:
            browser.close()

if __name__ == '__main__':
    verify_wordle()
