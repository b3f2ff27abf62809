from playwright.sync_api import sync_playwright

from verification.config import get_base_url, is_headless, screenshot_path
from verification.wordle_page import WordlePage


def take_board_screenshot():
    base_url = get_base_url()

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=is_headless())
        page = browser.new_page()
        try:
            WordlePage(page, base_url=base_url).setup_game()
            page.screenshot(path=screenshot_path('wordle_board.png'))
            print('Screenshot taken')
        finally:
            browser.close()

if __name__ == '__main__':
    take_board_screenshot()
