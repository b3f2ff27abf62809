"""In-memory stand-ins for playwright's Page and Locator.

Locators are identified by a key string built the way the selector was
chained, e.g. ``test_id=modal-overlay >> role=button[name=close]``.
The page holds the state for each key and logs every action in order.
"""
from playwright.sync_api import TimeoutError as PWTimeoutError

TERMS_MODAL = '.purr-blocker-card__content'
TERMS_CONTINUE = f'{TERMS_MODAL} >> role=button[name=continue]'
PLAY_BUTTON = 'test_id=Play'
MODAL_OVERLAY = 'test_id=modal-overlay'
MODAL_CLOSE = f'{MODAL_OVERLAY} >> role=button[name=close]'
ENTER_KEY = 'role=button[name=enter]'
TOAST = '#ToastContainer-module_gameToaster__HPkaC'
BASE_URL = 'http://localhost:8080/'


def letter_key(letter):
    return f'label=add {letter}'


class FakeLocator:

    def __init__(self, page, key):
        self.page = page
        self.key = key

    def _child(self, key):
        return FakeLocator(self.page, f'{self.key} >> {key}')

    def locator(self, selector):
        return self._child(selector)

    def get_by_role(self, role, name=None):
        return self._child(role_key(role, name))

    def get_by_test_id(self, test_id):
        return self._child(f'test_id={test_id}')

    def get_by_label(self, text):
        return self._child(f'label={text}')

    def click(self):
        self.page.actions.append(('click', self.key))

    def count(self):
        self.page.actions.append(('count', self.key))
        return self.page.counts.get(self.key, 0)

    def wait_for(self, state='visible', timeout=None):
        self.page.actions.append(('wait_for', self.key, state, timeout))
        if self.key in self.page.errors:
            raise self.page.errors[self.key]
        if state == 'visible' and self.key not in self.page.visible:
            raise PWTimeoutError(f'Timeout {timeout}ms exceeded.')
        if state == 'hidden' and self.key in self.page.stuck:
            raise PWTimeoutError('Timeout 30000ms exceeded.')

    def aria_snapshot(self):
        return self.page.snapshots.get(self.key, '')


def role_key(role, name=None):
    if name is None:
        return f'role={role}'
    return f'role={role}[name={getattr(name, "pattern", name)}]'


class FakePage:

    def __init__(self):
        self.counts = {}
        self.visible = set()
        self.snapshots = {}
        self.errors = {}
        self.stuck = set()
        self.actions = []

    def goto(self, url):
        self.actions.append(('goto', url))

    def locator(self, selector):
        return FakeLocator(self, selector)

    def get_by_role(self, role, name=None):
        return FakeLocator(self, role_key(role, name))

    def get_by_test_id(self, test_id):
        return FakeLocator(self, f'test_id={test_id}')

    def get_by_label(self, text):
        return FakeLocator(self, f'label={text}')

    @property
    def clicks(self):
        return [action[1] for action in self.actions if action[0] == 'click']

    def show_toast(self, text):
        self.visible.add(TOAST)
        self.snapshots[TOAST] = text
