import os

from verification.errors import ConfigurationError

DEFAULT_SCREENSHOT_DIR = 'verification'


def get_base_url(environ=None):
    """Return the game's address from BASE_URL, raising if it is not set."""
    environ = os.environ if environ is None else environ
    base_url = environ.get('BASE_URL', '').strip()
    if not base_url:
        raise ConfigurationError('BASE_URL environment variable is not set')
    return base_url


def is_headless(environ=None):
    environ = os.environ if environ is None else environ
    return environ.get('HEADLESS', '1').strip().lower() not in ('0', 'false', 'no')


def screenshot_path(filename, environ=None):
    environ = os.environ if environ is None else environ
    directory = environ.get('SCREENSHOT_DIR') or DEFAULT_SCREENSHOT_DIR
    return os.path.join(directory, filename)
