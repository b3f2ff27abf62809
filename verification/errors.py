class ConfigurationError(RuntimeError):
    """A required setting is missing."""


class WordValidationError(ValueError):
    """A word handed to the page object does not meet its preconditions."""
