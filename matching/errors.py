"""
Error types raised by the LIKE pattern compiler.
"""


class ConfigurationError(ValueError):
    """
    Raised when a caller supplies an unusable LIKE configuration.

    The only case today is an escape string longer than one character.
    The rejected value is kept on ``value`` so callers can report it.
    """

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value
