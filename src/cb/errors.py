"""Exception types raised around the CB lexer.

The scanner itself never raises: unknown characters come back as ILLEGAL
tokens. These exceptions belong to the callers that decide an illegal
character (or a bad configuration) should stop them.
"""


class CBError(Exception):
    """Base class for CB front-end errors."""


class ConfigError(CBError):
    """A configuration file could not be read or has the wrong shape."""


class IllegalCharacterError(CBError):
    """Raised by strict tokenization on the first ILLEGAL token."""

    def __init__(self, token, offset):
        self.token = token
        self.offset = offset
        super().__init__(f"Illegal character {token.literal!r} at offset {offset}")
