"""
Error Types

Exceptions raised at the data-access and terminal boundaries and handled by
the console state machine.
"""

from typing import Optional


class WordleError(Exception):
    """Base class for all application errors."""


class CorruptRecordError(WordleError):
    """A player database file exists but could not be parsed."""

    def __init__(self, filename: str, reason: Optional[str] = None):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Error: corrupt player database file: {filename}")


class IoFailureError(WordleError):
    """A dictionary, registry or player file could not be read or written."""

    def __init__(self, path: str, action: str):
        self.path = path
        self.action = action
        super().__init__(f"Error: could not {action} {path}")


class InputTerminated(WordleError):
    """The input stream ended (or was interrupted) while waiting for a line."""


class DictionaryExhaustedError(WordleError):
    """The player has already played every word in the dictionary."""

    def __init__(self, username: str):
        self.username = username
        super().__init__("There are no remaining words in the dictionary.")
