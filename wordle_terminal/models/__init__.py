"""
Data Models Package

Contains all data models and error types used throughout the application.
"""

from .errors import (
    WordleError, CorruptRecordError, IoFailureError, InputTerminated, DictionaryExhaustedError
)
from .game import LetterStatus, WordleAnswer
from .player import PlayerInfo

__all__ = [
    'WordleError', 'CorruptRecordError', 'IoFailureError', 'InputTerminated',
    'DictionaryExhaustedError', 'LetterStatus', 'WordleAnswer', 'PlayerInfo'
]
