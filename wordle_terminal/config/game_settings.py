"""
Game Configuration Constants Module

This module defines all game configuration constants. They are fixed when
the module is imported and never modified afterwards.
"""

from typing import Final, FrozenSet, Tuple

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""Number of letters in every answer and guess."""

MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

HISTOGRAM_BAR_WIDTH: Final[int] = 12
"""Length of the longest bar in the guess distribution."""

WIN_MESSAGES: Final[Tuple[str, ...]] = (
    "Genius",
    "Magnificent",
    "Impressive",
    "Splendid",
    "Great",
    "Phew",
)
"""
Message shown for a won game. A win in n guesses shows WIN_MESSAGES[n - 1].
"""

LOSS_MESSAGE: Final[str] = "Too bad!"

QUIT_COMMAND: Final[str] = ":q"

# Text database conventions
PLAYER_FILE_SUFFIX: Final[str] = ".txt"
FIELD_DELIMITER: Final[str] = ": "
LIST_DELIMITER: Final[str] = ","


def is_plain_word(word: str) -> bool:
    """True if word has exactly WORD_LENGTH ASCII letters."""
    return len(word) == WORD_LENGTH and word.isascii() and word.isalpha()


def load_dictionary(text: str) -> FrozenSet[str]:
    """
    Build the word universe from the raw contents of a dictionary file.

    Only lines of exactly WORD_LENGTH ASCII letters are kept. Words are
    upper-cased and de-duplicated.

    Args:
        text: Newline-delimited dictionary text

    Returns:
        FrozenSet[str]: Set of uppercase 5-letter words
    """
    lines = (line.rstrip('\r') for line in text.split('\n'))
    return frozenset(line.upper() for line in lines if is_plain_word(line))


def read_dictionary_file(path: str) -> FrozenSet[str]:
    """
    Read and filter a dictionary file.

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return load_dictionary(f.read())
