"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from ..config.game_settings import is_plain_word

ALPHABET_SIZE = 26


class LetterStatus(Enum):
    """Verdict for one letter of a guess, valued by its terminal symbol."""
    CORRECT = "G"    # letter is in the word at that position
    PRESENT = "Y"    # letter is in the word, but not at that position
    INCORRECT = "X"  # no more instances of the letter in the word


def letter_index(letter: str) -> int:
    """Index of an uppercase ASCII letter in a 26-slot count array."""
    return ord(letter) - ord('A')


def count_letters(word: str) -> Tuple[int, ...]:
    counts = [0] * ALPHABET_SIZE
    for letter in word:
        counts[letter_index(letter)] += 1
    return tuple(counts)


@dataclass(frozen=True)
class WordleAnswer:
    """
    The hidden word of one game.

    The letter counts are computed once so that a guess can be scored in a
    single linear pass over its letters.
    """
    word: str
    letter_counts: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not is_plain_word(self.word) or not self.word.isupper():
            raise ValueError(f"Answer '{self.word}' is not a 5-letter uppercase word")
        object.__setattr__(self, 'letter_counts', count_letters(self.word))
