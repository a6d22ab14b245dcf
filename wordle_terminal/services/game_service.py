"""
Game Service

Contains the core game logic for Wordle: answer selection, guess validation
and scoring.
"""

import random
from typing import AbstractSet, List, Optional, Tuple

from ..config.game_settings import WORD_LENGTH, is_plain_word
from ..models.game import LetterStatus, WordleAnswer, letter_index
from ..models.player import PlayerInfo


def score_guess(answer: WordleAnswer, guess: str) -> List[LetterStatus]:
    """
    Calculates the verdict for each letter of a guess.

    Correct always takes priority over Present, and the number of Correct
    and Present verdicts for a letter never exceeds the number of times the
    letter occurs in the answer. Both passes scan left to right.
    """
    statuses = [LetterStatus.INCORRECT] * WORD_LENGTH
    remaining = list(answer.letter_counts)

    # First pass: exact position matches
    for i, (a, g) in enumerate(zip(answer.word, guess)):
        if a == g:
            statuses[i] = LetterStatus.CORRECT
            remaining[letter_index(g)] -= 1

    # Second pass: letters elsewhere in the word
    for i, g in enumerate(guess):
        if statuses[i] is LetterStatus.CORRECT:
            continue
        if remaining[letter_index(g)] > 0:
            statuses[i] = LetterStatus.PRESENT
            remaining[letter_index(g)] -= 1

    return statuses


class GameService:
    """
    Core game service for one dictionary of valid words.

    This class handles:
    - Answer selection among the words a player has not played
    - Guess normalization and validation
    - Guess evaluation against the hidden answer
    """

    def __init__(self, dictionary: AbstractSet[str], rng: Optional[random.Random] = None):
        self.dictionary = dictionary
        self.rng = rng or random.Random()

    def new_answer(self, player: PlayerInfo) -> WordleAnswer:
        """
        Selects a hidden answer the player has not played yet.

        Raises:
            DictionaryExhaustedError: If the player has played every word
        """
        return WordleAnswer(player.pick_unplayed_word(self.dictionary, self.rng))

    @staticmethod
    def normalize_guess(guess: str) -> str:
        return guess.strip().upper()

    def is_valid_guess(self, guess: str) -> Tuple[bool, str]:
        """
        Validates a normalized guess before it is scored.

        Args:
            guess: The uppercase word to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not is_plain_word(guess):
            return False, "Error: guess must be 5 letters"

        if guess not in self.dictionary:
            return False, "Error: guess must be a word in the dictionary"

        return True, ""

    def evaluate_guess(self, answer: WordleAnswer, guess: str) -> List[LetterStatus]:
        return score_guess(answer, guess)

    @staticmethod
    def is_winning_result(statuses: List[LetterStatus]) -> bool:
        return all(status is LetterStatus.CORRECT for status in statuses)

    @staticmethod
    def format_result(statuses: List[LetterStatus]) -> str:
        """Terminal representation of a result, e.g. 'GYXXG'."""
        return "".join(status.value for status in statuses)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: AbstractSet[str], rng: Optional[random.Random] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(dictionary, rng)
    return _game_service
