"""
Player Data Models

Contains the persisted statistics of one player.
"""

import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set

from ..config.game_settings import MAX_ROUNDS, HISTOGRAM_BAR_WIDTH
from .errors import DictionaryExhaustedError


def _round_half_up(value: float) -> int:
    # round() in Python rounds halves to even
    return int(value + 0.5)


@dataclass
class PlayerInfo:
    """
    Statistics for a Wordle player.

    A player has a:
    - username
    - set of words played
    - guess distribution, where num_guesses[i] counts wins in (i + 1) guesses
    - maximum win streak
    - current win streak
    """
    username: str
    words_played: Set[str] = field(default_factory=set)
    num_guesses: List[int] = field(default_factory=lambda: [0] * MAX_ROUNDS)
    max_win_streak: int = 0
    cur_win_streak: int = 0

    def record_win(self, word: str, guesses_used: int) -> None:
        """
        Adds a word the player has successfully guessed.

        Increments the current win streak, adds the word to the words played
        and the guess count to the distribution, and raises the max win
        streak if needed.

        Raises:
            ValueError: If guesses_used is not between 1 and MAX_ROUNDS
        """
        if not 1 <= guesses_used <= MAX_ROUNDS:
            raise ValueError(f"guesses_used must be between 1 and {MAX_ROUNDS}, got {guesses_used}")

        self.words_played.add(word)
        self.num_guesses[guesses_used - 1] += 1
        self.cur_win_streak += 1
        self.max_win_streak = max(self.max_win_streak, self.cur_win_streak)

    def record_loss(self, word: str) -> None:
        """Adds a word the player failed to guess and resets the current streak."""
        self.words_played.add(word)
        self.cur_win_streak = 0

    def pick_unplayed_word(self, dictionary: Iterable[str], rng: Optional[random.Random] = None) -> str:
        """
        Picks a uniformly random word the player has not yet played.

        Raises:
            DictionaryExhaustedError: If every dictionary word has been played
        """
        unplayed = sorted(set(dictionary) - self.words_played)
        if not unplayed:
            raise DictionaryExhaustedError(self.username)
        return (rng or random).choice(unplayed)

    @property
    def games_won(self) -> int:
        return sum(self.num_guesses)

    @property
    def win_rate(self) -> int:
        """Percentage of played words that were won, rounded to an integer."""
        if not self.words_played:
            return 0
        return _round_half_up(100 * self.games_won / len(self.words_played))

    def render_stats(self) -> str:
        """
        Returns formatted player statistics: number of words played, win
        rate, current and max win streak and the guess distribution.
        """
        lines = [
            f"Number of Words Played: {len(self.words_played)}",
            f"Win Rate: {self.win_rate}%",
            f"Current Win Streak: {self.cur_win_streak}",
            f"Maximum Win Streak: {self.max_win_streak}",
            "Guess Distribution:",
        ]

        max_count = max(self.num_guesses)
        bar_factor = HISTOGRAM_BAR_WIDTH / max_count if max_count else 0
        for i, count in enumerate(self.num_guesses):
            bars = "=" * _round_half_up(bar_factor * count)
            lines.append(f"{i + 1}: {bars} {count}")

        return "\n".join(lines)
