"""
Game Controller

Runs a single game of Wordle in the terminal.
"""

from dataclasses import dataclass
from typing import Optional

from ..config.game_settings import MAX_ROUNDS, WIN_MESSAGES, LOSS_MESSAGE
from ..models.errors import InputTerminated
from ..models.game import WordleAnswer
from ..models.player import PlayerInfo
from ..services.game_service import GameService
from ..utils.game_logger import game_logger
from .prompts import read_line

INSTRUCTIONS = (
    "Guess the 5-letter word in 6 or fewer guesses.\n"
    "After each guess, each letter will be given a color:\n"
    "G = Green:\tletter is in that position in the word\n"
    "Y = Yellow:\tletter is in the word, but not that position\n"
    "X = Black:\tthere are no more instances of the letter in the word"
)


@dataclass(frozen=True)
class GameOutcome:
    """Result of a completed game."""
    word: str
    won: bool
    guesses_used: Optional[int] = None

    @property
    def message(self) -> str:
        if self.won:
            return f"{WIN_MESSAGES[self.guesses_used - 1]}!"
        return LOSS_MESSAGE


def request_guess(round_number: int, game_service: GameService) -> str:
    """Prompts until the player enters a valid guess."""
    while True:
        guess = game_service.normalize_guess(read_line(f"[{round_number}] "))
        is_valid, error = game_service.is_valid_guess(guess)
        if is_valid:
            return guess
        print(error)


def play_rounds(answer: WordleAnswer, game_service: GameService) -> Optional[int]:
    """
    Plays up to MAX_ROUNDS guesses.

    Returns:
        The number of guesses used for a win, or None for a loss
    """
    for round_number in range(1, MAX_ROUNDS + 1):
        guess = request_guess(round_number, game_service)
        statuses = game_service.evaluate_guess(answer, guess)
        print(f"    {game_service.format_result(statuses)}")
        if game_service.is_winning_result(statuses):
            return round_number
    return None


def run_game(answer: WordleAnswer, player: PlayerInfo, game_service: GameService) -> GameOutcome:
    """
    Plays one game and records its outcome in the player's statistics.

    Raises:
        InputTerminated: If input ended mid-game; nothing is recorded
    """
    print(INSTRUCTIONS)
    print()
    game_logger.log_game_event(player.username, 'game_started')

    try:
        guesses_used = play_rounds(answer, game_service)
    except InputTerminated:
        game_logger.log_game_event(player.username, 'game_abandoned', word=answer.word)
        raise

    if guesses_used is not None:
        player.record_win(answer.word, guesses_used)
        outcome = GameOutcome(answer.word, True, guesses_used)
        game_logger.log_game_event(player.username, 'game_won', word=answer.word, guesses_used=guesses_used)
    else:
        player.record_loss(answer.word)
        outcome = GameOutcome(answer.word, False)
        game_logger.log_game_event(player.username, 'game_lost', word=answer.word)

    print(f"{outcome.message} The word was: {answer.word}")
    print()
    return outcome
