"""
Console Application

The program's state machine: log in, run the main menu, delete a user and
exit. The username registry and the logged-in player belong to this loop
and are written to disk when a user logs in, finishes a game or is deleted.
"""

from dataclasses import dataclass
from typing import Optional, Set, Union

from ..models.errors import (
    CorruptRecordError, IoFailureError, InputTerminated, DictionaryExhaustedError
)
from ..models.player import PlayerInfo
from ..services.database import DatabaseService
from ..services.game_service import GameService
from ..utils.game_logger import game_logger
from .game import run_game
from .main_menu import (
    UserSelection, request_username, request_user_selection, request_delete_confirmation
)


@dataclass(frozen=True)
class LogIn:
    """Request the user's login information."""


@dataclass(frozen=True)
class MainMenu:
    """Run the main menu for a logged-in player."""
    player: PlayerInfo


@dataclass(frozen=True)
class DeleteUser:
    """Delete the given player."""
    player: PlayerInfo


@dataclass(frozen=True)
class Exit:
    """Exit the program."""


ProgramState = Union[LogIn, MainMenu, DeleteUser, Exit]


class ConsoleApp:
    """
    Terminal Wordle session for one process run.

    Args:
        game_service: Answer selection and guess scoring for the dictionary
        database_service: Storage for player records and the registry
        usernames: Username registry, modified in place
    """

    def __init__(self, game_service: GameService, database_service: DatabaseService, usernames: Set[str]):
        self.game_service = game_service
        self.database_service = database_service
        self.usernames = usernames

    def run(self, state: Optional[ProgramState] = None) -> None:
        """Runs the state machine until it reaches Exit."""
        state = state or LogIn()
        while not isinstance(state, Exit):
            try:
                state = self.step(state)
            except InputTerminated:
                state = Exit()
        game_logger.log_user_action(None, 'exit')

    def step(self, state: ProgramState) -> ProgramState:
        """Performs one transition of the state machine."""
        if isinstance(state, LogIn):
            return self.log_in()
        if isinstance(state, MainMenu):
            return self.main_menu(state.player)
        if isinstance(state, DeleteUser):
            return self.delete_user(state.player)
        return Exit()

    def log_in(self) -> ProgramState:
        username = request_username(self.usernames)
        if username is None:
            return Exit()

        if self.database_service.is_reserved_username(username):
            print("Error: username is not available")
            game_logger.log_user_action(username, 'login_rejected', reason='reserved')
            return LogIn()

        try:
            player = self.database_service.load_player(username)
        except (CorruptRecordError, IoFailureError) as e:
            print(e)
            game_logger.log_error(username, e, 'login')
            return LogIn()

        is_new_user = username not in self.usernames
        self.usernames.add(username)
        try:
            self.database_service.write_usernames(self.usernames)
        except IoFailureError as e:
            print("Error: could not write to the user database")
            game_logger.log_error(username, e, 'save_usernames')
            return Exit()

        print(f"Hello, {username}")
        game_logger.log_user_action(username, 'login', new_user=is_new_user, new_record=player is None)
        return MainMenu(player or PlayerInfo(username))

    def main_menu(self, player: PlayerInfo) -> ProgramState:
        selection = request_user_selection()

        if selection is UserSelection.PLAY_GAME:
            self.play_game(player)
            return MainMenu(player)

        if selection is UserSelection.VIEW_STATS:
            print(player.render_stats())
            game_logger.log_user_action(player.username, 'view_stats')
            return MainMenu(player)

        if selection is UserSelection.LOG_OFF:
            game_logger.log_user_action(player.username, 'logout')
            return LogIn()

        if request_delete_confirmation(player.username):
            print()
            return DeleteUser(player)
        print("Action aborted")
        return MainMenu(player)

    def play_game(self, player: PlayerInfo) -> None:
        try:
            answer = self.game_service.new_answer(player)
        except DictionaryExhaustedError as e:
            print(e)
            game_logger.log_game_event(player.username, 'dictionary_exhausted')
            return

        run_game(answer, player, self.game_service)
        print(player.render_stats())

        try:
            path = self.database_service.save_player(player)
        except IoFailureError as e:
            print("Error: could not write to user database file, progress has not been saved")
            game_logger.log_error(player.username, e, 'save_player')
        else:
            game_logger.log_user_action(player.username, 'save_player', path=path)

    def delete_user(self, player: PlayerInfo) -> ProgramState:
        self.usernames.discard(player.username)
        file_removed = self.database_service.delete_player_file(player.username)

        try:
            self.database_service.write_usernames(self.usernames)
        except IoFailureError as e:
            print("Error: could not write to the user database")
            game_logger.log_error(player.username, e, 'save_usernames')
            return Exit()

        game_logger.log_user_action(player.username, 'delete_user', file_removed=file_removed)
        return LogIn()
