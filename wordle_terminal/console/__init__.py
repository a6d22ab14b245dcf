"""
Console Package

Terminal controllers: prompts, the game round, the main menu and the
program state machine.
"""

from .console_app import ConsoleApp, ProgramState, LogIn, MainMenu, DeleteUser, Exit
from .game import GameOutcome, run_game
from .main_menu import UserSelection

__all__ = [
    'ConsoleApp', 'ProgramState', 'LogIn', 'MainMenu', 'DeleteUser', 'Exit',
    'GameOutcome', 'run_game', 'UserSelection'
]
