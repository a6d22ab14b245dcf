"""
Main Menu Controller

Prompts for the login screen and the main menu.
"""

from enum import IntEnum
from typing import Iterable, Optional

from ..config.game_settings import QUIT_COMMAND
from .prompts import read_line


class UserSelection(IntEnum):
    """Possible selections in the main menu."""
    PLAY_GAME = 1
    VIEW_STATS = 2
    LOG_OFF = 3
    DELETE_USER = 4


MENU_TEXT = (
    "[1] Play a game of Wordle\n"
    "[2] View player statistics\n"
    "[3] Log off\n"
    "[4] Delete user"
)


def request_username(usernames: Iterable[str]) -> Optional[str]:
    """
    Requests a user to enter their username.

    Usernames are case-insensitive and returned lower-cased.

    Returns:
        The username, or None if the user asked to exit

    Raises:
        InputTerminated: If input ended
    """
    existing = sorted(usernames)
    if existing:
        print("List of existing users:")
        for name in existing:
            print(name)
        print()

    print("Note: usernames are case-insensitive")
    print(f"Type \"{QUIT_COMMAND}\" to exit")

    username = read_line("Username: ").strip().lower()
    if not username or username == QUIT_COMMAND:
        return None
    return username


def request_user_selection() -> UserSelection:
    """
    Shows the main menu and requests a selection until a valid one is given.

    Raises:
        InputTerminated: If input ended
    """
    print()
    print(MENU_TEXT)

    while True:
        text = read_line("Selection: ").strip()
        try:
            selection = int(text)
        except ValueError:
            print("Error: selection must be an integer")
            continue

        try:
            user_selection = UserSelection(selection)
        except ValueError:
            print("Error: invalid selection")
            continue

        print()
        return user_selection


def request_delete_confirmation(username: str) -> bool:
    """
    Asks the user to confirm deleting their account.

    Raises:
        InputTerminated: If input ended
    """
    answer = read_line(f"Are you sure you would like to delete user: {username} [y/N] ")
    return answer.strip().lower() == "y"
