"""
Wordle Terminal Application Package

A single-player Wordle game for the terminal with per-user statistics kept
in plain text files.
"""

import random
from typing import AbstractSet, Optional

from .config import Config


def create_console_app(dictionary: AbstractSet[str], config_class=Config, rng: Optional[random.Random] = None):
    """
    Application factory for the terminal game.

    Args:
        dictionary: Set of valid uppercase 5-letter words
        config_class: Configuration class to use
        rng: Random source used to pick answers

    Returns:
        ConsoleApp with its services initialized

    Raises:
        IoFailureError: If the username registry cannot be read
    """
    from .console import ConsoleApp
    from .services.database import initialize_database_service
    from .services.game_service import initialize_game_service
    from .utils.game_logger import game_logger

    game_logger.configure(config_class.LOG_DIR, config_class.LOG_LEVEL, config_class.LOG_TO_FILE)

    database_service = initialize_database_service(config_class.DATA_DIR, config_class.usernames_path())
    usernames = database_service.read_usernames()
    game_service = initialize_game_service(dictionary, rng)

    return ConsoleApp(game_service, database_service, usernames)
