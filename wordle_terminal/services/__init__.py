"""
Services Package

Contains the game logic and the text database access.
"""

from .game_service import GameService, score_guess, get_game_service, initialize_game_service
from .database import (
    DatabaseEntry, DatabaseService, format_player, parse_player,
    get_database_service, initialize_database_service
)

__all__ = [
    'GameService', 'score_guess', 'get_game_service', 'initialize_game_service',
    'DatabaseEntry', 'DatabaseService', 'format_player', 'parse_player',
    'get_database_service', 'initialize_database_service'
]
