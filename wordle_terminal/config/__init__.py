"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: application configuration (environment-based)
- game_settings.py: game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    WORD_LENGTH, MAX_ROUNDS, HISTOGRAM_BAR_WIDTH, WIN_MESSAGES, LOSS_MESSAGE, QUIT_COMMAND,
    PLAYER_FILE_SUFFIX, FIELD_DELIMITER, LIST_DELIMITER,
    is_plain_word, load_dictionary, read_dictionary_file
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'WORD_LENGTH', 'MAX_ROUNDS', 'HISTOGRAM_BAR_WIDTH', 'WIN_MESSAGES', 'LOSS_MESSAGE',
    'QUIT_COMMAND', 'PLAYER_FILE_SUFFIX', 'FIELD_DELIMITER', 'LIST_DELIMITER',
    'is_plain_word', 'load_dictionary', 'read_dictionary_file'
]
