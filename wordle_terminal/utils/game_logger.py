"""
Game Logger Module for Wordle

This module provides structured logging for user actions and game events.
Entries are written as JSON objects to a dated log file; nothing is logged
to the console because the terminal is the game's user interface.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path


class GameLogger:
    """
    Centralized logging system for the Wordle terminal game.

    Features:
    - User action tracking by username
    - Game event logging (wins, losses, abandoned games)
    - Error logging with exception details
    - JSON structured logs for easy parsing
    """

    def __init__(self, name: str = 'wordle_game'):
        self.log_dir: Optional[Path] = None
        self.logger = logging.getLogger(name)
        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def configure(self, log_dir: str = "logs", level: str = "INFO", to_file: bool = True) -> logging.Logger:
        """Attach the file handler. Safe to call more than once."""
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        self.logger.propagate = False

        # Prevent duplicate handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        if not to_file:
            self.log_dir = None
            self.logger.addHandler(logging.NullHandler())
            return self.logger

        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        self.logger.addHandler(file_handler)

        return self.logger

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          username: Optional[str],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': username,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self, username: Optional[str], action: str, **kwargs):
        """
        Log user actions such as login, logout or a stats request.

        Args:
            username: Player performing the action, if logged in
            action: Type of action (e.g., 'login', 'view_stats', 'delete_user')
            **kwargs: Additional details to log
        """
        self.logger.info(self._create_log_entry('USER_ACTION', action, username, kwargs))

    def log_game_event(self, username: Optional[str], event: str, **kwargs):
        """
        Log game-specific events.

        Args:
            username: Player of the game
            event: Type of game event (e.g., 'game_started', 'game_won', 'game_lost')
            **kwargs: Additional game details
        """
        self.logger.info(self._create_log_entry('GAME_EVENT', event, username, kwargs))

    def log_error(self, username: Optional[str], error: Exception, action: str, **kwargs):
        """
        Log errors with full context.

        Args:
            username: Player affected by the error, if any
            error: Exception that occurred
            action: Action that was being performed
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'cause': repr(error.__cause__) if error.__cause__ else None,
            **kwargs
        }
        self.logger.error(self._create_log_entry('ERROR', action, username, details))


# Global logger instance
game_logger = GameLogger()
