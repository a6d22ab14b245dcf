"""
Database Service

Line-oriented text database for player records and the username registry.

A player file holds exactly five "key: value" lines:

    Username: <name>
    Words Played: <word>,<word>,...
    Number of Guesses: <n1>,<n2>,<n3>,<n4>,<n5>,<n6>
    Maximum Win Streak: <n>
    Current Win Streak: <n>
"""

import os
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, Set, TypeVar

from ..config.app_config import Config
from ..config.game_settings import FIELD_DELIMITER, LIST_DELIMITER, MAX_ROUNDS, PLAYER_FILE_SUFFIX
from ..models.errors import CorruptRecordError, IoFailureError
from ..models.player import PlayerInfo

T = TypeVar('T')

USERNAME_KEY = "Username"
WORDS_PLAYED_KEY = "Words Played"
NUM_GUESSES_KEY = "Number of Guesses"
MAX_WIN_STREAK_KEY = "Maximum Win Streak"
CUR_WIN_STREAK_KEY = "Current Win Streak"

RECORD_LINE_COUNT = 5


@dataclass(frozen=True)
class DatabaseEntry(Generic[T]):
    """A single "key: value" line of a database file."""
    key: str
    value: T

    @classmethod
    def from_line(cls, line: str, convert: Callable[[str], T]) -> Optional['DatabaseEntry[T]']:
        """
        Splits a line on the first ": " delimiter and converts the value.

        Returns None when the delimiter is missing. Errors raised by
        convert propagate to the caller.
        """
        key, sep, value = line.partition(FIELD_DELIMITER)
        if not sep:
            return None
        return cls(key, convert(value))

    @classmethod
    def from_collection(cls, line: str, convert: Callable[[str], T]) -> Optional['DatabaseEntry[List[T]]']:
        """Like from_line, with the value split on "," into a list."""
        entry = cls.from_line(line, str)
        if entry is None:
            return None
        items = entry.value.split(LIST_DELIMITER) if entry.value else []
        return DatabaseEntry(entry.key, [convert(item) for item in items])

    def to_line(self) -> str:
        if isinstance(self.value, (list, tuple)):
            value = LIST_DELIMITER.join(str(item) for item in self.value)
        else:
            value = str(self.value)
        return f"{self.key}{FIELD_DELIMITER}{value}\n"


def parse_count(text: str) -> int:
    """Parses a non-negative decimal integer."""
    if not text.isascii() or not text.isdigit():
        raise ValueError(f"'{text}' is not a non-negative integer")
    return int(text)


def split_lines(text: str) -> List[str]:
    """Splits on newlines, dropping one trailing empty line and any '\\r'."""
    lines = text.split('\n')
    if lines and lines[-1] == '':
        lines.pop()
    return [line.rstrip('\r') for line in lines]


def format_player(player: PlayerInfo) -> str:
    """Serializes a player record to its five-line text form."""
    entries = [
        DatabaseEntry(USERNAME_KEY, player.username),
        DatabaseEntry(WORDS_PLAYED_KEY, sorted(player.words_played)),
        DatabaseEntry(NUM_GUESSES_KEY, list(player.num_guesses)),
        DatabaseEntry(MAX_WIN_STREAK_KEY, player.max_win_streak),
        DatabaseEntry(CUR_WIN_STREAK_KEY, player.cur_win_streak),
    ]
    return "".join(entry.to_line() for entry in entries)


def parse_player(text: str, filename: str = "<string>") -> PlayerInfo:
    """
    Parses the five-line text form of a player record.

    Field keys are not checked; fields are identified by position.

    Raises:
        CorruptRecordError: On a wrong line count, a missing delimiter or a
            count that is not a non-negative integer
    """
    lines = split_lines(text)
    if len(lines) != RECORD_LINE_COUNT:
        raise CorruptRecordError(filename, f"expected {RECORD_LINE_COUNT} lines, found {len(lines)}")

    try:
        username = DatabaseEntry.from_line(lines[0], str)
        words_played = DatabaseEntry.from_collection(lines[1], str)
        num_guesses = DatabaseEntry.from_collection(lines[2], parse_count)
        max_win_streak = DatabaseEntry.from_line(lines[3], parse_count)
        cur_win_streak = DatabaseEntry.from_line(lines[4], parse_count)
    except ValueError as e:
        raise CorruptRecordError(filename, str(e)) from e

    entries = (username, words_played, num_guesses, max_win_streak, cur_win_streak)
    if any(entry is None for entry in entries):
        raise CorruptRecordError(filename, "missing field delimiter")

    if len(num_guesses.value) != MAX_ROUNDS:
        raise CorruptRecordError(filename, f"expected {MAX_ROUNDS} guess counts")

    return PlayerInfo(
        username=username.value,
        words_played=set(word for word in words_played.value if word),
        num_guesses=num_guesses.value,
        max_win_streak=max_win_streak.value,
        cur_win_streak=cur_win_streak.value
    )


class DatabaseService:
    """
    File storage for player records and the username registry.

    Player records live in "<username>.txt" inside data_dir; the registry is
    a single file with one username per line.
    """

    def __init__(self, data_dir: Optional[str] = None, usernames_path: Optional[str] = None):
        self.data_dir = data_dir or Config.DATA_DIR
        self.usernames_path = usernames_path or Config.usernames_path()

    def player_path(self, username: str) -> str:
        return os.path.join(self.data_dir, f"{username}{PLAYER_FILE_SUFFIX}")

    def is_reserved_username(self, username: str) -> bool:
        """True if the player's file would be the username registry itself."""
        player_file = os.path.normcase(os.path.abspath(self.player_path(username)))
        return player_file == os.path.normcase(os.path.abspath(self.usernames_path))

    def load_player(self, username: str) -> Optional[PlayerInfo]:
        """
        Reads a player's record from their database file.

        Returns:
            The player's record, or None if the file does not exist

        Raises:
            CorruptRecordError: If the file exists but cannot be parsed
            IoFailureError: If the file exists but cannot be read
        """
        path = self.player_path(username)
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                text = f.read()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise IoFailureError(path, "read") from e

        return parse_player(text, path)

    def save_player(self, player: PlayerInfo) -> str:
        """
        Writes a player's record to their database file.

        Raises:
            IoFailureError: If the file cannot be written
        """
        path = self.player_path(player.username)
        try:
            with open(path, 'w', encoding='utf-8', newline='\n') as f:
                f.write(format_player(player))
        except OSError as e:
            raise IoFailureError(path, "write") from e
        return path

    def delete_player_file(self, username: str) -> bool:
        """Removes a player's database file. Returns False if it could not be removed."""
        try:
            os.remove(self.player_path(username))
        except OSError:
            return False
        return True

    def read_usernames(self) -> Set[str]:
        """
        Loads the username registry, creating the file if it does not exist.

        Returns:
            A set of lower-cased usernames

        Raises:
            IoFailureError: If the file cannot be created or read
        """
        try:
            with open(self.usernames_path, 'a+', encoding='utf-8') as f:
                f.seek(0)
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise IoFailureError(self.usernames_path, "read") from e

        return set(name.strip().lower() for name in split_lines(text) if name.strip())

    def write_usernames(self, usernames: Iterable[str]) -> None:
        """
        Rewrites the username registry, one sorted name per line.

        Raises:
            IoFailureError: If the file cannot be written
        """
        try:
            with open(self.usernames_path, 'w', encoding='utf-8', newline='\n') as f:
                for name in sorted(usernames):
                    f.write(f"{name}\n")
        except OSError as e:
            raise IoFailureError(self.usernames_path, "write") from e


# Global service instance
_database_service = None


def get_database_service() -> Optional[DatabaseService]:
    """Get the global database service instance."""
    return _database_service


def initialize_database_service(data_dir: Optional[str] = None,
                                usernames_path: Optional[str] = None) -> DatabaseService:
    """Initialize the global database service instance."""
    global _database_service
    _database_service = DatabaseService(data_dir, usernames_path)
    return _database_service
