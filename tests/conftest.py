"""
Shared fixtures for the Wordle test suite.
"""

import io
import random

import pytest

from wordle_terminal.utils.game_logger import game_logger


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep tests from writing log files."""
    game_logger.configure(to_file=False)
    yield


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def dictionary():
    return frozenset({"TRACE", "CRANE", "SLATE", "AABBB", "CAACC", "AZZAA", "AAABB"})


@pytest.fixture
def stdin(monkeypatch):
    """Feed scripted lines to input(); the stream ends after the last line."""
    def feed(*lines):
        text = "".join(f"{line}\n" for line in lines)
        monkeypatch.setattr('sys.stdin', io.StringIO(text))
    return feed
