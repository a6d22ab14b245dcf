"""
Testing the login, menu and account deletion flow.
"""

import pytest

from wordle_terminal.console.console_app import ConsoleApp, LogIn, MainMenu, DeleteUser, Exit
from wordle_terminal.console.main_menu import (
    UserSelection, request_username, request_user_selection, request_delete_confirmation
)
from wordle_terminal.models.player import PlayerInfo
from wordle_terminal.services.database import DatabaseService
from wordle_terminal.services.game_service import GameService


@pytest.fixture
def store(tmp_path):
    return DatabaseService(str(tmp_path), str(tmp_path / "users.txt"))


@pytest.fixture
def make_app(tmp_path, rng):
    def make(dictionary=frozenset({"TRACE"}), usernames=None, usernames_path=None, data_dir=None):
        database_service = DatabaseService(
            data_dir or str(tmp_path),
            usernames_path or str(tmp_path / "users.txt")
        )
        return ConsoleApp(
            GameService(dictionary, rng),
            database_service,
            set() if usernames is None else usernames
        )
    return make


def test_request_username_lists_users_and_normalizes(stdin, capsys):
    stdin("  Alice ")
    assert request_username({"bob", "carol"}) == "alice"
    out = capsys.readouterr().out
    assert out.startswith("List of existing users:\nbob\ncarol\n\n")
    assert "Type \":q\" to exit" in out


@pytest.mark.parametrize("line", [":q", "", "   "])
def test_request_username_quit(stdin, line):
    stdin(line)
    assert request_username(set()) is None


def test_request_user_selection_reprompts(stdin, capsys):
    stdin("play", "9", "2")
    assert request_user_selection() is UserSelection.VIEW_STATS
    out = capsys.readouterr().out
    assert "Error: selection must be an integer" in out
    assert "Error: invalid selection" in out


@pytest.mark.parametrize("line, expected", [("y", True), (" Y ", True), ("n", False), ("yes", False), ("", False)])
def test_request_delete_confirmation(stdin, line, expected):
    stdin(line)
    assert request_delete_confirmation("alice") is expected


def test_new_user_plays_a_game(stdin, capsys, make_app, tmp_path):
    stdin("Alice", "1", "trace", "3", ":q")
    app = make_app()

    app.run()

    out = capsys.readouterr().out
    assert "Hello, alice" in out
    assert "Genius! The word was: TRACE" in out
    assert "Number of Words Played: 1" in out
    assert (tmp_path / "users.txt").read_text() == "alice\n"
    assert (tmp_path / "alice.txt").read_text() == (
        "Username: alice\n"
        "Words Played: TRACE\n"
        "Number of Guesses: 1,0,0,0,0,0\n"
        "Maximum Win Streak: 1\n"
        "Current Win Streak: 1\n"
    )
    assert app.usernames == {"alice"}


def test_existing_player_is_loaded(stdin, capsys, make_app, store, tmp_path):
    existing = PlayerInfo("alice", {"CRANE"}, [0, 0, 0, 1, 0, 0], 1, 1)
    store.save_player(existing)
    stdin("alice", "2", "")

    make_app(usernames={"alice"}).run()

    out = capsys.readouterr().out
    assert "Number of Words Played: 1\nWin Rate: 100%" in out
    assert "4: ============ 1" in out


def test_exhausted_dictionary_keeps_menu_running(stdin, capsys, make_app, store, tmp_path):
    store.save_player(PlayerInfo("alice", {"TRACE"}, [0] * 6, 0, 0))
    stdin("alice", "1", "3", ":q")

    make_app(usernames={"alice"}).run()

    out = capsys.readouterr().out
    assert "There are no remaining words in the dictionary." in out
    assert out.count("Username: ") == 2


def test_delete_user(stdin, capsys, make_app, store, tmp_path):
    store.save_player(PlayerInfo("alice"))
    stdin("alice", "4", "n", "4", "y", ":q")
    app = make_app(usernames={"alice", "bob"})

    app.run()

    out = capsys.readouterr().out
    assert "Action aborted" in out
    assert app.usernames == {"bob"}
    assert not (tmp_path / "alice.txt").exists()
    assert (tmp_path / "users.txt").read_text() == "bob\n"


def test_delete_user_without_player_file(stdin, make_app, tmp_path):
    stdin("alice", "4", "y", ":q")
    app = make_app()
    app.run()
    assert app.usernames == set()
    assert (tmp_path / "users.txt").read_text() == ""


def test_corrupt_record_fails_login(stdin, capsys, make_app, tmp_path):
    (tmp_path / "alice.txt").write_text("not a record\n")
    stdin("alice", ":q")
    app = make_app()

    app.run()

    out = capsys.readouterr().out
    assert f"Error: corrupt player database file: {tmp_path / 'alice.txt'}" in out
    assert "Hello, alice" not in out
    assert app.usernames == set()
    # the corrupt file is left untouched
    assert (tmp_path / "alice.txt").read_text() == "not a record\n"


def test_registry_write_failure_is_fatal(stdin, capsys, make_app, tmp_path):
    stdin("alice", "1")
    app = make_app(usernames_path=str(tmp_path / "missing" / "users.txt"))

    app.run()

    out = capsys.readouterr().out
    assert "Error: could not write to the user database" in out
    assert "Hello, alice" not in out


def test_player_save_failure_is_not_fatal(stdin, capsys, make_app, tmp_path):
    stdin("alice", "1", "trace", "2", "3", ":q")
    app = make_app(data_dir=str(tmp_path / "missing"))

    app.run()

    out = capsys.readouterr().out
    assert "Error: could not write to user database file, progress has not been saved" in out
    # in-memory stats survive for the session
    assert out.count("Number of Words Played: 1\nWin Rate: 100%\nCurrent Win Streak: 1") == 2


def test_end_of_input_mid_game_records_nothing(stdin, capsys, make_app, store, tmp_path):
    store.save_player(PlayerInfo("alice", {"CRANE"}, [0] * 6, 0, 0))
    before = (tmp_path / "alice.txt").read_text()
    stdin("alice", "1", "crane")

    make_app(dictionary=frozenset({"TRACE", "CRANE"})).run()

    assert (tmp_path / "alice.txt").read_text() == before
    assert "The word was" not in capsys.readouterr().out


def test_end_of_input_at_login_exits(stdin, make_app):
    stdin()
    make_app().run()


def test_step_transitions(stdin, make_app):
    app = make_app()
    player = PlayerInfo("alice")

    assert isinstance(app.step(Exit()), Exit)

    stdin("3")
    assert isinstance(app.step(MainMenu(player)), LogIn)

    stdin("4", "y")
    assert app.step(MainMenu(player)) == DeleteUser(player)


def test_registry_name_is_not_a_username(stdin, capsys, make_app, tmp_path):
    (tmp_path / "users.txt").write_text("bob\n")
    stdin("Users", ":q")
    app = make_app(usernames={"bob"})

    app.run()

    out = capsys.readouterr().out
    assert "Error: username is not available" in out
    assert "Hello, users" not in out
    assert app.usernames == {"bob"}
    assert (tmp_path / "users.txt").read_text() == "bob\n"
