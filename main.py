"""
Wordle - Main Entry Point

Runs a game of Wordle using a dictionary file given on the command line.
"""

import argparse
import sys
from typing import List, Optional

from wordle_terminal import create_console_app
from wordle_terminal.config import get_config, read_dictionary_file
from wordle_terminal.models.errors import IoFailureError
from wordle_terminal.utils.game_logger import game_logger


class UsageParser(argparse.ArgumentParser):
    """Argument parser that prints the usage text instead of failing."""

    def error(self, message):
        self.print_help()
        self.exit(0)


def build_parser() -> argparse.ArgumentParser:
    parser = UsageParser(
        prog='python main.py',
        description='Wordle',
        usage='python main.py [dictionary file name]',
        add_help=False
    )
    parser.add_argument('dictionary', help='file of words, one per line; only 5-letter lines are used')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to load the dictionary and run the game."""
    args = build_parser().parse_args(argv)

    if not args.dictionary:
        print("Error: no dictionary file specified")
        return 0

    try:
        dictionary = read_dictionary_file(args.dictionary)
    except (OSError, UnicodeDecodeError):
        print("Error: could not read dictionary file")
        return 1

    try:
        app = create_console_app(dictionary, get_config())
    except IoFailureError as e:
        print("Error: could not read user database")
        game_logger.log_error(None, e, 'startup')
        return 1

    game_logger.log_user_action(
        None, 'startup',
        dictionary=args.dictionary,
        word_count=len(dictionary)
    )

    app.run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
