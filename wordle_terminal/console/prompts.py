"""
Terminal Prompts

Line input that turns the end of the input stream (or Ctrl-C) into an
InputTerminated error, so every caller handles "the user wants to leave"
the same way.
"""

from ..models.errors import InputTerminated


def read_line(prompt: str = "") -> str:
    """
    Reads one line from standard input after writing prompt.

    Raises:
        InputTerminated: If the input stream ended or was interrupted
    """
    try:
        return input(prompt)
    except (EOFError, KeyboardInterrupt) as e:
        # finish the prompt line before anything else is printed
        print()
        raise InputTerminated() from e
