"""Command-line argument parsing.

Deliberately tiny: exactly one argument, either a help flag or a URL.
"""

from __future__ import annotations

from typing import Sequence

from core.domain.errors import ParseError
from core.domain.models import Command, HelpCommand, OpenUrlCommand

HELP_FLAGS = frozenset({"--help", "-h"})

WRONG_ARG_COUNT_MESSAGE = (
    "There should be only one argument to `browse`, either `--help`/`-h` or an `URL`"
)


def parse_args(args: Sequence[str]) -> Command:
    """Turn `argv[1:]` into a command.

    A help flag mixed with other arguments is still a wrong argument count.
    """

    if len(args) != 1:
        raise ParseError(WRONG_ARG_COUNT_MESSAGE)

    arg = args[0]
    if arg in HELP_FLAGS:
        return HelpCommand()

    return OpenUrlCommand(url=arg)
