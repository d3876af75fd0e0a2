"""CLI entry point.

`browse` accepts exactly one argument, so click never parses the command
line: `RawArgsCommand` hands every token (`-h`, `--help`, `--` included) to
`core.parser.parse_args`, which owns the argument rules.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

import typer
from typer.core import TyperCommand

from adapters.process_runner import SubprocessRunner
from cli.logging_config import configure_logging
from cli.ui_components import print_failure, print_text
from core.config import load_settings
from core.domain.errors import BrowseError
from core.parser import parse_args
from core.platform import current_platform_target
from core.services.executor import CommandExecutor

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


class RawArgsCommand(TyperCommand):
    """Typer command that skips click's option parsing entirely."""

    def parse_args(self, ctx: typer.Context, args: List[str]) -> List[str]:
        ctx.params["args"] = list(args)
        return []


@app.command(cls=RawArgsCommand, add_help_option=False)
def browse(
    args: Optional[List[str]] = typer.Argument(None, metavar="URL"),
) -> None:
    """Open an URL in your browser."""

    settings, problem = load_settings()
    configure_logging(settings.log_level)
    if problem:
        logger.warning("Ignoring invalid configuration: %s", problem)
    logger.debug("Raw arguments: %s", args)

    try:
        command = parse_args(list(args or []))
        executor = CommandExecutor(
            runner=SubprocessRunner(),
            target=current_platform_target(),
            emit=print_text,
        )
        executor.execute(command)
    except BrowseError as exc:
        print_failure(exc.detail)
        raise typer.Exit(code=1) from exc


def run() -> None:
    """Console-script target."""

    # Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8).
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    # Explicit args: click would otherwise glob/expand `~` and `%VAR%` on Windows.
    app(args=sys.argv[1:], windows_expand_args=False)


if __name__ == "__main__":
    run()
