"""CLI output components (Rich).

Why separate components:
- Keeps command wiring apart from how text reaches the terminal.
- Both consoles resolve `sys.stdout`/`sys.stderr` lazily, so test runners that
  swap the streams capture everything printed here.
"""

from __future__ import annotations

from rich.console import Console

DEFAULT_FAILURE_MESSAGE = "Failed to open browser"

# Plain text only: no markup, no highlighting, no wrapping of long lines.
stdout_console = Console(highlight=False, soft_wrap=True)
stderr_console = Console(stderr=True, highlight=False, soft_wrap=True)


def print_text(text: str, console: Console | None = None) -> None:
    """Print `text` verbatim to stdout."""

    (console or stdout_console).print(text, markup=False, emoji=False)


def format_failure(detail: str | None) -> str:
    """Single diagnostic line for a failed invocation."""

    if detail:
        return f"{DEFAULT_FAILURE_MESSAGE}, error message: {detail}"
    return DEFAULT_FAILURE_MESSAGE


def print_failure(detail: str | None, console: Console | None = None) -> None:
    """Report a failure on stderr."""

    (console or stderr_console).print(format_failure(detail), markup=False, emoji=False)
