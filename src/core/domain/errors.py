"""Failures raised by the core.

Every error carries its display text in `str(error)`; the CLI prints that text
after the standard failure prefix and exits with status 1.
"""

from __future__ import annotations

import signal
import sys


class BrowseError(Exception):
    """Base class for every failure the entry point reports."""

    @property
    def detail(self) -> str:
        return str(self)


class ParseError(BrowseError):
    """Malformed invocation (wrong argument count)."""


class CommandLaunchError(BrowseError):
    """The OS could not start the opener executable."""


class UnsupportedPlatformError(BrowseError):
    """No opener is known for the running operating system."""

    def __init__(self, platform_id: str) -> None:
        self.platform_id = platform_id
        super().__init__(f"unsupported platform: {platform_id!r}")


class NonZeroExitError(BrowseError):
    """The opener ran but reported failure."""

    def __init__(self, returncode: int) -> None:
        self.returncode = returncode
        super().__init__(describe_exit_status(returncode))


def describe_exit_status(returncode: int, platform_id: str = sys.platform) -> str:
    """Render a `subprocess` return code the way the OS reports it.

    Windows only has exit codes. On POSIX, negative codes mean the child was
    killed by that signal.
    """

    if platform_id.startswith("win"):
        return f"exit code: {returncode}"
    if returncode >= 0:
        return f"exit status: {returncode}"

    signum = -returncode
    try:
        name = signal.Signals(signum).name
    except ValueError:
        return f"signal: {signum}"
    return f"signal: {signum} ({name})"
