"""Command execution.

The executor owns the two behaviours of the tool: printing help and asking the
OS to open a URL. Output goes through an `emit` callback and processes are
started through a `ProcessRunner`, so the CLI keeps every side effect (rich
consoles, real subprocesses) at the edge and tests can replace both.
"""

from __future__ import annotations

import logging
from typing import Callable

from core.domain.errors import CommandLaunchError, NonZeroExitError
from core.domain.models import Command, HelpCommand, OpenUrlCommand, PlatformTarget
from core.help import HELP_TEXT
from core.interfaces.process_runner import ProcessRunner
from core.platform import current_platform_target

logger = logging.getLogger(__name__)


class CommandExecutor:
    """Runs a parsed `Command` against one platform target."""

    def __init__(
        self,
        runner: ProcessRunner,
        target: PlatformTarget,
        emit: Callable[[str], None],
    ) -> None:
        self._runner = runner
        self._target = target
        self._emit = emit

    @property
    def target(self) -> PlatformTarget:
        return self._target

    def execute(self, command: Command) -> None:
        """Execute `command`; failures raise a `BrowseError` subclass."""

        if isinstance(command, HelpCommand):
            self._emit(HELP_TEXT)
            return
        if isinstance(command, OpenUrlCommand):
            self.open(command.url)
            return
        raise TypeError(f"Unknown command: {command!r}")

    def open(self, url: str) -> None:
        """Launch the platform opener for `url` and wait for it to exit."""

        argv = self._target.build_argv(url)
        logger.debug("Launching opener: %s", argv)

        try:
            returncode = self._runner.run(argv)
        except OSError as exc:
            raise CommandLaunchError(str(exc) or exc.__class__.__name__) from exc

        logger.debug("Opener %s exited with %s", self._target.executable, returncode)
        if returncode != 0:
            raise NonZeroExitError(returncode)


def open_url(
    url: str,
    *,
    runner: ProcessRunner | None = None,
    target: PlatformTarget | None = None,
) -> None:
    """Open `url` in the default browser from library code.

    Uses the real subprocess runner and the current platform's opener unless
    overridden. Raises `BrowseError` subclasses on failure.
    """

    if runner is None:
        from adapters.process_runner import SubprocessRunner  # noqa: PLC0415

        runner = SubprocessRunner()

    executor = CommandExecutor(
        runner=runner,
        target=target or current_platform_target(),
        emit=lambda _text: None,
    )
    executor.open(url)
