from __future__ import annotations

import pytest

from core.domain.errors import CommandLaunchError, NonZeroExitError, describe_exit_status
from core.domain.models import HelpCommand, OpenUrlCommand
from core.help import HELP_TEXT
from core.platform import LINUX, WINDOWS, resolve_platform_target
from core.services.executor import CommandExecutor, open_url

from conftest import FakeRunner

URL = "https://crates.io"


def make_executor(runner: FakeRunner, platform_id: str = LINUX, sink: list[str] | None = None):
    out = sink if sink is not None else []
    return CommandExecutor(runner=runner, target=resolve_platform_target(platform_id), emit=out.append)


def test_help_is_emitted_without_launching(fake_runner: FakeRunner) -> None:
    out: list[str] = []

    make_executor(fake_runner, sink=out).execute(HelpCommand())

    assert out == [HELP_TEXT]
    assert fake_runner.calls == []
    assert "browse" in HELP_TEXT
    assert "USAGE" in HELP_TEXT
    assert "-h, --help" in HELP_TEXT
    assert "<URL>" in HELP_TEXT
    assert "https://github.com/" in HELP_TEXT


def test_open_launches_linux_opener(fake_runner: FakeRunner) -> None:
    make_executor(fake_runner).execute(OpenUrlCommand(url=URL))

    assert fake_runner.calls == [["xdg-open", URL]]


def test_open_launches_windows_opener(fake_runner: FakeRunner) -> None:
    make_executor(fake_runner, WINDOWS).execute(OpenUrlCommand(url=URL))

    assert fake_runner.calls == [["rundll32.exe", "url.dll,FileProtocolHandler", URL]]


def test_launch_failure() -> None:
    runner = FakeRunner(error=FileNotFoundError(2, "No such file or directory"))

    with pytest.raises(CommandLaunchError) as excinfo:
        make_executor(runner).execute(OpenUrlCommand(url=URL))

    assert "No such file or directory" in excinfo.value.detail
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert len(runner.calls) == 1


def test_launch_failure_message_is_never_empty() -> None:
    runner = FakeRunner(error=PermissionError())

    with pytest.raises(CommandLaunchError) as excinfo:
        make_executor(runner).execute(OpenUrlCommand(url=URL))

    assert excinfo.value.detail


def test_nonzero_exit() -> None:
    runner = FakeRunner(returncode=3)

    with pytest.raises(NonZeroExitError) as excinfo:
        make_executor(runner).execute(OpenUrlCommand(url=URL))

    assert excinfo.value.returncode == 3
    assert excinfo.value.detail == describe_exit_status(3)
    assert len(runner.calls) == 1


def test_unknown_command_type(fake_runner: FakeRunner) -> None:
    with pytest.raises(TypeError):
        make_executor(fake_runner).execute("open")  # type: ignore[arg-type]


def test_open_url_helper(fake_runner: FakeRunner) -> None:
    open_url(URL, runner=fake_runner, target=resolve_platform_target(WINDOWS))

    assert fake_runner.calls == [["rundll32.exe", "url.dll,FileProtocolHandler", URL]]


def test_open_url_helper_propagates_failure() -> None:
    with pytest.raises(NonZeroExitError):
        open_url(URL, runner=FakeRunner(returncode=1), target=resolve_platform_target(LINUX))
