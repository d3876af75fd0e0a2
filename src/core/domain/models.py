"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Commands and platform targets are small, immutable values; frozen models
  give equality and a readable repr for free, which keeps tests simple.
- The domain knows nothing about subprocesses or the CLI: it only describes
  *what* to open and *with which* program.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class HelpCommand(BaseModel):
    """Request to print the help text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["help"] = "help"


class OpenUrlCommand(BaseModel):
    """Request to open `url` in the default browser.

    The URL is kept exactly as typed: no scheme check, no trimming and no
    percent-decoding.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=False)

    kind: Literal["open_url"] = "open_url"
    url: str = Field(
        ...,
        description="Raw command-line argument, passed verbatim to the OS opener.",
    )


Command = Union[HelpCommand, OpenUrlCommand]


class PlatformTarget(BaseModel):
    """Program (and leading arguments) the OS uses to open a URL."""

    model_config = ConfigDict(frozen=True)

    executable: str = Field(
        ...,
        min_length=1,
        description="Name of the executable that opens URLs (e.g. 'xdg-open').",
    )
    fixed_args: tuple[str, ...] = Field(
        default=(),
        description="Arguments that must precede the URL.",
    )

    def open_args(self, url: str) -> list[str]:
        """Arguments handed to `executable`: fixed args first, URL last."""

        return [*self.fixed_args, url]

    def build_argv(self, url: str) -> list[str]:
        """Full child-process argv, executable included."""

        return [self.executable, *self.open_args(url)]
