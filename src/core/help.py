"""Help text shown by `browse --help`."""

from __future__ import annotations

REPOSITORY_URL = "https://github.com/otaviopace/browse"

HELP_TEXT = f"""\
browse - CLI tool to open an URL in your browser
USAGE:
    browse <URL>
FLAGS:
    -h, --help       Prints help information
PARAMETERS:
    <URL>            An URL like https://crates.io

GitHub repo: {REPOSITORY_URL}
"""
