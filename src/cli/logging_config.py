"""Logging setup for the CLI.

Records go to stderr through Rich. Core and adapters only log at DEBUG, so the
default WARNING level leaves stderr to the failure line alone.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from cli.ui_components import stderr_console

_HANDLER_NAME = "browse-rich"


def configure_logging(level: str = "WARNING") -> None:
    """Attach a single Rich handler to the root logger (idempotent)."""

    root = logging.getLogger()
    root.setLevel(level)
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = RichHandler(console=stderr_console, show_path=False, markup=False)
    handler.set_name(_HANDLER_NAME)
    root.addHandler(handler)
