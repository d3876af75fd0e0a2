"""Contract for launching the OS opener.

Why a Protocol:
- Structural typing keeps the executor free of `subprocess`, so tests can
  swap in a fake runner without spawning anything.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class ProcessRunner(Protocol):
    """Run a child process to completion and report its return code.

    Design rules:
    - Blocks until the child exits; no timeout.
    - The child inherits the parent's standard streams.
    - A launch failure (missing binary, permissions) raises `OSError`.
    """

    def run(self, argv: Sequence[str]) -> int:
        """Start `argv[0]` with `argv[1:]` and return its exit code."""

        ...
