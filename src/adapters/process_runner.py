"""`subprocess` implementation of `ProcessRunner`.

The child inherits stdin/stdout/stderr; nothing is captured. `shell=False`
so the URL reaches the opener as a single argument, untouched by any shell.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """Runs the opener with `subprocess.run` and waits for it to finish."""

    def run(self, argv: Sequence[str]) -> int:
        logger.debug("subprocess.run(%s)", list(argv))
        completed = subprocess.run(list(argv), check=False)
        return completed.returncode
