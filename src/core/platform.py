"""Mapping from the running OS to the program that opens URLs.

References:
- windows: https://stackoverflow.com/a/49115945
- others: https://dwheeler.com/essays/open-files-urls.html
"""

from __future__ import annotations

import sys
from functools import lru_cache

from core.domain.errors import UnsupportedPlatformError
from core.domain.models import PlatformTarget

WINDOWS = "win32"
MACOS = "darwin"
LINUX = "linux"

PLATFORM_TARGETS: dict[str, PlatformTarget] = {
    WINDOWS: PlatformTarget(executable="rundll32.exe", fixed_args=("url.dll,FileProtocolHandler",)),
    MACOS: PlatformTarget(executable="open"),
    LINUX: PlatformTarget(executable="xdg-open"),
}


def resolve_platform_target(platform_id: str) -> PlatformTarget:
    """Return the opener for a `sys.platform` style identifier."""

    # Older interpreters report "linux2"/"linux3".
    key = LINUX if platform_id.startswith(LINUX) else platform_id
    try:
        return PLATFORM_TARGETS[key]
    except KeyError:
        raise UnsupportedPlatformError(platform_id) from None


@lru_cache(maxsize=1)
def current_platform_target() -> PlatformTarget:
    """Opener for this process; resolved once and reused."""

    return resolve_platform_target(sys.platform)
