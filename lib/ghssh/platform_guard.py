"""Refuse to run anywhere but macOS."""

import platform
from typing import Optional

from ghssh.errors import UnsupportedPlatform

SUPPORTED_SYSTEM = 'Darwin'


def check_platform(system: Optional[str] = None) -> None:
    """Raise UnsupportedPlatform unless running on macOS.

    Args:
        system: OS identifier to check (defaults to platform.system())
    """
    system = system if system is not None else platform.system()
    if system != SUPPORTED_SYSTEM:
        raise UnsupportedPlatform(
            f"This tool only supports macOS (detected: {system or 'unknown'})."
        )
