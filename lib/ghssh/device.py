"""Derive a filesystem-safe device identifier from the Mac's name."""

import re
from pathlib import Path

from ghssh.errors import run_checked

FALLBACK_DEVICE_ID = 'device'


def normalize_device_name(name: str) -> str:
    """Turn a display name into a lowercase hyphenated slug.

    Example:
        >>> normalize_device_name("Jane's MacBook Pro (2)")
        'jane-s-macbook-pro-2'
    """
    slug = re.sub(r'[^a-z0-9]+', '-', name.lower())
    return slug.strip('-')


def get_computer_name() -> str:
    """Read the human-readable ComputerName from system settings."""
    result = run_checked(['scutil', '--get', 'ComputerName'])
    return result.stdout.strip()


def device_id() -> str:
    """Return the slug of the current ComputerName.

    Not cached: every call queries scutil again.
    """
    return normalize_device_name(get_computer_name()) or FALLBACK_DEVICE_ID


def key_path_for(ssh_dir: Path, key_prefix: str = 'id_ed25519_gh') -> Path:
    """Path of this device's private key, e.g. ~/.ssh/id_ed25519_gh_work-mac."""
    return ssh_dir / f'{key_prefix}_{device_id()}'
