"""SSH key generation and the overwrite decision."""

import os
from pathlib import Path

import click

from ghssh.errors import MissingPublicKey, run_checked

# Overwrite decision outcomes
NO_EXISTING_KEY = 'no_existing_key'
EXISTING_KEY_KEEP = 'existing_key_keep'
EXISTING_KEY_OVERWRITE = 'existing_key_overwrite'

PRIVATE_KEY_MODE = 0o600
PUBLIC_KEY_MODE = 0o644
SSH_DIR_MODE = 0o700


def public_key_path(key_path: Path) -> Path:
    return Path(f"{key_path}.pub")


def ensure_ssh_dir(ssh_dir: Path) -> None:
    """Create the directory if needed and restrict it to the owner."""
    ssh_dir.mkdir(mode=SSH_DIR_MODE, parents=True, exist_ok=True)
    os.chmod(ssh_dir, SSH_DIR_MODE)


def generate_key(email: str, key_path: Path) -> None:
    """Generate an ed25519 SSH keypair without a passphrase.

    Files already at key_path are overwritten by ssh-keygen; whether that is
    allowed is decided by the caller.

    Args:
        email: Key comment
        key_path: Path where private key will be saved (public key gets .pub suffix)

    Raises:
        CommandFailed: If ssh-keygen fails
    """
    ensure_ssh_dir(key_path.parent)

    run_checked([
        'ssh-keygen',
        '-q',
        '-t', 'ed25519',
        '-C', email,
        '-N', '',  # No passphrase
        '-f', str(key_path),
    ])

    os.chmod(key_path, PRIVATE_KEY_MODE)
    os.chmod(public_key_path(key_path), PUBLIC_KEY_MODE)


def get_public_key(key_path: Path) -> str:
    """Read public key content.

    Args:
        key_path: Path to private key (will append .pub)

    Returns:
        Public key content as string

    Raises:
        MissingPublicKey: If the .pub file does not exist
    """
    pub_path = public_key_path(key_path)
    if not pub_path.exists():
        raise MissingPublicKey(
            f"Public key {pub_path} not found. Run again and choose to overwrite "
            f"the key, or restore it with `ssh-keygen -y -f {key_path} > {pub_path}`."
        )
    return pub_path.read_text().strip()


def remove_key(key_path: Path) -> None:
    """Delete the private and public key files, if present."""
    for path in (key_path, public_key_path(key_path)):
        if path.exists():
            path.unlink()


def decide_overwrite(key_exists: bool, answer: str = '') -> str:
    """Map key presence and the user's answer to an overwrite decision.

    Only 'y' (any case) overwrites; everything else keeps the existing key.
    """
    if not key_exists:
        return NO_EXISTING_KEY
    if answer.strip().lower() == 'y':
        return EXISTING_KEY_OVERWRITE
    return EXISTING_KEY_KEEP


def ensure_key(email: str, key_path: Path) -> str:
    """Generate a key at key_path, asking first if one is already there.

    Returns:
        The overwrite decision that was taken
    """
    answer = ''
    if key_path.exists():
        answer = click.prompt(
            f"A key already exists at {key_path}. Overwrite it? [y/N]",
            default='', show_default=False
        )

    decision = decide_overwrite(key_path.exists(), answer)

    if decision == EXISTING_KEY_KEEP:
        return decision
    if decision == EXISTING_KEY_OVERWRITE:
        remove_key(key_path)

    generate_key(email, key_path)
    return decision
