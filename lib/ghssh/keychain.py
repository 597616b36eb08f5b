"""Register a private key with the macOS Keychain."""

from pathlib import Path

from ghssh.errors import run_checked


def add_to_keychain(key_path: Path) -> str:
    """Add the key to ssh-agent and store it in the Keychain.

    No duplicate check is made; ssh-add handles repeated additions itself.

    Returns:
        ssh-add's status message (it reports on stderr)
    """
    result = run_checked(['ssh-add', '--apple-use-keychain', str(key_path)])
    return (result.stderr or result.stdout or '').strip()
