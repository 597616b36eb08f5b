"""Xcode Command Line Tools detection and installation."""

import subprocess

import click

from ghssh.errors import ToolchainInstallIncomplete, run_checked


def is_installed() -> bool:
    """Check whether the Command Line Tools are installed.

    Returns:
        True if `xcode-select -p` reports a developer directory
    """
    try:
        result = subprocess.run(
            ['xcode-select', '-p'],
            capture_output=True, text=True, check=False
        )
    except (FileNotFoundError, OSError):
        return False
    return result.returncode == 0


def install() -> None:
    """Trigger the Command Line Tools installer and wait for the user.

    The installer runs as a separate GUI process with no completion signal,
    so this blocks on a keypress and then probes again.

    Raises:
        ToolchainInstallIncomplete: If the tools are still missing afterwards
        CommandFailed: If the installer could not be triggered
    """
    run_checked(['xcode-select', '--install'])

    click.echo("   Finish the installation in the window that opened, then come back here.")
    click.pause("Press any key once the installation has finished...")

    if not is_installed():
        raise ToolchainInstallIncomplete(
            "Xcode Command Line Tools are still not installed. "
            "Install them with `xcode-select --install` and run this again."
        )
