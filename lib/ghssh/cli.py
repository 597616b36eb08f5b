#!/usr/bin/env python3
"""ghssh CLI - one-time GitHub SSH key setup for macOS."""

import sys
import click
from pathlib import Path
from ghssh import toolchain
from ghssh.device import key_path_for
from ghssh.errors import SetupError, UnsupportedPlatform
from ghssh.identity import prompt_email
from ghssh.keychain import add_to_keychain
from ghssh.platform_guard import check_platform
from ghssh.runlog import SetupLog
from ghssh.settings import SetupConfig
from ghssh.ssh_config import ensure_config_stanza
from ghssh.ssh_keys import (
    EXISTING_KEY_KEEP,
    EXISTING_KEY_OVERWRITE,
    ensure_key,
    get_public_key,
)


def _warn(log: SetupLog, message: str) -> None:
    log.log_event(message, level='WARN')
    click.secho(f"⚠️  Warning: {message}", fg='yellow')


def _print_report(pubkey: str, host: str) -> None:
    """Show the public key and the manual steps left to do."""
    click.echo("\n" + "="*60)
    click.echo("📋 Your public key:")
    click.echo("="*60)
    click.echo(pubkey)
    click.echo("="*60 + "\n")
    click.echo("Next steps:")
    click.echo("  1. Copy the public key above")
    click.echo(f"  2. Open https://{host}/settings/keys")
    click.echo("  3. Click 'New SSH key', paste the key and save")
    click.echo("\n🔌 Then test the connection:")
    click.echo(f"  ssh -T git@{host}")


def run_setup(config: SetupConfig, log: SetupLog) -> None:
    """Run every setup step after the platform check. Any failure raises SetupError."""
    if toolchain.is_installed():
        click.echo("✓ Xcode Command Line Tools installed")
    else:
        _warn(log, "Xcode Command Line Tools not found, starting installer")
        toolchain.install()
        click.echo("✓ Xcode Command Line Tools installed")
    log.log_event('Toolchain present')

    email = prompt_email()
    log.log_event(f'Using email: {email}')

    key_path = key_path_for(config.ssh_dir, config.key_prefix)
    decision = ensure_key(email, key_path)
    if decision == EXISTING_KEY_KEEP:
        _warn(log, f"Keeping existing key at {key_path}")
    else:
        if decision == EXISTING_KEY_OVERWRITE:
            log.log_event(f'Removed existing key at {key_path}')
        log.log_event(f'Generated key at {key_path}')
        click.echo(f"✓ SSH key created at {key_path}")

    message = add_to_keychain(key_path)
    log.log_event(f'Added key to Keychain: {message}' if message else 'Added key to Keychain')
    click.echo("✓ Key added to macOS Keychain")

    config_path = config.ssh_config_path
    if ensure_config_stanza(config_path, key_path, config.host):
        log.log_event(f'Added Host {config.host} to {config_path}')
        click.echo(f"✓ Added Host {config.host} to {config_path}")
    else:
        _warn(log, f"{config_path} already has a Host {config.host} entry; "
                   f"check it uses IdentityFile {key_path}")

    _print_report(get_public_key(key_path), config.host)
    log.log_event('Setup complete')
    click.echo("\n✅ Setup complete!")


@click.command()
@click.version_option()
def main():
    """Set up SSH authentication to GitHub on this Mac."""
    click.echo("🔧 Setting up GitHub SSH access...")

    # Nothing is written before the platform is known to be supported
    try:
        check_platform()
    except UnsupportedPlatform as e:
        click.secho(f"❌ Error: {e}", fg='red')
        sys.exit(1)

    config_dir = Path.home() / '.ghssh'
    log = SetupLog(config_dir / 'setup.log')
    log.log_event('Setup started')
    log.log_event('Platform check passed')

    try:
        config = SetupConfig.load(config_dir)
        run_setup(config, log)
    except (SetupError, ValueError) as e:
        log.log_event(f'{type(e).__name__}: {e}', level='ERROR')
        click.secho(f"❌ Error: {e}", fg='red')
        sys.exit(1)


if __name__ == '__main__':
    main()
