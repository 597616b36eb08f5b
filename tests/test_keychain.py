import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from ghssh.errors import CommandFailed
from ghssh.keychain import add_to_keychain


def test_add_to_keychain():
    key_path = Path('/Users/dev/.ssh/id_ed25519_gh_work-mac')
    result = subprocess.CompletedProcess(
        [], 0, stdout='', stderr=f'Identity added: {key_path} (dev@example.com)\n'
    )

    with patch('subprocess.run', return_value=result) as mock_run:
        message = add_to_keychain(key_path)

    assert mock_run.call_args[0][0] == ['ssh-add', '--apple-use-keychain', str(key_path)]
    assert message.startswith('Identity added')


def test_add_to_keychain_failure():
    error = subprocess.CalledProcessError(
        1, ['ssh-add'], stderr='Could not open a connection to your authentication agent.'
    )
    with patch('subprocess.run', side_effect=error):
        with pytest.raises(CommandFailed, match='authentication agent'):
            add_to_keychain(Path('/tmp/key'))


def test_add_to_keychain_missing_binary():
    with patch('subprocess.run', side_effect=FileNotFoundError):
        with pytest.raises(CommandFailed, match='Command not found: ssh-add'):
            add_to_keychain(Path('/tmp/key'))
