"""Errors raised by setup steps."""

import subprocess
from typing import Optional, Sequence


class SetupError(Exception):
    """Base class for fatal setup failures."""


class UnsupportedPlatform(SetupError):
    pass


class ToolchainInstallIncomplete(SetupError):
    pass


class MissingEmail(SetupError):
    pass


class InvalidEmailFormat(SetupError):
    pass


class MissingPublicKey(SetupError):
    pass


class CommandFailed(SetupError):
    """An external command exited nonzero or could not be started."""

    def __init__(self, cmd: Sequence[str], returncode: Optional[int] = None, stderr: str = ''):
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = (stderr or '').strip()

        if returncode is None:
            message = f"Command not found: {self.cmd[0]}"
        else:
            message = f"`{' '.join(self.cmd)}` exited with status {returncode}"
        if self.stderr:
            message += f": {self.stderr}"
        super().__init__(message)

    @classmethod
    def from_called_process_error(cls, e: subprocess.CalledProcessError) -> 'CommandFailed':
        stderr = e.stderr
        if isinstance(stderr, bytes):
            stderr = stderr.decode(errors='replace')
        return cls(e.cmd, e.returncode, stderr or '')


def run_checked(cmd: Sequence[str], **kwargs) -> subprocess.CompletedProcess:
    """Run a command with check=True, converting failures to CommandFailed.

    Output is captured as text unless the caller overrides it.
    """
    kwargs.setdefault('capture_output', True)
    kwargs.setdefault('text', True)
    try:
        return subprocess.run(list(cmd), check=True, **kwargs)
    except subprocess.CalledProcessError as e:
        raise CommandFailed.from_called_process_error(e) from e
    except FileNotFoundError as e:
        raise CommandFailed(cmd) from e
