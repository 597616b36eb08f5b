"""Parse the optional ~/.ghssh/config.yml."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

KNOWN_FIELDS = {'host', 'key_prefix', 'ssh_dir'}


def _default_ssh_dir() -> Path:
    return Path.home() / '.ssh'


@dataclass
class SetupConfig:
    """User overrides for the setup run."""
    host: str = 'github.com'
    key_prefix: str = 'id_ed25519_gh'
    ssh_dir: Path = field(default_factory=_default_ssh_dir)

    @property
    def ssh_config_path(self) -> Path:
        return self.ssh_dir / 'config'

    @classmethod
    def load(cls, config_dir: Path) -> 'SetupConfig':
        """Load config.yml from config_dir. Returns defaults if not present."""
        config_file = config_dir / 'config.yml'
        if not config_file.exists():
            return cls()

        with open(config_file, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Invalid config.yml: expected a mapping, got {type(data).__name__}")

        unknown = set(data.keys()) - KNOWN_FIELDS
        if unknown:
            raise ValueError(f"Unknown config.yml field(s): {', '.join(sorted(map(str, unknown)))}")

        for name in KNOWN_FIELDS:
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                raise ValueError(
                    f"Invalid config.yml field '{name}': expected a string, "
                    f"got {type(value).__name__}"
                )

        config = cls()
        if data.get('host'):
            config.host = data['host']
        if data.get('key_prefix'):
            config.key_prefix = data['key_prefix']
        ssh_dir: Optional[str] = data.get('ssh_dir')
        if ssh_dir:
            config.ssh_dir = Path(ssh_dir).expanduser()
        return config
