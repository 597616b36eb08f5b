"""Parse and append to the OpenSSH client config (~/.ssh/config)."""

import os
import re
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from ghssh.ssh_keys import ensure_ssh_dir

CONFIG_MODE = 0o600

STANZA_TEMPLATE = """Host {host}
    AddKeysToAgent yes
    UseKeychain yes
    IdentityFile {key_path}
"""

# "Keyword value" or "Keyword=value", per ssh_config(5)
_LINE_RE = re.compile(r'^(?P<keyword>[^\s=]+)(?:\s*=\s*|\s+)(?P<value>.*)$')


@dataclass
class Stanza:
    """A Host or Match block and the options under it."""
    keyword: str                 # 'host' | 'match'
    patterns: List[str]
    line: int                    # 1-based line of the Host/Match keyword
    options: List[Tuple[str, str]] = field(default_factory=list)

    def matches_host(self, host: str) -> bool:
        """True if this is a Host block naming host literally (case-insensitive)."""
        if self.keyword != 'host':
            return False
        host = host.lower()
        return any(p.lower() == host for p in self.patterns if not p.startswith('!'))

    def get(self, option: str) -> Optional[str]:
        option = option.lower()
        for key, value in self.options:
            if key == option:
                return value
        return None


def _split_args(value: str) -> List[str]:
    try:
        return shlex.split(value, comments=True)
    except ValueError:
        # Unbalanced quotes; fall back to plain whitespace splitting
        return value.split()


def parse_config(text: str) -> List[Stanza]:
    """Parse ssh_config text into Host/Match stanzas.

    Options that appear before the first Host/Match line are global and are
    not returned. Include directives are not followed.
    """
    stanzas: List[Stanza] = []
    current: Optional[Stanza] = None

    for lineno, raw in enumerate(text.splitlines(), 1):
        line = raw.strip()
        # Skip comments and empty lines
        if not line or line.startswith('#'):
            continue

        m = _LINE_RE.match(line)
        if m:
            keyword, value = m.group('keyword').lower(), m.group('value')
        else:
            keyword, value = line.lower(), ''

        if keyword in ('host', 'match'):
            current = Stanza(keyword=keyword, patterns=_split_args(value), line=lineno)
            stanzas.append(current)
        elif current is not None:
            current.options.append((keyword, value.strip()))

    return stanzas


def find_host_stanzas(text: str, host: str) -> List[Stanza]:
    return [s for s in parse_config(text) if s.matches_host(host)]


def render_stanza(host: str, key_path: Path) -> str:
    identity = str(key_path)
    # ssh splits unquoted arguments on whitespace
    if any(c.isspace() for c in identity):
        identity = f'"{identity}"'
    return STANZA_TEMPLATE.format(host=host, key_path=identity)


def ensure_config_stanza(config_path: Path, key_path: Path, host: str = 'github.com') -> bool:
    """Append a Host stanza for host unless the config already has one.

    Existing content is never rewritten. After an append the file is
    restricted to the owner.

    Args:
        config_path: Path to the ssh client config
        key_path: Private key to reference as IdentityFile
        host: Host to add a stanza for

    Returns:
        True if a stanza was appended, False if one already existed
    """
    existing = config_path.read_text() if config_path.exists() else ''

    if find_host_stanzas(existing, host):
        return False

    ensure_ssh_dir(config_path.parent)

    separator = ''
    if existing:
        separator = '\n' if existing.endswith('\n') else '\n\n'

    with open(config_path, 'a') as f:
        f.write(separator + render_stanza(host, key_path))

    os.chmod(config_path, CONFIG_MODE)
    return True
