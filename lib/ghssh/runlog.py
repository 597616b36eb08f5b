"""Append-only event log for setup runs."""

import sys
from datetime import datetime
from pathlib import Path


class SetupLog:
    """Writes timestamped events to ~/.ghssh/setup.log."""

    def __init__(self, log_path: Path):
        self.log_path = log_path

    def log_event(self, message: str, level: str = 'INFO') -> None:
        """Log an event to setup.log."""
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        entry = f'[{timestamp}] {level}: {message}\n'
        try:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_path, 'a') as f:
                f.write(entry)
        except (IOError, OSError) as e:
            print(f"Warning: Failed to log event: {e}", file=sys.stderr)
