import re
from ghssh.runlog import SetupLog


def test_log_event_appends_entries(tmp_path):
    """Should append timestamped entries, creating the directory"""
    log = SetupLog(tmp_path / '.ghssh' / 'setup.log')

    log.log_event('Setup started')
    log.log_event('Keeping existing key', level='WARN')

    lines = (tmp_path / '.ghssh' / 'setup.log').read_text().splitlines()
    assert len(lines) == 2
    assert re.match(r'^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] INFO: Setup started$', lines[0])
    assert lines[1].endswith('WARN: Keeping existing key')


def test_log_event_failure_does_not_raise(tmp_path, capsys):
    """A log path that cannot be written only warns"""
    blocker = tmp_path / 'not-a-dir'
    blocker.write_text('')
    log = SetupLog(blocker / 'setup.log')

    log.log_event('hello')

    assert 'Failed to log event' in capsys.readouterr().err
