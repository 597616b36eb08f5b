import pytest

from ghssh.errors import InvalidEmailFormat, MissingEmail
from ghssh.identity import is_valid_email, prompt_email, validate_email


def test_accepts_valid_emails():
    assert is_valid_email('user@example.com')
    assert is_valid_email('user.name+tag@sub.example.co')


def test_rejects_invalid_emails():
    for email in ['', 'noatsign.com', 'user@', 'user@domain']:
        assert not is_valid_email(email), email


def test_validate_email_strips_whitespace():
    assert validate_email('  dev@example.com \n') == 'dev@example.com'


def test_validate_email_empty():
    with pytest.raises(MissingEmail):
        validate_email('')
    with pytest.raises(MissingEmail):
        validate_email('   ')


def test_validate_email_malformed():
    with pytest.raises(InvalidEmailFormat, match='user@domain'):
        validate_email('user@domain')


def test_prompt_email(monkeypatch):
    monkeypatch.setattr('click.prompt', lambda *args, **kwargs: 'dev@example.com')
    assert prompt_email() == 'dev@example.com'


def test_prompt_email_empty(monkeypatch):
    """Empty input should fail instead of re-prompting"""
    monkeypatch.setattr('click.prompt', lambda *args, **kwargs: kwargs.get('default'))
    with pytest.raises(MissingEmail):
        prompt_email()
