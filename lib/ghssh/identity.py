"""Email prompt and validation."""

import re

import click

from ghssh.errors import InvalidEmailFormat, MissingEmail

EMAIL_PATTERN = re.compile(r'^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$')


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def validate_email(email: str) -> str:
    """Validate an email address for use as the key comment.

    Args:
        email: Raw user input

    Returns:
        The email with surrounding whitespace removed

    Raises:
        MissingEmail: If the input is empty
        InvalidEmailFormat: If the input is not a plausible address
    """
    email = (email or '').strip()
    if not email:
        raise MissingEmail("An email address is required.")
    if not is_valid_email(email):
        raise InvalidEmailFormat(f"Invalid email address: {email}")
    return email


def prompt_email() -> str:
    """Ask for the GitHub account email and validate it."""
    answer = click.prompt(
        "Enter the email address of your GitHub account",
        default='', show_default=False
    )
    return validate_email(answer)
