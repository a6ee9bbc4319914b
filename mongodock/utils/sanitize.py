"""Input validation and escaping utilities for mongodock.

Operator-supplied names never become part of a mongosh script. They are
validated here and then handed to the shell out-of-band (see modules.mongo).
"""

import re
import shlex
from typing import Iterable

# Characters MongoDB rejects in database names (Unix and Windows deployments)
DATABASE_NAME_FORBIDDEN = '/\\. "$*<>:|?\x00'

DATABASE_NAME_MAX_LENGTH = 63


def escape_shell(value: str) -> str:
    """
    Escape a string for safe use in shell commands.

    Uses shlex.quote() which wraps value in single quotes
    and escapes any single quotes within.

    Example:
        >>> escape_shell("test; rm -rf /")
        "'test; rm -rf /'"
    """
    if not value:
        return "''"
    return shlex.quote(str(value))


def format_command(command: Iterable[str]) -> str:
    """Render an argument list as a copy-pasteable shell line."""
    return " ".join(escape_shell(arg) for arg in command)


def validate_identifier(identifier: str, max_length: int = 64,
                        allow_chars: str = "a-zA-Z0-9_") -> bool:
    """
    Validate an identifier against allowed character set and length.

    Args:
        identifier: String to validate
        max_length: Maximum allowed length
        allow_chars: Regex character class of allowed characters

    Returns:
        True if valid, False otherwise
    """
    if not identifier:
        return False

    if len(identifier) > max_length:
        return False

    pattern = f"^[{allow_chars}]+$"
    return bool(re.fullmatch(pattern, str(identifier)))


def validate_database_name(name: str) -> bool:
    """
    Validate a MongoDB database name.

    Args:
        name: Database name

    Returns:
        True if MongoDB would accept the name
    """
    if not name:
        return False

    if len(name.encode("utf-8")) > DATABASE_NAME_MAX_LENGTH:
        return False

    return not any(ch in DATABASE_NAME_FORBIDDEN for ch in name)


def validate_username(username: str) -> bool:
    """Validate a MongoDB username (letters, digits, and _ . @ -)."""
    return validate_identifier(username, max_length=64, allow_chars=r"a-zA-Z0-9_.@\-")
