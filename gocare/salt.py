"""Random salts for password hashing."""

from __future__ import annotations

import secrets
import string

_LETTERS = string.ascii_lowercase + string.ascii_uppercase
DEFAULT_SALT_LENGTH = 50


def gen_salt(length: int) -> str:
    """Return a random string of ASCII letters; a negative length means 50."""
    if length < 0:
        length = DEFAULT_SALT_LENGTH
    return "".join(secrets.choice(_LETTERS) for _ in range(length))