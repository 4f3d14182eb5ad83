"""Password generation for the memorable and all-characters modes."""

import secrets
import string

from passgen.settings import Mode, PasswordSettings
from passgen.words import WORDS


MIN_SUFFIX_DIGITS = 2


# ── All characters ─────────────────────────────────────────────────────────


def character_pool(settings: PasswordSettings) -> str:
    """Return the alphabet selected by the character-class flags.

    Classes are always joined in the same order (lowercase, uppercase,
    numbers, symbols).  The result is empty when every flag is off.
    """
    pool = ""
    if settings.with_lowercase:
        pool += string.ascii_lowercase
    if settings.with_uppercase:
        pool += string.ascii_uppercase
    if settings.with_numbers:
        pool += string.digits
    if settings.with_symbols:
        pool += string.punctuation
    return pool


def _random_characters(length: int, pool: str) -> str:
    if not pool:
        return ""
    return "".join(secrets.choice(pool) for _ in range(length))


# ── Memorable ──────────────────────────────────────────────────────────────


def suffix_width(password_length: int, word: str) -> int:
    """Number of digits appended to *word* for a given target length."""
    return max(MIN_SUFFIX_DIGITS, password_length - len(word))


def _memorable(password_length: int) -> str:
    word = secrets.choice(WORDS)
    digits = "".join(
        secrets.choice(string.digits)
        for _ in range(suffix_width(password_length, word))
    )
    return word.capitalize() + digits


# ── Entry point ────────────────────────────────────────────────────────────


def generate_password(settings: PasswordSettings) -> str:
    """Generate a password for *settings*.

    Never raises for a valid settings value: an all-characters request with
    every class disabled yields an empty string.
    """
    if settings.mode == Mode.MEMORABLE:
        return _memorable(settings.password_length)
    return _random_characters(settings.password_length, character_pool(settings))
