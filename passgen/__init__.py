"""passgen -- password generation with live strength scoring.

Generates memorable or fully random passwords from a settings model and
keeps a debounced strength score in step with the current password.
"""

from passgen.debounce import Debouncer
from passgen.generator import character_pool, generate_password
from passgen.session import PasswordSession, SessionState
from passgen.settings import Mode, PasswordSettings
from passgen.store import MemoryStore, SettingsStore
from passgen.strength import (
    StrengthEvaluator,
    estimate_strength,
    get_scorer,
    score_entropy,
    score_zxcvbn,
)

__all__ = [
    "Debouncer",
    "MemoryStore",
    "Mode",
    "PasswordSession",
    "PasswordSettings",
    "SessionState",
    "SettingsStore",
    "StrengthEvaluator",
    "character_pool",
    "estimate_strength",
    "generate_password",
    "get_scorer",
    "score_entropy",
    "score_zxcvbn",
]
