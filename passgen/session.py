"""Session state tying settings, generation and scoring together."""

from dataclasses import dataclass
from typing import Any

from loguru import logger

from passgen.config import config
from passgen.generator import generate_password
from passgen.settings import PasswordSettings
from passgen.store import (
    SettingsStore,
    load_hidden,
    load_settings,
    save_hidden,
    save_settings,
)
from passgen.strength import Scorer, StrengthEvaluator, get_scorer


@dataclass(frozen=True)
class SessionState:
    password: str
    score: int | None
    copied: bool
    hidden: bool


class PasswordSession:
    """Own the current settings, password and score for one password field.

    Every settings change is persisted and regenerates the password; every
    password change, generated or typed, is re-scored after the debounce
    delay.  Use as an async context manager, or call :meth:`start` and
    :meth:`close` explicitly.
    """

    def __init__(
        self,
        store: SettingsStore,
        *,
        scorer: Scorer | None = None,
        delay: float | None = None,
    ):
        self.store = store
        self.settings = load_settings(store)
        self.hidden = load_hidden(store)
        self.password = generate_password(self.settings)
        self.copied = False
        self.evaluator = StrengthEvaluator(
            scorer or get_scorer(config.scorer),
            delay=delay,
        )

    @property
    def score(self) -> int | None:
        return self.evaluator.score

    async def start(self) -> None:
        await self.evaluator.start(self.password)

    def close(self) -> None:
        self.evaluator.close()

    async def join(self) -> None:
        """Wait for pending scoring to settle."""
        await self.evaluator.join()

    def update_settings(self, **changes: Any) -> PasswordSettings:
        """Apply *changes* to the settings and regenerate the password.

        Raises ``pydantic.ValidationError`` for invalid values, and
        ``RuntimeError`` when called outside a running event loop; either way
        the session is left untouched.
        """
        settings = self.settings.replace(**changes)
        self._apply_settings(settings)
        logger.debug(f"Settings changed: {changes}")
        return self.settings

    def regenerate(self) -> str:
        self._apply_settings(self.settings)
        return self.password

    def edit_password(self, value: str) -> None:
        self._set_password(value)

    def mark_copied(self, result: bool) -> None:
        self.copied = bool(result) and bool(self.password)

    def toggle_hidden(self) -> bool:
        self.hidden = not self.hidden
        save_hidden(self.store, self.hidden)
        return self.hidden

    def snapshot(self) -> SessionState:
        return SessionState(
            password=self.password,
            score=self.score,
            copied=self.copied,
            hidden=self.hidden,
        )

    def _apply_settings(self, settings: PasswordSettings) -> None:
        self._set_password(generate_password(settings))
        self.settings = settings
        save_settings(self.store, settings)

    def _set_password(self, value: str) -> None:
        self.evaluator.on_password_changed(value)
        self.password = value
        self.copied = False

    async def __aenter__(self) -> "PasswordSession":
        await self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.close()
