"""Boundary to the key/value store that persists settings.

Store failures never block generation: loading falls back to defaults and
saving only logs.
"""

from typing import Any, Protocol

from loguru import logger

from passgen.settings import PasswordSettings


SETTINGS_KEY = "passwordSettings"
HIDDEN_KEY = "passwordHidden"


class SettingsStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class MemoryStore:
    """Dict-backed store, for tests and one-shot CLI sessions."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self.data: dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value


def load_settings(store: SettingsStore) -> PasswordSettings:
    try:
        raw = store.get(SETTINGS_KEY, None)
        if raw is None:
            return PasswordSettings()
        return PasswordSettings.from_storage(raw)
    except Exception as exc:
        logger.warning(f"Could not restore settings, using defaults: {exc}")
        return PasswordSettings()


def save_settings(store: SettingsStore, settings: PasswordSettings) -> None:
    try:
        store.set(SETTINGS_KEY, settings.to_storage())
    except Exception as exc:
        logger.warning(f"Could not persist settings: {exc}")


def load_hidden(store: SettingsStore) -> bool:
    try:
        return bool(store.get(HIDDEN_KEY, True))
    except Exception as exc:
        logger.warning(f"Could not restore hidden flag: {exc}")
        return True


def save_hidden(store: SettingsStore, hidden: bool) -> None:
    try:
        store.set(HIDDEN_KEY, hidden)
    except Exception as exc:
        logger.warning(f"Could not persist hidden flag: {exc}")
