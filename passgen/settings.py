"""Generation settings shared by the generator, the session and the store."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


MIN_LENGTH = 1
MAX_LENGTH = 128


class Mode(StrEnum):
    MEMORABLE = "memo"
    ALL_CHARACTERS = "allChars"


class PasswordSettings(BaseModel):
    """Immutable description of how passwords are generated.

    Character-class flags only matter in ``Mode.ALL_CHARACTERS``.  The
    camelCase aliases are the persisted key names.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    password_length: int = Field(default=16, ge=MIN_LENGTH, le=MAX_LENGTH)
    mode: Mode = Mode.MEMORABLE
    with_lowercase: bool = True
    with_uppercase: bool = True
    with_numbers: bool = True
    with_symbols: bool = True

    def replace(self, **changes: Any) -> "PasswordSettings":
        """Return a validated copy with *changes* applied."""
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)

    def to_storage(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_storage(cls, raw: dict[str, Any]) -> "PasswordSettings":
        return cls.model_validate(raw)
