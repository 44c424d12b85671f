from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    model_serializer,
    model_validator,
)

from namegen.words import ADJECTIVES, NOUNS

# Attempts per name before a length constraint is declared unsatisfiable
MAX_ATTEMPTS = 1000

# Widest numeric suffix accepted
MAX_DIGITS = 64

# A single entry of a word list
Word = Annotated[str, StringConstraints(min_length=1)]


class Casing(StrEnum):
    LOWER = "lower"
    UPPER = "upper"
    TITLE = "title"


class SeparatorKind(StrEnum):
    NONE = "none"
    HYPHEN = "hyphen"
    UNDERSCORE = "underscore"
    SPACE = "space"
    CUSTOM = "custom"


_SEPARATOR_TEXT = {
    SeparatorKind.NONE: "",
    SeparatorKind.HYPHEN: "-",
    SeparatorKind.UNDERSCORE: "_",
    SeparatorKind.SPACE: " ",
}
_TEXT_SEPARATOR = {text: kind for kind, text in _SEPARATOR_TEXT.items()}


class NumberSeparator(BaseModel):
    """Delimiter between the word pair and the numeric suffix.

    Serialized as its literal text ("-", "_", " ", "" or any custom string),
    and parsed back from that text.
    """

    model_config = ConfigDict(frozen=True)

    kind: SeparatorKind = SeparatorKind.HYPHEN
    value: str = ""

    @model_validator(mode="before")
    @classmethod
    def _parse_text(cls, data):
        if isinstance(data, str):
            kind = _TEXT_SEPARATOR.get(data, SeparatorKind.CUSTOM)
            return {"kind": kind, "value": data if kind == SeparatorKind.CUSTOM else ""}
        return data

    @model_validator(mode="after")
    def _check_custom(self) -> NumberSeparator:
        if self.kind == SeparatorKind.CUSTOM and not self.value:
            raise ValueError("a custom separator needs a non-empty value")
        return self

    @model_serializer
    def _dump(self) -> str:
        return self.text

    @classmethod
    def parse(cls, text: str) -> NumberSeparator:
        return cls.model_validate(text)

    @classmethod
    def custom(cls, text: str) -> NumberSeparator:
        return cls(kind=SeparatorKind.CUSTOM, value=text)

    @property
    def text(self) -> str:
        if self.kind == SeparatorKind.CUSTOM:
            return self.value
        return _SEPARATOR_TEXT[self.kind]

    def __str__(self) -> str:
        return self.text


class PlainName(BaseModel):
    """Names of the form "adjective-noun"."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["plain"] = "plain"


class NumberedName(BaseModel):
    """Names of the form "adjective-noun{separator}0427" with a fixed digit count."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["numbered"] = "numbered"
    digits: int = Field(ge=1, le=MAX_DIGITS)


NamePolicy = Annotated[PlainName | NumberedName, Field(discriminator="kind")]


class LengthBounds(BaseModel):
    """Inclusive character-count range a generated name must fall within."""

    model_config = ConfigDict(frozen=True)

    min: int | None = Field(default=None, ge=0)
    max: int | None = Field(default=None, ge=0)

    def contains(self, length: int) -> bool:
        if self.min is not None and length < self.min:
            return False
        if self.max is not None and length > self.max:
            return False
        return True

    def describe(self) -> str:
        low = "0" if self.min is None else str(self.min)
        high = "inf" if self.max is None else str(self.max)
        return f"[{low}, {high}]"


class GeneratorConfig(BaseModel):
    """Fully resolved generator configuration. Everything except the random source."""

    model_config = ConfigDict(frozen=True)

    adjectives: tuple[Word, ...] = ADJECTIVES
    nouns: tuple[Word, ...] = NOUNS
    casing: Casing = Casing.LOWER
    name_policy: NamePolicy = PlainName()
    number_separator: NumberSeparator = NumberSeparator()
    length: LengthBounds | None = None
    max_attempts: int = Field(default=MAX_ATTEMPTS, ge=1)
