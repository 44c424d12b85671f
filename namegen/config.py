from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from namegen.models import MAX_DIGITS, Casing


class Settings(BaseSettings):
    count: int = Field(default=1, ge=0)
    casing: Casing = Casing.LOWER

    # Numeric suffix: digit count (unset = plain names) and its separator
    digits: int | None = Field(default=None, ge=1, le=MAX_DIGITS)
    separator: str = "-"

    # Plaintext word lists, one word per line
    adjectives_file: str | None = None
    nouns_file: str | None = None

    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=0)
    seed: int | None = None

    log_level: str = "WARNING"

    model_config = {"env_prefix": "NAMEGEN_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    """Read NAMEGEN_* settings once; raises ValidationError on bad values."""
    return Settings()
