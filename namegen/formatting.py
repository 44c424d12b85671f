"""Pure formatting helpers turning sampled words and digits into a display name."""

from __future__ import annotations

from namegen.models import Casing, LengthBounds, NumberSeparator

# Joins adjective and noun; not configurable
WORD_SEPARATOR = "-"


def apply_casing(word: str, casing: Casing) -> str:
    if casing == Casing.UPPER:
        return word.upper()
    if casing == Casing.TITLE:
        return word[:1].upper() + word[1:].lower()
    return word.lower()


def render_suffix(value: int, digits: int) -> str:
    """Zero-padded decimal rendering, e.g. (427, 4) -> "0427"."""
    return str(value).zfill(digits)


def format_name(
    adjective: str,
    noun: str,
    suffix: str | None,
    casing: Casing,
    separator: NumberSeparator,
) -> str:
    """Assemble the final name.

    Casing applies to the words only. The number separator is emitted verbatim,
    and only when there is a suffix to separate.
    """
    pair = f"{apply_casing(adjective, casing)}{WORD_SEPARATOR}{apply_casing(noun, casing)}"
    if suffix is None:
        return pair
    return f"{pair}{separator.text}{suffix}"


def fits_length(name: str, bounds: LengthBounds | None) -> bool:
    if bounds is None:
        return True
    return bounds.contains(len(name))
