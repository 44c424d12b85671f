"""Errors raised while building or running a name generator."""

from __future__ import annotations


class NameGenError(ValueError):
    """Base class for every error this package raises."""


class EmptyWordList(NameGenError):
    def __init__(self, which: str):
        self.which = which
        super().__init__(f"{which} must not be empty")


class InvalidLengthBounds(NameGenError):
    def __init__(self, min: int, max: int):
        self.min = min
        self.max = max
        super().__init__(f"minimum length {min} exceeds maximum length {max}")


class LengthUnsatisfiable(NameGenError):
    """No name within the length bounds was drawn before the retry budget ran out."""

    def __init__(self, bounds, attempts: int):
        self.bounds = bounds
        self.attempts = attempts
        super().__init__(
            f"no name of length {bounds.describe()} found after {attempts} attempts"
        )


class UnreadableWordList(NameGenError):
    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"cannot read word list {path}: {reason}")
