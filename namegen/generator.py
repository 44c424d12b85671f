"""Random name generator and the builder that validates and assembles it.

Typical use:

    generator = GeneratorBuilder(name_policy=NumberedName(digits=4)).build()
    next(generator)  # "pushy-pencil-5602"
"""

from __future__ import annotations

import copy
import logging
import random
from typing import Any, Protocol

from pydantic import BaseModel, Field

from namegen.errors import EmptyWordList, InvalidLengthBounds, LengthUnsatisfiable
from namegen.formatting import fits_length, format_name, render_suffix
from namegen.models import (
    Casing,
    GeneratorConfig,
    LengthBounds,
    NamePolicy,
    NumberedName,
    NumberSeparator,
    Word,
)

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that returns a uniformly distributed integer in [0, stop).

    ``random.Random`` and ``random.SystemRandom`` both qualify.
    """

    def randrange(self, stop: int) -> int: ...


def validate_config(config: GeneratorConfig) -> None:
    if not config.adjectives:
        raise EmptyWordList("adjectives")
    if not config.nouns:
        raise EmptyWordList("nouns")
    bounds = config.length
    if bounds is not None and bounds.min is not None and bounds.max is not None:
        if bounds.min > bounds.max:
            raise InvalidLengthBounds(bounds.min, bounds.max)


class Generator:
    """Infinite iterator of random names.

    Each ``next()`` draws an adjective index, then a noun index, then (for
    numbered names) the suffix value, all from the one owned random source.
    Nothing is remembered between calls, so uniqueness is only probabilistic.
    A Generator is not safe to share between threads; give each thread its own.
    """

    def __init__(self, config: GeneratorConfig, rng: RandomSource):
        validate_config(config)
        self.config = config
        self._rng = rng

    def __iter__(self) -> Generator:
        return self

    def __next__(self) -> str:
        bounds = self.config.length
        for _ in range(self.config.max_attempts):
            name = self._draw()
            if fits_length(name, bounds):
                return name

        logger.warning(
            f"Gave up after {self.config.max_attempts} attempts "
            f"at a name of length {bounds.describe()}"
        )
        raise LengthUnsatisfiable(bounds, self.config.max_attempts)

    def take(self, count: int) -> list[str]:
        return [next(self) for _ in range(count)]

    def _draw(self) -> str:
        config = self.config
        adjective = config.adjectives[self._rng.randrange(len(config.adjectives))]
        noun = config.nouns[self._rng.randrange(len(config.nouns))]

        suffix = None
        if isinstance(config.name_policy, NumberedName):
            digits = config.name_policy.digits
            suffix = render_suffix(self._rng.randrange(10**digits), digits)

        return format_name(adjective, noun, suffix, config.casing, config.number_separator)


class GeneratorBuilder(BaseModel):
    """Optional overrides for every generator setting.

    Unset fields fall back to the bundled word lists, lower casing, plain
    names, a hyphen number separator and no length constraint. ``build()``
    validates and returns a new Generator each call.

    ``seed`` makes the default random source deterministic. An explicit
    ``rng`` is deep-copied into each built Generator so two builds never
    share random state.
    """

    adjectives: tuple[Word, ...] | None = None
    nouns: tuple[Word, ...] | None = None
    casing: Casing | None = None
    name_policy: NamePolicy | None = None
    number_separator: NumberSeparator | None = None
    length: LengthBounds | None = None
    max_attempts: int | None = Field(default=None, ge=1)

    seed: int | None = None
    rng: Any = Field(default=None, exclude=True)

    @classmethod
    def from_config(
        cls,
        config: GeneratorConfig,
        seed: int | None = None,
        rng: RandomSource | None = None,
    ) -> GeneratorBuilder:
        return cls(**dict(config), seed=seed, rng=rng)

    def resolve(self) -> GeneratorConfig:
        """Fill unset fields with defaults, without validating word lists or bounds."""
        overrides = {
            name: getattr(self, name)
            for name in GeneratorConfig.model_fields
            if getattr(self, name) is not None
        }
        return GeneratorConfig(**overrides)

    def build(self) -> Generator:
        config = self.resolve()
        generator = Generator(config, self._make_rng())
        logger.debug(
            f"Built generator with {len(config.adjectives)} adjectives, "
            f"{len(config.nouns)} nouns, policy={config.name_policy.kind}"
        )
        return generator

    def _make_rng(self) -> RandomSource:
        if isinstance(self.rng, random.SystemRandom):
            # Stateless: reads from the OS, nothing to copy
            return self.rng
        if self.rng is not None:
            return copy.deepcopy(self.rng)
        return random.Random(self.seed)
