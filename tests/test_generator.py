"""Tests for name generation: sampling, formatting and length retries."""

import re

import pytest

from namegen.errors import LengthUnsatisfiable
from namegen.generator import Generator, GeneratorBuilder
from namegen.models import (
    MAX_ATTEMPTS,
    MAX_DIGITS,
    Casing,
    GeneratorConfig,
    LengthBounds,
    NumberedName,
    NumberSeparator,
)
from namegen.words import ADJECTIVES, NOUNS


def make_generator(
    adjectives: list[str] | None = None,
    nouns: list[str] | None = None,
    seed: int = 1234,
    **options,
) -> Generator:
    return GeneratorBuilder(
        adjectives=adjectives or ["cold"],
        nouns=nouns or ["mountain"],
        seed=seed,
        **options,
    ).build()


class TestPlainNames:
    def test_single_pair_always_same_name(self):
        generator = make_generator()
        assert generator.take(20) == ["cold-mountain"] * 20

    def test_plain_ignores_number_separator(self):
        generator = make_generator(number_separator=NumberSeparator.parse("_"))
        assert next(generator) == "cold-mountain"

    def test_one_adjective_and_one_noun_from_lists(self):
        generator = GeneratorBuilder(seed=99).build()
        for name in generator.take(200):
            adjective, noun = name.split("-")
            assert adjective in ADJECTIVES
            assert noun in NOUNS

    def test_custom_lists_cover_every_word(self):
        adjectives = ["red", "green", "blue"]
        nouns = ["fox", "owl"]
        generator = make_generator(adjectives, nouns)
        names = set(generator.take(500))
        assert names == {f"{a}-{n}" for a in adjectives for n in nouns}


class TestNumberedNames:
    def test_four_digit_suffix(self):
        generator = make_generator(name_policy=NumberedName(digits=4))
        for name in generator.take(50):
            assert re.fullmatch(r"cold-mountain-\d{4}", name)

    @pytest.mark.parametrize("digits", range(1, 11))
    def test_suffix_is_exactly_n_digits(self, digits):
        generator = make_generator(name_policy=NumberedName(digits=digits))
        for name in generator.take(20):
            suffix = name.rsplit("-", 1)[1]
            assert len(suffix) == digits
            assert suffix.isdigit()

    def test_widest_suffix(self):
        generator = make_generator(name_policy=NumberedName(digits=MAX_DIGITS))
        for name in generator.take(5):
            suffix = name.rsplit("-", 1)[1]
            assert len(suffix) == MAX_DIGITS
            assert suffix.isdigit()

    def test_zero_padding_appears(self):
        # With three digits, values below 100 show up quickly
        generator = make_generator(name_policy=NumberedName(digits=3))
        suffixes = [name[-3:] for name in generator.take(500)]
        assert any(s.startswith("0") for s in suffixes)

    def test_underscore_separator(self):
        generator = make_generator(
            name_policy=NumberedName(digits=2),
            number_separator=NumberSeparator.parse("_"),
        )
        assert re.fullmatch(r"cold-mountain_\d{2}", next(generator))

    def test_no_separator(self):
        generator = make_generator(
            name_policy=NumberedName(digits=2),
            number_separator=NumberSeparator.parse(""),
        )
        assert re.fullmatch(r"cold-mountain\d{2}", next(generator))


class TestCasing:
    def test_upper_has_no_lowercase(self):
        generator = GeneratorBuilder(casing=Casing.UPPER, seed=5).build()
        for name in generator.take(100):
            assert not any(c.islower() for c in name)

    def test_lower_has_no_uppercase(self):
        generator = make_generator(["LOUD"], ["NOISE"], casing=Casing.LOWER)
        assert next(generator) == "loud-noise"

    def test_title_capitalizes_each_word(self):
        generator = make_generator(["cOLD"], ["MOUNTAIN"], casing=Casing.TITLE)
        assert next(generator) == "Cold-Mountain"

    def test_title_on_bundled_lists(self):
        generator = GeneratorBuilder(casing=Casing.TITLE, seed=8).build()
        for name in generator.take(100):
            for word in name.split("-"):
                assert word[0].isupper()
                assert word[1:] == word[1:].lower()


class TestDrawOrder:
    def test_adjective_then_noun_then_digits(self, scripted_rng):
        config = GeneratorConfig(
            adjectives=("a0", "a1", "a2"),
            nouns=("n0", "n1"),
            name_policy=NumberedName(digits=3),
        )
        rng = scripted_rng([2, 1, 7])
        generator = Generator(config, rng)

        assert next(generator) == "a2-n1-007"
        assert rng.bounds == [3, 2, 1000]

    def test_plain_draws_no_digits(self, scripted_rng):
        config = GeneratorConfig(adjectives=("a0", "a1"), nouns=("n0", "n1"))
        rng = scripted_rng([1, 0, 0, 1])
        generator = Generator(config, rng)

        assert generator.take(2) == ["a1-n0", "a0-n1"]
        assert rng.bounds == [2, 2, 2, 2]


class TestDeterminism:
    def test_same_seed_same_sequence(self):
        first = GeneratorBuilder(seed=42, name_policy=NumberedName(digits=4)).build()
        second = GeneratorBuilder(seed=42, name_policy=NumberedName(digits=4)).build()
        assert first.take(100) == second.take(100)

    def test_different_seeds_diverge(self):
        first = GeneratorBuilder(seed=1).build()
        second = GeneratorBuilder(seed=2).build()
        assert first.take(50) != second.take(50)

    def test_iterates_like_any_iterator(self):
        generator = make_generator()
        names = []
        for name in generator:
            names.append(name)
            if len(names) == 3:
                break
        assert names == ["cold-mountain"] * 3


class TestLengthConstraint:
    def test_satisfiable_bounds(self):
        generator = make_generator(["ab"], ["cd"], length=LengthBounds(min=5, max=6))
        assert generator.take(10) == ["ab-cd"] * 10

    def test_unsatisfiable_bounds_raise(self):
        generator = make_generator(["ab"], ["cd"], length=LengthBounds(min=20, max=21))
        with pytest.raises(LengthUnsatisfiable) as exc_info:
            next(generator)
        assert exc_info.value.attempts == MAX_ATTEMPTS

    def test_retry_budget_is_configurable(self, scripted_rng):
        config = GeneratorConfig(
            adjectives=("ab",),
            nouns=("cd",),
            length=LengthBounds(min=20),
            max_attempts=3,
        )
        rng = scripted_rng([0] * 6)
        generator = Generator(config, rng)

        with pytest.raises(LengthUnsatisfiable) as exc_info:
            next(generator)
        assert exc_info.value.attempts == 3
        assert len(rng.bounds) == 6

    def test_redraws_until_name_fits(self):
        generator = make_generator(["a", "abcdef"], ["b"], length=LengthBounds(min=8))
        assert set(generator.take(50)) == {"abcdef-b"}

    def test_digits_count_towards_length(self):
        generator = make_generator(
            name_policy=NumberedName(digits=4),
            length=LengthBounds(min=18, max=18),
        )
        assert len(next(generator)) == 18

    def test_max_only_bound(self):
        generator = make_generator(["ab", "abcdefgh"], ["cd"], length=LengthBounds(max=5))
        assert next(generator) == "ab-cd"
