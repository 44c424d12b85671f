"""Print random names, one per line.

Usage:
    namegen                              # one plain name, e.g. "delirious-pail"
    namegen 5 --number 4                 # five names like "pushy-pencil-5602"
    namegen 3 -c title -n 2 -s _         # "Rusty-Nail_07"
    namegen --config generator.json 10   # settings from a saved GeneratorConfig
    namegen --dump-config -n 4           # print the resolved config as JSON

Defaults come from NAMEGEN_* environment variables (see namegen.config),
except when --config is given: then the config file is the base and only
explicit flags override it.
"""

from __future__ import annotations

import argparse
import logging
import sys
from itertools import islice
from pathlib import Path

from pydantic import ValidationError

from namegen.config import Settings, get_settings
from namegen.errors import NameGenError
from namegen.generator import GeneratorBuilder
from namegen.models import (
    MAX_DIGITS,
    Casing,
    GeneratorConfig,
    LengthBounds,
    NumberedName,
    NumberSeparator,
)
from namegen.words import load_word_list

logger = logging.getLogger(__name__)


def _non_negative(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if number < 0:
        raise argparse.ArgumentTypeError(f"{value} must not be negative")
    return number


def _positive(value: str) -> int:
    number = _non_negative(value)
    if number == 0:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def _digit_count(value: str) -> int:
    number = _positive(value)
    if number > MAX_DIGITS:
        raise argparse.ArgumentTypeError(f"must be at most {MAX_DIGITS}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="namegen",
        description='A random name generator with results like "delirious-pail"',
    )
    parser.add_argument(
        "amount",
        nargs="?",
        type=_non_negative,
        help="Number of names to generate (default: 1, or NAMEGEN_COUNT)",
    )
    parser.add_argument(
        "-n",
        "--number",
        dest="digits",
        type=_digit_count,
        help=f"Append a zero-padded number with this many digits (1-{MAX_DIGITS})",
    )
    parser.add_argument(
        "-s",
        "--separator",
        help='Text between the words and the number (default: "-")',
    )
    parser.add_argument(
        "-c",
        "--casing",
        choices=[casing.value for casing in Casing],
        help="Letter casing of the words (default: lower)",
    )
    parser.add_argument("--adjectives", metavar="FILE", help="Adjective list, one per line")
    parser.add_argument("--nouns", metavar="FILE", help="Noun list, one per line")
    parser.add_argument("--min-length", type=_non_negative, help="Shortest allowed name")
    parser.add_argument("--max-length", type=_non_negative, help="Longest allowed name")
    parser.add_argument("--seed", type=int, help="Seed for reproducible output")
    parser.add_argument("--config", metavar="FILE", help="GeneratorConfig JSON document")
    parser.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON instead of names",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log more (-v info, -vv debug)",
    )
    return parser


def builder_from_args(args: argparse.Namespace, settings: Settings) -> GeneratorBuilder:
    """Layer flags over either the --config document or the environment settings."""
    if args.config:
        config = GeneratorConfig.model_validate_json(Path(args.config).read_text())
        base = GeneratorBuilder.from_config(config)
        use_settings = False
    else:
        base = GeneratorBuilder()
        use_settings = True

    def pick(flag, setting):
        if flag is not None:
            return flag
        return setting if use_settings else None

    options: dict = {}

    casing = pick(args.casing, settings.casing)
    if casing is not None:
        options["casing"] = Casing(casing)

    digits = pick(args.digits, settings.digits)
    if digits is not None:
        options["name_policy"] = NumberedName(digits=digits)

    separator = pick(args.separator, settings.separator)
    if separator is not None:
        options["number_separator"] = NumberSeparator.parse(separator)

    adjectives_file = pick(args.adjectives, settings.adjectives_file)
    if adjectives_file:
        options["adjectives"] = load_word_list(adjectives_file)

    nouns_file = pick(args.nouns, settings.nouns_file)
    if nouns_file:
        options["nouns"] = load_word_list(nouns_file)

    min_length = pick(args.min_length, settings.min_length)
    max_length = pick(args.max_length, settings.max_length)
    if min_length is not None or max_length is not None:
        current = base.length or LengthBounds()
        options["length"] = LengthBounds(
            min=current.min if min_length is None else min_length,
            max=current.max if max_length is None else max_length,
        )

    seed = args.seed if args.seed is not None else settings.seed
    if seed is not None:
        options["seed"] = seed

    return GeneratorBuilder(**(dict(base) | options))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"error: invalid NAMEGEN_* setting: {e}", file=sys.stderr)
        return 1

    if args.verbose >= 2:
        level = logging.DEBUG
    elif args.verbose == 1:
        level = logging.INFO
    else:
        level = settings.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    amount = args.amount if args.amount is not None else settings.count

    try:
        generator = builder_from_args(args, settings).build()
        if args.dump_config:
            print(generator.config.model_dump_json(indent=2))
            return 0

        logger.info(f"Generating {amount} names")
        for name in islice(generator, amount):
            print(name)
    except (NameGenError, ValidationError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
