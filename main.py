"""CLI entrypoint for the Tango puzzle generator."""

from __future__ import annotations

import argparse
import logging

from tango.engine.generator import GeneratorConfig, TangoGenerator
from tango.engine.minimizer import ORACLES
from tango.utils.logger import configure_logging
from tango.utils.pretty import print_generation_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the hardest 6x6 Tango puzzle by enumerating and minimising solutions",
    )
    parser.add_argument(
        "--no-constraints",
        action="store_true",
        help="Only remove givens; never replace them with = / x clues",
    )
    parser.add_argument(
        "--max-candidates",
        type=int,
        default=None,
        help="Minimise only the first N canonical solutions (default: all)",
    )
    parser.add_argument(
        "--oracle",
        type=str,
        choices=list(ORACLES),
        default="backtracking",
        help="Uniqueness check used while minimising",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.max_candidates is not None and args.max_candidates < 1:
        parser.error("--max-candidates must be positive")

    config = GeneratorConfig(
        include_constraints=not args.no_constraints,
        max_candidates=args.max_candidates,
        oracle=args.oracle,
    )
    result = TangoGenerator(config).generate()
    print_generation_stats(result)


if __name__ == "__main__":  # pragma: no cover
    main()
