"""Console demo: draw many times and compare observed shares to weights.

Usage:
    # Default items A=10 B=50 C=40, 100000 draws:
    python -m weighted_random

    # Custom items and distribution size:
    python -m weighted_random X=3 Y=7 --size 10 --iterations 5000

    # Reproducible run on the lock-free source:
    python -m weighted_random --source thread_local --seed 1234
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from weighted_random.config import WeightedRandomConfig, resolve_config
from weighted_random.exceptions import ConfigValidationError, SelectorValidationError
from weighted_random.items import WeightedItem
from weighted_random.selector import WeightedSelector
from weighted_random.sources import RandomSourceRegistry
from weighted_random.tally import DrawSummary, DrawTally

logger = logging.getLogger("weighted_random")

DEFAULT_ITEMS: tuple[tuple[str, int], ...] = (("A", 10), ("B", 50), ("C", 40))
DEFAULT_ITERATIONS = 100_000


def parse_item(text: str) -> WeightedItem[str]:
    """Parse an ``ID=WEIGHT`` argument.

    Raises:
        argparse.ArgumentTypeError: If *text* is malformed or the weight is
            not a positive integer.
    """
    identifier, sep, weight = text.rpartition("=")
    if not sep or not identifier:
        raise argparse.ArgumentTypeError(f"expected ID=WEIGHT, got {text!r}")
    try:
        return WeightedItem(identifier, int(weight))
    except ValueError:
        raise argparse.ArgumentTypeError(f"weight must be an integer, got {weight!r}") from None
    except SelectorValidationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weighted-random-demo",
        description="Draw from a weighted selector and report observed frequencies.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  %(prog)s                                  # A=10 B=50 C=40, 100000 draws
  %(prog)s X=3 Y=7 --size 10                # custom items
  %(prog)s --source numpy --seed 7          # reproducible numpy source
""",
    )
    parser.add_argument(
        "items",
        nargs="*",
        type=parse_item,
        metavar="ID=WEIGHT",
        help="Weighted items (default: A=10 B=50 C=40).",
    )
    parser.add_argument(
        "--iterations",
        "-n",
        type=int,
        default=DEFAULT_ITERATIONS,
        help=f"Number of draws (default: {DEFAULT_ITERATIONS}).",
    )
    parser.add_argument(
        "--size",
        dest="distribution_size",
        type=int,
        default=None,
        help="Distribution size the weights must add up to (default: 100).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random source.",
    )
    parser.add_argument(
        "--source",
        dest="random_source",
        default=None,
        help="Random source name (default: locked).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def print_report(
    selector: WeightedSelector[str],
    summary: DrawSummary,
    out: TextIO = sys.stdout,
) -> None:
    """Write the per-identifier results in the classic demo format."""
    print(f"Number of iterations: {summary.total_draws}", file=out)
    for item in selector.items:
        print(
            f"\t{item.identifier} selected {summary.counts[item.identifier]} times, "
            f"or {summary.percentage(item.identifier)}% of the time (weight: {item.weight})",
            file=out,
        )
    print(f"Number of selections: {sum(summary.counts.values())}", file=out)


def main(argv: list[str] | None = None, out: TextIO = sys.stdout) -> int:
    """Run the demo. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(
            WeightedRandomConfig(),
            {
                "distribution_size": args.distribution_size,
                "seed": args.seed,
                "random_source": args.random_source,
                "log_level": "DEBUG" if args.verbose else None,
            },
        )
    except ConfigValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.iterations < 0:
        print("error: --iterations must be non-negative", file=sys.stderr)
        return 2

    try:
        source = RandomSourceRegistry.create(config.random_source, seed=config.seed)
    except KeyError as exc:
        print(f"error: {exc.args[0]}", file=sys.stderr)
        return 2

    items = args.items or [WeightedItem(i, w) for i, w in DEFAULT_ITEMS]
    try:
        try:
            selector = WeightedSelector.create(items, config.distribution_size, source=source)
        except SelectorValidationError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

        logger.debug("Random source status: %s", source.describe())
        logger.info("Drawing %d times from %r", args.iterations, selector)
        summary = DrawTally.for_selector(selector).run(selector, args.iterations)
        print_report(selector, summary, out=out)
        return 0
    finally:
        source.close()


if __name__ == "__main__":
    sys.exit(main())
