"""Sample standard deviation over numbers read from stdin.

Reads whitespace/newline separated tokens until "e", "end" or EOF,
accumulates sum and sum of squares with the calculator primitives and
prints the sample standard deviation.

    $ printf '2 4 4 4 5 5 7 9 end' | python -m src.tools.stddev
    2.13809
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, TextIO

from src.core.math.numerical_safeguards import clamp, is_valid_float
from src.core.math.primitives import add, div, mul, root, sub

logger = logging.getLogger(__name__)

END_TOKENS = frozenset({"e", "end"})


@dataclass
class RunningMoments:
    """Sum and sum of squares accumulated one sample at a time."""

    count: int = 0
    total: float = 0.0
    total_squares: float = 0.0

    def push(self, x: float) -> None:
        self.total = add(self.total, x)
        self.total_squares = add(self.total_squares, mul(x, x))
        self.count += 1

    def sample_stddev(self) -> float:
        """Sample standard deviation (N - 1 denominator); 0.0 for fewer than two samples."""
        if self.count < 2:
            return 0.0

        n = float(self.count)
        mean = div(self.total, n)
        variance = div(
            sub(self.total_squares, mul(n, mul(mean, mean))),
            n - 1.0,
        )
        # sum-of-squares form can round slightly below zero for equal samples
        return root(clamp(variance, min_value=0.0), 2.0)


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Yield tokens up to (not including) the first end token."""
    for line in lines:
        for token in line.split():
            if token in END_TOKENS:
                return
            yield token


def accumulate(lines: Iterable[str]) -> RunningMoments:
    moments = RunningMoments()

    for token in iter_tokens(lines):
        try:
            x = float(token)
        except ValueError:
            logger.warning("Invalid input: %s", token)
            continue

        if not is_valid_float(x):
            logger.warning("Invalid input: %s", token)
            continue

        moments.push(x)

    logger.debug(
        "Read %d samples: sum=%r sum_squares=%r",
        moments.count,
        moments.total,
        moments.total_squares,
    )
    return moments


def calculate_stddev(stream: TextIO) -> float:
    return accumulate(stream).sample_stddev()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Read numbers from stdin until 'e'/'end' and print their sample standard deviation."
    )
    p.add_argument(
        "--precision",
        type=int,
        default=6,
        help="Significant digits in the printed result (default: 6).",
    )
    p.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    stddev = calculate_stddev(sys.stdin)
    print(f"{stddev:.{args.precision}g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
