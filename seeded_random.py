"""Seeded random number generator utility.

This module exposes the number streams used by the placeholder-text
generator: a deterministic stream driven by a numeric seed and an unseeded
stream backed by the standard library generator. It also offers helpers for
mapping stream values to bounded integers and a simple CLI for printing
generated numbers either line-by-line or as JSON.
"""

from __future__ import annotations

import argparse
import json
import math
import random
from typing import Iterable, List


class SeededStream:
    """Reproducible stream of floats in ``[0, 1)``.

    Not suitable for anything security related: the sequence only has to be
    the same for the same seed and the same number of calls.
    """

    def __init__(self, seed: float) -> None:
        self.seed = seed
        self._state = float(seed)

    def next(self) -> float:
        self._state = math.sin(self._state) * 10000
        self._state -= math.floor(self._state)
        # Tiny negative states round up to exactly 1.0 after the subtraction.
        if self._state >= 1.0:
            self._state = 0.0
        return self._state


class UnseededStream:
    """Stream of independent uniform draws with no reproducibility."""

    seed = None

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def next(self) -> float:
        return self._rng.random()


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Bound ``value`` into the closed range ``[minimum, maximum]``."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def clamp_random(value: float, minimum: int, maximum: int) -> int:
    """Map a stream value in ``[0, 1)`` to an integer in ``[minimum, maximum]``.

    Both bounds are inclusive.

    Raises:
        ValueError: If ``minimum`` is greater than ``maximum``.
    """

    if minimum > maximum:
        raise ValueError("minimum cannot be greater than maximum")
    return math.floor(value * (maximum - minimum + 1)) + minimum


def generate_random_numbers(
    seed: float,
    count: int,
    lower: int = 0,
    upper: int = 100,
) -> List[int]:
    """Generate a deterministic list of pseudo-random integers.

    Args:
        seed: Seed to initialize the stream.
        count: How many numbers to generate. Must be non-negative.
        lower: Inclusive lower bound of the range.
        upper: Inclusive upper bound of the range.

    Returns:
        A list of integers drawn from the inclusive range ``[lower, upper]``.

    Raises:
        ValueError: If ``count`` is negative or if ``lower`` is greater than
            ``upper``.
    """

    if count < 0:
        raise ValueError("count must be non-negative")
    if lower > upper:
        raise ValueError("lower cannot be greater than upper")

    stream = SeededStream(seed)
    return [clamp_random(stream.next(), lower, upper) for _ in range(count)]


def _format_numbers(numbers: Iterable[int], as_json: bool) -> str:
    if as_json:
        return json.dumps({"numbers": list(numbers)})
    return "\n".join(str(n) for n in numbers)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=float, required=True, help="Seed for the stream")
    parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="How many numbers to generate (default: 10)",
    )
    parser.add_argument(
        "--lower",
        type=int,
        default=0,
        help="Inclusive lower bound of the generated numbers (default: 0)",
    )
    parser.add_argument(
        "--upper",
        type=int,
        default=100,
        help="Inclusive upper bound of the generated numbers (default: 100)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the generated numbers as a JSON object",
    )
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    numbers = generate_random_numbers(args.seed, args.count, args.lower, args.upper)
    print(_format_numbers(numbers, args.json))


if __name__ == "__main__":
    main()
