"""Parallel fold of a float vector over contiguous segments."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")
A = TypeVar("A")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class _UsageError(Exception):
    """Raised when command-line arguments cannot be used."""


def _atoi(text: str) -> int:
    """Parse a leading integer the way the C library's atoi does (0 on failure)."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _parse_common(argv: Sequence[str]) -> tuple[int, int, bool]:
    """Validate ``n_threads size_of_vector print?`` and return them adjusted."""
    if len(argv) < 3:
        raise _UsageError(
            "Error: there's an argument [n_threads] or [size_of_vector] "
            "or [print?] missing.\n\n"
        )
    n_threads = _atoi(argv[0])
    size_of_vector = _atoi(argv[1])
    print_flag = _atoi(argv[2])

    if size_of_vector < 0:
        raise _UsageError("Error: the size of vector needs to be non-negative.\n\n")
    if n_threads <= 0:
        raise _UsageError("Error: the number of threads needs to be positive.\n\n")
    if size_of_vector < n_threads:
        print(f"\nNumber of threads limited to {size_of_vector}.", end="")
        n_threads = size_of_vector
    if print_flag not in (0, 1):
        print("\nprint? set to 1.", end="")
        print_flag = 1
    return n_threads, size_of_vector, bool(print_flag)


def sample_float(a: float, b: float, rng: random.Random | None = None) -> float:
    """Sample a float uniformly between ``a`` and ``b``."""
    source = rng if rng is not None else random
    return source.random() * (b - a) + a


def random_vector(length: int, rng: random.Random | None = None) -> list[float]:
    """Return ``length`` random floats between 1 and 2."""
    return [sample_float(1.0, 2.0, rng) for _ in range(length)]


def format_vector(vector: Sequence[float]) -> str:
    """Render a vector as ``[ x  y ... ]`` with six decimal places."""
    return "[" + "".join(f" {value:f} " for value in vector) + "]"


def segment_bounds(length: int, n_threads: int) -> list[tuple[int, int]]:
    """Split ``range(length)`` into ``n_threads`` contiguous (start, stop) pairs.

    Every segment has ``length // n_threads`` elements; the last one also
    takes the remainder.
    """
    if n_threads < 0:
        raise ValueError("the number of threads must not be negative")
    if length < 0:
        raise ValueError("the length must not be negative")
    if n_threads == 0:
        return []
    step = length // n_threads
    bounds = [(i * step, (i + 1) * step) for i in range(n_threads)]
    last_start, _ = bounds[-1]
    bounds[-1] = (last_start, length)
    return bounds


def _fold_segment(
    segment: Sequence[T], func: Callable[[T, A], A], init_value: A
) -> A:
    accumulator = init_value
    for element in segment:
        accumulator = func(element, accumulator)
    return accumulator


def concurrent_fold(
    vector: Sequence[T],
    func: Callable[[T, A], A],
    n_threads: int,
    init_value: A,
) -> A:
    """Fold ``vector`` with ``func(element, accumulator)`` using worker threads.

    Each thread folds its segment starting from ``init_value``; the partial
    results are then folded in segment order, again starting from
    ``init_value``.
    """
    bounds = segment_bounds(len(vector), n_threads)
    accumulator = init_value
    if not bounds:
        return accumulator
    with ThreadPoolExecutor(max_workers=len(bounds)) as pool:
        futures = [
            pool.submit(_fold_segment, vector[start:stop], func, init_value)
            for start, stop in bounds
        ]
        for future in futures:
            accumulator = func(future.result(), accumulator)
    return accumulator


def add(a: float, b: float) -> float:
    """Return ``a + b``."""
    return a + b


def mul(a: float, b: float) -> float:
    """Return ``a * b``."""
    return a * b


def main(argv: Sequence[str] | None = None) -> int:
    """Multiply a random vector together in parallel: ``n_threads size print?``."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        n_threads, size_of_vector, show = _parse_common(args)
    except _UsageError as exc:
        print(str(exc), end="")
        return 1

    vector = random_vector(size_of_vector, random.Random())
    if show:
        print("\n\nOriginal vector: " + format_vector(vector), end="")

    result = concurrent_fold(vector, mul, n_threads, 1.0)

    if show:
        print(f"\n\nresult: {result:f}\n\n", end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())