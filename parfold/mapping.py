"""Parallel element-wise map over contiguous segments of an integer vector."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from parfold.fold import _parse_common, _UsageError, segment_bounds

T = TypeVar("T")
R = TypeVar("R")


def _map_segment(segment: Sequence[T], func: Callable[[T], R]) -> list[R]:
    return [func(element) for element in segment]


def concurrent_map(
    vector: Sequence[T], func: Callable[[T], R], n_threads: int
) -> list[R]:
    """Return ``func`` applied to every element, one segment per thread."""
    bounds = segment_bounds(len(vector), n_threads)
    if not bounds:
        return []
    with ThreadPoolExecutor(max_workers=len(bounds)) as pool:
        futures = [
            pool.submit(_map_segment, vector[start:stop], func)
            for start, stop in bounds
        ]
        return [value for future in futures for value in future.result()]


def double(x: int) -> int:
    """Return ``x * 2``."""
    return x * 2


def enumeration(length: int) -> list[int]:
    """Return ``[1, 2, ..., length]``."""
    return list(range(1, length + 1))


def _format_ints(vector: Sequence[int]) -> str:
    return "[" + "".join(f" {value:d} " for value in vector) + "]"


def main(argv: Sequence[str] | None = None) -> int:
    """Double every element of ``1..size`` in parallel: ``n_threads size print?``."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        n_threads, size_of_vector, show = _parse_common(args)
    except _UsageError as exc:
        print(str(exc), end="")
        return 1

    vector = enumeration(size_of_vector)
    if show:
        print("\n\nOriginal vector: " + _format_ints(vector), end="")

    mapped = concurrent_map(vector, double, n_threads)

    if show:
        print("\n\nMapped vector: " + _format_ints(mapped) + "\n\n", end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())