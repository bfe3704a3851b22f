"""Compare the sequential and threaded dot products on a fresh random file."""

from __future__ import annotations

import math
import os
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from parfold.dotp import conc_main, seq_main
from parfold.fold import _atoi
from parfold.vectorfile import main as create_vector_main
from parfold.vectorfile import read_last_result

DEFAULT_FILENAME = "data.bin"


class _BenchError(RuntimeError):
    """Raised when one of the benchmark steps fails."""


@dataclass(frozen=True)
class BenchResult:
    """Results and timings of one benchmark run."""

    sequential_result: float
    concurrent_result: float
    relative_variance: float
    sequential_time: float
    concurrent_time: float

    def report(self) -> str:
        """Render the results the way the benchmark prints them."""
        return (
            f"Sequential result: {self.sequential_result:f}\n"
            f"Concurrent result: {self.concurrent_result:f}\n\n"
            f"Relative Variance: {self.relative_variance:f}\n\n"
            f"Sequential time: {self.sequential_time:g} s\n"
            f"Concurrent time: {self.concurrent_time:g} s\n\n"
        )


def _relative_variance(sequential: float, concurrent: float) -> float:
    difference = sequential - concurrent
    if sequential == 0:
        if difference == 0 or math.isnan(difference):
            return math.nan
        return math.copysign(math.inf, difference)
    return difference / sequential


def _timed_step(name: str, step: Callable[[list[str]], int], args: list[str]) -> float:
    """Run ``step(args)`` and return the seconds it took; raise if it fails."""
    start = time.perf_counter()
    status = step(args)
    elapsed = time.perf_counter() - start
    if status != 0:
        raise _BenchError(f"Error: something happening while executing {name}.\n\n")
    return elapsed


def run_benchmark(
    size_of_vector: int,
    number_of_threads: int,
    filename: str | os.PathLike[str] = DEFAULT_FILENAME,
) -> BenchResult:
    """Create a vector file, run both dot products on it and time them."""
    path = os.fspath(filename)

    _timed_step("create-vector", create_vector_main, [str(size_of_vector), path])
    print("Created vector.")

    sequential_time = _timed_step("seq-dotp", seq_main, [path])
    print("Sequential dot-product executed.")
    sequential_result = read_last_result(path)

    concurrent_time = _timed_step(
        "conc-dotp", conc_main, [str(number_of_threads), path]
    )
    print("Concurrent dot-product executed.\n")
    concurrent_result = read_last_result(path)

    return BenchResult(
        sequential_result=sequential_result,
        concurrent_result=concurrent_result,
        relative_variance=_relative_variance(sequential_result, concurrent_result),
        sequential_time=sequential_time,
        concurrent_time=concurrent_time,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Benchmark both dot products: ``size_of_vector number_of_threads``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(
            "Error: there's an argument [size_of_vector] [number_of_threads] missing."
        )
        return 1
    size_of_vector = _atoi(args[0])
    number_of_threads = _atoi(args[1])
    try:
        result = run_benchmark(size_of_vector, number_of_threads, DEFAULT_FILENAME)
    except _BenchError as exc:
        print(str(exc), end="")
        return 1
    print(result.report(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())