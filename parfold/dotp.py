"""Sequential and threaded dot products of vectors stored in vector files."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from parfold.fold import _atoi, add, concurrent_fold, segment_bounds
from parfold.vectorfile import (
    VectorFileError,
    _read_header,
    append_result,
    read_vectors,
    write_result,
)


def dot_product(vector1: Sequence[float], vector2: Sequence[float]) -> float:
    """Return the dot product of two equally long vectors."""
    accumulator = 0.0
    for a, b in zip(vector1, vector2, strict=True):
        accumulator += a * b
    return accumulator


def _multiply_segment(
    segment1: Sequence[float], segment2: Sequence[float]
) -> list[float]:
    return [a * b for a, b in zip(segment1, segment2)]


def concurrent_dot_product(
    vector1: Sequence[float], vector2: Sequence[float], n_threads: int
) -> float:
    """Multiply element-wise in segments on threads, then sum with a parallel fold."""
    if len(vector1) != len(vector2):
        raise ValueError("both vectors must have the same length")
    if not vector1:
        return 0.0
    if n_threads <= 0:
        raise ValueError("the number of threads needs to be positive")
    bounds = segment_bounds(len(vector1), n_threads)
    with ThreadPoolExecutor(max_workers=len(bounds)) as pool:
        futures = [
            pool.submit(_multiply_segment, vector1[start:stop], vector2[start:stop])
            for start, stop in bounds
        ]
        products = [value for future in futures for value in future.result()]
    return concurrent_fold(products, add, n_threads, 0.0)


def seq_main(argv: Sequence[str] | None = None) -> int:
    """Append the sequential dot product of the vectors in ``filename``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Error: there's an argument [filename] missing.\n\n", end="")
        return 1
    filename = args[0]
    try:
        vector1, vector2 = read_vectors(filename)
    except OSError:
        print("Error: something happening when opening file.\n\n", end="")
        return 1
    except VectorFileError as exc:
        print(f"{exc}\n\n", end="")
        return 1
    append_result(filename, dot_product(vector1, vector2))
    return 0


def conc_main(argv: Sequence[str] | None = None) -> int:
    """Write the threaded dot product after the vectors: ``n_threads filename``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Error: there's an argument [n_threads] [filename] missing.\n\n", end="")
        return 1
    n_threads = _atoi(args[0])
    filename = args[1]

    try:
        size_of_vector = _read_header(filename)
    except OSError as exc:
        print(
            f"Error: something happened when opening file.\n\n: {exc.strerror}",
            file=sys.stderr,
        )
        return 1
    except VectorFileError as exc:
        print(f"{exc}\n\n", end="")
        return 1

    if n_threads <= 0:
        print("Error: the number of threads needs to be positive.\n\n", end="")
        return 1
    if size_of_vector < n_threads:
        print(f"\nWarning: Number of threads limited to {size_of_vector}.", end="")
        n_threads = size_of_vector

    try:
        vector1, vector2 = read_vectors(filename)
    except VectorFileError:
        print("Error: something happened when reading vectors from file.\n\n", end="")
        return 1

    result = concurrent_dot_product(vector1, vector2, n_threads)
    write_result(filename, result)
    return 0


if __name__ == "__main__":
    sys.exit(conc_main())