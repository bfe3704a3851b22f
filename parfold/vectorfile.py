"""Binary vector files: a size header, two float vectors and trailing results.

Layout, in native byte order: one signed 64-bit size ``n``, ``n`` 32-bit
floats of the first vector, ``n`` 32-bit floats of the second vector,
followed by any number of 32-bit float results.
"""

from __future__ import annotations

import os
import random
import struct
import sys
from collections.abc import Sequence

from parfold.fold import _atoi, random_vector

_HEADER = struct.Struct("=q")
_FLOAT = struct.Struct("=f")


class VectorFileError(Exception):
    """Raised when a vector file is truncated or malformed."""


def _pack_floats(values: Sequence[float]) -> bytes:
    return struct.pack(f"={len(values)}f", *values)


def _unpack_floats(data: bytes, count: int) -> list[float]:
    return list(struct.unpack(f"={count}f", data))


def _read_header(path: str | os.PathLike[str]) -> int:
    """Return the vector size stored at the start of ``path``."""
    with open(path, "rb") as handle:
        data = handle.read(_HEADER.size)
    if len(data) != _HEADER.size:
        raise VectorFileError(
            "Error: something happened when reading vector size from file."
        )
    (size,) = _HEADER.unpack(data)
    return size


def write_vectors(
    path: str | os.PathLike[str],
    vector1: Sequence[float],
    vector2: Sequence[float],
) -> None:
    """Create ``path`` holding the size header and both vectors."""
    if len(vector1) != len(vector2):
        raise ValueError("both vectors must have the same length")
    with open(path, "wb") as handle:
        handle.write(_HEADER.pack(len(vector1)))
        handle.write(_pack_floats(vector1))
        handle.write(_pack_floats(vector2))


def read_vectors(path: str | os.PathLike[str]) -> tuple[list[float], list[float]]:
    """Read both vectors from ``path``."""
    with open(path, "rb") as handle:
        header = handle.read(_HEADER.size)
        if len(header) != _HEADER.size:
            raise VectorFileError(
                "Error: something happened when reading vector size from file."
            )
        (size,) = _HEADER.unpack(header)
        if size < 0:
            raise VectorFileError("Error: the size of vector needs to be non-negative.")
        byte_count = size * _FLOAT.size
        first = handle.read(byte_count)
        second = handle.read(byte_count)
    if len(first) != byte_count or len(second) != byte_count:
        raise VectorFileError(
            "Error: something happened when reading vectors from file."
        )
    return _unpack_floats(first, size), _unpack_floats(second, size)


def append_result(path: str | os.PathLike[str], value: float) -> None:
    """Append ``value`` as a float at the end of ``path``."""
    with open(path, "ab") as handle:
        handle.write(_FLOAT.pack(value))


def write_result(path: str | os.PathLike[str], value: float) -> None:
    """Write ``value`` right after the two vectors, replacing any result there."""
    size = _read_header(path)
    if size < 0:
        raise VectorFileError("Error: the size of vector needs to be non-negative.")
    with open(path, "r+b") as handle:
        handle.seek(_HEADER.size + 2 * size * _FLOAT.size)
        handle.write(_FLOAT.pack(value))


def read_last_result(path: str | os.PathLike[str]) -> float:
    """Return the last float stored in ``path``."""
    with open(path, "rb") as handle:
        handle.seek(0, os.SEEK_END)
        if handle.tell() < _FLOAT.size:
            raise VectorFileError("Error: the file holds no result.")
        handle.seek(-_FLOAT.size, os.SEEK_END)
        (value,) = _FLOAT.unpack(handle.read(_FLOAT.size))
    return value


def create_random_file(
    path: str | os.PathLike[str],
    size_of_vector: int,
    rng: random.Random | None = None,
) -> tuple[list[float], list[float]]:
    """Write two random vectors of floats between 1 and 2 and return them."""
    if size_of_vector < 0:
        raise ValueError("the size of vector needs to be non-negative")
    vector1 = random_vector(size_of_vector, rng)
    vector2 = random_vector(size_of_vector, rng)
    write_vectors(path, vector1, vector2)
    return vector1, vector2


def main(argv: Sequence[str] | None = None) -> int:
    """Create a random vector file: ``size_of_vector filename``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Error: there's an argument [size_of_vector] [filename] missing.\n\n", end="")
        return 1
    size_of_vector = _atoi(args[0])
    filename = args[1]
    if size_of_vector < 0:
        print("Error: the size of vector needs to be non-negative.\n\n", end="")
        return 1
    try:
        create_random_file(filename, size_of_vector, random.Random())
    except OSError:
        print("Error: something happened when opening the file.\n\n", end="")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())