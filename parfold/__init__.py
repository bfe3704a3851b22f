"""Thread-parallel fold, map and dot product over vectors, with a vector file format and benchmark."""

__version__ = "0.1.0"