# parfold

`parfold` splits a vector into contiguous segments, gives each segment to its
own worker thread through `concurrent.futures.ThreadPoolExecutor`, and then
combines the results. It provides:

- **fold** (`parfold.fold`): `concurrent_fold(vector, func, n_threads, init_value)`
  reduces a vector with `func(element, accumulator)`. Each thread folds its
  segment starting from `init_value`. The per-segment results are then folded
  in segment order, again starting from `init_value`. `add` and `mul` are
  provided as ready-made functions.
- **map** (`parfold.mapping`): `concurrent_map(vector, func, n_threads)`
  returns a new list with `func` applied to every element, one segment per
  thread. The input is left unchanged. `double` and `enumeration` are small
  helpers.
- **dot product** (`parfold.dotp`): `dot_product(vector1, vector2)` computes
  the result sequentially. `concurrent_dot_product(vector1, vector2, n_threads)`
  computes the element-wise products on threads and sums them with
  `concurrent_fold`. Vectors of different lengths raise `ValueError`.
- **vector files** (`parfold.vectorfile`): a small binary format that holds two
  vectors and their results.
- **benchmark** (`parfold.bench`): `run_benchmark` times both dot products on a
  freshly created vector file.

`segment_bounds(length, n_threads)` describes how segments are laid out. It
returns `n_threads` `(start, stop)` pairs of `length // n_threads` elements
each, and the last pair also takes the remainder. A negative length or thread
count raises `ValueError`.

## Installation

```
pip install .
```

To run the tests, install the test extra with `pip install .[test]` and then
run `pytest`.

## Library use

```python
import random
from parfold.fold import concurrent_fold, mul, random_vector
from parfold.mapping import concurrent_map, double, enumeration
from parfold.dotp import concurrent_dot_product, dot_product

rng = random.Random(1)
vector = random_vector(10, rng)               # floats in [1, 2)
product = concurrent_fold(vector, mul, 4, 1.0)

numbers = enumeration(8)                      # [1, 2, ..., 8]
doubled = concurrent_map(numbers, double, 3)  # [2, 4, ..., 16]

dot_product([1.0, 2.0], [3.0, 4.0])                # 11.0
concurrent_dot_product([1.0, 2.0], [3.0, 4.0], 2)  # 11.0
```

`format_vector(vector)` renders a vector as `[ 1.000000  2.000000 ]`.
`sample_float(a, b, rng)` draws one value between `a` and `b`.

## Commands

```
parfold-fold N_THREADS SIZE_OF_VECTOR PRINT
parfold-map N_THREADS SIZE_OF_VECTOR PRINT
```

`parfold-fold` multiplies together a random vector of values between 1 and 2.
`parfold-map` doubles the vector `1..SIZE_OF_VECTOR`. `PRINT` is `0` or `1`,
and any other value is treated as `1`. A thread count larger than the vector
is reduced to the vector's size. A negative size or a thread count below 1 is
an error. Non-numeric arguments are read as `0`.

### Dot product over a vector file

```
parfold-create-vector SIZE_OF_VECTOR FILENAME
parfold-seq-dotp FILENAME
parfold-conc-dotp N_THREADS FILENAME
parfold-bench SIZE_OF_VECTOR NUMBER_OF_THREADS
```

All values in a vector file are stored in native byte order, in this sequence:

1. a signed 64-bit integer that holds the vector size `n`
2. the first vector, as `n` 32-bit floats
3. the second vector, as `n` 32-bit floats
4. any number of result floats (32-bit)

`parfold-create-vector` writes the size and two random vectors.
`parfold-seq-dotp` appends its result to the end of the file.
`parfold-conc-dotp` writes its result directly after the two vectors and
overwrites any result already stored there.

`parfold-bench` creates `data.bin` in the current directory. It then runs the
sequential and the concurrent dot product on that file, timing each run, and
reads each result back from the end of the file. Finally it prints both
results, their relative difference and the two elapsed times. From Python,
`run_benchmark(size_of_vector, number_of_threads, filename)` returns the same
figures as a `BenchResult`, and `BenchResult.report()` renders them as text.

The functions in `parfold.vectorfile` give direct access to the format:
`write_vectors`, `read_vectors`, `append_result`, `write_result`,
`read_last_result` and `create_random_file`. Truncated or malformed files
raise `VectorFileError`.