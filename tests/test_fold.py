import math
import random

import pytest

from parfold.fold import (
    add,
    concurrent_fold,
    format_vector,
    main,
    mul,
    random_vector,
    sample_float,
    segment_bounds,
)


def test_sample_float_stays_in_range():
    rng = random.Random(42)
    values = [sample_float(3.0, 5.0, rng) for _ in range(500)]
    assert all(3.0 <= v <= 5.0 for v in values)


def test_random_vector_is_reproducible_and_bounded():
    first = random_vector(50, random.Random(7))
    second = random_vector(50, random.Random(7))
    assert first == second
    assert len(first) == 50
    assert all(1.0 <= v <= 2.0 for v in first)


def test_format_vector_uses_six_decimals():
    assert format_vector([1.0, 2.5]) == "[ 1.000000  2.500000 ]"


def test_format_vector_empty():
    assert format_vector([]) == "[]"


def test_segment_bounds_remainder_goes_to_last():
    assert segment_bounds(10, 3) == [(0, 3), (3, 6), (6, 10)]


@pytest.mark.parametrize("length,n_threads", [(1, 1), (7, 2), (100, 7), (5, 5), (3, 8)])
def test_segment_bounds_cover_range_contiguously(length, n_threads):
    bounds = segment_bounds(length, n_threads)
    assert len(bounds) == n_threads
    assert bounds[0][0] == 0
    assert bounds[-1][1] == length
    for (_, stop), (start, _) in zip(bounds, bounds[1:]):
        assert stop == start


def test_segment_bounds_zero_threads():
    assert segment_bounds(0, 0) == []


def test_segment_bounds_negative_threads():
    with pytest.raises(ValueError):
        segment_bounds(4, -1)


@pytest.mark.parametrize("n_threads", [1, 2, 3, 8])
def test_concurrent_fold_sum_matches_builtin(n_threads):
    vector = random_vector(40, random.Random(1))
    assert concurrent_fold(vector, add, n_threads, 0.0) == pytest.approx(sum(vector))


@pytest.mark.parametrize("n_threads", [1, 4, 10])
def test_concurrent_fold_product_matches_prod(n_threads):
    vector = random_vector(10, random.Random(3))
    assert concurrent_fold(vector, mul, n_threads, 1.0) == pytest.approx(math.prod(vector))


def test_concurrent_fold_preserves_order():
    letters = list("abcdefg")
    result = concurrent_fold(letters, lambda element, acc: acc + element, 3, "")
    assert result == "abcdefg"


def test_concurrent_fold_no_threads_returns_init():
    assert concurrent_fold([], mul, 0, 1.0) == 1.0


def test_main_missing_arguments(capsys):
    assert main(["2", "3"]) == 1
    assert "missing" in capsys.readouterr().out


def test_main_negative_size(capsys):
    assert main(["2", "-1", "0"]) == 1
    assert "non-negative" in capsys.readouterr().out


def test_main_non_positive_threads(capsys):
    assert main(["0", "5", "0"]) == 1
    assert "positive" in capsys.readouterr().out


def test_main_limits_threads(capsys):
    assert main(["4", "2", "0"]) == 0
    assert "Number of threads limited to 2." in capsys.readouterr().out


def test_main_print_flag_defaulted(capsys):
    assert main(["2", "3", "5"]) == 0
    out = capsys.readouterr().out
    assert "print? set to 1." in out
    assert "Original vector: [" in out
    assert "result:" in out


def test_main_quiet_prints_nothing(capsys):
    assert main(["2", "6", "0"]) == 0
    assert capsys.readouterr().out == ""