import pytest

from parfold.mapping import concurrent_map, double, enumeration, main


def test_enumeration_starts_at_one():
    assert enumeration(5) == [1, 2, 3, 4, 5]


def test_enumeration_empty():
    assert enumeration(0) == []


def test_double():
    assert double(21) == 42


@pytest.mark.parametrize("n_threads", [1, 2, 3, 7, 10])
def test_concurrent_map_matches_builtin_map(n_threads):
    vector = enumeration(10)
    assert concurrent_map(vector, double, n_threads) == list(map(double, vector))


def test_concurrent_map_leaves_input_untouched():
    vector = enumeration(6)
    concurrent_map(vector, double, 4)
    assert vector == enumeration(6)


def test_concurrent_map_preserves_order_with_other_function():
    words = ["a", "bb", "ccc", "dddd", "eeeee"]
    assert concurrent_map(words, len, 2) == [1, 2, 3, 4, 5]


def test_concurrent_map_more_threads_than_elements():
    assert concurrent_map([1, 2], double, 5) == [2, 4]


def test_concurrent_map_zero_threads():
    assert concurrent_map([], double, 0) == []


def test_concurrent_map_negative_threads():
    with pytest.raises(ValueError):
        concurrent_map([1], double, -2)


def test_main_prints_original_and_mapped(capsys):
    assert main(["2", "3", "1"]) == 0
    out = capsys.readouterr().out
    assert "Original vector: [ 1  2  3 ]" in out
    assert "Mapped vector: [ 2  4  6 ]" in out


def test_main_missing_arguments(capsys):
    assert main([]) == 1
    assert "missing" in capsys.readouterr().out


def test_main_rejects_zero_threads(capsys):
    assert main(["0", "3", "1"]) == 1
    assert "positive" in capsys.readouterr().out


def test_main_limits_threads_to_size(capsys):
    assert main(["9", "0", "0"]) == 0
    assert "Number of threads limited to 0." in capsys.readouterr().out