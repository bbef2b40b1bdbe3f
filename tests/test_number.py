import pytest
from halton import number, InvalidBaseError, IndexOverflowError, IndexBounds, MAX_INDEX

BASE_2 = [0.0, 0.5, 0.25, 0.75, 0.125, 0.625, 0.375, 0.875, 0.0625, 0.5625]
BASE_3 = [
    0.0,
    0.3333333333333333,
    0.6666666666666666,
    0.1111111111111111,
    0.4444444444444444,
    0.7777777777777777,
    0.2222222222222222,
    0.5555555555555555,
    0.8888888888888888,
    0.0370370370370370,
]


def test_number_base_2():
    for i, expected in enumerate(BASE_2):
        assert number(2, i) == pytest.approx(expected, rel=1e-12)


def test_number_base_3():
    for i, expected in enumerate(BASE_3):
        assert number(3, i) == pytest.approx(expected, rel=1e-12)


def test_digit_reversal_examples():
    # 3 = 0b11 -> 0.11 in base 2; 9 = 100 in base 3 -> 0.001 in base 3
    assert number(2, 3) == 0.75
    assert number(3, 9) == pytest.approx(1 / 27, rel=1e-12)
    # 10 = 0b1010 -> 0.0101 = 1/4 + 1/16
    assert number(2, 10) == 0.3125


def test_index_zero_is_zero_for_any_base():
    for base in (2, 3, 5, 7, 10, 255, 256, 65537, MAX_INDEX):
        assert number(base, 0) == 0.0


def test_values_in_open_unit_interval():
    for base in range(2, 14):
        for i in range(1, 500):
            v = number(base, i)
            assert 0.0 < v < 1.0


def test_first_value_is_reciprocal_of_base():
    for base in (2, 3, 7, 1000, 2 ** 40):
        assert number(base, 1) == pytest.approx(1.0 / base, rel=1e-15)


def test_large_index():
    # 2**40 in base 2 is a single 1 followed by forty zeros
    assert number(2, 2 ** 40) == 2.0 ** -41
    v = number(3, MAX_INDEX)
    assert 0.0 < v <= 1.0


def test_invalid_base_rejected():
    for bad in (0, 1, -3):
        with pytest.raises(InvalidBaseError):
            number(bad, 5)
    with pytest.raises(ValueError):
        number(1, 5)
    with pytest.raises(InvalidBaseError):
        number(MAX_INDEX + 1, 5)


def test_invalid_index_rejected():
    with pytest.raises(ValueError):
        number(2, -1)
    with pytest.raises(IndexOverflowError):
        number(2, MAX_INDEX + 1)
    with pytest.raises(IndexOverflowError):
        number(2, 256, bounds=IndexBounds(index_bits=8))


def test_non_integer_arguments_rejected():
    with pytest.raises(TypeError):
        number(2.0, 3)
    with pytest.raises(TypeError):
        number(2, 3.5)
    with pytest.raises(TypeError):
        number(True, 3)


def test_numpy_integers_accepted():
    np = pytest.importorskip("numpy")
    assert number(np.int32(2), np.uint64(3)) == 0.75
