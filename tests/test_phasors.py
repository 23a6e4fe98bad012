import pytest

from mixfft.phasors import SPLIT_LENGTH, Phasors

TOL = 1e-12


def test_index_zero_is_one():
    assert Phasors(10).load(0) == 1


def test_quarter_turn():
    assert abs(Phasors(4).load(1) - 1j) < TOL


def test_half_turn_beyond_split():
    p = Phasors(2 * SPLIT_LENGTH)
    assert abs(p.load(SPLIT_LENGTH) + 1) < TOL


@pytest.mark.parametrize("length", [1, 3, 17, 2048, 5000])
def test_unit_modulus(length):
    p = Phasors(length)
    for index in {0, length // 3, length // 2, length - 1}:
        assert abs(abs(p.load(index)) - 1.0) < TOL


def test_product_rule_across_split():
    n = 5000
    p = Phasors(n)
    for a, b in [(1000, 2000), (2047, 1), (3000, 1999), (100, 4800), (2048, 2048)]:
        assert abs(p.load(a) * p.load(b) - p.load((a + b) % n)) < TOL


def test_conjugate_symmetry():
    n = 4100
    p = Phasors(n)
    for k in (1, 5, 2047, 2048, 3001):
        assert abs(p.load(n - k) - p.load(k).conjugate()) < TOL


def test_root_raised_to_length_is_one():
    p = Phasors(9)
    assert abs(p.load(1) ** 9 - 1) < TOL
    assert abs(p.load(3) ** 3 - 1) < TOL


def test_multiply_with_index_zero_returns_value():
    value = complex(1.5, -2.25)
    assert Phasors(8).multiply(value, 0) == value


@pytest.mark.parametrize("index", [1, 7, 2047, 2048, 4095])
def test_multiply_matches_load(index):
    p = Phasors(4096)
    value = complex(0.3, -1.7)
    assert abs(p.multiply(value, index) - value * p.load(index)) < TOL


def test_length_attribute():
    assert Phasors(123).length == 123


def test_invalid_length():
    with pytest.raises(ValueError):
        Phasors(0)