import pytest

from mixfft.numtheory import (
    SIZE_MAX,
    factor_integer,
    is_prime,
    list_product,
    power_mod,
    primitive_root,
)


def test_small_non_primes():
    assert not is_prime(0)
    assert not is_prime(1)
    assert not is_prime(91)


def test_is_prime_agrees_with_factorisation():
    for n in range(2, 500):
        assert is_prime(n) == (factor_integer(n) == [n])


@pytest.mark.parametrize("n", [1, 2, 12, 97, 360, 1024, 999983, 2 * 3 * 5 * 7 * 11 * 13])
def test_factor_product_and_primality(n):
    factors = factor_integer(n)
    assert list_product(factors) == n
    assert factors == sorted(factors)
    assert all(is_prime(f) for f in factors)


def test_factor_of_one_is_empty():
    assert factor_integer(1) == []


def test_factor_integer_rejects_zero():
    with pytest.raises(ValueError):
        factor_integer(0)


@pytest.mark.parametrize("base, exponent, modulus", [(3, 5, 7), (10, 100, 13), (2, 0, 9)])
def test_power_mod_positive(base, exponent, modulus):
    assert power_mod(base, exponent, modulus) == pow(base, exponent, modulus)


@pytest.mark.parametrize("base, modulus", [(3, 7), (5, 11), (12, 97)])
def test_power_mod_inverse(base, modulus):
    inverse = power_mod(base, -1, modulus)
    assert 0 <= inverse < modulus
    assert (base * inverse) % modulus == 1


def test_power_mod_not_invertible():
    with pytest.raises(ValueError):
        power_mod(2, -1, 4)


def test_primitive_root_of_seven():
    assert primitive_root(7) == 3


@pytest.mark.parametrize("p", [3, 5, 11, 13, 23, 97, 257])
def test_primitive_root_generates_group_and_is_smallest(p):
    g = primitive_root(p)
    assert len({pow(g, k, p) for k in range(p - 1)}) == p - 1
    for h in range(2, g):
        assert len({pow(h, k, p) for k in range(p - 1)}) < p - 1


def test_primitive_root_requires_prime():
    with pytest.raises(ValueError):
        primitive_root(4)


def test_list_product_empty_is_one():
    assert list_product([]) == 1


def test_list_product_limit():
    assert list_product([SIZE_MAX]) == SIZE_MAX
    with pytest.raises(OverflowError):
        list_product([2**32, 2**32])


def test_list_product_rejects_negative():
    with pytest.raises(ValueError):
        list_product([3, -1])