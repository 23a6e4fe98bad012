import cmath
import math
import random

import pytest

from mixfft.kernels_b import butterfly_11, butterfly_13
from mixfft.phasors import Phasors

KERNELS = [(butterfly_11, 11), (butterfly_13, 13)]


def _random_vector(n, seed):
    rng = random.Random(seed)
    return [complex(rng.uniform(-1, 1), rng.uniform(-1, 1)) for _ in range(n)]


def _dft(values):
    n = len(values)
    return [
        sum(x * cmath.exp(2j * math.pi * k * m / n) for m, x in enumerate(values))
        for k in range(n)
    ]


def _assert_close(actual, expected, tol=1e-10):
    assert len(actual) == len(expected)
    for a, e in zip(actual, expected):
        assert abs(a - e) < tol


@pytest.mark.parametrize("kernel,length", KERNELS)
def test_matches_direct_dft(kernel, length):
    values = _random_vector(length, length)
    data = list(values)
    kernel(Phasors(length), data, 0, 1, 0, 0)
    _assert_close(data, _dft(values))


@pytest.mark.parametrize("kernel,length", KERNELS)
def test_impulse_gives_all_ones(kernel, length):
    data = [1.0 + 0j] + [0j] * (length - 1)
    kernel(Phasors(length), data, 0, 1, 0, 0)
    _assert_close(data, [1.0] * length)


@pytest.mark.parametrize("kernel,length", KERNELS)
def test_constant_concentrates_in_dc_bin(kernel, length):
    data = [1.0 + 0j] * length
    kernel(Phasors(length), data, 0, 1, 0, 0)
    _assert_close(data, [float(length)] + [0.0] * (length - 1))


@pytest.mark.parametrize("kernel,length", KERNELS)
def test_shifted_impulse_is_positive_exponential(kernel, length):
    data = [0j] * length
    data[1] = 1.0
    kernel(Phasors(length), data, 0, 1, 0, 0)
    _assert_close(data, [cmath.exp(2j * math.pi * k / length) for k in range(length)])


@pytest.mark.parametrize("kernel,length", KERNELS)
def test_offset_and_stride_leave_other_elements_alone(kernel, length):
    stride, offset = 3, 2
    size = offset + stride * length + 1
    original = _random_vector(size, 7 * length)
    data = list(original)
    kernel(Phasors(length), data, offset, stride, 0, 0)

    touched = set(range(offset, offset + stride * length, stride))
    for i in range(size):
        if i not in touched:
            assert data[i] == original[i]

    expected = _dft([original[offset + stride * n] for n in range(length)])
    _assert_close([data[offset + stride * n] for n in range(length)], expected)


@pytest.mark.parametrize("kernel,length", KERNELS)
def test_twiddles_are_applied(kernel, length):
    table_length = 4 * length
    twiddle_start, twiddle_increment = 3, 2
    values = _random_vector(length, 3 * length)
    data = list(values)
    kernel(Phasors(table_length), data, 0, 1, twiddle_start, twiddle_increment)

    twiddled = [
        x * cmath.exp(2j * math.pi * (twiddle_start + n * twiddle_increment) / table_length)
        for n, x in enumerate(values)
    ]
    _assert_close(data, _dft(twiddled))


@pytest.mark.parametrize("kernel,length", KERNELS)
def test_parseval(kernel, length):
    values = _random_vector(length, 11 * length)
    data = list(values)
    kernel(Phasors(length), data, 0, 1, 0, 0)
    energy_in = sum(abs(x) ** 2 for x in values)
    energy_out = sum(abs(x) ** 2 for x in data)
    assert energy_out == pytest.approx(length * energy_in, rel=1e-12)


@pytest.mark.parametrize("kernel,length", KERNELS)
def test_linearity(kernel, length):
    phasors = Phasors(length)
    a = _random_vector(length, 1)
    b = _random_vector(length, 2)
    combined = [2.0 * x - 0.5j * y for x, y in zip(a, b)]
    fa, fb, fc = list(a), list(b), list(combined)
    for vec in (fa, fb, fc):
        kernel(phasors, vec, 0, 1, 0, 0)
    _assert_close(fc, [2.0 * x - 0.5j * y for x, y in zip(fa, fb)])


@pytest.mark.parametrize("kernel,length", KERNELS)
def test_round_trip_through_conjugation(kernel, length):
    phasors = Phasors(length)
    values = _random_vector(length, 5 * length)
    data = list(values)
    kernel(phasors, data, 0, 1, 0, 0)
    back = [x.conjugate() for x in data]
    kernel(phasors, back, 0, 1, 0, 0)
    _assert_close([x.conjugate() / length for x in back], values)