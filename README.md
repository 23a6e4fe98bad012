# mixfft

Building blocks for mixed-radix fast Fourier transforms, written in plain
Python with no dependencies.

The package provides three things:

- `mixfft.phasors.Phasors`, a table of twiddle factors (roots of unity).
- `mixfft.numtheory`, the integer helpers that a mixed-radix and Rader
  transform planner needs.
- Hand-optimised butterfly kernels for the lengths 2, 10, 11, 12, 13, 16
  and 18.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Twiddle factors

`Phasors(length)` holds the roots of unity `exp(2*pi*i*k/length)` for
`0 <= k < length`. A length below 1 raises `ValueError`.

```python
from mixfft.phasors import Phasors

table = Phasors(8)
table.load(2)              # exp(2*pi*i*2/8), about 1j
table.multiply(3 + 0j, 4)  # 3 * exp(2*pi*i*4/8), about -3
```

`multiply(value, 0)` returns `value` unchanged. Internally the table keeps
the first 2048 roots and every 2048-th root, and forms other roots as the
product of one entry from each.

## Number theory helpers

`mixfft.numtheory` contains:

- `is_prime(n)`: primality test.
- `factor_integer(n)`: prime factors with multiplicity, ascending; raises
  `ValueError` for `n < 1`.
- `power_mod(base, exponent, modulus)`: modular power; a negative exponent
  uses the modular inverse and raises `ValueError` when none exists.
- `primitive_root(p)`: smallest primitive root of a prime; raises
  `ValueError` if `p` is not prime.
- `list_product(values)`: product of non-negative integers; raises
  `OverflowError` if the result does not fit into 64 bits.

## Butterfly kernels

The kernels live in `mixfft.kernels_a` (`butterfly_2`, `butterfly_10`,
`butterfly_12`), `mixfft.kernels_b` (`butterfly_11`, `butterfly_13`) and
`mixfft.kernels_d` (`butterfly_16`, `butterfly_18`). All share one
signature:

```
butterfly_N(phasors, data, offset, stride, twiddle_start, twiddle_increment)
```

A kernel works in place on the `N` elements of the mutable sequence `data`
at `offset`, `offset + stride`, ... . It first multiplies element `n` by
the twiddle factor with index `twiddle_start + n * twiddle_increment` from
`phasors`, then replaces the elements by their discrete Fourier transform
with kernel `exp(+2*pi*i*k*n/N)`, in natural order.

With both twiddle arguments set to 0 no twiddling happens, and the kernel
is a plain length-`N` DFT:

```python
from mixfft.phasors import Phasors
from mixfft.kernels_a import butterfly_10

data = [complex(n, -n) for n in range(10)]
butterfly_10(Phasors(10), data, 0, 1, 0, 0)
# data now holds the length-10 transform of the original values
```

## What the package does not do

The package has no ready-to-use transform object: nothing here plans a
transform of an arbitrary length, chains the kernels together, applies
Rader's algorithm to prime lengths, transforms several dimensions, or
applies scaling and sign conventions. Kernels exist only for the lengths
listed above. There are no command-line programs, benchmarks or self-test
runner.