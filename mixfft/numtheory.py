"""Integer arithmetic helpers: primality, factorisation, modular powers."""

SIZE_MAX = 2**64 - 1


def is_prime(n):
    """Return True if ``n`` is a prime number."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    f = 5
    while f * f <= n:
        if n % f == 0 or n % (f + 2) == 0:
            return False
        f += 6
    return True


def factor_integer(n):
    """Return the prime factors of ``n`` with multiplicity, in ascending order."""
    if n < 1:
        raise ValueError("factor_integer() requires a positive integer")
    factors = []
    for p in (2, 3):
        while n % p == 0:
            factors.append(p)
            n //= p
    f = 5
    while f * f <= n:
        for p in (f, f + 2):
            while n % p == 0:
                factors.append(p)
                n //= p
        f += 6
    if n > 1:
        factors.append(n)
    return factors


def power_mod(base, exponent, modulus):
    """Return ``base ** exponent`` modulo ``modulus``; negative exponents use the inverse."""
    if modulus < 1:
        raise ValueError("modulus must be positive")
    try:
        return pow(base, exponent, modulus)
    except ValueError as exc:
        raise ValueError(f"{base} is not invertible modulo {modulus}") from exc


def primitive_root(p):
    """Return the smallest primitive root of the prime ``p``."""
    if not is_prime(p):
        raise ValueError(f"{p} is not a prime number")
    if p == 2:
        return 1
    phi = p - 1
    divisors = set(factor_integer(phi))
    for g in range(2, p):
        if all(pow(g, phi // q, p) != 1 for q in divisors):
            return g
    raise ValueError(f"no primitive root found for {p}")


def list_product(values):
    """Return the product of non-negative integers; raise OverflowError past 64 bits."""
    result = 1
    for value in values:
        if value < 0:
            raise ValueError("list_product() requires non-negative values")
        result *= value
        if result > SIZE_MAX:
            raise OverflowError("product does not fit into 64 bits")
    return result