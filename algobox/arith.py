"""Number-theoretic helpers: gcd, modular powers, prime sieve, peasant multiplication."""

from __future__ import annotations

from math import isqrt


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm; ``b`` must not be zero."""
    remainder = a % b
    while remainder:
        a, b = b, remainder
        remainder = a % b
    return b


def _check_exponent(exponent: int) -> None:
    if exponent < 0:
        raise ValueError("exponent must be non-negative")


def pow_mod_linear(base: int, exponent: int, modulus: int) -> int:
    """Compute ``base ** exponent % modulus`` with one multiplication per step."""
    _check_exponent(exponent)
    result = 1
    for _ in range(exponent):
        result = result * base % modulus
    return result


def pow_mod(base: int, exponent: int, modulus: int) -> int:
    """Compute ``base ** exponent % modulus`` by repeated squaring.

    An exponent of zero yields 1 whatever the modulus.
    """
    _check_exponent(exponent)
    if exponent == 0:
        return 1
    half = pow_mod(base, exponent // 2, modulus)
    result = half * half % modulus
    if exponent & 1:
        result = result * base % modulus
    return result


def prime_table(n: int) -> list[int]:
    """Return every prime up to and including ``n`` (sieve of Eratosthenes)."""
    if n < 2:
        return []
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, isqrt(n) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n + 1, i)))
    return [number for number, is_prime in enumerate(sieve) if is_prime]


def _check_multiplier(m: int) -> None:
    if m < 1:
        raise ValueError("the halved factor must be a positive integer")


def russian_peasant(m: int, n: int) -> int:
    """Multiply by halving ``m`` and doubling ``n``."""
    _check_multiplier(m)
    total = 0
    while m != 1:
        if m % 2:
            total += n
        m //= 2
        n *= 2
    return total + n


def russian_peasant_recursive(m: int, n: int) -> int:
    """Recursive form of :func:`russian_peasant`."""
    _check_multiplier(m)
    if m == 1:
        return n
    if m % 2 == 0:
        return russian_peasant_recursive(m // 2, n * 2)
    return russian_peasant_recursive((m - 1) // 2, n * 2) + n