import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algobox.arith import (
    gcd,
    pow_mod,
    pow_mod_linear,
    prime_table,
    russian_peasant,
    russian_peasant_recursive,
)


def test_gcd_example():
    assert gcd(128, 56) == 8


@given(st.integers(1, 10**9), st.integers(1, 10**9))
def test_gcd_matches_stdlib(a, b):
    assert gcd(a, b) == math.gcd(a, b)


def test_gcd_zero_divisor_raises():
    with pytest.raises(ZeroDivisionError):
        gcd(5, 0)


@given(st.integers(0, 10**6), st.integers(0, 300), st.integers(2, 10**4))
def test_pow_mod_matches_builtin(base, exponent, modulus):
    expected = pow(base, exponent, modulus)
    assert pow_mod(base, exponent, modulus) == expected
    assert pow_mod_linear(base, exponent, modulus) == expected


@given(st.integers(0, 100), st.integers(2, 10**18), st.integers(2, 10**6))
def test_pow_mod_large_exponent(base, exponent, modulus):
    assert pow_mod(base, exponent, modulus) == pow(base, exponent, modulus)


def test_zero_exponent_gives_one_even_for_unit_modulus():
    assert pow_mod(7, 0, 1) == 1
    assert pow_mod_linear(7, 0, 1) == 1


def test_negative_exponent_rejected():
    with pytest.raises(ValueError):
        pow_mod(2, -1, 5)
    with pytest.raises(ValueError):
        pow_mod_linear(2, -1, 5)


def test_prime_table_small():
    assert prime_table(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


@pytest.mark.parametrize("n", [-5, 0, 1])
def test_prime_table_below_two_is_empty(n):
    assert prime_table(n) == []


@given(st.integers(2, 2000))
def test_prime_table_exact(n):
    primes = prime_table(n)
    assert primes == sorted(set(primes))
    assert all(2 <= p <= n for p in primes)
    assert all(all(p % d for d in range(2, math.isqrt(p) + 1)) for p in primes)
    listed = set(primes)
    for k in range(2, n + 1):
        if k not in listed:
            assert any(k % p == 0 for p in primes if p < k)


def test_russian_peasant_example():
    assert russian_peasant_recursive(26, 47) == 26 * 47
    assert russian_peasant(47, 26) == 26 * 47


@given(st.integers(1, 10**9), st.integers(-(10**9), 10**9))
def test_russian_peasant_multiplies(m, n):
    assert russian_peasant(m, n) == m * n
    assert russian_peasant_recursive(m, n) == m * n


@pytest.mark.parametrize("func", [russian_peasant, russian_peasant_recursive])
def test_russian_peasant_rejects_non_positive(func):
    with pytest.raises(ValueError):
        func(0, 3)