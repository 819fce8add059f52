"""Small number-theoretic routines and a complex-number value."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ComplexNumber:
    """A complex number with integer parts."""

    real: int
    imag: int

    def __add__(self, other: ComplexNumber) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return ComplexNumber(self.real + other.real, self.imag + other.imag)

    def __str__(self) -> str:
        return f"{self.real}+{self.imag}i"


def is_armstrong(number: int) -> bool:
    """Tell whether *number* equals the sum of the cubes of its digits."""
    sign = -1 if number < 0 else 1
    cubes = sum(int(digit) ** 3 for digit in str(abs(number)) if number)
    return sign * cubes == number


def fibonacci(n: int) -> int:
    """Return the *n*-th Fibonacci number, counting fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def primes_up_to(limit: int) -> list[int]:
    """Return every prime not greater than *limit*, by the sieve of Eratosthenes."""
    if limit < 2:
        return []
    prime = [True] * (limit + 1)
    p = 2
    while p * p <= limit:
        if prime[p]:
            prime[p * p::p] = [False] * len(range(p * p, limit + 1, p))
        p += 1
    return [n for n in range(2, limit + 1) if prime[n]]


def _truncating_half(value: int) -> int:
    return value // 2 if value >= 0 else -((-value) // 2)


def sompal_answer(b: int, c: int, d: int) -> int:
    """Return the answer to one test case of the b, c, d puzzle."""
    if c == d:
        return c
    if c <= _truncating_half(d) or c < b:
        return abs(b - c)
    return abs(c - d) + 1