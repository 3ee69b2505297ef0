"""Small number routines: common factor, Fibonacci, powers, character codes."""

from __future__ import annotations

__all__ = ["hcf", "fibonacci", "power", "ascii_value"]


def hcf(a: int, b: int) -> int:
    """Return the highest common factor of two non-negative integers.

    If either argument is 0 the result is 0.
    """
    if a < 0 or b < 0:
        raise ValueError("hcf needs non-negative integers")
    if a == 0 or b == 0:
        return 0
    while b:
        a, b = b, a % b
    return a


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; values of n below 2 are returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def power(x: int, y: int) -> int:
    """Return ``x`` raised to the non-negative integer ``y`` by repeated squaring."""
    if y < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    base = x
    while y:
        if y & 1:
            result *= base
        base *= base
        y >>= 1
    return result


def ascii_value(char: str) -> int:
    """Return the ASCII code of a single character."""
    if len(char) != 1:
        raise ValueError("expected exactly one character")
    code = ord(char)
    if code > 127:
        raise ValueError(f"{char!r} is not an ASCII character")
    return code