"""Scalar helpers shared by the matrix operations."""


def fmod(num: float, scalar: int) -> float:
    """Return the remainder of ``num / scalar`` with the quotient truncated toward zero.

    The result carries the sign of ``num``.

    Raises:
        ZeroDivisionError: if ``scalar`` is zero.
    """
    if scalar == 0:
        raise ZeroDivisionError("Division by 0")
    quotient = int(num / scalar)  # int() truncates toward zero
    return num - quotient * scalar


def power(num: float, scalar: int) -> float:
    """Raise ``num`` to the non-negative integer power ``scalar``.

    A zero or negative exponent yields 1.
    """
    result = 1.0
    for _ in range(scalar):
        result *= num
    return result