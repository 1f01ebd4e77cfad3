# core/narcissism.py
"""Narcissistic (Armstrong) number test using exact integer arithmetic."""


def digit_count(n: int) -> int:
    """Number of decimal digits of a non-negative int; 0 has one digit."""
    count = 1
    n //= 10
    while n:
        count += 1
        n //= 10
    return count


def is_narcissistic(n: int) -> bool:
    """True if ``n`` equals the sum of its decimal digits each raised to the digit count."""
    if n < 0:
        return False
    power = digit_count(n)
    total = 0
    rest = n
    while True:
        rest, digit = divmod(rest, 10)
        total += digit ** power
        if not rest:
            break
    return total == n
