"""Function drills: calls, return values, conditionals and simple pricing."""

from __future__ import annotations

EVEN_DISCOUNT = 10
ODD_DISCOUNT = 3
BULK_THRESHOLD = 40
REGULAR_APPLE_PRICE = 2
BULK_APPLE_PRICE = 1


def call_me(num: int) -> list[str]:
    """Ring ``num`` times, printing each ring, and return the lines printed."""
    lines = [f"Ring! Call number {i}" for i in range(1, num + 1)]
    for line in lines:
        print(line)
    return lines


def is_even(num: int) -> bool:
    """Whether ``num`` is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Sale price: even prices lose 10, odd prices lose 3."""
    return price - (EVEN_DISCOUNT if is_even(price) else ODD_DISCOUNT)


def square(num: int) -> int:
    """The square of ``num``."""
    return num * num


def bigger(a: int, b: int) -> int:
    """The larger of two numbers; ``b`` when they are equal."""
    return a if a > b else b


def calculate_price(num: int) -> int:
    """Price of ``num`` apples: 2 each, or 1 each for orders above 40."""
    if num > BULK_THRESHOLD:
        return num * BULK_APPLE_PRICE
    return num * REGULAR_APPLE_PRICE


def times_two(num: int) -> int:
    """Twice ``num``."""
    return num * 2