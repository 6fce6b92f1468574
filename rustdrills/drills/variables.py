"""Drills on variable bindings and primitive types."""

from __future__ import annotations

from collections.abc import Sequence, Sized
from typing import Any

BIG_ARRAY_SIZE = 100
TEN = 10


def ten_check(x: int) -> str:
    """Say whether ``x`` is ten; ``x`` must be an integer."""
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError(f"expected an integer, got {type(x).__name__}")
    if x == TEN:
        return "Ten!"
    return "Not ten!"


def greetings(is_morning: bool, is_evening: bool) -> list[str]:
    """The greetings that apply at the given time of day."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def classify_char(ch: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def array_size_message(items: Sized) -> str:
    """Comment on whether ``items`` holds at least a hundred elements."""
    if len(items) >= BIG_ARRAY_SIZE:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(values: Sequence[Any], start: int, stop: int) -> list[Any]:
    """Elements ``start`` up to but not including ``stop``; bounds are checked."""
    if not 0 <= start <= stop <= len(values):
        raise IndexError(
            f"slice {start}..{stop} out of range for length {len(values)}"
        )
    return list(values[start:stop])


def _display(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a ``(name, age)`` pair."""
    name, age = cat
    return f"{name} is {_display(age)} years old."


def second_number(numbers: Sequence[Any]) -> Any:
    """The element at index 2 of ``numbers``."""
    return numbers[2]