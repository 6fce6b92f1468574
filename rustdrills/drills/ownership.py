"""Ownership drills: filling vectors by copy, in place, or from scratch."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

FILL_VALUES = (22, 44, 66)


def fill_vec(vec: Iterable[int]) -> list[int]:
    """Return a new list holding ``vec`` followed by the fill values.

    The argument is left untouched.
    """
    filled = list(vec)
    filled.extend(FILL_VALUES)
    return filled


def fill_vec_in_place(vec: list[int]) -> list[int]:
    """Append the fill values to ``vec`` itself and return a copy of the result."""
    vec.extend(FILL_VALUES)
    return list(vec)


def fresh_vec() -> list[int]:
    """A newly made list holding only the fill values."""
    return list(FILL_VALUES)


def describe_vec(name: str, vec: Sequence[int]) -> str:
    """Describe a vector by name, length and contents."""
    content = "[" + ", ".join(repr(item) for item in vec) + "]"
    return f"{name} has length {len(vec)} content `{content}`"