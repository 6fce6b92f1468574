"""Module and macro drills: re-exported names and variadic messages."""

from __future__ import annotations

from typing import Any

PEAR = "Pear"
APPLE = "Apple"
CUCUMBER = "Cucumber"
CARROT = "Carrot"

FRUIT = PEAR
VEGGIE = CUCUMBER


def make_sausage() -> str:
    """Print and return the sausage message."""
    message = "sausage!"
    print(message)
    return message


def favorite_snacks() -> str:
    """Describe the favourite fruit and vegetable."""
    return f"favorite snacks: {FRUIT} and {VEGGIE}"


def my_macro(*args: Any) -> str:
    """Print and return a message; with one argument, the argument is shown."""
    if not args:
        message = "Check out my macro!"
    elif len(args) == 1:
        message = f"Look at this other macro: {args[0]}"
    else:
        raise TypeError(f"my_macro takes at most one argument ({len(args)} given)")
    print(message)
    return message


def hello(val: Any) -> str:
    """Greet ``val``."""
    return f"Hello {val}"