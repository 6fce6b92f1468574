"""String drills: owned strings, string slices and common conversions."""

from __future__ import annotations

COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    """The current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether ``attempt`` is one of the known colour words."""
    return attempt in COLOR_WORDS


def sample_strings() -> list[str]:
    """A set of strings built by literals, formatting, slicing and conversions."""
    return [
        "blue",
        "red",
        "hi",
        "rust is fun!",
        "nice weather",
        "Interpolation {}".format("Station"),
        "abc"[0:1],
        "  hello there ".strip(),
        "Happy Monday!".replace("Mon", "Tues"),
        "mY sHiFt KeY iS sTiCkY".lower(),
    ]