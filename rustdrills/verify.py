"""Checking exercises in order: compiling them or running their tests."""

from __future__ import annotations

import contextlib
from collections.abc import Callable, Iterable, Iterator

from rich.console import Console
from rich.text import Text

from .exercise import Exercise, ExerciseFailed, Mode

_console = Console(highlight=False, soft_wrap=True, markup=False, emoji=False)


def _emoji(fancy: str, plain: str) -> str:
    try:
        fancy.encode(_console.encoding)
    except (UnicodeEncodeError, LookupError):
        return plain
    return fancy


def _success(message: str) -> None:
    _console.print(f"{_emoji('✅', '✓')} {message}", style="green")


def _failure(message: str) -> None:
    _console.print(f"{_emoji('⚠️ ', '!')} {message}", style="red")


def _show(output: bytes) -> None:
    print(output.decode("utf-8", errors="replace"))


@contextlib.contextmanager
def _spinner(message: str) -> Iterator[Callable[[str], None]]:
    """Show a spinner on a terminal; yield a function that changes its text."""
    if not _console.is_terminal:
        yield lambda _message: None
        return
    with _console.status(Text(message)) as status:
        yield lambda new_message: status.update(Text(new_message))


def verify(exercises: Iterable[Exercise]) -> None:
    """Check each exercise in turn, stopping at the first that fails."""
    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            test(exercise)
        else:
            compile_only(exercise)


def compile_only(exercise: Exercise) -> None:
    """Check that the exercise compiles."""
    try:
        with _spinner(f"Compiling {exercise}..."):
            output = exercise.compile()
        if output.returncode == 0:
            _success(f"Successfully compiled {exercise}!")
            return
        _failure(f"Compilation of {exercise} failed! Compiler error message:\n")
        _show(output.stderr)
        raise ExerciseFailed(exercise)
    finally:
        exercise.clean()


def test(exercise: Exercise) -> None:
    """Build the exercise's tests and check that they pass."""
    try:
        with _spinner(f"Testing {exercise}...") as update:
            compiled = exercise.compile()
            ran = None
            if compiled.returncode == 0:
                update(f"Running {exercise}...")
                ran = exercise.run()
        if ran is None:
            _failure(
                f"Compiling of {exercise} failed! Please try again. Here's the output:"
            )
            _show(compiled.stderr)
            raise ExerciseFailed(exercise)
        if ran.returncode == 0:
            _success(f"Successfully tested {exercise}!")
            return
        _failure(f"Testing of {exercise} failed! Please try again. Here's the output:")
        _show(ran.stdout)
        raise ExerciseFailed(exercise)
    finally:
        exercise.clean()