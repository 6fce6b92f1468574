"""Running or testing a single exercise."""

from __future__ import annotations

from .exercise import Exercise, ExerciseFailed, Mode
from .verify import _failure, _show, _spinner, _success
from .verify import test as run_tests


def run(exercise: Exercise) -> None:
    """Test the exercise, or compile and run it, depending on its mode."""
    if exercise.mode is Mode.TEST:
        run_tests(exercise)
    else:
        compile_and_run(exercise)


def compile_and_run(exercise: Exercise) -> None:
    """Compile the exercise, run the binary and show what it printed."""
    try:
        with _spinner(f"Compiling {exercise}...") as update:
            compiled = exercise.compile()
            update(f"Running {exercise}...")
            ran = exercise.run() if compiled.returncode == 0 else None
        if ran is None:
            _failure(f"Compilation of {exercise} failed! Compiler error message:\n")
            _show(compiled.stderr)
            raise ExerciseFailed(exercise)
        _show(ran.stdout)
        if ran.returncode == 0:
            _success(f"Successfully ran {exercise}")
            return
        _show(ran.stderr)
        _failure(f"Ran {exercise} with errors")
        raise ExerciseFailed(exercise)
    finally:
        exercise.clean()