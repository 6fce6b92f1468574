"""Exercise descriptions and the compiler calls that check them."""

from __future__ import annotations

import contextlib
import os
import subprocess
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

RUSTC_COLOR_ARGS = ("--color", "always")


def temp_file() -> str:
    """Path of the binary built for the exercise currently being checked."""
    return f"./temp_{os.getpid()}"


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"


class ExerciseFailed(Exception):
    """An exercise did not compile, did not run cleanly or failed its tests."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} failed")
        self.exercise = exercise


@dataclass(frozen=True)
class Exercise:
    """One exercise file and the way it is checked."""

    path: Path
    mode: Mode

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))
        object.__setattr__(self, "mode", Mode(self.mode))

    def compile(self) -> subprocess.CompletedProcess[bytes]:
        """Build the exercise (as a test harness in test mode) into the temp file."""
        args = ["rustc"]
        if self.mode is Mode.TEST:
            args.append("--test")
        args += [str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS]
        try:
            return subprocess.run(args, capture_output=True, check=False)
        except OSError as err:
            raise RuntimeError("Failed to run 'compile' command.") from err

    def run(self) -> subprocess.CompletedProcess[bytes]:
        """Run the binary produced by :meth:`compile`."""
        try:
            return subprocess.run([temp_file()], capture_output=True, check=False)
        except OSError as err:
            raise RuntimeError("Failed to run 'run' command") from err

    def clean(self) -> None:
        """Remove the built binary, if any."""
        with contextlib.suppress(OSError):
            os.remove(temp_file())

    def __str__(self) -> str:
        return str(self.path)


def _parse_entry(entry: Any) -> Exercise:
    try:
        return Exercise(Path(entry["path"]), Mode(entry["mode"]))
    except (KeyError, TypeError) as err:
        raise ValueError(f"invalid exercise entry: {entry!r}") from err


def load_exercises(path: str | os.PathLike[str]) -> list[Exercise]:
    """Read the ordered exercise list from a TOML file."""
    with open(path, "rb") as fh:
        data = tomllib.load(fh)
    entries = data.get("exercises")
    if not isinstance(entries, list):
        raise ValueError("the exercise list must hold an 'exercises' array")
    return [_parse_entry(entry) for entry in entries]