import os
import subprocess
from pathlib import Path
from unittest import mock

import pytest

from rustdrills.exercise import (
    Exercise,
    ExerciseFailed,
    Mode,
    load_exercises,
    temp_file,
)


def test_clean(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path(temp_file()).touch()
    exercise = Exercise(Path("example.rs"), Mode.TEST)
    exercise.clean()
    assert not Path(temp_file()).exists()


def test_clean_without_file_leaves_other_files_alone(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    keep = tmp_path / "keep.txt"
    keep.write_text("data")
    exercise = Exercise(Path("example.rs"), Mode.COMPILE)
    exercise.clean()
    exercise.clean()
    assert not Path(temp_file()).exists()
    assert keep.read_text() == "data"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["keep.txt"]


def test_temp_file_names_this_process():
    assert temp_file().startswith("./temp_")
    assert temp_file().endswith(str(os.getpid()))


def test_str_is_the_path():
    exercise = Exercise(Path("exercises/if/if1.rs"), Mode.TEST)
    assert str(exercise) == "exercises/if/if1.rs"


def test_values_are_coerced():
    exercise = Exercise("example.rs", "compile")
    assert exercise.path == Path("example.rs")
    assert exercise.mode is Mode.COMPILE


def test_load_exercises(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text(
        '[[exercises]]\npath = "a.rs"\nmode = "compile"\n\n'
        '[[exercises]]\npath = "b.rs"\nmode = "test"\n'
    )
    assert load_exercises(info) == [
        Exercise(Path("a.rs"), Mode.COMPILE),
        Exercise(Path("b.rs"), Mode.TEST),
    ]


def test_load_exercises_rejects_unknown_mode(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text('[[exercises]]\npath = "a.rs"\nmode = "Compile"\n')
    with pytest.raises(ValueError):
        load_exercises(info)


def test_load_exercises_rejects_missing_path(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text('[[exercises]]\nmode = "test"\n')
    with pytest.raises(ValueError):
        load_exercises(info)


def test_load_exercises_requires_list(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text('title = "nothing"\n')
    with pytest.raises(ValueError):
        load_exercises(info)


def test_compile_mode_arguments():
    done = subprocess.CompletedProcess([], 0, b"", b"")
    with mock.patch("subprocess.run", return_value=done) as fake:
        result = Exercise(Path("x.rs"), Mode.COMPILE).compile()
    assert result is done
    assert fake.call_args.args[0] == [
        "rustc", "x.rs", "-o", temp_file(), "--color", "always",
    ]


def test_test_mode_arguments():
    done = subprocess.CompletedProcess([], 0, b"", b"")
    with mock.patch("subprocess.run", return_value=done) as fake:
        Exercise(Path("x.rs"), Mode.TEST).compile()
    assert fake.call_args.args[0] == [
        "rustc", "--test", "x.rs", "-o", temp_file(), "--color", "always",
    ]


def test_run_executes_temp_file():
    done = subprocess.CompletedProcess([], 0, b"out", b"")
    with mock.patch("subprocess.run", return_value=done) as fake:
        result = Exercise(Path("x.rs"), Mode.COMPILE).run()
    assert result.stdout == b"out"
    assert fake.call_args.args[0] == [temp_file()]


def test_missing_compiler_is_reported():
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("rustc")):
        with pytest.raises(RuntimeError, match="Failed to run 'compile' command."):
            Exercise(Path("x.rs"), Mode.COMPILE).compile()


def test_exercise_failed_carries_exercise():
    exercise = Exercise(Path("x.rs"), Mode.TEST)
    err = ExerciseFailed(exercise)
    assert err.exercise is exercise
    assert "x.rs" in str(err)