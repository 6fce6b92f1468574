"""Command line entry point: verify, watch or run exercises."""

from __future__ import annotations

import argparse
import contextlib
import itertools
import os
import queue
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, ExerciseFailed, load_exercises
from .run import run
from .verify import verify

INFO_FILE = "info.toml"
DEFAULT_OUT_FILE = "default_out.txt"
EXERCISES_DIR = "./exercises"
DEBOUNCE_SECONDS = 2.0

_BANNER = """
       welcome to...

    +-----------------------+
    |      r u s t d r i l l s     |
    +-----------------------+
"""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="rustdrills",
        description="A collection of small exercises to get you used to "
        "writing and reading Rust code",
    )
    parser.set_defaults(command=None)
    sub = parser.add_subparsers()
    verify_cmd = sub.add_parser(
        "verify", aliases=["v"],
        help="Verifies all exercises according to the recommended order",
    )
    verify_cmd.set_defaults(command="verify")
    watch_cmd = sub.add_parser(
        "watch", aliases=["w"], help="Reruns `verify` when files were edited"
    )
    watch_cmd.set_defaults(command="watch")
    run_cmd = sub.add_parser("run", aliases=["r"], help="Runs/Tests a single exercise")
    run_cmd.add_argument("file")
    run_cmd.add_argument("-t", "--test", action="store_true", help="Run the file as a test")
    run_cmd.set_defaults(command="run")
    return parser


def _ends_with(path: Path, suffix: Path) -> bool:
    count = len(suffix.parts)
    return count > 0 and path.parts[-count:] == suffix.parts


def find_exercise(exercises: Iterable[Exercise], filename: str) -> Exercise | None:
    """Return the exercise whose path the existing file ``filename`` ends with."""
    try:
        target = Path(filename).resolve(strict=True)
    except OSError:
        return None
    return next((e for e in exercises if _ends_with(target, e.path)), None)


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, events: queue.Queue[str]) -> None:
        super().__init__()
        self._events = events

    def _record(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._events.put(os.fsdecode(event.src_path))

    def on_created(self, event: FileSystemEvent) -> None:
        self._record(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._record(event)


def _debounced(events: queue.Queue[str]) -> list[str]:
    """Wait for a change, then gather changes until the files settle."""
    pending = {events.get(): None}
    while True:
        try:
            pending[events.get(timeout=DEBOUNCE_SECONDS)] = None
        except queue.Empty:
            return list(pending)


def watch(exercises: Sequence[Exercise]) -> None:
    """Verify everything, then re-verify from each edited exercise onwards."""
    events: queue.Queue[str] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(events), EXERCISES_DIR, recursive=True)
    observer.start()
    try:
        with contextlib.suppress(ExerciseFailed):
            verify(exercises)
        while True:
            for changed in _debounced(events):
                if Path(changed).suffix != ".rs":
                    continue
                print("----------**********----------\n")
                target = Path(changed).resolve()
                remaining = itertools.dropwhile(
                    lambda e: not _ends_with(target, e.path), exercises
                )
                with contextlib.suppress(ExerciseFailed):
                    verify(remaining)
    finally:
        observer.stop()
        observer.join()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and carry out the chosen command."""
    args = _build_parser().parse_args(argv)

    if args.command is None:
        print(_BANNER)

    if not Path(INFO_FILE).exists():
        print(f"{Path(sys.argv[0]).resolve()} must be run from the rustdrills directory")
        print("Try `cd rustdrills/`!")
        return 1

    exercises = load_exercises(INFO_FILE)

    if args.command == "run":
        exercise = find_exercise(exercises, args.file)
        if exercise is None:
            print("No exercise found for your file name!")
            return 1
        try:
            run(exercise)
        except ExerciseFailed:
            return 1
    elif args.command == "verify":
        try:
            verify(exercises)
        except ExerciseFailed:
            return 1
    elif args.command == "watch":
        with contextlib.suppress(KeyboardInterrupt):
            watch(exercises)
    else:
        print(Path(DEFAULT_OUT_FILE).read_text())
    return 0