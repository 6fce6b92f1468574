"""Drills on shared data, threads, iterators and division errors."""

from __future__ import annotations

import itertools
import math
import threading
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

_U64_MAX = (1 << 64) - 1


def offset_sums(
    numbers: Sequence[int],
    offsets: Iterable[int] = range(8),
    step: int = 5,
) -> dict[int, int]:
    """Sum every ``step``-th number from each offset, one thread per offset.

    All threads read the same sequence; no copy of it is made.
    """
    offsets = list(offsets)

    def _sum_from(offset: int) -> int:
        return sum(itertools.islice(numbers, offset, None, step))

    with ThreadPoolExecutor(max_workers=max(len(offsets), 1)) as pool:
        sums = dict(zip(offsets, pool.map(_sum_from, offsets)))
    for offset, total in sums.items():
        print(f"Sum of offset {offset} is {total}")
    return sums


def capitalize_first(text: str) -> str:
    """Return ``text`` with its first character in upper case."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


class DivisionError(Exception):
    """A division that could not give a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((NotDivisibleError, self.dividend, self.divisor))

    def __repr__(self) -> str:
        return f"NotDivisibleError(dividend={self.dividend}, divisor={self.divisor})"


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)

    def __repr__(self) -> str:
        return "DivideByZeroError()"


def divide(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` when ``a`` is an exact multiple of ``b``."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def divide_all(numbers: Iterable[int], divisor: int) -> list[int]:
    """Divide every number; the first failure is raised."""
    return [divide(n, divisor) for n in numbers]


def divide_each(numbers: Iterable[int], divisor: int) -> list[int | DivisionError]:
    """Divide every number, keeping each quotient or the error it raised."""
    results: list[int | DivisionError] = []
    for n in numbers:
        try:
            results.append(divide(n, divisor))
        except DivisionError as err:
            results.append(err)
    return results


def factorial(num: int) -> int:
    """Factorial of a non-negative integer that fits in 64 unsigned bits."""
    if num < 0:
        raise ValueError("factorial is only defined for non-negative numbers")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in a 64-bit unsigned integer")
    return result


@dataclass
class JobStatus:
    """Progress shared between a worker and the thread watching it."""

    jobs_completed: int = 0
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )


def run_jobs(
    total: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5
) -> JobStatus:
    """Complete ``total`` jobs on a worker thread while this thread waits.

    Prints ``waiting...`` each time the jobs are found unfinished.
    """
    status = JobStatus()

    def _work() -> None:
        for _ in range(total):
            time.sleep(job_delay)
            with status.lock:
                status.jobs_completed += 1

    worker = threading.Thread(target=_work, daemon=True)
    worker.start()
    while True:
        with status.lock:
            done = status.jobs_completed >= total
        if done:
            break
        print("waiting... ")
        time.sleep(poll_delay)
    worker.join()
    return status