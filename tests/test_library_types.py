import pytest

from rustdrills.drills.library_types import (
    DivideByZeroError,
    DivisionError,
    JobStatus,
    NotDivisibleError,
    capitalize_first,
    divide,
    divide_all,
    divide_each,
    factorial,
    offset_sums,
    run_jobs,
)


def test_offset_sums_small():
    assert offset_sums([1, 2, 3, 4, 5, 6], [0, 1], 2) == {0: 9, 1: 12}


def test_offset_sums_first_five_offsets_cover_everything():
    numbers = list(range(100))
    sums = offset_sums(numbers, range(5), 5)
    assert sum(sums.values()) == sum(numbers)


def test_offset_sums_default_offsets():
    numbers = list(range(100))
    sums = offset_sums(numbers)
    assert sorted(sums) == list(range(8))
    assert sums[5] == sums[0]


def test_offset_sums_prints(capsys):
    offset_sums([1, 2, 3], [0], 1)
    assert "Sum of offset 0 is 6" in capsys.readouterr().out


def test_capitalize_success():
    assert capitalize_first("hello") == "Hello"


def test_capitalize_empty():
    assert capitalize_first("") == ""


def test_iterate_string_vec():
    assert [capitalize_first(w) for w in ["hello", "world"]] == ["Hello", "World"]


def test_iterate_into_string():
    assert "".join(capitalize_first(w) for w in ["hello", " ", "world"]) == "Hello World"


def test_divide_success():
    assert divide(81, 9) == 9


def test_not_divisible():
    with pytest.raises(NotDivisibleError) as info:
        divide(81, 6)
    assert info.value == NotDivisibleError(81, 6)
    assert (info.value.dividend, info.value.divisor) == (81, 6)


def test_divide_by_0():
    with pytest.raises(DivideByZeroError):
        divide(81, 0)


def test_divide_0_by_something():
    assert divide(0, 81) == 0


def test_errors_share_base():
    with pytest.raises(DivisionError):
        divide(1, 0)
    with pytest.raises(DivisionError):
        divide(1, 2)


def test_result_with_list():
    assert divide_all([27, 297, 38502, 81], 27) == [1, 11, 1426, 3]


def test_result_with_list_failure():
    with pytest.raises(NotDivisibleError) as info:
        divide_all([27, 28, 0], 27)
    assert info.value == NotDivisibleError(28, 27)


def test_list_of_results():
    assert divide_each([27, 297, 38502, 81], 27) == [1, 11, 1426, 3]


def test_list_of_results_keeps_errors():
    results = divide_each([27, 28], 27)
    assert results[0] == 1
    assert results[1] == NotDivisibleError(28, 27)
    assert divide_each([5], 0) == [DivideByZeroError()]


def test_factorial_of_1():
    assert factorial(1) == 1


def test_factorial_of_2():
    assert factorial(2) == 2


def test_factorial_of_4():
    assert factorial(4) == 24


def test_factorial_of_0():
    assert factorial(0) == 1


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_factorial_overflow():
    assert factorial(20) == 2432902008176640000
    with pytest.raises(OverflowError):
        factorial(21)


def test_run_jobs_completes(capsys):
    status = run_jobs(3, 0.01, 0.001)
    assert status.jobs_completed == 3
    lines = capsys.readouterr().out.splitlines()
    assert lines
    assert set(lines) == {"waiting... "}


def test_run_jobs_nothing_to_do(capsys):
    status = run_jobs(0, 0.01, 0.001)
    assert status == JobStatus(0)
    assert capsys.readouterr().out == ""