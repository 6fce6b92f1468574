# rustdrills

rustdrills walks you through a series of small Rust exercises. It compiles
each exercise with `rustc`, then runs the result or runs its tests, and reports
how that went. `rustc` must be on your `PATH`.

## Installing

    pip install .

To run the test suite as well:

    pip install ".[test]"
    pytest

## Usage

Run every command from the directory that holds `info.toml`. That file lists
the exercises in their recommended order:

    [[exercises]]
    path = "exercises/variables/variables1.rs"
    mode = "compile"

    [[exercises]]
    path = "exercises/tests/tests1.rs"
    mode = "test"

Commands:

    rustdrills               # print the welcome banner, then the contents of default_out.txt
    rustdrills verify        # check every exercise in order, stopping at the first failure
    rustdrills watch         # verify, then verify again whenever a .rs file under exercises/ changes
    rustdrills run FILE      # check a single exercise

`verify`, `watch` and `run` also answer to `v`, `w` and `r`.

How an exercise is checked depends on its `mode`:

- `verify` compiles a `compile` exercise and reports success if it compiles.
  A `test` exercise is compiled as a test binary, which is then run; it
  succeeds when all of its tests pass.
- `run` treats `test` exercises the same way. A `compile` exercise is
  compiled and then run, and whatever it printed is shown; it succeeds when
  the program exits cleanly.

The built binary is written to `./temp_<pid>` and removed afterwards.
Compiler errors, or the test output of a failing test binary, are printed
below the failure message.

`run FILE` looks for the first listed exercise whose path the resolved path
of `FILE` ends with; `FILE` must exist. The `-t`/`--test` option is accepted,
but the exercise's `mode` in `info.toml` decides how it is checked.

`watch` verifies the whole list once, then waits for `.rs` files under
`./exercises` to be created or modified. Once changes have settled for two
seconds, it starts a new verification at the changed exercise and goes on
through the rest of the list. Stop it with Ctrl-C.

### Exit status

The command exits with status 1 when:

- `info.toml` is missing from the current directory,
- `run` is given a file that matches no listed exercise,
- the exercise checked by `run`, or any exercise checked by `verify`, fails,
- the command line cannot be parsed (for example `run` without a file).

Otherwise it exits with status 0.

## Using it from Python

The same steps are available as functions:

- `rustdrills.exercise.load_exercises(path)` reads `info.toml` into a list of
  `Exercise` objects, each with a `path` and a `mode` (`Mode.COMPILE` or
  `Mode.TEST`).
- `rustdrills.verify.verify(exercises)` checks exercises in order.
  `rustdrills.verify.compile_only(exercise)` and
  `rustdrills.verify.test(exercise)` check one exercise.
- `rustdrills.run.run(exercise)` and `rustdrills.run.compile_and_run(exercise)`
  do what the `run` command does.
- `rustdrills.cli.find_exercise(exercises, filename)` returns the matching
  exercise or `None`.

A failed check raises `rustdrills.exercise.ExerciseFailed`, whose `exercise`
attribute names the exercise.

## Drills

The `rustdrills.drills` package holds worked Python solutions to the same
exercises, grouped by topic:

- `errors`: `generate_nametag_text`, `total_cost`, `purchase_message`,
  `pop_report`, `read_and_validate`, and `PositiveNonzeroInteger`, which raises
  `CreationError` (with a `CreationKind`) for zero or negative values.
- `library_types`: `offset_sums`, `capitalize_first`, `divide`, `divide_all`,
  `divide_each`, `factorial`, `run_jobs` and `JobStatus`. `divide` raises
  `NotDivisibleError` or `DivideByZeroError`, both subclasses of
  `DivisionError`.
- `structs`: `ColorClassicStruct`, `ColorTupleStruct` and `UnitStruct`.
- `functions`: `call_me`, `sale_price`, `is_even`, `square`, `bigger`,
  `calculate_price`, `times_two`.
- `variables`: `ten_check`, `greetings`, `classify_char`,
  `array_size_message`, `nice_slice`, `describe_cat`, `second_number`.
- `strings`: `current_favorite_color`, `is_a_color_word`, `sample_strings`.
- `ownership`: `fill_vec`, `fill_vec_in_place`, `fresh_vec`, `describe_vec`.
- `namespaces`: `make_sausage`, `favorite_snacks`, `my_macro`, `hello`.

For example, `rustdrills.drills.functions.calculate_price(55)` returns `55`,
and `rustdrills.drills.errors.total_cost("34")` returns `171`.

## What it does not do

rustdrills ships no exercise files and no `info.toml` or `default_out.txt`;
you supply them in the directory you run it from. It shows no hints for an
exercise, and it does not keep track of your progress between runs.