# rustdrill

`rustdrill` walks you through a course of small exercises. Each exercise is a
source file with a compile error, a failing test or a lint warning for you to
fix. The runner compiles and runs the exercises in the order given by the
course file, shows you what went wrong, and moves on once you are done.

## Requirements

- Python 3.11 or later
- `rustc` on your `PATH` (and `cargo clippy` for the lint exercises)
- `git`, for `rustdrill reset`

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Getting started

Run the command from the course directory, the one that holds `info.toml`
and the `exercises/` folder:

```
rustdrill watch
```

Watch mode verifies every exercise in order and stops at the first one that
fails. Open that file in your editor and fix it; each time a `.rs` file under
`exercises/` is created or saved, the exercise you changed and every exercise
not yet done are checked again. When an exercise compiles and passes but still
carries its `I AM NOT DONE` comment, the runner shows the lines around that
comment. Remove it to move on to the next exercise.

While watch mode is running you can type:

- `hint`: print the hint for the current exercise
- `clear`: clear the screen
- `quit`: leave watch mode
- `help`: list these commands

## Commands

```
rustdrill                  # print a welcome and a short introduction
rustdrill -v               # print the version
rustdrill verify           # check all exercises in order
rustdrill watch            # verify, then re-verify whenever a file changes
rustdrill run NAME         # compile and run (or test) a single exercise
rustdrill run next         # run the first exercise that is not done yet
rustdrill hint NAME        # print the hint for an exercise
rustdrill reset NAME       # put an exercise back with "git stash -- <file>"
rustdrill list             # show every exercise with its path and status
rustdrill lsp              # write rust-project.json for editor support
```

Every command except `-v` must be run from a directory holding `info.toml`,
and needs `rustc` to be found; otherwise it exits with status 1. `run`,
`hint` and `reset` exit with status 1 when no exercise of that name exists,
and `run` and `verify` exit with status 1 when an exercise fails.

Add `--nocapture` before a command to see the output of test exercises:

```
rustdrill --nocapture run tests1
```

### Listing exercises

`rustdrill list` accepts:

- `-p`, `--paths`: show only the paths
- `-n`, `--names`: show only the names
- `-f`, `--filter TEXT`: show exercises whose name or path contains one of
  the comma separated patterns
- `-u`, `--unsolved`: show only exercises that are still pending
- `-s`, `--solved`: show only exercises that are done

An exercise counts as done when it no longer carries an `I AM NOT DONE`
comment; `list` does not compile anything. The list ends with a progress line
such as `Progress: You completed 12 / 80 exercises (15.00 %).`

## The course file

`info.toml` lists the exercises in order:

```toml
[[exercises]]
name = "intro1"
path = "exercises/intro/intro1.rs"
mode = "compile"
hint = "Remove the I AM NOT DONE comment to move on."
```

`mode` is one of `compile` (build and run the program), `test` (build and run
its tests) or `clippy` (build it and require a lint run without warnings; the
runner writes `exercises/clippy/Cargo.toml` for this).

From Python, `rustdrill.exercise.load_exercises("info.toml")` returns the
list of `Exercise` objects; `Exercise.state()` reports the context lines
around a pending marker and `Exercise.looks_done()` whether the marker is gone.

## Environment

Set `NO_EMOJI` to any value to replace emoji in messages with plain symbols.

## Reference solutions

The `rustdrill.solutions` package holds worked versions of the logic of
several exercises:

- `quizzes`: apple prices, a string transformer, report cards
- `persons`: building a `Person` from `"name,age"` text
- `errors`: name tags, token costs, positive non-zero integers
- `iterators`: capitalising words, exact division, factorial, progress counts
- `containers`: cons lists, copy-on-change absolute values, per-offset sums,
  planets sharing a sun, ice-cream options, a message-driven state
- `hashmaps`: fruit baskets and a goals table
- `basics`: conditionals, functions, strings, lists and a generic wrapper
- `structs`: orders, packages, licensing information, appending "Bar"

For example:

```python
from rustdrill.solutions.quizzes import calculate_price_of_apples

calculate_price_of_apples(41)  # 41
```

## What is not included

The package is only the runner and the reference solutions. The exercise
files and `info.toml` themselves are not shipped; point the runner at a
course directory that provides them. The reference solutions do not cover
every exercise: there are none for the colour conversions or for counting
bytes and characters.