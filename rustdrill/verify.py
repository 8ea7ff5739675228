"""Checking exercises in order and reporting the first that fails."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from rustdrill.exercise import (
    CompiledExercise,
    Exercise,
    ExerciseFailed,
    Mode,
)
from rustdrill.ui import bold, colored, no_emoji, success, warn

_BAR_WIDTH = 60


class VerificationFailed(Exception):
    """Raised by verify() with the first exercise that is not finished."""

    def __init__(self, exercise: Exercise):
        super().__init__(f"{exercise} is not finished")
        self.exercise = exercise


class _ProgressBar:
    def __init__(self, total: int, position: int):
        self.total = total
        self.position = position
        self._draw()

    def inc(self) -> None:
        self.position += 1
        self._draw()

    def _draw(self) -> None:
        if self.total:
            filled = min(_BAR_WIDTH * self.position // self.total, _BAR_WIDTH)
        else:
            filled = _BAR_WIDTH
        head = ">" if filled < _BAR_WIDTH else ""
        rest = "-" * (_BAR_WIDTH - filled - len(head))
        bar = colored("#" * filled, "green") + colored(head + rest, "red")
        print(f"Progress: [{bar}] {self.position}/{self.total}", file=sys.stderr)


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int] | None = None,
    verbose: bool = False,
) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first failure."""
    exercises = list(exercises)
    num_done, total = progress if progress is not None else (0, len(exercises))
    bar = _ProgressBar(total, num_done)
    for exercise in exercises:
        try:
            completed = _check(exercise, verbose)
        except ExerciseFailed:
            completed = False
        if not completed:
            raise VerificationFailed(exercise)
        bar.inc()


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the test harness; raise ExerciseFailed on failure."""
    _compile_and_test(exercise, interactive=False, verbose=verbose)


def _check(exercise: Exercise, verbose: bool) -> bool:
    match exercise.mode:
        case Mode.TEST:
            return _compile_and_test(exercise, interactive=True, verbose=verbose)
        case Mode.COMPILE:
            return _compile_and_run_interactively(exercise)
        case Mode.CLIPPY:
            return _compile_only(exercise)


def _compile(exercise: Exercise) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailed as err:
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        raise


def _compile_only(exercise: Exercise) -> bool:
    with _compile(exercise):
        pass
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _compile(exercise) as compiled:
        try:
            output = compiled.run()
        except ExerciseFailed as err:
            warn(f"Ran {exercise} with errors")
            print(err.output.stdout)
            print(err.output.stderr)
            raise
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with _compile(exercise) as compiled:
        try:
            output = compiled.run()
        except ExerciseFailed as err:
            warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(err.output.stdout)
            raise
    if verbose:
        print(output.stdout)
    if interactive:
        return prompt_for_completion(exercise, None)
    return True


def _separator() -> str:
    return bold("====================")


def prompt_for_completion(exercise: Exercise, prompt_output: str | None) -> bool:
    """Return True if the exercise is done; otherwise show where its marker is."""
    state = exercise.state()
    if state.done:
        return True

    match exercise.mode:
        case Mode.COMPILE:
            success(f"Successfully ran {exercise}!")
        case Mode.TEST:
            success(f"Successfully tested {exercise}!")
        case Mode.CLIPPY:
            success(f"Successfully compiled {exercise}!")

    plain = no_emoji()
    clippy_message = (
        "The code is compiling, and Clippy is happy!"
        if plain
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    message = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }[exercise.mode]

    print()
    print(f"~*~ {message} ~*~" if plain else f"🎉 🎉  {message} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(_separator())
        print(prompt_output)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(
        "or jump into the next one by removing the "
        f"{bold('`I AM NOT DONE`')} comment:"
    )
    print()
    for context_line in state.context:
        line = bold(context_line.line) if context_line.important else context_line.line
        number = bold(colored(f"{context_line.number:>2}", "blue"))
        print(f"{number} {colored('|', 'blue')}  {line}")
    return False