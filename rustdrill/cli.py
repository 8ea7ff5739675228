"""Command-line interface: list, run, verify and watch exercises."""

from __future__ import annotations

import argparse
import os
import queue
import subprocess
import sys
import threading
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum, auto
from pathlib import Path

from rustdrill.exercise import Exercise, ExerciseFailed, load_exercises
from rustdrill.project import RustAnalyzerProject
from rustdrill.run import reset, run as run_exercise
from rustdrill.ui import no_emoji
from rustdrill.verify import VerificationFailed, verify

VERSION = "5.2.1"

WELCOME = """       welcome to...
                 _           _      _ _ _
  _ __ _   _ ___| |_ __| |_ __(_) | |
 | '__| | | / __| __/ _` | '__| | | |
 | |  | |_| \\__ \\ || (_| | |  | | | |
 |_|   \\__,_|___/\\__\\__,_|_|  |_|_|_|"""

DEFAULT_OUT = """Thanks for installing rustdrill!

New here? No problem, the exercises are written with beginners in mind.
A few notes on how things work before you start:

1. You learn by solving exercises. Each one has a mistake in it: usually a
   compile error, sometimes a logic error that makes its tests fail. Your job
   is to find the mistake and fix it. Once the exercise compiles and passes,
   you can move on to the next one.
2. Watch mode (recommended) starts with the first exercise and re-checks it
   whenever you save a file. An error message right after starting is
   expected: it is the exercise you are meant to solve, so open the file in
   your editor and start investigating.
3. Stuck? Type 'hint' in watch mode, or run `rustdrill hint exercise_name`.
4. To get editor support for the exercises, run `rustdrill lsp` to generate a
   rust-project.json file for rust-analyzer.

Ready? Run `rustdrill watch` to get the first exercise, and keep your editor
open!"""

FINISH_LINE = """+----------------------------------------------------+
|          You made it to the finish line!           |
+----------------------------------------------------+

We hope you enjoyed working through all of the exercises!
If you found problems along the way, please report them,
and consider contributing exercises of your own."""

_WATCH_HELP = """Commands available to you in watch mode:
  hint  - prints the current exercise's hint
  clear - clears the screen
  quit  - quits watch mode
  help  - displays this help message

Watch mode automatically re-evaluates the current exercise
when you edit a file's contents."""

_NAMED_COMMANDS = ("run", "reset", "hint")


class WatchStatus(Enum):
    """How watch mode ended."""

    FINISHED = auto()
    UNFINISHED = auto()


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise _UsageError(f"{self.prog}: error: {message}")


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="rustdrill",
        description="Small exercises to get you used to reading and writing Rust code",
    )
    parser.add_argument(
        "--nocapture", action="store_true", help="show outputs from the test exercises"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="show the executable version"
    )
    sub = parser.add_subparsers(dest="command", parser_class=_Parser)
    sub.add_parser("verify", help="verify all exercises in the recommended order")
    sub.add_parser("watch", help="rerun `verify` when files are edited")
    for name, text in (
        ("run", "run or test a single exercise"),
        ("reset", 'reset a single exercise using "git stash -- <filename>"'),
        ("hint", "show the hint for the given exercise"),
    ):
        command = sub.add_parser(name, help=text)
        command.add_argument("name", nargs="?", help="the name of the exercise")
    listing = sub.add_parser("list", help="list the available exercises")
    listing.add_argument(
        "-p", "--paths", action="store_true", help="show only the paths of the exercises"
    )
    listing.add_argument(
        "-n", "--names", action="store_true", help="show only the names of the exercises"
    )
    listing.add_argument(
        "-f",
        "--filter",
        help="comma separated patterns to match exercise names or paths",
    )
    listing.add_argument(
        "-u", "--unsolved", action="store_true", help="show only unsolved exercises"
    )
    listing.add_argument(
        "-s", "--solved", action="store_true", help="show only solved exercises"
    )
    sub.add_parser("lsp", help="enable rust-analyzer for the exercises")
    return parser


def rustc_exists() -> bool:
    """Return True if ``rustc --version`` runs successfully."""
    try:
        result = subprocess.run(["rustc", "--version"], stdout=subprocess.DEVNULL)
    except OSError:
        return False
    return result.returncode == 0


def find_exercise(name: str, exercises: Sequence[Exercise]) -> Exercise:
    """Find an exercise by name, or the first unfinished one for ``next``.

    Raises LookupError with a message for the user when there is none.
    """
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise LookupError(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise LookupError(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Sequence[Exercise],
    paths: bool = False,
    names: bool = False,
    filters: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> Iterator[str]:
    """Yield the lines of the exercise listing, ending with a progress line."""
    if not paths and not names:
        yield f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}"
    patterns = [f for f in (filters or "").lower().split(",") if f.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        matches = any(p in exercise.name or p in fname for p in patterns)
        done = exercise.looks_done()
        if done:
            done_count += 1
        status = "Done" if done else "Pending"
        wanted = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if wanted and (matches or filters is None):
            if paths:
                yield fname
            elif names:
                yield exercise.name
            else:
                yield f"{exercise.name:<17}\t{fname:<46}\t{status:<7}"
    total = len(exercises)
    percentage = done_count / total * 100.0 if total else float("nan")
    yield (
        f"Progress: You completed {done_count} / {total} exercises "
        f"({percentage:.2f} %)."
    )


class _SharedHint:
    def __init__(self, hint: str):
        self._lock = threading.Lock()
        self._hint = hint

    def get(self) -> str:
        with self._lock:
            return self._hint

    def set(self, hint: str) -> None:
        with self._lock:
            self._hint = hint


def _watch_shell(hint: _SharedHint, should_quit: threading.Event) -> None:
    while True:
        try:
            line = sys.stdin.readline()
        except OSError as err:
            print(f"error reading command: {err}")
            continue
        if not line:
            return
        command = line.strip()
        if command == "hint":
            print(hint.get())
        elif command == "clear":
            print("\x1b[2J\x1b[1;1H")
        elif command == "quit":
            should_quit.set()
            print("Bye!")
        elif command == "help":
            print(_WATCH_HELP)
        else:
            print(f"unknown command: {command}")


def _clear_screen() -> None:
    print("\x1bc")


def _ends_with(path: Path, suffix: Path) -> bool:
    parts = Path(suffix).parts
    return bool(parts) and path.parts[-len(parts):] == parts


def watch(exercises: Sequence[Exercise], verbose: bool = False) -> WatchStatus:
    """Verify the exercises, then re-verify whenever an exercise file changes."""
    from watchdog.events import FileSystemEventHandler
    from watchdog.observers import Observer

    changes: queue.Queue[Path] = queue.Queue()

    class _Handler(FileSystemEventHandler):
        def _record(self, event) -> None:
            if not event.is_directory:
                changes.put(Path(os.fsdecode(event.src_path)))

        on_created = _record
        on_modified = _record

    observer = Observer()
    observer.schedule(_Handler(), "./exercises", recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, (0, len(exercises)), verbose)
        except VerificationFailed as err:
            hint = _SharedHint(err.exercise.hint)
        else:
            return WatchStatus.FINISHED

        should_quit = threading.Event()
        print(
            "Welcome to watch mode! You can type 'help' to get an overview "
            "of the commands you can use here."
        )
        threading.Thread(
            target=_watch_shell, args=(hint, should_quit), daemon=True
        ).start()

        while not should_quit.is_set():
            try:
                first = changes.get(timeout=1)
            except queue.Empty:
                continue
            batch = [first]
            while True:
                try:
                    batch.append(changes.get_nowait())
                except queue.Empty:
                    break
            for changed in dict.fromkeys(batch):
                if changed.suffix != ".rs" or not changed.exists():
                    continue
                filepath = changed.resolve()
                current = [e for e in exercises if _ends_with(filepath, e.path)][:1]
                others = [
                    e
                    for e in exercises
                    if not e.looks_done() and not _ends_with(filepath, e.path)
                ]
                num_done = sum(1 for e in exercises if e.looks_done())
                _clear_screen()
                try:
                    verify(current + others, (num_done, len(exercises)), verbose)
                except VerificationFailed as err:
                    hint.set(err.exercise.hint)
                else:
                    return WatchStatus.FINISHED
        return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


def _print_lines(lines: Iterable[str]) -> int:
    try:
        for line in lines:
            sys.stdout.write(line + "\n")
        sys.stdout.flush()
    except BrokenPipeError:
        return 0
    except OSError:
        return 1
    return 0


def _lsp() -> int:
    project = RustAnalyzerProject()
    try:
        project.get_sysroot_src()
    except OSError:
        print("Couldn't find toolchain path, do you have `rustc` installed?")
        return 1
    try:
        project.exercises_to_json(".")
    except OSError:
        print("Couldn't parse the exercise files")
        return 1
    if not project.crates:
        print("Failed find any exercises, make sure you're in the `rustdrill` folder")
        return 0
    try:
        project.write_to_disk()
    except OSError:
        print("Failed to write rust-project.json to disk for rust-analyzer")
        return 0
    print("Successfully generated rust-project.json")
    print("rust-analyzer will now parse exercises, restart your language server or editor")
    return 0


def _watch_command(exercises: Sequence[Exercise], verbose: bool) -> int:
    try:
        status = watch(exercises, verbose)
    except OSError as err:
        print(f"Error: Could not watch your progress. Error message was {err!r}.")
        print(
            "Most likely you've run out of disk space or your "
            "'inotify limit' has been reached."
        )
        return 1
    if status is WatchStatus.FINISHED:
        emoji = "★" if no_emoji() else "🎉"
        print(f"{emoji} All exercises completed! {emoji}")
        print(f"\n{FINISH_LINE}\n")
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `rustdrill watch` again"
        )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except _UsageError as err:
        print(err, file=sys.stderr)
        return 1

    if args.command in _NAMED_COMMANDS and args.name is None:
        print("Required positional arguments not provided:\n    name", file=sys.stderr)
        return 1

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command is None:
        print(f"\n{WELCOME}\n")

    if not Path("info.toml").exists():
        print(f"{sys.argv[0]} must be run from the rustdrill directory")
        print("Try `cd rustdrill/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises("info.toml")
    verbose = args.nocapture

    if args.command is None:
        print(f"{DEFAULT_OUT}\n")
        return 0

    match args.command:
        case "list":
            return _print_lines(
                list_exercises(
                    exercises,
                    paths=args.paths,
                    names=args.names,
                    filters=args.filter,
                    unsolved=args.unsolved,
                    solved=args.solved,
                )
            )
        case "run" | "reset" | "hint":
            try:
                exercise = find_exercise(args.name, exercises)
            except LookupError as err:
                print(err.args[0])
                return 1
            if args.command == "hint":
                print(exercise.hint)
                return 0
            if args.command == "reset":
                try:
                    reset(exercise)
                except OSError:
                    return 1
                return 0
            try:
                run_exercise(exercise, verbose)
            except ExerciseFailed:
                return 1
            return 0
        case "verify":
            try:
                verify(exercises, (0, len(exercises)), verbose)
            except VerificationFailed:
                return 1
            return 0
        case "lsp":
            return _lsp()
        case "watch":
            return _watch_command(exercises, verbose)
    return 1