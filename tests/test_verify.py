import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from rustdrill.exercise import Exercise, ExerciseFailed, Mode
from rustdrill.verify import VerificationFailed, prompt_for_completion, test, verify

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


def _fake_run(compile_code=0, run_code=0, stdout=b"", stderr=b""):
    def fake(args, **kwargs):
        if args[0] in ("rustc", "cargo"):
            return subprocess.CompletedProcess(args, compile_code, b"", stderr)
        return subprocess.CompletedProcess(args, run_code, stdout, b"")

    return fake


@pytest.fixture(autouse=True)
def _in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NO_EMOJI", raising=False)


def _exercise(tmp_path, name, source, mode=Mode.COMPILE):
    path = Path(tmp_path) / f"{name}.rs"
    path.write_text(source)
    return Exercise(name=name, path=path, mode=mode, hint="")


def test_prompt_done_exercise_returns_true(tmp_path, capsys):
    exercise = _exercise(tmp_path, "finished_exercise", FINISHED)
    assert prompt_for_completion(exercise, None) is True
    assert capsys.readouterr().out == ""


def test_prompt_pending_returns_false_and_shows_context(tmp_path, capsys):
    exercise = _exercise(tmp_path, "pending_exercise", PENDING)
    assert prompt_for_completion(exercise, None) is False
    out = capsys.readouterr().out
    assert "// I AM NOT DONE" in out
    assert f"Successfully ran {exercise.path}!" in out
    assert "Output:" not in out


def test_prompt_shows_program_output(tmp_path, capsys):
    exercise = _exercise(tmp_path, "pending_exercise", PENDING)
    assert prompt_for_completion(exercise, "hello from binary") is False
    out = capsys.readouterr().out
    assert "Output:" in out
    assert "hello from binary" in out


def test_prompt_without_emoji(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    exercise = _exercise(tmp_path, "pending_test", PENDING, Mode.TEST)
    assert prompt_for_completion(exercise, None) is False
    out = capsys.readouterr().out
    assert "~*~ The code is compiling, and the tests pass! ~*~" in out
    assert f"Successfully tested {exercise.path}!" in out


def test_verify_all_done_reports_progress(tmp_path, capsys):
    first = _exercise(tmp_path, "one", FINISHED)
    second = _exercise(tmp_path, "two", FINISHED, Mode.TEST)
    with patch("subprocess.run", side_effect=_fake_run()) as runner:
        verify([first, second], (0, 2), False)
    assert "2/2" in capsys.readouterr().err
    programs = [call.args[0][0] for call in runner.call_args_list]
    assert programs.count("rustc") == 2


def test_verify_stops_at_pending_exercise(tmp_path):
    done = _exercise(tmp_path, "done", FINISHED)
    pending = _exercise(tmp_path, "pending", PENDING)
    later = _exercise(tmp_path, "later", FINISHED)
    with patch("subprocess.run", side_effect=_fake_run()) as runner:
        with pytest.raises(VerificationFailed) as excinfo:
            verify([done, pending, later], (0, 3), False)
    assert excinfo.value.exercise is pending
    compiled = [call.args[0] for call in runner.call_args_list if call.args[0][0] == "rustc"]
    assert all(str(later.path) not in args for args in compiled)


def test_verify_compile_failure_reports_stderr(tmp_path, capsys):
    broken = _exercise(tmp_path, "compFailure", "fn main() {\n    let\n}\n")
    fake = _fake_run(compile_code=1, stderr=b"error: expected pattern")
    with patch("subprocess.run", side_effect=fake):
        with pytest.raises(VerificationFailed) as excinfo:
            verify([broken], None, False)
    assert excinfo.value.exercise is broken
    out = capsys.readouterr().out
    assert "error: expected pattern" in out
    assert f"Compiling of {broken.path} failed!" in out


def test_verify_clippy_writes_manifest(tmp_path):
    (tmp_path / "exercises" / "clippy").mkdir(parents=True)
    exercise = _exercise(tmp_path, "clippy1", FINISHED, Mode.CLIPPY)
    with patch("subprocess.run", side_effect=_fake_run()) as runner:
        verify([exercise], None, False)
    manifest = (tmp_path / "exercises" / "clippy" / "Cargo.toml").read_text()
    assert 'name = "clippy1"' in manifest
    assert any(call.args[0][:2] == ["cargo", "clippy"] for call in runner.call_args_list)


def test_test_verbose_prints_output(tmp_path, capsys):
    exercise = _exercise(tmp_path, "testSuccess", FINISHED, Mode.TEST)
    fake = _fake_run(stdout=b"THIS TEST TOO SHALL PASS")
    with patch("subprocess.run", side_effect=fake) as runner:
        test(exercise, True)
    assert "THIS TEST TOO SHALL PASS" in capsys.readouterr().out
    assert runner.call_args_list[-1].args[0][-1] == "--show-output"


def test_test_quiet_hides_output(tmp_path, capsys):
    exercise = _exercise(tmp_path, "testSuccess", FINISHED, Mode.TEST)
    with patch("subprocess.run", side_effect=_fake_run(stdout=b"THIS TEST TOO SHALL PASS")):
        test(exercise, False)
    assert "THIS TEST TOO SHALL PASS" not in capsys.readouterr().out


def test_test_failure_raises(tmp_path, capsys):
    exercise = _exercise(tmp_path, "testNotPassed", FINISHED, Mode.TEST)
    fake = _fake_run(run_code=101, stdout=b"assertion failed: false")
    with patch("subprocess.run", side_effect=fake):
        with pytest.raises(ExerciseFailed) as excinfo:
            test(exercise, False)
    assert excinfo.value.output.stdout == "assertion failed: false"
    assert f"Testing of {exercise.path} failed!" in capsys.readouterr().out