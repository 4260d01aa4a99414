import io
import os
import signal
import subprocess
import sys

import pytest

from bonzai import run


@pytest.fixture(autouse=True)
def _reset_flags():
    saved = (run.DO_NOT_EXIT, run.ALLOW_PANIC)
    yield
    run.DO_NOT_EXIT, run.ALLOW_PANIC = saved


def test_sys_exec_noargs():
    with pytest.raises(ValueError, match="missing name of executable"):
        run.sys_exec()


def test_sys_exec_nocmd():
    with pytest.raises(FileNotFoundError):
        run.sys_exec("__inoexist")


def test_execute_noargs():
    with pytest.raises(ValueError, match="missing name of executable"):
        run.execute()


def test_execute_nocmd():
    with pytest.raises(FileNotFoundError):
        run.execute("__inoexist")


def test_execute_success():
    assert run.execute(sys.executable, "-c", "pass") == 0


def test_execute_failure():
    with pytest.raises(subprocess.CalledProcessError) as info:
        run.execute(sys.executable, "-c", "raise SystemExit(3)")
    assert info.value.returncode == 3


def test_out_captures_stdout():
    result = run.out(sys.executable, "-c", "print('hi')")
    assert result.strip() == "hi"


def test_out_noargs_and_missing():
    assert run.out() == ""
    assert run.out("__inoexist") == ""


def test_exe_name(monkeypatch):
    monkeypatch.setattr(sys, "argv", [os.path.join("some", "path", "prog")])
    assert run.exe_name() == "prog"


def test_exe_state_dirs(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path))
    monkeypatch.setattr(sys, "argv", ["prog"])
    assert run.exe_state_dir() == os.path.join(str(tmp_path), "prog")
    assert run.real_exe_state_dir() == os.path.join(str(tmp_path), "prog")


def test_executable_is_absolute_existing():
    path = run.executable()
    assert os.path.isabs(path)
    assert os.path.exists(path)
    assert run.real_exe_name() == os.path.basename(path)


def test_is_admin_false_when_user_unknown(monkeypatch):
    def fail():
        raise OSError("no user")

    monkeypatch.setattr(run.getpass, "getuser", fail)
    assert run.is_admin() is False


def test_shell_checks(monkeypatch):
    monkeypatch.setenv("SHELL", "/bin/bash")
    monkeypatch.delenv("FISH_VERSION", raising=False)
    monkeypatch.delenv("PSModulePath", raising=False)
    assert run.shell_is_bash() is True
    assert run.shell_is_zsh() is False
    assert run.shell_is_fish() is False
    assert run.shell_is_power_shell() is False
    monkeypatch.setenv("SHELL", "/usr/bin/zsh")
    monkeypatch.setenv("FISH_VERSION", "3.7")
    monkeypatch.setenv("PSModulePath", "x")
    assert run.shell_is_zsh() is True
    assert run.shell_is_bash() is False
    assert run.shell_is_fish() is True
    assert run.shell_is_power_shell() is True


@pytest.mark.parametrize(
    "line, expected",
    [
        ("", []),
        ("one two", ["one", "two"]),
        ("one  two ", ["one", "two", ""]),
        ("  lead", ["lead"]),
    ],
)
def test_args_from(line, expected):
    assert run.args_from(line) == expected


def test_args_or_in_joins_args():
    assert run.args_or_in(["a", "b", "c"]) == "a b c"


def test_args_or_in_reads_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("from stdin\n"))
    assert run.args_or_in([]) == "from stdin\n"


def test_file_or_in(tmp_path, monkeypatch):
    target = tmp_path / "f.txt"
    target.write_text("content", encoding="utf-8")
    assert run.file_or_in(str(target)) == "content"
    monkeypatch.setattr(sys, "stdin", io.StringIO("piped"))
    assert run.file_or_in("") == "piped"


def test_file_or_in_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        run.file_or_in(str(tmp_path / "nope"))


def test_trap_panic_exits():
    run.ALLOW_PANIC = False
    with run.trap_panic():
        words = run.args_from("one two")
    assert words == ["one", "two"]
    with pytest.raises(SystemExit) as info:
        with run.trap_panic():
            run.execute()
    assert info.value.code == 1


def test_trap_panic_allowed():
    run.ALLOW_PANIC = True
    with run.trap_panic():
        joined = run.args_or_in(["a", "b"])
    assert joined == "a b"
    with pytest.raises(ValueError) as info:
        with run.trap_panic():
            run.execute()
    assert str(info.value) == "missing name of executable"


def test_exit_error_string_exits(capsys):
    run.exit_on()
    with pytest.raises(SystemExit) as info:
        run.exit_error("bad %s", "thing")
    assert info.value.code == 1
    assert capsys.readouterr().err == "bad thing\n"


def test_exit_error_short_string(capsys):
    run.exit_off()
    run.exit_error("x")
    assert capsys.readouterr().err == "x"


def test_exit_error_exception(capsys):
    run.exit_off()
    run.exit_error(ValueError("  oops  "))
    assert capsys.readouterr().out == "oops\n"


def test_exit_error_requires_argument():
    with pytest.raises(ValueError):
        run.exit_error()


def test_exit_switches():
    run.exit_off()
    assert run.DO_NOT_EXIT is True
    run.exit_()
    run.exit_on()
    assert run.DO_NOT_EXIT is False
    with pytest.raises(SystemExit) as info:
        run.exit_()
    assert info.value.code == 0


def test_trap_calls_handler_once():
    calls = []
    original = signal.getsignal(signal.SIGINT)
    try:
        run.trap(lambda: calls.append(1), signal.SIGINT)
        signal.raise_signal(signal.SIGINT)
        signal.raise_signal(signal.SIGINT)
    finally:
        signal.signal(signal.SIGINT, original)
    assert calls == [1]


def test_trap_default_handler(capsys):
    run.exit_on()
    original = signal.getsignal(signal.SIGINT)
    try:
        run.trap(None, signal.SIGINT)
        with pytest.raises(SystemExit) as info:
            signal.raise_signal(signal.SIGINT)
    finally:
        signal.signal(signal.SIGINT, original)
    assert info.value.code == 0
    assert capsys.readouterr().out == "\b\b"