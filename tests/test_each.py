import logging

import pytest

from bonzai import each


def test_do(capsys):
    each.do(["doe", "ray", "mi"], lambda s: print(s, end=""))
    print()
    funcs = [
        lambda: print("one", end=""),
        lambda: print("two", end=""),
        lambda: print("three", end=""),
    ]
    each.do(funcs, lambda f: f())
    assert capsys.readouterr().out == "doeraymi\nonetwothree"


def test_println_all(capsys):
    each.println_all(["doe", "ray", "mi"])
    each.println_all([False, True, True])
    assert capsys.readouterr().out == "doe\nray\nmi\nFalse\nTrue\nTrue\n"


def test_print_all(capsys):
    each.print_all(["doe", "ray", "mi"])
    each.print_all([False, True, True])
    assert capsys.readouterr().out == "doeraymiFalseTrueTrue"


def test_printf_all(capsys):
    each.printf_all(["doe", "ray", "mi"], "sing %s\n")
    assert capsys.readouterr().out == "sing doe\nsing ray\nsing mi\n"


def test_logf_all(caplog):
    caplog.set_level(logging.INFO)
    each.logf_all(["doe", "ray", "mi"], "sing %s\n")
    assert caplog.messages == ["sing doe", "sing ray", "sing mi"]


def test_log_all(caplog):
    caplog.set_level(logging.INFO)
    each.log_all(["doe", "ray", "mi"])
    assert caplog.messages == ["doe", "ray", "mi"]


def test_until_error_raised():
    seen = []

    def visit(item):
        seen.append(item)
        if item == "ray":
            raise ValueError("stop")

    with pytest.raises(ValueError, match="stop"):
        each.until_error(["doe", "ray", "mi"], visit)
    assert seen == ["doe", "ray"]


def test_until_error_returned():
    seen = []

    def visit(item):
        seen.append(item)
        return KeyError(item) if item == "doe" else None

    with pytest.raises(KeyError):
        each.until_error(["doe", "ray"], visit)
    assert seen == ["doe"]


def test_until_error_completes():
    seen = []
    each.until_error([1, 2, 3], seen.append)
    assert seen == [1, 2, 3]