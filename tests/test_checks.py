import pytest

from bonzai import checks


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello", True),
        ("world", True),
        ("Hello", False),
        ("123", False),
        ("abc123", False),
        ("abcdEF", False),
        ("", False),
        ("abc-def", False),
        ("latinlower", True),
        ("ábc", False),
    ],
)
def test_all_latin_ascii_lower(text, expected):
    assert checks.all_latin_ascii_lower(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello", True),
        ("world", True),
        ("Hello", False),
        ("123", False),
        ("abc123", False),
        ("abcdEF", False),
        ("", False),
        ("abc-def", True),
        ("latinlower", True),
        ("ábc", False),
        ("-fail", False),
        ("its-all-fine", True),
        ("even-this-", False),
    ],
)
def test_all_latin_ascii_lower_with_dashes(text, expected):
    assert checks.all_latin_ascii_lower_with_dashes(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("HELLO", True),
        ("WORLD", True),
        ("Hello", False),
        ("123", False),
        ("abc123", False),
        ("abcdEF", False),
        ("", False),
        ("ABC-DEF", False),
        ("LATINLOWER", True),
        ("ÁBC", False),
    ],
)
def test_all_latin_ascii_upper(text, expected):
    assert checks.all_latin_ascii_upper(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("true", True),
        ("t", True),
        ("on", True),
        ("1", True),
        ("5", True),
        ("500", True),
        ("false", False),
        ("f", False),
        ("off", False),
        ("0", False),
        ("-1", False),
        ("-5", False),
        ("-500", False),
        ("", False),
        (" ", False),
        ("\t", False),
        ("\n", False),
        ("foo", False),
        ("f4g5g5", False),
        ("~:", False),
    ],
)
def test_truthy(text, expected):
    assert checks.truthy(text) is expected


def test_truthy_ignores_case_and_space():
    assert checks.truthy("  TRUE \n") is True
    assert checks.truthy(" On") is True


def test_truthy_rejects_out_of_range_integer():
    assert checks.truthy("99999999999999999999") is False


def test_started_by_explorer_is_false():
    assert checks.started_by_explorer() is False