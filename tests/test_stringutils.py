import datetime

import pytest

from ratekit.stringutils import (
    compress_whitespace,
    format_date,
    join,
    ltrim,
    parse_date,
    rtrim,
    split,
    trim,
    uppercase,
)


def test_split_basic():
    assert split("a,b,c", ",") == ["a", "b", "c"]


def test_split_keeps_trailing_and_leading_empties():
    assert split("a,", ",") == ["a", ""]
    assert split(",a", ",") == ["", "a"]


def test_split_empty_string():
    assert split("", ",") == []


def test_split_rejects_empty_separator():
    with pytest.raises(ValueError):
        split("abc", "")


@pytest.mark.parametrize("text", ["a,b,c", "x", "a,,b", "a,b,"])
def test_join_inverts_split(text):
    assert join(split(text, ","), ",") == text


def test_join_skips_separator_until_non_empty():
    assert join(["", "a"], ",") == "a"
    assert join([], ",") == ""


def test_trims():
    assert ltrim("  hi  ") == "hi  "
    assert rtrim("  hi \n") == "  hi"
    assert trim("\t hi \r\n") == "hi"
    assert trim("   ") == ""


def test_compress_whitespace_keeps_first_of_run():
    assert compress_whitespace("a   b\t\t c") == "a b\tc"
    assert compress_whitespace("plain") == "plain"


def test_parse_date():
    assert parse_date("15-Jan-2020") == datetime.date(2020, 1, 15)
    assert parse_date("3-dec-1999") == datetime.date(1999, 12, 3)


def test_format_date_pins_layout():
    assert format_date(datetime.date(2020, 1, 5)) == "5-Jan-2020"


@pytest.mark.parametrize(
    "value",
    [datetime.date(2021, m, d) for m, d in [(1, 1), (6, 30), (12, 31), (2, 28)]],
)
def test_date_round_trip(value):
    assert parse_date(format_date(value)) == value


def test_parse_date_unknown_month():
    with pytest.raises(ValueError):
        parse_date("1-Foo-2020")


def test_parse_date_malformed():
    with pytest.raises(ValueError):
        parse_date("2020/01/01")


def test_uppercase():
    assert uppercase("abc Def") == "ABC DEF"