import datetime

import pytest

from sowascene.text import format_arg_count, get_time, split


def test_split_basic():
    assert split("a/b/c", "/") == ["a", "b", "c"]


def test_split_drops_empty_tail():
    assert split("a/b/", "/") == ["a", "b"]


def test_split_keeps_leading_and_inner_empty_tokens():
    assert split("/a//b", "/") == ["", "a", "", "b"]


def test_split_empty_text():
    assert split("", "/") == []


def test_split_without_delimiter_present():
    assert split("node", "/") == ["node"]


def test_split_multichar_delimiter():
    assert split("x::y::z", "::") == ["x", "y", "z"]


def test_split_join_round_trip():
    parts = ["root", "child", "leaf"]
    assert split("/".join(parts), "/") == parts


def test_split_empty_delimiter_raises():
    with pytest.raises(ValueError):
        split("abc", "")


@pytest.mark.parametrize("n", [0, 1, 4])
def test_format_arg_count_counts_placeholders(n):
    assert format_arg_count("value {} " * n) == n


def test_format_arg_count_counts_each_open_brace():
    assert format_arg_count("{{") == len("{{")


def test_get_time_default_format():
    before = datetime.date.today()
    result = get_time()
    after = datetime.date.today()
    assert result in {before.isoformat(), after.isoformat()}


def test_get_time_literal_pattern_passes_through():
    assert get_time("plain") == "plain"


def test_get_time_year_is_four_digits():
    before = datetime.date.today()
    result = get_time("%Y")
    after = datetime.date.today()
    assert result in {f"{before.year:04d}", f"{after.year:04d}"}