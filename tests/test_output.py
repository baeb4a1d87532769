import io

import pytest

from ftkit.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    out = io.StringIO()
    put_char("z", out)
    assert out.getvalue() == "z"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_put_char_rejects_non_single_character(bad):
    with pytest.raises(ValueError):
        put_char(bad, io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("hello world", out)
    assert out.getvalue() == "hello world"


def test_put_str_rejects_none():
    with pytest.raises(TypeError):
        put_str(None, io.StringIO())


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("line", out)
    assert out.getvalue() == "line\n"


def test_put_endl_of_empty_string():
    out = io.StringIO()
    put_endl("", out)
    assert out.getvalue() == "\n"


def test_put_nbr_minimum_int():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("n, text", [(0, "0"), (7, "7"), (42, "42"), (-18, "-18")])
def test_put_nbr_values(n, text):
    out = io.StringIO()
    put_nbr(n, out)
    assert out.getvalue() == text


def test_put_nbr_round_trips_through_int():
    for n in (-999999, -1, 10, 123456789, 2**40):
        out = io.StringIO()
        put_nbr(n, out)
        assert int(out.getvalue()) == n


def test_put_nbr_rejects_float():
    with pytest.raises(TypeError):
        put_nbr(1.5, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("to stdout")
    put_char("!")
    assert capsys.readouterr().out == "to stdout!"


def test_successive_writes_accumulate():
    out = io.StringIO()
    put_str("n=", out)
    put_nbr(5, out)
    put_endl("", out)
    assert out.getvalue() == "n=5\n"