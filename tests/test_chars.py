import string

import pytest

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("code", range(128))
def test_predicates_agree_with_ascii_tables(code):
    ch = chr(code)
    assert is_alpha(ch) == (ch in string.ascii_letters)
    assert is_digit(ch) == (ch in string.digits)
    assert is_alnum(ch) == (ch in string.ascii_letters + string.digits)
    assert is_print(code) == (ch in string.printable and ch not in "\t\n\r\x0b\x0c")
    assert is_ascii(code) is True


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(32) is True
    assert is_print(126) is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_alnum("é") is False
    assert is_digit("٣") is False


def test_case_conversion_of_letters():
    assert to_lower("A") == "a"
    assert to_upper("z") == "Z"
    assert to_lower(ord("Q")) == ord("q")
    assert to_upper(ord("q")) == ord("Q")


@pytest.mark.parametrize("ch", list(string.punctuation + string.digits + " "))
def test_case_conversion_leaves_other_characters(ch):
    assert to_lower(ch) == ch
    assert to_upper(ch) == ch


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_case_round_trip(ch):
    assert to_upper(to_lower(ch)) == ch.upper()
    assert to_lower(to_upper(ch)) == ch.lower()


def test_integer_input_keeps_integer_output():
    result = to_lower(200)
    assert result == 200
    assert isinstance(result, int)


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_empty_string_rejected():
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(3.5)