import string

import pytest

from minitalk.charclass import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)


@pytest.mark.parametrize("code", range(128))
def test_isalpha_matches_ascii_letters(code):
    assert isalpha(code) == (chr(code) in string.ascii_letters)
    assert isalpha(chr(code)) == isalpha(code)


@pytest.mark.parametrize("code", range(128))
def test_isdigit_matches_ascii_digits(code):
    assert isdigit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", range(-5, 300))
def test_isalnum_is_letter_or_digit(code):
    assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_non_ascii_codes_are_not_letters_or_digits():
    assert not any(isalnum(code) for code in range(128, 512))
    assert not isalpha("é")


@pytest.mark.parametrize(
    "code, expected",
    [(-1, False), (0, True), (127, True), (128, False)],
)
def test_isascii_bounds(code, expected):
    assert isascii(code) is expected


@pytest.mark.parametrize("code", range(128))
def test_isprint_matches_printable_ascii(code):
    assert isprint(code) == chr(code).isprintable()


def test_isprint_rejects_outside_ascii():
    assert not isprint(-1)
    assert not isprint(200)


def test_toupper_and_tolower_on_strings():
    assert toupper("a") == "A"
    assert tolower("Z") == "z"


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_case_round_trip(letter):
    upper = toupper(letter)
    assert upper == letter.upper()
    assert tolower(upper) == letter


@pytest.mark.parametrize("code", [0, 48, 64, 91, 96, 123, 200, -3])
def test_case_conversion_leaves_non_letters(code):
    assert toupper(code) == code
    assert tolower(code) == code


def test_case_conversion_keeps_kind():
    assert toupper(ord("q")) == ord("Q")
    assert tolower(ord("Q")) == ord("q")


@pytest.mark.parametrize("bad", ["", "ab"])
def test_multi_character_string_rejected(bad):
    with pytest.raises(ValueError):
        isalpha(bad)
    with pytest.raises(ValueError):
        toupper(bad)


def test_non_character_rejected():
    with pytest.raises(TypeError):
        isdigit(3.5)