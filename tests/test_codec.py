import pytest

from adofai.codec import (
    Rgba,
    format_color,
    format_optional_vector,
    format_tag,
    format_vector,
    parse_bool,
    parse_color,
    parse_optional_vector,
    parse_tag,
    parse_vector,
)
from adofai.units import Vector2


def test_six_digit_colour_is_opaque():
    assert parse_color("FFFFFF") == Rgba(255, 255, 255, 255)
    assert parse_color("000000").a == 255


def test_eight_digit_colour_keeps_alpha():
    color = parse_color("12345600")
    assert color.a == 0
    assert color.r == 0x12 and color.g == 0x34 and color.b == 0x56


@pytest.mark.parametrize("text", ["AABBCC", "A1B2C3D4", "DEBB7B"])
def test_colour_round_trip(text):
    assert format_color(parse_color(text)) == text


def test_colour_lower_case_parses_and_writes_upper():
    assert format_color(parse_color("abcdef")) == "ABCDEF"


@pytest.mark.parametrize("bad", [5, None, "zz", "0xFF", "", "1FFFFFFFF"])
def test_colour_errors(bad):
    with pytest.raises(ValueError):
        parse_color(bad)


def test_parse_bool():
    assert parse_bool(True) is True
    assert parse_bool(False) is False
    assert parse_bool("Enabled") is True
    assert parse_bool("Disabled") is False


@pytest.mark.parametrize("bad", ["yes", 1, None, "enabled"])
def test_parse_bool_errors(bad):
    with pytest.raises(ValueError):
        parse_bool(bad)


def test_vector_round_trip():
    v = parse_vector([1, -2.5])
    assert v == Vector2(1.0, -2.5)
    assert format_vector(v) == [1.0, -2.5]


@pytest.mark.parametrize("bad", [[1], "12", [1, None], [True, 2]])
def test_vector_errors(bad):
    with pytest.raises(ValueError):
        parse_vector(bad)


def test_optional_vector_round_trip():
    for raw in ([None, 3.0], [2.0, None], [None, None], [1.0, 4.0]):
        assert format_optional_vector(parse_optional_vector(raw)) == raw


def test_optional_vector_rejects_strings():
    with pytest.raises(ValueError):
        parse_optional_vector(["a", None])


def test_tags():
    assert parse_tag("  one two\tthree ") == ["one", "two", "three"]
    assert parse_tag("") == []
    assert parse_tag(format_tag(["a", "b"])) == ["a", "b"]
    with pytest.raises(ValueError):
        parse_tag(["a"])