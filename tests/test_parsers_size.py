import pytest

from plotparse.extraction.parsers.size import (
    SizeMatch,
    dimension_key,
    parse_size,
    parse_size_dimension,
    parse_size_shorthand,
    parse_size_worded,
)


@pytest.mark.parametrize(
    "text, value, unit",
    [
        ("10 Marla plot in DHA", 10, "Marla"),
        ("1 kanal corner", 1, "Kanal"),
        ("7.5 marla", 7.5, "Marla"),
        ("120 sq yd bungalow", 120, "SqYd"),
        ("240 gaz", 240, "SqYd"),
        ("10m plot", 10, "Marla"),
        ("1 k house", 1, "Kanal"),
    ],
)
def test_parse_size(text: str, value, unit: str) -> None:
    result = parse_size(text)
    assert result.value == value
    assert result.unit == unit
    assert result.dimensions == ""


def test_worded_size_returns_integers() -> None:
    result = parse_size_worded("10 Marla")
    assert result == SizeMatch(value=10, unit="Marla")
    assert isinstance(result.value, int)


def test_known_dimension_maps_to_area() -> None:
    result = parse_size("25x50 plot")
    assert result == SizeMatch(value=5, unit="Marla", dimensions="25x50")


def test_dimension_separator_is_kept() -> None:
    result = parse_size_dimension("size 35*70")
    assert result == SizeMatch(value=10, unit="Marla", dimensions="35*70")


def test_unknown_dimension_keeps_raw_text() -> None:
    result = parse_size("40x80 plot")
    assert result.value is None
    assert result.unit == "40x80"
    assert result.dimensions == "40x80"


def test_shorthand_wins_over_dimension() -> None:
    result = parse_size("10m 35x70")
    assert result.value == 10
    assert result.dimensions == ""


def test_no_size() -> None:
    assert parse_size("plot for sale") == SizeMatch()
    assert parse_size_shorthand("10 Marla") is None


def test_dimension_key() -> None:
    assert dimension_key("025", "50") == "25x50"
