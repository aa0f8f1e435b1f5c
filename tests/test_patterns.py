import dataclasses

import pytest

from plotparse.extraction.patterns import DIMENSION_AREAS, PATTERNS


def test_pattern_library_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        PATTERNS.phone = PATTERNS.price  # type: ignore[misc]


def test_dimension_table_is_read_only() -> None:
    assert DIMENSION_AREAS["35x70"] == (10, "Marla")
    with pytest.raises(TypeError):
        DIMENSION_AREAS["10x10"] = (1, "Marla")  # type: ignore[index]


@pytest.mark.parametrize("text", ["10 marla", "10 Marla plot", "2 kanal"])
def test_size_words_never_match_currency_units(text: str) -> None:
    match = PATTERNS.price.search(text)
    assert match is not None
    assert match.group("unit") is None


def test_phone_pattern_rejects_embedded_numbers() -> None:
    assert PATTERNS.phone.search("id 1203001234567") is None


@pytest.mark.parametrize("text", ["03001234567", "+923001234567", "call 1234567"])
def test_price_numerals_never_span_long_digit_runs(text: str) -> None:
    assert PATTERNS.price.search(text) is None
