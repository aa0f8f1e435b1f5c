import pytest

from plotparse.extraction.parsers.numbers import compact_number, count_digits, parse_amount


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("85", 85.0),
        ("1.5", 1.5),
        ("1,500,000", 1500000.0),
        ("12,500", 12500.0),
        ("1.500.000", 1500000.0),
        ("0300", 300.0),
        ("2.25", 2.25),
    ],
)
def test_parse_amount(raw: str, expected: float) -> None:
    assert parse_amount(raw) == pytest.approx(expected)


def test_parse_amount_invalid() -> None:
    with pytest.raises(ValueError):
        parse_amount("lac")


def test_compact_number() -> None:
    assert compact_number(10.0) == 10
    assert isinstance(compact_number(10.0), int)
    assert compact_number(7.5) == 7.5
    assert compact_number(None) is None


def test_count_digits() -> None:
    assert count_digits("1,500,000") == 7
    assert count_digits("1.5") == 2
