import pytest

from plotparse.extraction.parsers.price import PriceMatch, iter_price_candidates, parse_price, price_mention_spans


@pytest.mark.parametrize(
    "text, amount, raw",
    [
        ("Demand 85 Lac", 8_500_000, "85 Lac"),
        ("Price 1.2 Cr", 12_000_000, "1.2 Cr"),
        ("Plot # 12 5 Marla Demand 60 Lac", 6_000_000, "60 Lac"),
        ("Demand 95", 9_500_000, "95"),
        ("Asking 2.2 final, in cr", 22_000_000, "2.2"),
        ("Demand 12,500,000", 12_500_000, "12,500,000"),
        ("only 500k", 500_000, "500k"),
        ("1.5 million", 1_500_000, "1.5 million"),
        ("55 lakh negotiable", 5_500_000, "55 lakh"),
    ],
)
def test_parse_price(text: str, amount: int, raw: str) -> None:
    result = parse_price(text)
    assert result.amount == amount
    assert result.text == raw


def test_ties_prefer_larger_amount() -> None:
    assert parse_price("1 cr or 2 cr").amount == 20_000_000


def test_no_price() -> None:
    assert parse_price("DHA plot for sale") == PriceMatch()
    assert parse_price("") == PriceMatch()


def test_numbers_near_plot_mention_are_ignored() -> None:
    assert parse_price("Plot 45 available").amount is None


def test_size_unit_is_not_read_as_million() -> None:
    # "m" of "Marla" must not turn 10 into ten million.
    assert parse_price("10 Marla").amount is None


def test_unitless_long_numbers_are_penalised() -> None:
    candidates = list(iter_price_candidates("Demand 1,500,000"))
    assert len(candidates) == 1
    candidate = candidates[0]
    assert candidate.amount == 1_500_000
    assert candidate.score == pytest.approx(2.0 - 7 / 50 - 0.5)


def test_explicit_unit_outranks_bare_number() -> None:
    text = "Demand 85 Lac 0300-1234567"
    assert parse_price(text).amount == 8_500_000


def test_price_mention_spans_require_unit_or_prefix() -> None:
    text = "Street 12 Demand 85 lac 345"
    spans = list(price_mention_spans(text))
    assert [text[start:end] for start, end in spans] == ["Demand 85 lac"]


@pytest.mark.parametrize(
    "text",
    [
        "DHA Lahore 1 kanal plot for sale call 03001234567",
        "BTR 10 marla corner 0300-1234567",
        "DHA 1 kanal +923001234567 price 95",
        "contact 92 300 1234567 for details",
    ],
)
def test_phone_numbers_are_never_demands(text: str) -> None:
    assert parse_price(text) == PriceMatch()


def test_phone_digits_are_not_candidates_even_with_lakh_context() -> None:
    # "0300" would otherwise read as 300 lac.
    candidates = list(iter_price_candidates("5 marla 0300-1234567 demand 95 lac"))
    assert [candidate.amount for candidate in candidates] == [9_500_000]


def test_unitless_demand_next_to_phone() -> None:
    result = parse_price("Demand 95 call 03001234567")
    assert result.amount == 9_500_000
    assert result.text == "95"


def test_ungrouped_long_runs_are_not_prices() -> None:
    assert list(iter_price_candidates("ref 1500000")) == []
