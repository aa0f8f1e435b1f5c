"""End-to-end tests for message parsing."""
import pytest

from plotparse.extraction import ListingFlags, Orchestrator, ParsedRecord, ParseOptions, parse_message

SCENARIO_A = "BTR Phase 7 Plot # 123 10 Marla Demand 85 Lac 0300-1234567 corner plot"
SCENARIO_B = "Multi Gardens B-17 Block F Plot 45 25x50 Price 1.2 Cr 03211234567"


def test_scenario_phase_listing() -> None:
    record = parse_message(SCENARIO_A)
    assert record.society == "Bahria Town Rawalpindi"
    assert record.phase_block == "Phase 7"
    assert record.plot_number == "123"
    assert record.size_value == 10
    assert record.size_unit == "Marla"
    assert record.demand_amount == 8_500_000
    assert record.demand_text == "85 Lac"
    assert record.phone_e164 == "+923001234567"
    assert "Corner" in record.notes
    assert record.flags == ListingFlags(corner=True)
    assert record.dimensions_text == ""


def test_scenario_dimension_listing() -> None:
    record = parse_message(SCENARIO_B)
    assert record.society == "Multi Gardens B-17"
    assert record.phase_block == "Block F"
    assert record.plot_number == "45"
    assert record.size_value == 5
    assert record.size_unit == "Marla"
    assert record.dimensions_text == "25x50"
    assert record.demand_amount == 12_000_000
    assert record.demand_text == "1.2 Cr"
    assert record.phone_e164 == "+923211234567"
    assert "Dimensions 25x50" in record.notes


def test_parsing_is_deterministic() -> None:
    assert parse_message(SCENARIO_A) == parse_message(SCENARIO_A)


@pytest.mark.parametrize("text", ["", "   \n\t", None])
def test_empty_input_yields_default_record(text) -> None:
    record = parse_message(text)
    assert record == ParsedRecord()
    assert record.size_value is None
    assert record.demand_amount is None


def test_non_string_input_is_coerced() -> None:
    record = parse_message(3001234567)
    assert isinstance(record, ParsedRecord)
    assert record.phone_e164 == "+923001234567"


def test_worded_size_is_resolved() -> None:
    record = parse_message("10 Marla plot in DHA")
    assert record.size_value == 10
    assert record.size_unit == "Marla"


def test_unknown_dimensions_keep_raw_text() -> None:
    record = parse_message("40x80 plot for sale")
    assert record.size_value is None
    assert record.size_unit == "40x80"
    assert record.dimensions_text == "40x80"
    assert record.notes == "Dimensions 40x80"


def test_letter_block_style_for_dictionary_block() -> None:
    options = ParseOptions(block_output_style="letter")
    record = parse_message("FHC 10 marla corner", options)
    assert record.society == "Faisal Hills"
    assert record.phase_block == "C block"


def test_title_block_style_for_dictionary_block() -> None:
    record = parse_message("FHC 10 marla corner")
    assert record.phase_block == "Block C"


def test_heuristic_block_ignores_letter_style() -> None:
    options = ParseOptions(blockOutputStyle="letter")
    record = parse_message("Block F plot 12", options)
    assert record.phase_block == "Block F"


def test_alias_table_fallback() -> None:
    record = parse_message("BHT 7 plot 10 marla demand 90 lac")
    assert record.society == "Bahria Town Rawalpindi"
    assert record.phase_block == "Phase 7"
    assert record.demand_amount == 9_000_000


def test_custom_society_dictionary() -> None:
    options = ParseOptions(society_dictionary="Capital Smart City : CSC")
    record = parse_message("CSC Overseas Block plot 10", options)
    assert record.society == "Capital Smart City"
    assert record.phase_block == "Overseas"
    assert record.plot_number == "10"


def test_custom_alias_table() -> None:
    options = ParseOptions(alias_table={"Capital Smart City": {"Overseas Prime": ["osp"]}})
    record = parse_message("OSP plot 12", options)
    assert record.society == "Capital Smart City"
    assert record.phase_block == "Overseas Prime"


def test_input_is_capped() -> None:
    text = "Plot 12 " + "x" * 40 + " 0300-1234567"
    options = ParseOptions(max_input_chars=20)
    record = Orchestrator(options).parse(text)
    assert record.plot_number == "12"
    assert record.phone_e164 == ""


def test_orchestrator_exposes_config() -> None:
    options = ParseOptions(block_output_style="letter")
    assert Orchestrator(options).config is options
    assert Orchestrator().config.block_output_style == "title"


def test_record_is_immutable() -> None:
    record = parse_message(SCENARIO_A)
    with pytest.raises(AttributeError):
        record.society = "other"  # type: ignore[misc]


def test_listing_payload() -> None:
    payload = parse_message(SCENARIO_B).to_listing_payload()
    assert payload["society_name"] == "Multi Gardens B-17"
    assert payload["plot_size_value"] == 5
    assert payload["demand_amount_pkr"] == 12_000_000
    assert payload["phone"] == "+923211234567"
    assert payload["attributes"]["dimensions"] == "25x50"
    assert payload["attributes"]["flags"] == {"corner": False, "park": False, "possession": False}

    empty = ParsedRecord().to_listing_payload()
    assert empty["society_name"] is None
    assert empty["notes"] is None
    assert empty["attributes"]["demand_text"] is None


def test_as_dict_is_json_ready() -> None:
    data = parse_message(SCENARIO_A).as_dict()
    assert data["flags"] == {"corner": True, "park": False, "possession": False}
    assert data["demand_amount"] == 8_500_000
    assert set(data) == {
        "society",
        "phase_block",
        "plot_number",
        "size_value",
        "size_unit",
        "demand_amount",
        "demand_text",
        "phone_e164",
        "notes",
        "flags",
        "dimensions_text",
    }


@pytest.mark.parametrize(
    "text",
    [
        "DHA Lahore 1 kanal plot for sale call 03001234567",
        "BTR 10 marla corner 0300-1234567",
        "DHA 1 kanal +923001234567 price 95",
    ],
)
def test_phone_number_is_not_reported_as_demand(text: str) -> None:
    record = parse_message(text)
    assert record.demand_amount is None
    assert record.demand_text == ""
    assert record.phone_e164.startswith("+923")
