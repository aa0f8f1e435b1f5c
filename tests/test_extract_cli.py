import json
from pathlib import Path

from typer.testing import CliRunner

from plotparse.cli.main import app

runner = CliRunner()


def _write_messages(path: Path) -> None:
    rows = [
        {"id": "m1", "text": "BTR Phase 7 Plot # 123 10 Marla Demand 85 Lac 0300-1234567 corner plot"},
        {"id": "m2", "text": "Multi Gardens B-17 Block F Plot 45 25x50 Price 1.2 Cr 03211234567"},
        {"id": "m3", "text": "nothing useful here"},
    ]
    with path.open("w", encoding="utf-8") as handle:
        for row in rows:
            handle.write(json.dumps(row) + "\n")
        handle.write("\n")


def test_batch_writes_records_and_events(tmp_path: Path) -> None:
    input_path = tmp_path / "messages.jsonl"
    output_path = tmp_path / "out" / "records.jsonl"
    log_path = tmp_path / "events.jsonl"
    _write_messages(input_path)

    result = runner.invoke(
        app,
        ["extract", "batch", "--input", str(input_path), "--output", str(output_path), "--log-file", str(log_path)],
    )
    assert result.exit_code == 0, result.stdout

    records = [json.loads(line) for line in output_path.read_text(encoding="utf-8").splitlines()]
    assert [record["id"] for record in records] == ["m1", "m2", "m3"]
    assert records[0]["society"] == "Bahria Town Rawalpindi"
    assert records[1]["dimensions_text"] == "25x50"
    assert records[2]["society"] == ""

    events = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines() if line.strip()]
    assert [event["event"] for event in events] == ["batch.start", "batch.completed"]
    assert events[1]["messages"] == 3
    assert events[1]["with_society"] == 2
    assert events[1]["with_demand"] == 2


def test_batch_plain_text_payload(tmp_path: Path) -> None:
    input_path = tmp_path / "messages.txt"
    input_path.write_text("Demand 85 lac DHA Lahore\nFHC 10 marla\n", encoding="utf-8")
    output_path = tmp_path / "payloads.jsonl"

    result = runner.invoke(
        app,
        ["extract", "batch", "--input", str(input_path), "--output", str(output_path), "--payload", "--block-style", "letter"],
    )
    assert result.exit_code == 0, result.stdout

    payloads = [json.loads(line) for line in output_path.read_text(encoding="utf-8").splitlines()]
    assert [payload["id"] for payload in payloads] == [1, 2]
    assert payloads[0]["society_name"] == "DHA Lahore"
    assert payloads[0]["demand_amount_pkr"] == 8_500_000
    assert payloads[1]["phase_block"] == "C block"


def test_batch_rejects_invalid_alias_table(tmp_path: Path) -> None:
    input_path = tmp_path / "messages.txt"
    input_path.write_text("FHC 10 marla\n", encoding="utf-8")
    aliases = tmp_path / "aliases.json"
    aliases.write_text("[]", encoding="utf-8")

    result = runner.invoke(
        app,
        ["extract", "batch", "--input", str(input_path), "--output", str(tmp_path / "out.jsonl"), "--aliases", str(aliases)],
    )
    assert result.exit_code != 0


def test_batch_debug_log_has_one_event_per_message(tmp_path: Path) -> None:
    input_path = tmp_path / "messages.jsonl"
    output_path = tmp_path / "records.jsonl"
    log_path = tmp_path / "events.jsonl"
    _write_messages(input_path)

    result = runner.invoke(
        app,
        [
            "extract",
            "batch",
            "--input",
            str(input_path),
            "--output",
            str(output_path),
            "--log-file",
            str(log_path),
            "--log-level",
            "debug",
        ],
    )
    assert result.exit_code == 0, result.stdout

    events = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines() if line.strip()]
    listings = [event for event in events if event["event"] == "listing.parsed"]
    assert [event["message_id"] for event in listings] == ["m1", "m2", "m3"]
    assert len({event["trace_id"] for event in listings}) == 1
    assert listings[1]["society"] == "Multi Gardens B-17"
    assert "society" in listings[2]["missing"]


def test_batch_rejects_unknown_log_level(tmp_path: Path) -> None:
    input_path = tmp_path / "messages.txt"
    input_path.write_text("FHC 10 marla\n", encoding="utf-8")

    result = runner.invoke(
        app,
        ["extract", "batch", "--input", str(input_path), "--output", str(tmp_path / "out.jsonl"), "--log-level", "chatty"],
    )
    assert result.exit_code != 0
