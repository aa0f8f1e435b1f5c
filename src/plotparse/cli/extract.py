"""CLI entrypoints for batch listing extraction."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple

import typer
from pydantic import ValidationError
from tqdm import tqdm

from ..config import get_settings
from ..extraction.lexicon import load_options
from ..extraction.options import ParseOptions
from ..extraction.orchestrator import Orchestrator
from ..utils.logging import configure_json_logger, flush_handlers, generate_trace_id, log_event, log_listing

__all__ = ["app", "build_options"]

app = typer.Typer(help="Listing extraction utilities", add_completion=False)


def build_options(
    block_style: str,
    societies: Optional[Path],
    aliases: Optional[Path],
) -> ParseOptions:
    """Resolve CLI flags into :class:`ParseOptions`, reporting bad values as usage errors."""

    try:
        return load_options(
            block_output_style=block_style,
            societies_path=societies,
            aliases_path=aliases,
        )
    except (ValidationError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc


def _iter_messages(path: Path, text_field: str, id_field: str) -> Iterator[Tuple[Any, str]]:
    with path.open("r", encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            stripped = line.strip()
            if not stripped:
                continue
            row: Any = None
            if stripped.startswith("{"):
                try:
                    row = json.loads(stripped)
                except json.JSONDecodeError:
                    row = None
            if isinstance(row, dict):
                yield row.get(id_field, line_number), str(row.get(text_field) or "")
            else:
                yield line_number, stripped


@app.command("batch")
def batch_command(
    input_path: Path = typer.Option(
        ..., "--input", exists=True, dir_okay=False, readable=True, help="JSONL (or plain text) file, one message per line"
    ),
    output_path: Path = typer.Option(..., "--output", dir_okay=False, help="JSONL file receiving one record per message"),
    text_field: str = typer.Option("text", "--text-field", help="JSON field holding the message text"),
    id_field: str = typer.Option("id", "--id-field", help="JSON field identifying the message"),
    block_style: str = typer.Option("title", "--block-style", help='"title" (Block F) or "letter" (F block)'),
    societies: Optional[Path] = typer.Option(
        None, "--societies", exists=True, dir_okay=False, help="Society dictionary (.txt lines or .json entries)"
    ),
    aliases: Optional[Path] = typer.Option(None, "--aliases", exists=True, dir_okay=False, help="Alias table JSON"),
    payload: bool = typer.Option(False, "--payload", help="Write listing-store payloads instead of records"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", dir_okay=False, help="JSONL event log"),
    log_level: str = typer.Option("info", "--log-level", help="Event log level (debug logs every parsed listing)"),
) -> None:
    """Parse every message of ``--input`` and write the records to ``--output``."""

    try:
        logger = configure_json_logger(log_file or get_settings().log_path, log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    trace_id = generate_trace_id()
    options = build_options(block_style, societies, aliases)
    orchestrator = Orchestrator(options)

    log_event(logger, "batch.start", trace_id=trace_id, input=str(input_path), block_style=options.block_output_style)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    stats: Dict[str, int] = {"messages": 0, "with_society": 0, "with_demand": 0}
    with output_path.open("w", encoding="utf-8") as out:
        for message_id, text in tqdm(_iter_messages(input_path, text_field, id_field), desc="parse", unit="msg", disable=None):
            record = orchestrator.parse(text)
            log_listing(logger, message_id, record, trace_id=trace_id)
            body = record.to_listing_payload() if payload else record.as_dict()
            out.write(json.dumps({"id": message_id, **body}, ensure_ascii=False) + "\n")
            stats["messages"] += 1
            stats["with_society"] += int(bool(record.society))
            stats["with_demand"] += int(record.demand_amount is not None)

    log_event(logger, "batch.completed", trace_id=trace_id, output=str(output_path), **stats)
    flush_handlers(logger)

    typer.echo(json.dumps({"output": str(output_path), **stats}, indent=2, ensure_ascii=False))
