import json
from pathlib import Path
from typing import Optional

import typer

from .._version import __version__
from .config import app as config_app
from .extract import app as extract_app
from .extract import build_options
from ..extraction.orchestrator import Orchestrator


__all__ = ["app", "run"]


app = typer.Typer(help="Extract structured listings from property classified messages", add_completion=False)


@app.callback(invoke_without_command=True)
def version_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show plotparse version and exit", is_eager=True),
) -> None:
    """Handle global options before any sub-command executes."""

    if version:
        typer.echo(f"plotparse {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


app.add_typer(extract_app, name="extract")
app.add_typer(config_app, name="config")


@app.command("parse")
def parse_command(
    text: str = typer.Argument(..., help='Message text, or "-" to read it from stdin'),
    block_style: str = typer.Option("title", "--block-style", help='"title" (Block F) or "letter" (F block)'),
    societies: Optional[Path] = typer.Option(
        None, "--societies", exists=True, dir_okay=False, help="Society dictionary (.txt lines or .json entries)"
    ),
    aliases: Optional[Path] = typer.Option(None, "--aliases", exists=True, dir_okay=False, help="Alias table JSON"),
    payload: bool = typer.Option(False, "--payload", help="Print the listing-store payload instead of the record"),
) -> None:
    """Parse a single message and print the extracted record as JSON."""

    if text == "-":
        text = typer.get_text_stream("stdin").read()
    record = Orchestrator(build_options(block_style, societies, aliases)).parse(text)
    body = record.to_listing_payload() if payload else record.as_dict()
    typer.echo(json.dumps(body, indent=2, ensure_ascii=False))


def run() -> None:
    """Entry point compatible with ``python -m plotparse.cli.main`` and console scripts."""

    from typer.main import get_command

    cli = get_command(app)
    cli()


if __name__ == "__main__":
    run()
