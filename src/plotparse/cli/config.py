"""Utility commands to inspect plotparse resource paths."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

import typer

from ..config import ResourcePaths, get_settings

__all__ = ["app"]

app = typer.Typer(help="Inspect the lexicon and log paths plotparse resolves.", add_completion=False)


def _inventory(paths: ResourcePaths) -> Dict[str, Dict[str, str | bool]]:
    inventory: Dict[str, Dict[str, str | bool]] = {}
    for key, value in paths.as_dict().items():
        if not value:
            inventory[key] = {"path": "", "exists": False, "kind": "unset"}
            continue
        path = Path(value)
        if path.is_dir():
            kind = "directory"
        elif path.is_file():
            kind = "file"
        else:
            kind = "missing"
        inventory[key] = {"path": str(path), "exists": path.exists(), "kind": kind}
    return inventory


@app.command("paths")
def show_paths(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Alternative TOML/YAML configuration instead of environment variables.",
    ),
    refresh: bool = typer.Option(False, "--refresh", help="Ignore the cached settings and resolve them again."),
) -> None:
    """Print the resolved resource paths as JSON."""

    settings = get_settings(refresh=refresh, config_file=config_file)
    payload = {
        "config_source": str(config_file) if config_file else "environment",
        "paths": _inventory(settings),
    }
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
