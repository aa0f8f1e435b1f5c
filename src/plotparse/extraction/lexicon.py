"""Loaders for the society dictionary and alias table lexicon files."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ..config import get_settings
from .options import ParseOptions
from .resources import DEFAULT_ALIAS_TABLE, DEFAULT_SOCIETY_DICTIONARY

__all__ = [
    "SocietyEntry",
    "load_alias_table",
    "load_options",
    "load_society_dictionary",
    "load_society_entries",
    "render_society_dictionary",
]


@dataclass(frozen=True)
class SocietyEntry:
    """Stored society record as kept by the listing service (name, city, aliases)."""

    name: str
    city: Optional[str] = None
    aliases: Tuple[str, ...] = ()


def render_society_dictionary(entries: Iterable[SocietyEntry]) -> str:
    """Render society records as ``Canonical : alias1, alias2`` dictionary text."""

    lines: List[str] = []
    for entry in entries:
        name = (entry.name or "").strip()
        if not name:
            continue
        aliases = [alias.strip() for alias in entry.aliases if alias and alias.strip()]
        lines.append(f"{name} : {', '.join(aliases)}")
    return "\n".join(lines)


def load_society_entries(path: str | Path) -> List[SocietyEntry]:
    """Read a JSON list of ``{"name", "city", "aliases"}`` objects."""

    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError(f"Expected a list of societies at {path}, got {type(payload)!r}")
    entries: List[SocietyEntry] = []
    for item in payload:
        if not isinstance(item, Mapping):
            continue
        aliases = item.get("aliases") or []
        if not isinstance(aliases, (list, tuple)):
            aliases = []
        entries.append(
            SocietyEntry(
                name=str(item.get("name") or ""),
                city=item.get("city"),
                aliases=tuple(str(alias) for alias in aliases),
            )
        )
    return entries


def load_society_dictionary(path: str | Path | None = None) -> str:
    """Return dictionary text from ``path`` (``.txt`` or ``.json`` entries).

    Falls back to the built-in dictionary when the file does not exist.
    """

    dictionary_path = Path(path) if path is not None else get_settings().society_dictionary
    if not dictionary_path.exists():
        return DEFAULT_SOCIETY_DICTIONARY
    if dictionary_path.suffix.lower() == ".json":
        return render_society_dictionary(load_society_entries(dictionary_path))
    return dictionary_path.read_text(encoding="utf-8")


def load_alias_table(path: str | Path | None = None) -> Mapping[str, Any]:
    """Return the alias table stored as JSON at ``path`` (default when missing)."""

    table_path = Path(path) if path is not None else get_settings().alias_table
    if not table_path.exists():
        return DEFAULT_ALIAS_TABLE
    data = json.loads(table_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected dictionary at {table_path}, got {type(data)!r}")
    return data


def load_options(
    *,
    block_output_style: str = "title",
    societies_path: str | Path | None = None,
    aliases_path: str | Path | None = None,
    **overrides: Any,
) -> ParseOptions:
    """Build :class:`ParseOptions` from lexicon files resolved via settings."""

    payload: Dict[str, Any] = {
        "block_output_style": block_output_style,
        "society_dictionary": load_society_dictionary(societies_path),
        "alias_table": dict(load_alias_table(aliases_path)),
    }
    payload.update(overrides)
    return ParseOptions(**payload)
