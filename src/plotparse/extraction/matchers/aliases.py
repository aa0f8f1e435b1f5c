"""Fallback matching against the nested society → phase/block alias table."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from ..resources import DEFAULT_ALIAS_TABLE

__all__ = ["AliasMatch", "match_aliases", "normalize_alias_table"]

LOGGER = logging.getLogger(__name__)

NormalizedAliasTable = Tuple[Tuple[str, Tuple[Tuple[str, Tuple[str, ...]], ...]], ...]


@dataclass(frozen=True)
class AliasMatch:
    society: str = ""
    phase_block: str = ""


def _patterns(value: Any) -> Tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(str(item) for item in value if str(item).strip())


def normalize_alias_table(table: Optional[Mapping[str, Any]]) -> NormalizedAliasTable:
    """Coerce an alias table into nested tuples, treating malformed entries as empty."""

    source = DEFAULT_ALIAS_TABLE if table is None else table
    normalized: List[Tuple[str, Tuple[Tuple[str, Tuple[str, ...]], ...]]] = []
    for society, phases in source.items():
        if not isinstance(phases, Mapping):
            LOGGER.debug("alias table entry for %r is not a mapping", society)
            phases = {}
        entries = tuple((str(label), _patterns(patterns)) for label, patterns in phases.items())
        normalized.append((str(society), entries))
    return tuple(normalized)


def match_aliases(text: str, table: Optional[Mapping[str, Any]] = None) -> AliasMatch:
    """Return the first society whose phase/block pattern (or own name) occurs in ``text``."""

    lowered = (text or "").lower()
    if not lowered:
        return AliasMatch()
    for society, phases in normalize_alias_table(table):
        for label, patterns in phases:
            if _contains_any(lowered, patterns):
                return AliasMatch(society=society, phase_block=label)
        if society and society.lower() in lowered:
            return AliasMatch(society=society)
    return AliasMatch()


def _contains_any(lowered: str, patterns: Sequence[str]) -> bool:
    return any(pattern.lower() in lowered for pattern in patterns)
