"""Society dictionary parsing and alias-based society resolution."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

__all__ = [
    "SocietyDefinition",
    "SocietyMatch",
    "SocietyMatcher",
    "find_society",
    "get_society_matcher",
    "parse_society_dictionary",
]

LOGGER = logging.getLogger(__name__)

_BLOCK_PLACEHOLDER = re.compile(r"\{block\}", re.IGNORECASE)
_NAME_PLACEHOLDER = re.compile(r"\{name\}", re.IGNORECASE)
_LINE_SPLIT = re.compile(r"\r?\n")


@dataclass(frozen=True)
class SocietyDefinition:
    """Canonical society name and every surface form it is known by."""

    canonical: str
    aliases: Tuple[str, ...]


@dataclass(frozen=True)
class SocietyMatch:
    society: str = ""
    block: str = ""


@lru_cache(maxsize=32)
def parse_society_dictionary(source: str) -> Tuple[SocietyDefinition, ...]:
    """Parse ``Canonical : alias1, alias2`` lines into society definitions.

    Blank lines, lines without ``:`` and lines with an empty canonical name are
    skipped. The canonical name always belongs to its own alias list, and
    repeated canonical names are merged in first-seen order.
    """

    merged: Dict[str, List[str]] = {}
    for line_number, line in enumerate(_LINE_SPLIT.split(source or ""), start=1):
        stripped = line.strip()
        if not stripped:
            continue
        canonical, separator, right = stripped.partition(":")
        canonical = canonical.strip()
        if not separator or not canonical:
            LOGGER.debug("skipping malformed society line %d: %r", line_number, stripped)
            continue
        aliases = merged.setdefault(canonical, [])
        for alias in right.split(","):
            alias = alias.strip()
            if alias and alias not in aliases:
                aliases.append(alias)
        if canonical not in aliases:
            aliases.append(canonical)
    return tuple(SocietyDefinition(canonical=name, aliases=tuple(aliases)) for name, aliases in merged.items())


@dataclass(frozen=True)
class _AliasRule:
    canonical: str
    pattern: re.Pattern[str]
    captures_block: bool


def _compile_alias(canonical: str, alias: str) -> Optional[_AliasRule]:
    if _BLOCK_PLACEHOLDER.search(alias):
        base = _BLOCK_PLACEHOLDER.sub("", alias, count=1)
        if not base.strip():
            return None
        pattern = re.compile(rf"(?<!\w){re.escape(base)}([A-Z])\b", re.IGNORECASE)
        return _AliasRule(canonical, pattern, captures_block=True)
    if _NAME_PLACEHOLDER.search(alias):
        base = _NAME_PLACEHOLDER.sub("", alias, count=1)
        if not base.strip():
            return None
        pattern = re.compile(rf"(?<!\w){re.escape(base)}\s+([A-Za-z]+)\b", re.IGNORECASE)
        return _AliasRule(canonical, pattern, captures_block=True)
    if len(alias) < 2:
        return None
    pattern = re.compile(rf"(?<!\w){re.escape(alias)}(?!\w)", re.IGNORECASE)
    return _AliasRule(canonical, pattern, captures_block=False)


class SocietyMatcher:
    """Resolve a society by the first matching alias in dictionary order."""

    def __init__(self, definitions: Tuple[SocietyDefinition, ...]) -> None:
        self._definitions = definitions
        rules: List[_AliasRule] = []
        for definition in definitions:
            for alias in definition.aliases:
                rule = _compile_alias(definition.canonical, alias)
                if rule is not None:
                    rules.append(rule)
        self._rules = tuple(rules)

    @property
    def definitions(self) -> Tuple[SocietyDefinition, ...]:
        return self._definitions

    def find(self, text: str) -> SocietyMatch:
        if not text:
            return SocietyMatch()
        for rule in self._rules:
            match = rule.pattern.search(text)
            if match is None:
                continue
            block = ""
            if rule.captures_block:
                block = match.group(1)
                if len(block) == 1:
                    block = block.upper()
            return SocietyMatch(society=rule.canonical, block=block)
        return SocietyMatch()


@lru_cache(maxsize=32)
def get_society_matcher(source: str) -> SocietyMatcher:
    """Return a matcher for ``source``, cached by dictionary text."""

    return SocietyMatcher(parse_society_dictionary(source))


def find_society(text: str, source: str) -> SocietyMatch:
    return get_society_matcher(source).find(text)
