"""Configuration accepted by :func:`plotparse.extraction.parse_message`."""
from __future__ import annotations

from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .resources import DEFAULT_ALIAS_TABLE, DEFAULT_SOCIETY_DICTIONARY

__all__ = ["DEFAULT_MAX_INPUT_CHARS", "ParseOptions"]

DEFAULT_MAX_INPUT_CHARS = 5000


class ParseOptions(BaseModel):
    """Per-call extraction options; every field falls back to a built-in default."""

    block_output_style: Literal["title", "letter"] = Field(
        "title",
        alias="blockOutputStyle",
        description='"title" renders "Block F", "letter" renders "F block"',
    )
    society_dictionary: str = Field(
        DEFAULT_SOCIETY_DICTIONARY,
        alias="societyDictionarySource",
        description="Newline separated 'Canonical : alias1, alias2' text",
    )
    alias_table: Optional[Mapping[str, Any]] = Field(
        None,
        alias="aliasTableSource",
        description="society -> phase/block label -> list of patterns",
    )
    max_input_chars: int = Field(DEFAULT_MAX_INPUT_CHARS, ge=1, alias="maxInputChars")

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    @field_validator("block_output_style", mode="before")
    @classmethod
    def _style_lower(cls, value: Any) -> Any:
        if value is None:
            return "title"
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("society_dictionary", mode="before")
    @classmethod
    def _dictionary_default(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_SOCIETY_DICTIONARY
        return value

    @property
    def resolved_alias_table(self) -> Mapping[str, Any]:
        return DEFAULT_ALIAS_TABLE if self.alias_table is None else self.alias_table
