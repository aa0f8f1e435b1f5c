"""Built-in lexicon resources for the listing extractor."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

__all__ = ["DEFAULT_ALIAS_TABLE", "DEFAULT_SOCIETY_DICTIONARY"]

DEFAULT_SOCIETY_DICTIONARY = """\
Bahria Town Karachi : BTK, Bahria Karachi, BT Karachi
DHA Lahore : DHA LHR, Defence Lahore
Bahria Town Rawalpindi : BTR, Bahria Pindi, Bahria Rwp
Gulberg Islamabad : GI, Gulberg Isb
Multi Gardens B-17 : MG B-17, Multi Garden, MPCHS B-17, B-17
Faisal Hills : FH, FH{block}, FH{name}, Faisal Hills Taxila
"""

DEFAULT_ALIAS_TABLE: Mapping[str, Mapping[str, Tuple[str, ...]]] = MappingProxyType(
    {
        "Bahria Town Rawalpindi": MappingProxyType(
            {"Phase 7": ("BHT 7", "BT P7", "Bahria P7", "Bahria Town Phase 7")}
        ),
        "Faisal Hills": MappingProxyType(
            {"Executive": ("FH Executive", "FH Executive Block", "Executive Block")}
        ),
        "Multi Gardens B-17": MappingProxyType(
            {"Block F": ("B17 F", "Multi Garden F", "B-17 F")}
        ),
    }
)
