from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple


DEFINITION_PLACEHOLDER = "Definition not available."
IMPORTED_DEFINITION_PLACEHOLDER = "(imported definition)"
COMPARISON_NOTICE = "Could not automatically summarize the key difference."

# How a definition block was chosen for its term.
MATCH_CONTENT = "content"
MATCH_POSITION = "position"
MATCH_RAW = "raw"
MATCH_EMPTY = "empty"
MATCH_IMPORTED = "imported"


@dataclass(slots=True)
class DefinitionRecord:
    word: str
    part_of_speech: str = ""
    level: str = ""
    uk_phonetic: str = ""
    us_phonetic: str = ""
    definition: str = DEFINITION_PLACEHOLDER
    examples: List[str] = field(default_factory=list)
    match: str = field(default=MATCH_CONTENT, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class ComparisonRecord:
    summary: str
    details: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class SynonymSection:
    """One markdown section, starting with a ``## `` heading, for one word."""

    markdown: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class SynonymView:
    title: str
    synonyms: List[str] = field(default_factory=list)
    usage_notes: str = ""
    examples: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class EtymologyRecord:
    word: str
    language_of_origin: str = ""
    root_word: str = ""
    first_known_use: str = ""
    explanation: str = ""
    timeline: List[Tuple[str, str]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["timeline"] = [
            {"period": period, "change": change} for period, change in self.timeline
        ]
        return data


@dataclass(slots=True)
class DefinitionImport:
    records: List[DefinitionRecord]
    grammar: str
    generated_at: Optional[str] = None
    version: Optional[str] = None
