from __future__ import annotations

import re
from typing import Iterable, List

from wordsmith.errors import FormatError
from wordsmith.models import SynonymSection
from wordsmith.parsing.synonyms import split_sections


TITLE = "Word Synonym Analysis"
SECTION_SEPARATOR = "\n\n---\n\n"

TRAILING_SEPARATOR = re.compile(r"(?:\n[ \t]*---[ \t]*)+\s*$")


def serialize_synonyms(sections: Iterable[SynonymSection]) -> str:
    body = SECTION_SEPARATOR.join(section.markdown.strip() for section in sections)
    return f"{TITLE}\n\n{body}"


def import_synonyms(text: str) -> List[SynonymSection]:
    text = (text or "").replace("\r\n", "\n").replace("\r", "\n").lstrip("\ufeff")
    if TITLE not in text:
        raise FormatError(
            "Invalid file format. Please select a valid exported synonym file."
        )

    sections = [
        SynonymSection(markdown=TRAILING_SEPARATOR.sub("", section).strip())
        for section in split_sections(text)
    ]
    if not sections:
        raise FormatError("No valid content found in the file.")
    return sections
