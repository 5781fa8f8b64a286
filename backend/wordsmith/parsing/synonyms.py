"""Markdown sections of the synonym tool.

Sections are kept as markdown. The synonyms, usage notes and examples are
only pulled out for display and never stored on their own.
"""

from __future__ import annotations

import re
from typing import List, Optional

from wordsmith.models import SynonymSection, SynonymView


SECTION_BOUNDARY = re.compile(r"\n(?=## )")
HEADING_PATTERN = re.compile(r"^##\s*(.*)")
SYNONYM_SPLIT = re.compile(r", | and ")

SYNONYMS_LABEL = "**synonyms:**"
USAGE_LABEL = "**usage notes:**"
EXAMPLES_LABEL = "**examples:**"
DEFAULT_TITLE = "Synonym Analysis"


def split_sections(text: str) -> List[str]:
    """Split markdown into the ``## `` sections it contains, in order.

    Anything before the first heading is not a section and is dropped.
    """

    normalized = (text or "").replace("\r\n", "\n").strip()
    if not normalized:
        return []
    sections: List[str] = []
    for fragment in SECTION_BOUNDARY.split(normalized):
        section = fragment.strip()
        if section.startswith("## "):
            sections.append(section)
    return sections


def parse_synonyms(text: str) -> List[SynonymSection]:
    return [SynonymSection(markdown=section) for section in split_sections(text)]


def _extract_between(markdown: str, start: str, end: Optional[str] = None) -> str:
    lower = markdown.lower()
    start_idx = lower.find(start)
    if start_idx == -1:
        return ""
    begin = start_idx + len(start)
    end_idx = lower.find(end, begin) if end else -1
    if end_idx == -1:
        return markdown[begin:].strip()
    return markdown[begin:end_idx].strip()


def extract_synonym_view(section: SynonymSection | str) -> SynonymView:
    markdown = section.markdown if isinstance(section, SynonymSection) else section or ""
    heading = HEADING_PATTERN.match(markdown.strip())
    title = heading.group(1).strip() if heading and heading.group(1).strip() else DEFAULT_TITLE

    synonyms_text = _extract_between(markdown, SYNONYMS_LABEL, USAGE_LABEL)
    synonyms = [item.strip() for item in SYNONYM_SPLIT.split(synonyms_text) if item.strip()]

    return SynonymView(
        title=title,
        synonyms=synonyms,
        usage_notes=_extract_between(markdown, USAGE_LABEL, EXAMPLES_LABEL),
        examples=_extract_between(markdown, EXAMPLES_LABEL),
    )
