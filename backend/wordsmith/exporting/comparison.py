from __future__ import annotations

import logging
import re

from wordsmith.errors import FormatError
from wordsmith.models import ComparisonRecord


LOGGER = logging.getLogger(__name__)

TITLE = "Word Comparison Analysis"
SUMMARY_LABEL = "Key Difference:"
SEPARATOR = "---"
MISSING_SUMMARY = "No summary found."

SEPARATOR_LINE = re.compile(r"^[ \t]*---[ \t]*$", re.MULTILINE)


def serialize_comparison(record: ComparisonRecord) -> str:
    return f"{TITLE}\n\n{SUMMARY_LABEL}\n{record.summary}\n\n{SEPARATOR}\n\n{record.details}"


def import_comparison(text: str) -> ComparisonRecord:
    text = (text or "").replace("\r\n", "\n").replace("\r", "\n").lstrip("\ufeff")
    title_idx = text.find(TITLE)
    if title_idx == -1:
        raise FormatError(
            "Invalid file format. Please select a valid exported comparison file."
        )
    body = text[title_idx + len(TITLE):]

    separator = SEPARATOR_LINE.search(body)
    if separator is None:
        LOGGER.info("Comparison import without separator, keeping the body as details")
        return ComparisonRecord(summary=MISSING_SUMMARY, details=body.strip())

    head = body[:separator.start()]
    details = body[separator.end():].strip()
    _, label, summary = head.partition(SUMMARY_LABEL)
    summary = summary.strip() if label else head.strip()
    return ComparisonRecord(summary=summary or MISSING_SUMMARY, details=details)
