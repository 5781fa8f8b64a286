"""Line grammar of the definitions export file.

The file is a sequence of ``Key: value`` lines grouped into entries by the
``---ENTRY---`` delimiter, with examples fenced between ``<<EXAMPLES>>`` and
``<</EXAMPLES>>``. Writer and reader share the label table below, so every
line the writer emits is classified back to the field it came from.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List


TITLE = "Word Definitions"
FORMAT_VERSION = "2"
ENTRY_DELIMITER = "---ENTRY---"
EXAMPLES_OPEN = "<<EXAMPLES>>"
EXAMPLES_CLOSE = "<</EXAMPLES>>"
BULLET_PREFIX = "- "

WORD = "word"
PART_OF_SPEECH = "part_of_speech"
LEVEL = "level"
UK = "uk"
US = "us"
DEFINITION = "definition"
EXAMPLES = "examples"
GENERATED_AT = "generated_at"
VERSION = "version"

ENTRY = "entry"
FENCE_OPEN = "fence_open"
FENCE_CLOSE = "fence_close"
BULLET = "bullet"
TEXT = "text"

# Label written for each field, and the pattern that reads it back.
LABELS = {
    WORD: "Word",
    PART_OF_SPEECH: "PartOfSpeech",
    LEVEL: "Level",
    UK: "UK",
    US: "US",
    DEFINITION: "Definition",
    EXAMPLES: "Examples",
    GENERATED_AT: "GeneratedAt",
    VERSION: "Version",
}

_LABEL_PATTERNS = [
    (WORD, re.compile(r"^word\s*:\s*(.*)$", re.IGNORECASE)),
    (PART_OF_SPEECH, re.compile(r"^part\s*of\s*speech\s*:\s*(.*)$", re.IGNORECASE)),
    (LEVEL, re.compile(r"^level\s*:\s*(.*)$", re.IGNORECASE)),
    (UK, re.compile(r"^uk\s*:\s*(.*)$", re.IGNORECASE)),
    (US, re.compile(r"^us\s*:\s*(.*)$", re.IGNORECASE)),
    (DEFINITION, re.compile(r"^definition\s*:\s*(.*)$", re.IGNORECASE)),
    (EXAMPLES, re.compile(r"^examples\s*:\s*(.*)$", re.IGNORECASE)),
    (GENERATED_AT, re.compile(r"^generated\s*at\s*:\s*(.*)$", re.IGNORECASE)),
    (VERSION, re.compile(r"^version\s*:\s*(.*)$", re.IGNORECASE)),
]
_FENCE_OPEN_PATTERN = re.compile(r"^<<EXAMPLES>>$", re.IGNORECASE)
_FENCE_CLOSE_PATTERN = re.compile(r"^<<?/EXAMPLES>>$", re.IGNORECASE)


@dataclass(frozen=True)
class Token:
    kind: str
    value: str = ""
    line: str = ""


def classify_line(line: str) -> Token:
    stripped = line.strip()
    if stripped == ENTRY_DELIMITER:
        return Token(ENTRY, line=stripped)
    if _FENCE_OPEN_PATTERN.match(stripped):
        return Token(FENCE_OPEN, line=stripped)
    if _FENCE_CLOSE_PATTERN.match(stripped):
        return Token(FENCE_CLOSE, line=stripped)
    if stripped.startswith(BULLET_PREFIX):
        return Token(BULLET, stripped[len(BULLET_PREFIX):].strip(), stripped)
    for kind, pattern in _LABEL_PATTERNS:
        match = pattern.match(stripped)
        if match:
            return Token(kind, match.group(1).strip(), stripped)
    return Token(TEXT, stripped, stripped)


def tokenize(fragment: str) -> List[Token]:
    """Classify every non-blank line of ``fragment``."""

    return [classify_line(line) for line in fragment.splitlines() if line.strip()]


def format_line(kind: str, value: str) -> str:
    return f"{LABELS[kind]}: {value}"


def wrap_phonetic(value: str) -> str:
    return f"/{value}/"


def unwrap_phonetic(value: str) -> str:
    text = value.strip()
    if len(text) >= 2 and text.startswith("/") and text.endswith("/"):
        text = text[1:-1]
    return text.strip()
