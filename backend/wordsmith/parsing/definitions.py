"""Field extraction for definition blocks.

Every field has its own chain of strategies, tried in priority order. A
strategy that does not apply returns ``None`` and the next one is tried; when
the whole chain comes up empty the field keeps its default. Extraction of a
block never raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from wordsmith.models import DEFINITION_PLACEHOLDER, MATCH_CONTENT, DefinitionRecord

from .strategies import ExtractionStrategy, StrategyChain


LONE_WORD_PATTERN = re.compile(r"^([A-Za-z'’\-]+)\s*$")

UK_INLINE_PATTERN = re.compile(r"\buk\s*/([^/]+)/", re.IGNORECASE)
US_INLINE_PATTERN = re.compile(r"\bus\s*/([^/]+)/", re.IGNORECASE)
UK_LABEL_PATTERN = re.compile(r"^uk\s*[:/]\s*/?([^/]+)/?", re.IGNORECASE)
US_LABEL_PATTERN = re.compile(r"^us\s*[:/]\s*/?([^/]+)/?", re.IGNORECASE)

LEVEL_PATTERN = re.compile(r"^level\s*:\s*(.*)$", re.IGNORECASE)
DEFINITION_PATTERN = re.compile(r"^definition\s*:\s*", re.IGNORECASE)
EXAMPLES_LABEL_PATTERN = re.compile(r"^examples\s*:", re.IGNORECASE)
FIELD_LABEL_PATTERN = re.compile(
    r"^(word|part\s*of\s*speech|level|uk|us|definition|examples)\s*:",
    re.IGNORECASE,
)
EXAMPLES_FENCE_PATTERN = re.compile(
    r"<<EXAMPLES>>\s*(.*?)\s*<<?/EXAMPLES>>",
    re.IGNORECASE | re.DOTALL,
)
FENCE_LINE_PATTERN = re.compile(r"^<<?/?EXAMPLES>>", re.IGNORECASE)
BULLET_PREFIX = "- "
WHITESPACE_RUN = re.compile(r"\s{2,}")


def block_lines(block: str) -> List[str]:
    return [line.strip() for line in (block or "").splitlines() if line.strip()]


def _strip_bullet(line: str) -> str:
    if line.startswith(BULLET_PREFIX):
        return line[len(BULLET_PREFIX):].strip()
    return line


def _pipe_header_index(lines: Sequence[str]) -> Optional[int]:
    for idx, line in enumerate(lines):
        if "|" in line:
            return idx
    return None


def is_phonetic_line(line: str) -> bool:
    return bool(
        UK_LABEL_PATTERN.match(line)
        or US_LABEL_PATTERN.match(line)
        or (UK_INLINE_PATTERN.search(line) and US_INLINE_PATTERN.search(line))
    )


def is_label_line(line: str) -> bool:
    return bool(
        FIELD_LABEL_PATTERN.match(line)
        or FENCE_LINE_PATTERN.match(line)
        or is_phonetic_line(line)
    )


# ---------------------------
# Header: word and part of speech
# ---------------------------

def _header_from_pipe(lines: Sequence[str]) -> Optional[Tuple[str, str]]:
    idx = _pipe_header_index(lines)
    if idx is None:
        return None
    parts = [part.strip() for part in lines[idx].split("|")]
    word = parts[0].lower() if parts and parts[0] else ""
    part_of_speech = parts[1] if len(parts) > 1 else ""
    return word, part_of_speech


def _header_from_lone_word(lines: Sequence[str]) -> Optional[Tuple[str, str]]:
    if not lines:
        return None
    match = LONE_WORD_PATTERN.match(lines[0])
    if not match:
        return None
    return match.group(1).lower(), ""


HEADER_CHAIN: StrategyChain[Tuple[str, str]] = StrategyChain(
    [
        ExtractionStrategy("pipe_header", 10, _header_from_pipe),
        ExtractionStrategy("lone_word", 20, _header_from_lone_word),
    ]
)


# ---------------------------
# Phonetics
# ---------------------------

def _phonetics_inline_pair(lines: Sequence[str]) -> Optional[Tuple[str, str]]:
    for line in lines:
        uk = UK_INLINE_PATTERN.search(line)
        us = US_INLINE_PATTERN.search(line)
        if uk and us:
            return uk.group(1).strip(), us.group(1).strip()
    return None


def _first_group(lines: Sequence[str], pattern: re.Pattern, *, anchored: bool) -> str:
    for line in lines:
        match = pattern.match(line) if anchored else pattern.search(line)
        if match:
            return match.group(1).strip()
    return ""


def _phonetics_labelled(lines: Sequence[str]) -> Optional[Tuple[str, str]]:
    uk = _first_group(lines, UK_LABEL_PATTERN, anchored=True)
    us = _first_group(lines, US_LABEL_PATTERN, anchored=True)
    if not uk and not us:
        return None
    return uk, us


def _phonetics_inline_single(lines: Sequence[str]) -> Optional[Tuple[str, str]]:
    uk = _first_group(lines, UK_INLINE_PATTERN, anchored=False)
    us = _first_group(lines, US_INLINE_PATTERN, anchored=False)
    if not uk and not us:
        return None
    return uk, us


PHONETICS_CHAIN: StrategyChain[Tuple[str, str]] = StrategyChain(
    [
        ExtractionStrategy("inline_pair", 10, _phonetics_inline_pair),
        ExtractionStrategy("labelled_lines", 20, _phonetics_labelled),
        ExtractionStrategy("inline_single", 30, _phonetics_inline_single),
    ]
)


# ---------------------------
# Level
# ---------------------------

def _level_from_label(lines: Sequence[str]) -> Optional[str]:
    for line in lines:
        match = LEVEL_PATTERN.match(line)
        if match:
            return match.group(1).strip()
    return None


LEVEL_CHAIN: StrategyChain[str] = StrategyChain(
    [ExtractionStrategy("level_label", 10, _level_from_label)]
)


# ---------------------------
# Examples
# ---------------------------

def _examples_from_fence(lines: Sequence[str]) -> Optional[List[str]]:
    match = EXAMPLES_FENCE_PATTERN.search("\n".join(lines))
    if not match:
        return None
    return [_strip_bullet(line) for line in block_lines(match.group(1))]


def _examples_from_bullets(lines: Sequence[str]) -> Optional[List[str]]:
    examples = [_strip_bullet(line) for line in lines if line.startswith(BULLET_PREFIX)]
    return examples or None


EXAMPLES_CHAIN: StrategyChain[List[str]] = StrategyChain(
    [
        ExtractionStrategy("examples_fence", 10, _examples_from_fence),
        ExtractionStrategy("bullet_lines", 20, _examples_from_bullets),
    ]
)


# ---------------------------
# Definition
# ---------------------------

def _definition_from_label(lines: Sequence[str]) -> Optional[str]:
    start = None
    for idx, line in enumerate(lines):
        if DEFINITION_PATTERN.match(line):
            start = idx
            break
    if start is None:
        return None

    parts = [DEFINITION_PATTERN.sub("", lines[start], count=1)]
    for line in lines[start + 1:]:
        if line.startswith(BULLET_PREFIX) or is_label_line(line):
            break
        parts.append(line)
    text = " ".join(part for part in parts if part).strip()
    return text or None


def _definition_from_free_lines(lines: Sequence[str]) -> Optional[str]:
    header_idx = _pipe_header_index(lines)
    if header_idx is None and lines and LONE_WORD_PATTERN.match(lines[0]):
        header_idx = 0

    in_fence = False
    parts: List[str] = []
    for idx, line in enumerate(lines):
        if FENCE_LINE_PATTERN.match(line):
            in_fence = "/" not in line
            continue
        if in_fence or idx == header_idx:
            continue
        if line.startswith(BULLET_PREFIX) or is_label_line(line):
            continue
        parts.append(line)
    text = " ".join(parts).strip()
    return text or None


DEFINITION_CHAIN: StrategyChain[str] = StrategyChain(
    [
        ExtractionStrategy("definition_label", 10, _definition_from_label),
        ExtractionStrategy("free_lines", 20, _definition_from_free_lines),
    ]
)


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RUN.sub(" ", text or "").strip()


@dataclass(slots=True)
class DefinitionExtractor:
    header: StrategyChain = HEADER_CHAIN
    phonetics: StrategyChain = PHONETICS_CHAIN
    level: StrategyChain = LEVEL_CHAIN
    examples: StrategyChain = EXAMPLES_CHAIN
    definition: StrategyChain = DEFINITION_CHAIN

    def extract(self, block: str, expected_word: str, *, match: str = MATCH_CONTENT) -> DefinitionRecord:
        lines = block_lines(block)
        expected = (expected_word or "").strip().lower()

        word, part_of_speech = self.header.first(lines, ("", ""))
        uk_phonetic, us_phonetic = self.phonetics.first(lines, ("", ""))
        definition = collapse_whitespace(self.definition.first(lines, ""))

        return DefinitionRecord(
            word=word or expected,
            part_of_speech=part_of_speech,
            level=self.level.first(lines, ""),
            uk_phonetic=uk_phonetic,
            us_phonetic=us_phonetic,
            definition=definition or DEFINITION_PLACEHOLDER,
            examples=list(self.examples.first(lines, [])),
            match=match,
        )


def extract_definition(block: str, expected_word: str, *, match: str = MATCH_CONTENT) -> DefinitionRecord:
    return DefinitionExtractor().extract(block, expected_word, match=match)
