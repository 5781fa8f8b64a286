"""Export and import of definition records."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence

from wordsmith.errors import FormatError
from wordsmith.models import (
    DEFINITION_PLACEHOLDER,
    IMPORTED_DEFINITION_PLACEHOLDER,
    MATCH_IMPORTED,
    DefinitionImport,
    DefinitionRecord,
)
from wordsmith.parsing.definitions import DefinitionExtractor, collapse_whitespace

from . import grammar
from .grammar import Token


LOGGER = logging.getLogger(__name__)

CANONICAL = "canonical"
LEGACY = "legacy"

LEGACY_SECTION_BOUNDARY = re.compile(r"\n(?=\d+\.\s)")
LEGACY_NUMBERING = re.compile(r"^\d+\.\s*")


def _timestamp(generated_at: Optional[datetime]) -> str:
    moment = generated_at or datetime.now(timezone.utc)
    return moment.isoformat()


def _entry_lines(record: DefinitionRecord) -> List[str]:
    lines = [grammar.ENTRY_DELIMITER, grammar.format_line(grammar.WORD, record.word)]
    if record.part_of_speech:
        lines.append(grammar.format_line(grammar.PART_OF_SPEECH, record.part_of_speech))
    if record.level:
        lines.append(grammar.format_line(grammar.LEVEL, record.level))
    if record.uk_phonetic:
        lines.append(grammar.format_line(grammar.UK, grammar.wrap_phonetic(record.uk_phonetic)))
    if record.us_phonetic:
        lines.append(grammar.format_line(grammar.US, grammar.wrap_phonetic(record.us_phonetic)))
    definition = collapse_whitespace(record.definition) or DEFINITION_PLACEHOLDER
    lines.append(grammar.format_line(grammar.DEFINITION, definition))
    lines.append(grammar.format_line(grammar.EXAMPLES, "").rstrip())
    lines.append(grammar.EXAMPLES_OPEN)
    for example in record.examples:
        text = collapse_whitespace(example)
        if text:
            lines.append(f"{grammar.BULLET_PREFIX}{text}")
    lines.append(grammar.EXAMPLES_CLOSE)
    lines.append("")
    return lines


def serialize_definitions(
    records: Iterable[DefinitionRecord],
    *,
    generated_at: Optional[datetime] = None,
) -> str:
    """Render records in the canonical ``---ENTRY---`` export format."""

    lines = [
        grammar.TITLE,
        grammar.format_line(grammar.GENERATED_AT, _timestamp(generated_at)),
        grammar.format_line(grammar.VERSION, grammar.FORMAT_VERSION),
        "",
    ]
    for record in records:
        lines.extend(_entry_lines(record))
    return "\n".join(lines)


def _check_title(text: str) -> None:
    first_line = text.lstrip("\ufeff").split("\n", 1)[0] if text else ""
    if first_line.strip().lower() != grammar.TITLE.lower():
        raise FormatError(
            "Invalid file format. Please select a valid exported definition file."
        )


def _parse_entry(tokens: Sequence[Token]) -> Optional[DefinitionRecord]:
    values = {}
    definition_parts: List[str] = []
    fenced_examples: Optional[List[str]] = None
    bullet_examples: List[str] = []
    in_definition = False
    in_fence = False

    for token in tokens:
        if in_fence:
            if token.kind == grammar.FENCE_CLOSE:
                in_fence = False
            elif token.kind == grammar.BULLET:
                fenced_examples.append(token.value)
            else:
                fenced_examples.append(token.line)
            continue

        if token.kind == grammar.FENCE_OPEN:
            in_fence = True
            in_definition = False
            fenced_examples = fenced_examples if fenced_examples is not None else []
            continue

        if token.kind == grammar.DEFINITION:
            in_definition = True
            definition_parts.append(token.value)
            continue
        if in_definition and token.kind == grammar.TEXT:
            definition_parts.append(token.value)
            continue
        in_definition = False

        if token.kind == grammar.BULLET:
            bullet_examples.append(token.value)
        elif token.kind in grammar.LABELS and token.kind not in values:
            values[token.kind] = token.value

    word = (values.get(grammar.WORD) or "").strip().lower()
    if not word:
        return None

    definition = collapse_whitespace(" ".join(definition_parts))
    examples = fenced_examples if fenced_examples is not None else bullet_examples
    return DefinitionRecord(
        word=word,
        part_of_speech=values.get(grammar.PART_OF_SPEECH, ""),
        level=values.get(grammar.LEVEL, ""),
        uk_phonetic=grammar.unwrap_phonetic(values.get(grammar.UK, "")),
        us_phonetic=grammar.unwrap_phonetic(values.get(grammar.US, "")),
        definition=definition or IMPORTED_DEFINITION_PLACEHOLDER,
        examples=[example for example in examples if example],
        match=MATCH_IMPORTED,
    )


def _parse_canonical(text: str) -> DefinitionImport:
    fragments = [fragment.strip() for fragment in text.split(grammar.ENTRY_DELIMITER)]
    header_tokens = grammar.tokenize(fragments[0]) if fragments else []
    metadata = {token.kind: token.value for token in header_tokens}

    records: List[DefinitionRecord] = []
    for position, fragment in enumerate(fragments):
        if not fragment:
            continue
        record = _parse_entry(grammar.tokenize(fragment))
        if record is None:
            if position:
                LOGGER.debug("Skipping export entry %s without a Word line", position)
            continue
        records.append(record)

    return DefinitionImport(
        records=records,
        grammar=CANONICAL,
        generated_at=metadata.get(grammar.GENERATED_AT),
        version=metadata.get(grammar.VERSION),
    )


def _parse_legacy(text: str) -> DefinitionImport:
    extractor = DefinitionExtractor()
    records: List[DefinitionRecord] = []
    for section in LEGACY_SECTION_BOUNDARY.split(text):
        section = section.strip()
        if not LEGACY_NUMBERING.match(section):
            continue
        cleaned = LEGACY_NUMBERING.sub("", section, count=1).strip()
        if not cleaned:
            continue
        record = extractor.extract(cleaned, "", match=MATCH_IMPORTED)
        if not record.word:
            continue
        if record.definition == DEFINITION_PLACEHOLDER:
            record.definition = IMPORTED_DEFINITION_PLACEHOLDER
        records.append(record)
    return DefinitionImport(records=records, grammar=LEGACY)


def import_definitions(text: str) -> DefinitionImport:
    """Parse an exported definitions file.

    The title line is mandatory. Entries without a ``Word:`` line are skipped;
    the import only fails as a whole when nothing usable is left.
    """

    text = (text or "").replace("\r\n", "\n").replace("\r", "\n")
    _check_title(text)

    if grammar.ENTRY_DELIMITER in text:
        result = _parse_canonical(text)
    else:
        result = _parse_legacy(text)

    if not result.records:
        raise FormatError("No valid definitions found in the file.")

    LOGGER.info("Imported %s definitions (%s format)", len(result.records), result.grammar)
    return result
