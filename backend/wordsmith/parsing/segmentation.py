"""Splitting of model responses into candidate definition blocks."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List


LOGGER = logging.getLogger(__name__)

BLANK_LINE_RUN = re.compile(r"\n[ \t\r\f\v]*\n\s*")

PIPE_HEADER_PATTERN = re.compile(r"[A-Za-z0-9'’\-]+\s*\|")
UK_PHONETIC_PATTERN = re.compile(r"\buk\s*/[^/\n]+/", re.IGNORECASE)
DEFINITION_LABEL_PATTERN = re.compile(r"definition\s*:", re.IGNORECASE)

# A header line as it appears inside a block: a short word or phrase then a pipe.
HEADER_LINE_PATTERN = re.compile(r"^[ \t]*[A-Za-z'’\- \t]{1,40}?[ \t]*\|")


@dataclass
class Segmentation:
    raw_blocks: List[str] = field(default_factory=list)
    blocks: List[str] = field(default_factory=list)
    # Index into raw_blocks that each candidate block came from.
    sources: List[int] = field(default_factory=list)


def split_blocks(text: str) -> List[str]:
    """Split on blank-line runs, trimming blocks and dropping empty ones."""

    if not text:
        return []
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    blocks: List[str] = []
    for block in BLANK_LINE_RUN.split(normalized):
        stripped = block.strip()
        if stripped:
            blocks.append(stripped)
    return blocks


def is_potential_block(block: str) -> bool:
    return bool(
        PIPE_HEADER_PATTERN.search(block)
        or UK_PHONETIC_PATTERN.search(block)
        or DEFINITION_LABEL_PATTERN.search(block)
    )


def truncate_merged_block(block: str) -> str:
    """Cut a block at its second pipe header.

    A model that forgets the blank line between two words produces a single
    block with two headers. Only the first word survives; the rest of the
    block is dropped.
    """

    offset = 0
    headers_seen = 0
    for line in block.split("\n"):
        if HEADER_LINE_PATTERN.match(line):
            headers_seen += 1
            if headers_seen == 2:
                LOGGER.debug("Merged block truncated at offset %s", offset)
                return block[:offset].strip()
        offset += len(line) + 1
    return block


def segment_response(text: str) -> Segmentation:
    raw_blocks = split_blocks(text)
    sources = [idx for idx, block in enumerate(raw_blocks) if is_potential_block(block)]
    blocks = [truncate_merged_block(raw_blocks[idx]) for idx in sources]
    LOGGER.debug(
        "Segmented response into %s raw blocks, %s candidate blocks",
        len(raw_blocks),
        len(blocks),
    )
    return Segmentation(raw_blocks=raw_blocks, blocks=blocks, sources=sources)
