"""Matching of segmented blocks to the expected terms."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from wordsmith.models import MATCH_CONTENT, MATCH_EMPTY, MATCH_POSITION, MATCH_RAW

from .segmentation import Segmentation, truncate_merged_block


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class AlignedBlock:
    term: str
    text: str
    match: str


def _contains_word(block: str, term: str) -> bool:
    if not term:
        return False
    pattern = re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)
    return bool(pattern.search(block))


def _find_by_content(blocks: Sequence[str], term: str, used: Set[int]) -> Optional[int]:
    for idx, block in enumerate(blocks):
        if idx in used:
            continue
        if _contains_word(block, term):
            return idx
    return None


def _find_by_position(blocks: Sequence[str], used: Set[int]) -> Optional[int]:
    for idx in range(len(blocks)):
        if idx not in used:
            return idx
    return None


def align_blocks(segmentation: Segmentation, terms: Sequence[str]) -> List[AlignedBlock]:
    """Assign each term exactly one block, never handing a block out twice.

    Content matches win, then the next unused block by position, then the
    raw block at the term's own index unless that block was already handed
    out. The ``match`` field records which rule applied, so callers can tell
    a confident match from a guess.
    """

    blocks = segmentation.blocks
    sources = segmentation.sources or list(range(len(blocks)))
    used: Set[int] = set()
    used_raw: Set[int] = set()
    aligned: List[AlignedBlock] = []

    for index, raw_term in enumerate(terms):
        term = raw_term.lower()

        found = _find_by_content(blocks, term, used)
        match = MATCH_CONTENT
        if found is None:
            found = _find_by_position(blocks, used)
            match = MATCH_POSITION

        if found is not None:
            used.add(found)
            used_raw.add(sources[found])
            aligned.append(AlignedBlock(term=term, text=blocks[found], match=match))
            if match == MATCH_POSITION:
                LOGGER.debug("No block mentions %r, using block %s by position", term, found)
            continue

        if index < len(segmentation.raw_blocks) and index not in used_raw:
            used_raw.add(index)
            raw = truncate_merged_block(segmentation.raw_blocks[index])
            aligned.append(AlignedBlock(term=term, text=raw, match=MATCH_RAW))
            LOGGER.debug("Blocks exhausted for %r, falling back to raw block %s", term, index)
        else:
            aligned.append(AlignedBlock(term=term, text="", match=MATCH_EMPTY))
            LOGGER.debug("Blocks exhausted for %r, no unused raw block left", term)

    return aligned
