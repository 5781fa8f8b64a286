"""Definition parsing pipeline: segment, align, extract."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from wordsmith.models import DefinitionRecord

from .alignment import AlignedBlock, align_blocks
from .definitions import DefinitionExtractor
from .segmentation import segment_response


LOGGER = logging.getLogger(__name__)


class ParsingPipeline:
    """Turns one definitions response into one record per expected term."""

    def __init__(self, extractor: Optional[DefinitionExtractor] = None) -> None:
        self.extractor = extractor or DefinitionExtractor()

    def align(self, response: str, terms: Sequence[str]) -> List[AlignedBlock]:
        if not response or not response.strip():
            return []
        return align_blocks(segment_response(response), terms)

    def parse_definitions(self, response: str, terms: Sequence[str]) -> List[DefinitionRecord]:
        records: List[DefinitionRecord] = []
        for aligned in self.align(response, terms):
            if not aligned.text:
                continue
            records.append(
                self.extractor.extract(aligned.text, aligned.term, match=aligned.match)
            )
        LOGGER.debug("Parsed %s definition records for %s terms", len(records), len(terms))
        return records


def parse_definitions(response: str, terms: Sequence[str]) -> List[DefinitionRecord]:
    """Convenience helper that parses with a fresh pipeline."""

    return ParsingPipeline().parse_definitions(response, terms)
