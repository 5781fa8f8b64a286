from __future__ import annotations

from functools import lru_cache

from .comparison import DETAILS_SEPARATOR, parse_comparison
from .definitions import DefinitionExtractor, extract_definition
from .etymology import parse_etymology
from .normalization import normalize_terms, split_terms
from .pipeline import ParsingPipeline, parse_definitions
from .segmentation import segment_response
from .synonyms import extract_synonym_view, parse_synonyms


@lru_cache(maxsize=1)
def get_parsing_pipeline() -> ParsingPipeline:
    return ParsingPipeline()


__all__ = [
    "DETAILS_SEPARATOR",
    "DefinitionExtractor",
    "ParsingPipeline",
    "extract_definition",
    "extract_synonym_view",
    "get_parsing_pipeline",
    "normalize_terms",
    "parse_comparison",
    "parse_definitions",
    "parse_etymology",
    "parse_synonyms",
    "segment_response",
    "split_terms",
]
