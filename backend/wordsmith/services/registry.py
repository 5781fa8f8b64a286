"""The tools a session can run, with their prompts, parsers and file formats."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from wordsmith.exporting import (
    import_comparison,
    import_definitions,
    import_synonyms,
    serialize_comparison,
    serialize_definitions,
    serialize_synonyms,
)
from wordsmith.parsing import (
    get_parsing_pipeline,
    parse_comparison,
    parse_etymology,
    parse_synonyms,
)

from . import prompts


ResponseParser = Callable[[str, Sequence[str]], List[Any]]
Serializer = Callable[[List[Any]], str]
Importer = Callable[[str], List[Any]]

DEFINE = "define"
COMPARE = "compare"
SYNONYMS = "synonyms"
ETYMOLOGY = "etymology"


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    min_terms: int
    build_prompt: Callable[[Sequence[str], str], str]
    parse: ResponseParser
    serialize: Optional[Serializer] = None
    import_text: Optional[Importer] = None

    @property
    def min_terms_message(self) -> str:
        if self.min_terms == 1:
            return "Please enter at least one word"
        return f"Please enter at least {self.min_terms} words"


def _parse_definitions(response: str, terms: Sequence[str]) -> List[Any]:
    return get_parsing_pipeline().parse_definitions(response, terms)


def _parse_comparison(response: str, terms: Sequence[str]) -> List[Any]:
    return [parse_comparison(response)]


def _parse_synonyms(response: str, terms: Sequence[str]) -> List[Any]:
    return parse_synonyms(response)


def _parse_etymology(response: str, terms: Sequence[str]) -> List[Any]:
    record = parse_etymology(response, terms[0] if terms else "")
    return [record] if record is not None else []


def _import_definitions(text: str) -> List[Any]:
    return import_definitions(text).records


TOOLS: Dict[str, ToolDefinition] = {
    DEFINE: ToolDefinition(
        name=DEFINE,
        min_terms=1,
        build_prompt=prompts.build_define_prompt,
        parse=_parse_definitions,
        serialize=serialize_definitions,
        import_text=_import_definitions,
    ),
    COMPARE: ToolDefinition(
        name=COMPARE,
        min_terms=2,
        build_prompt=prompts.build_compare_prompt,
        parse=_parse_comparison,
        serialize=lambda records: serialize_comparison(records[0]),
        import_text=lambda text: [import_comparison(text)],
    ),
    SYNONYMS: ToolDefinition(
        name=SYNONYMS,
        min_terms=1,
        build_prompt=prompts.build_synonyms_prompt,
        parse=_parse_synonyms,
        serialize=serialize_synonyms,
        import_text=import_synonyms,
    ),
    ETYMOLOGY: ToolDefinition(
        name=ETYMOLOGY,
        min_terms=1,
        build_prompt=prompts.build_etymology_prompt,
        parse=_parse_etymology,
    ),
}


def get_tool(name: str) -> ToolDefinition:
    try:
        return TOOLS[name]
    except KeyError:
        raise KeyError(f"Unknown tool: {name}") from None
