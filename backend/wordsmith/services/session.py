"""Per-tool request flow: Idle → Requesting → Parsing → Ready / Error."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from wordsmith.config import get_settings
from wordsmith.errors import (
    EmptyResponseError,
    ExtractionWarning,
    UpstreamError,
    ValidationError,
)
from wordsmith.parsing import split_terms

from .llm_client import CompletionClient
from .registry import ToolDefinition


LOGGER = logging.getLogger(__name__)

EMPTY_RESPONSE_MESSAGE = "Received an empty response from the API. Please try again."
EXTRACTION_WARNING_MESSAGE = (
    "Parsing failed, but response received. Try single word or rephrase prompt."
)


class FlowState(str, enum.Enum):
    IDLE = "idle"
    REQUESTING = "requesting"
    PARSING = "parsing"
    READY = "ready"
    ERROR = "error"


@dataclass(slots=True)
class SessionSnapshot:
    tool: str
    state: FlowState
    request_id: int
    terms: List[str] = field(default_factory=list)
    records: List[Any] = field(default_factory=list)
    raw_text: str = ""
    warning: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tool": self.tool,
            "state": self.state.value,
            "request_id": self.request_id,
            "terms": list(self.terms),
            "records": [record.to_dict() for record in self.records],
            "raw_text": self.raw_text,
            "warning": self.warning,
            "error": self.error,
        }


class ToolSession:
    """Holds the transient results of one tool.

    Every submit takes a new request id. A response that arrives after a
    newer submit (or import) is discarded, so the latest request always wins.
    """

    def __init__(self, tool: ToolDefinition) -> None:
        self.tool = tool
        self.state = FlowState.IDLE
        self.terms: List[str] = []
        self.records: List[Any] = []
        self.raw_text = ""
        self.warning: Optional[ExtractionWarning] = None
        self.error: Optional[str] = None
        self._request_id = 0

    @property
    def request_id(self) -> int:
        return self._request_id

    def _transition(self, state: FlowState) -> None:
        LOGGER.info(
            "%s session: %s -> %s (request %s)",
            self.tool.name,
            self.state.value,
            state.value,
            self._request_id,
        )
        self.state = state

    def _reset_results(self) -> None:
        self.records = []
        self.raw_text = ""
        self.warning = None
        self.error = None

    def validate(self, raw_input: str) -> List[str]:
        terms = split_terms(raw_input)
        if len(terms) < self.tool.min_terms:
            raise ValidationError(self.tool.min_terms_message)
        return terms

    async def submit(
        self,
        raw_input: str,
        client: CompletionClient,
        *,
        level: str = "",
    ) -> Optional[SessionSnapshot]:
        """Run one request. Returns ``None`` when a newer request superseded it."""

        terms = self.validate(raw_input)

        self._request_id += 1
        request_id = self._request_id
        self._reset_results()
        self.terms = terms
        self._transition(FlowState.REQUESTING)

        prompt = self.tool.build_prompt(terms, level or get_settings().english_level)
        try:
            text = await client.generate(prompt)
        except Exception as exc:
            if request_id != self._request_id:
                LOGGER.warning("Discarding failure of superseded request %s", request_id)
                return None
            if isinstance(exc, UpstreamError):
                failure = exc
            else:
                LOGGER.exception("Completion client failed for request %s", request_id)
                failure = UpstreamError(str(exc) or type(exc).__name__)
            self.error = str(failure)
            self._transition(FlowState.ERROR)
            if failure is exc:
                raise
            raise failure from exc

        if request_id != self._request_id:
            LOGGER.warning(
                "Discarding response to request %s, request %s is newer",
                request_id,
                self._request_id,
            )
            return None

        self._transition(FlowState.PARSING)
        if not text or not text.strip():
            self.error = EMPTY_RESPONSE_MESSAGE
            self._transition(FlowState.ERROR)
            raise EmptyResponseError(EMPTY_RESPONSE_MESSAGE)

        self.raw_text = text
        self.records = self.tool.parse(text, terms)
        if not self.records:
            self.warning = ExtractionWarning(EXTRACTION_WARNING_MESSAGE, raw_text=text)
            LOGGER.warning("%s response produced no records", self.tool.name)
        self._transition(FlowState.READY)
        return self.snapshot()

    def load_import(self, text: str) -> SessionSnapshot:
        if self.tool.import_text is None:
            raise ValidationError(f"The {self.tool.name} tool has no import format")

        records = self.tool.import_text(text)

        self._request_id += 1
        self._reset_results()
        self.records = list(records)
        self.terms = [record.word for record in self.records if hasattr(record, "word")]
        self._transition(FlowState.READY)
        return self.snapshot()

    def export_text(self) -> str:
        if self.tool.serialize is None:
            raise ValidationError(f"The {self.tool.name} tool has no export format")
        if not self.records:
            raise ValidationError("Nothing to export")
        return self.tool.serialize(self.records)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            tool=self.tool.name,
            state=self.state,
            request_id=self._request_id,
            terms=list(self.terms),
            records=list(self.records),
            raw_text=self.raw_text,
            warning=str(self.warning) if self.warning else None,
            error=self.error,
        )
