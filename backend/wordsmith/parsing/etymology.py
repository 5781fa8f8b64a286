from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from wordsmith.models import EtymologyRecord


LOGGER = logging.getLogger(__name__)

CODE_FENCE_PATTERN = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)


def _candidate_json(text: str) -> str:
    stripped = (text or "").strip()
    fenced = CODE_FENCE_PATTERN.search(stripped)
    if fenced:
        return fenced.group(1)
    start = stripped.find("{")
    end = stripped.rfind("}")
    if start != -1 and end > start:
        return stripped[start:end + 1]
    return stripped


def _text(payload: Dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    return str(value).strip()


def _timeline(payload: Dict[str, Any]) -> List[Tuple[str, str]]:
    items = payload.get("timeline")
    if not isinstance(items, list):
        return []
    timeline: List[Tuple[str, str]] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        timeline.append((_text(item, "period"), _text(item, "change")))
    return timeline


def parse_etymology(text: str, expected_word: str = "") -> Optional[EtymologyRecord]:
    """Parse the JSON object of an etymology response.

    Returns ``None`` when the response holds no JSON object.
    """

    try:
        payload = json.loads(_candidate_json(text))
    except (TypeError, ValueError) as exc:
        LOGGER.debug("Etymology response is not valid JSON: %s", exc)
        return None
    if not isinstance(payload, dict):
        return None

    return EtymologyRecord(
        word=_text(payload, "word").lower() or (expected_word or "").strip().lower(),
        language_of_origin=_text(payload, "languageOfOrigin"),
        root_word=_text(payload, "rootWord"),
        first_known_use=_text(payload, "firstKnownUse"),
        explanation=_text(payload, "explanation"),
        timeline=_timeline(payload),
    )
