from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from wordsmith.errors import FormatError, UpstreamError, ValidationError
from wordsmith.parsing import extract_synonym_view, normalize_terms, split_terms
from wordsmith.services import (
    CompletionClient,
    SessionSnapshot,
    ToolSession,
    get_completion_client,
    get_tool_session,
)
from wordsmith.services.registry import SYNONYMS


EXPORT_FILENAMES = {
    "define": "word-definitions.txt",
    "compare": "word-comparison.txt",
    "synonyms": "word-synonyms.txt",
}


class NormalizeRequest(BaseModel):
    text: str = ""


class NormalizeResponse(BaseModel):
    normalized: str
    terms: List[str]


class SubmitRequest(BaseModel):
    words: str = Field(description="Comma or newline separated words.")
    level: str = Field(default="", description="Explanation level passed to the prompt.")


class ImportRequest(BaseModel):
    content: str = Field(description="Text of a previously exported file.")
    filename: Optional[str] = None


class SessionPayload(BaseModel):
    tool: str
    state: str
    request_id: int
    terms: List[str]
    records: List[Dict[str, Any]]
    raw_text: str
    warning: Optional[str] = None
    error: Optional[str] = None
    views: Optional[List[Dict[str, Any]]] = None
    filename: Optional[str] = None


router = APIRouter(prefix="/tools", tags=["tools"])


def _session(tool: str) -> ToolSession:
    try:
        return get_tool_session(tool)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {tool}") from None


Client = Annotated[CompletionClient, Depends(get_completion_client)]


def _payload(snapshot: SessionSnapshot, *, filename: Optional[str] = None) -> SessionPayload:
    data = snapshot.to_dict()
    if snapshot.tool == SYNONYMS:
        data["views"] = [extract_synonym_view(record).to_dict() for record in snapshot.records]
    data["filename"] = filename
    return SessionPayload(**data)


@router.post("/normalize", response_model=NormalizeResponse)
def normalize(payload: NormalizeRequest) -> NormalizeResponse:
    return NormalizeResponse(
        normalized=normalize_terms(payload.text),
        terms=split_terms(payload.text),
    )


@router.get("/{tool}", response_model=SessionPayload)
def session_state(tool: str) -> SessionPayload:
    return _payload(_session(tool).snapshot())


@router.post("/{tool}/submit", response_model=SessionPayload)
async def submit(tool: str, payload: SubmitRequest, client: Client) -> SessionPayload:
    session = _session(tool)
    try:
        snapshot = await session.submit(payload.words, client, level=payload.level)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except UpstreamError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc

    if snapshot is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Superseded by a newer request",
        )
    return _payload(snapshot)


@router.get("/{tool}/export", response_class=PlainTextResponse)
def export(tool: str) -> PlainTextResponse:
    session = _session(tool)
    try:
        content = session.export_text()
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    filename = EXPORT_FILENAMES.get(tool, f"{tool}.txt")
    return PlainTextResponse(
        content,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/{tool}/import", response_model=SessionPayload)
def import_export(tool: str, payload: ImportRequest) -> SessionPayload:
    session = _session(tool)
    try:
        snapshot = session.load_import(payload.content)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except FormatError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    return _payload(snapshot, filename=payload.filename)
