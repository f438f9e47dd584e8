"""
FastAPI routes for case lookups and query history.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ConfigDict, Field

from court_lookup.errors import UnimplementedError

router = APIRouter()


def get_app_state(request: Request):
    return request.app.state


class CaseQueryPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    case_type: Optional[Any] = Field(None, alias="caseType")
    case_number: Optional[Any] = Field(None, alias="caseNumber")
    year: Optional[Any] = Field(None, description="Filing year.")


@router.get("/health")
async def health():
    return {"status": "ok", "message": "Server is running"}


@router.post("/query")
async def submit_query(payload: CaseQueryPayload, state=Depends(get_app_state)):
    result = await run_in_threadpool(
        state.service.lookup,
        payload.case_type,
        payload.case_number,
        payload.year,
    )
    body = result.record.to_dict()
    body["queryId"] = result.saved.entry_id
    return body


@router.get("/queries")
async def list_queries(limit: Optional[int] = Query(None, ge=1), state=Depends(get_app_state)):
    settings = state.settings
    limit = min(limit or settings.history_default_limit, settings.history_max_limit)
    entries = await run_in_threadpool(state.service.history, limit)
    return [entry.to_dict() for entry in entries]


@router.get("/queries/{entry_id}")
async def get_query(entry_id: int, state=Depends(get_app_state)):
    entry = await run_in_threadpool(state.service.get_entry, entry_id)
    return entry.to_dict()


@router.get("/judgment")
async def download_judgment(url: Optional[str] = None):
    raise UnimplementedError("PDF download not implemented in demo. Connect to actual eCourts portal.")
