"""Summarise endpoint.

Routes
------
POST /api/summarise    Body: {"url": "https://..."}    → {"summary", "urdu"}

Failures answer ``{"error": "..."}`` with 400 (bad address, content too
short) or 500 (fetch failure, anything unexpected).  Persistence runs after
the response as one background task per sink.
"""

from __future__ import annotations

import logging
from typing import Any, Union

from fastapi import APIRouter, BackgroundTasks, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from backend.errors import InternalError, SummariseError
from backend.summary.pipeline import SummaryPipeline

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class SummariseRequest(BaseModel):
    # Plain ``Any`` so a malformed address reaches the pipeline and gets the
    # documented 400 rather than a 422 validation response.
    url: Any = None


class SummariseResponse(BaseModel):
    summary: str
    urdu: str


class ErrorResponse(BaseModel):
    error: str


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _error_response(exc: SummariseError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post(
    "/summarise",
    response_model=SummariseResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def summarise_endpoint(
    body: SummariseRequest,
    request: Request,
    background_tasks: BackgroundTasks,
) -> Union[dict[str, str], JSONResponse]:
    """Summarise the page at ``body.url`` and gloss the summary into Urdu."""
    pipeline: SummaryPipeline = request.app.state.pipeline
    try:
        record = pipeline.run(body.url)
    except SummariseError as exc:
        return _error_response(exc)
    except Exception:
        logger.exception("Unhandled error while summarising %r", body.url)
        return _error_response(InternalError())

    for sink in pipeline.sinks:
        background_tasks.add_task(pipeline.save_to, sink, record)

    return record.to_response()
