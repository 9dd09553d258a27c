"""
FastAPI Router — Risk Categories • Readiness Status
===================================================

Purpose
-------
Defines the HTTP API for:
- Readiness: status snapshot for orchestration health checks
- Risk Categories: create, get by id, search, partial update, soft delete

Key Notes
---------
- CRUD handlers are plain `def` functions: FastAPI runs them on its thread pool,
  so a slow database call never blocks other requests.
- Request bodies are taken as JSON objects; the service layer owns the
  allow-list decoding and the entity rules.
- Error bodies are plain text (`text/plain`), not JSON objects. A 404 has an
  empty body.
- Every failure is caught here and translated; nothing reaches the ASGI server
  as an unhandled exception.

Routes
------
GET    /risk-categories/status   -> snapshot (200 when ready, else 500)
POST   /risk-categories          -> create (201)
GET    /risk-categories/{id}     -> get by id (200 / 404)
POST   /risk-categories/search   -> search (200)
PATCH  /risk-categories/{id}     -> partial update (200 / 404)
DELETE /risk-categories/{id}     -> soft delete (200 / 404)
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from risk_categories.api.models import RiskCategoryDetails
from risk_categories.database.core.funcs import (
    create_risk_category,
    find_risk_categories,
    get_risk_category_by_id,
    patch_risk_category,
    soft_delete_risk_category,
)
from risk_categories.errors import NotFoundError, RiskCategoryError

logger = logging.getLogger("uvicorn")

router = APIRouter(prefix="/risk-categories")
"""Creates the FastAPI router in which we define its routes"""

INTERNAL_ERROR_MESSAGE = "Internal server error."


def error_response(err: Exception) -> Response:
    """
    Translate an operation failure into its HTTP response.

    - NotFoundError -> 404, empty body
    - other RiskCategoryError -> its status code, message as text
    - anything else -> 500, generic message; the exception is only logged
    """
    if isinstance(err, NotFoundError):
        return Response(status_code=404)
    if isinstance(err, RiskCategoryError):
        if err.status_code < 500:
            logger.info(err.message)
        else:
            logger.error(err.message)
        return PlainTextResponse(err.message, status_code=err.status_code)
    logger.exception("Unexpected error while handling a risk category request")
    return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=500)


@router.get("/status")
async def send_server_status(request: Request):
    """Readiness snapshot. The HTTP status is the stored aggregate code."""
    code, body = request.app.state.server_status.snapshot()
    return JSONResponse(content=body, status_code=code)


@router.post("", status_code=201, response_model=RiskCategoryDetails)
def create(payload: Dict[str, Any] = Body(...)):
    """Create a Risk Category.

    Responses:
        201: the stored document
        400: `deleted` set, or `{language_code, name}` already exists
        500: entity rules rejected the payload
    """
    try:
        return create_risk_category(payload=payload)
    except Exception as e:
        return error_response(e)


@router.get("/{id}", response_model=RiskCategoryDetails)
def get_by_id(id: str):
    """Fetch one Risk Category. 400 for a malformed id, empty 404 when absent."""
    try:
        return get_risk_category_by_id(id=id)
    except Exception as e:
        return error_response(e)


@router.post("/search", response_model=List[RiskCategoryDetails])
def search(query: Optional[Dict[str, Any]] = Body(None)):
    """Exact-match search; an empty or missing body returns every document."""
    try:
        return find_risk_categories(query=query)
    except Exception as e:
        return error_response(e)


@router.patch("/{id}", response_model=RiskCategoryDetails)
def patch(id: str, changes: Dict[str, Any] = Body(...)):
    """Set the given fields on one Risk Category.

    Responses:
        200: the updated document
        400: malformed id, or the body carries `id`
        404: no such document (empty body)
        500: the merged document breaks the entity rules
    """
    try:
        return patch_risk_category(id=id, changes=changes)
    except Exception as e:
        return error_response(e)


@router.delete("/{id}", response_model=RiskCategoryDetails)
def soft_delete(id: str):
    """Mark one Risk Category as deleted; repeatable."""
    try:
        return soft_delete_risk_category(id=id)
    except Exception as e:
        return error_response(e)
