"""FastAPI service for the contact book."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from sqlalchemy.exc import SQLAlchemyError

from api.dependencies import CORS_HEADERS, get_engine, get_repository
from api.routers import contacts_router
from contact_book import __version__
from contact_book.db import ContactRepository, check_connection, create_tables

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    try:
        create_tables(engine)
    except SQLAlchemyError as exc:
        logger.error(f"[API] Could not create contacts table: {exc}")
    check_connection(engine)
    yield


app = FastAPI(
    title="Contact Book API",
    version=__version__,
    description="JSON CRUD interface over the contacts table.",
    lifespan=lifespan,
)


@app.middleware("http")
async def cors_headers(request: Request, call_next):
    """Answer every preflight with 204 and open CORS on all responses."""
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparseable or mistyped bodies as 400 instead of 422."""
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        detail = "Invalid JSON body"
    else:
        detail = "Invalid request body"
    logger.warning(f"[API] {request.method} {request.url.path} rejected: {detail}")
    return JSONResponse(status_code=400, content={"detail": detail})


app.include_router(contacts_router, prefix="/api/contacts", tags=["contacts"])


@app.get("/health")
def health_check(repo: ContactRepository = Depends(get_repository)) -> dict:
    """Health check endpoint with database reachability."""
    database = "up" if check_connection(repo.engine) else "down"
    return {"status": "ok", "database": database}
