"""
handlers/errors.py
------------------
Maps exceptions to HTTP responses with an ``{"error": ...}`` body.

    InvalidInputError / request validation  → 400
    ProductNotFoundError                    → 404
    psycopg2.Error                          → 500 (driver message passed through)
    DatabaseUnavailableError                → 503
"""

import psycopg2
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from db.connection import DatabaseUnavailableError
from services.exceptions import ProductError
from utils.logger import get_logger

logger = get_logger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts) or "Requisição inválida"


async def product_error_handler(request: Request, exc: ProductError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


async def unavailable_error_handler(request: Request, exc: DatabaseUnavailableError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=503, content={"error": str(exc)})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": _describe_validation_error(exc)})


async def database_error_handler(request: Request, exc: psycopg2.Error) -> JSONResponse:
    message = str(exc).strip() or exc.__class__.__name__
    logger.error(f"{request.method} {request.url.path} database error: {message}")
    return JSONResponse(status_code=500, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProductError, product_error_handler)
    app.add_exception_handler(DatabaseUnavailableError, unavailable_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(psycopg2.Error, database_error_handler)
