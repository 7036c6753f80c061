"""
Errores de dominio y handlers globales para respuestas de error consistentes.

Repositorios y servicios lanzan subclases de `AppError`; solo esta capa las
traduce a códigos HTTP.
"""
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class AppError(Exception):
    """Base de errores semánticos. `message` es seguro para el cliente."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class NotFoundError(AppError):
    status_code = 404
    message = "Not found"


class ConflictError(AppError):
    status_code = 409
    message = "Conflict"


class AIUnavailableError(AppError):
    """La IA no está configurada (sin API key)."""

    status_code = 503
    message = "AI features not available - API key not configured"


class GenerationError(AppError):
    """La IA está configurada pero la llamada falló o devolvió datos inservibles."""

    status_code = 500
    message = "Failed to generate content with AI"


def _req_id(request: Request) -> str | None:
    return getattr(getattr(request, "state", object()), "request_id", None)


def _body(request: Request, message: str, **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"message": message, **extra}
    rid = _req_id(request)
    if rid:
        body["request_id"] = rid
    return body


def register_exception_handlers(app: FastAPI) -> None:
    log = logging.getLogger("studynotes.errors")

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content=_body(request, exc.detail or "HTTP error"))

    @app.exception_handler(RequestValidationError)
    async def _validation_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors(), exclude={"ctx", "input", "url"})
        return JSONResponse(status_code=400, content=_body(request, "Invalid request data", errors=errors))

    @app.exception_handler(AppError)
    async def _app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            log.warning("%s request_id=%s: %s", type(exc).__name__, _req_id(request), exc.__cause__ or exc)
        return JSONResponse(status_code=exc.status_code, content=_body(request, exc.message))

    @app.exception_handler(Exception)
    async def _generic_handler(request: Request, exc: Exception):
        rid = _req_id(request)
        log.exception("Unhandled error request_id=%s", rid)
        return JSONResponse(status_code=500, content=_body(request, "Internal server error"))
