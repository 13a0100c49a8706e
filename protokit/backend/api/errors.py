"""Error responses shared by every site.

All errors leave the API as ``{"message": ...}`` JSON.  Validation problems
are reported as 400 (not FastAPI's default 422) together with the
offending locations.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def _error_items(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in errors
    ]


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request data", "errors": _error_items(list(exc.errors()))},
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    content = exc.detail if isinstance(exc.detail, dict) else {"message": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def install_error_handlers(application: FastAPI) -> None:
    """Register the JSON error handlers on ``application``."""
    application.add_exception_handler(RequestValidationError, validation_error_handler)
    application.add_exception_handler(StarletteHTTPException, http_error_handler)
    application.add_exception_handler(Exception, unhandled_error_handler)


def not_found(entity: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"{entity} not found")


@contextmanager
def failure_message(message: str) -> Iterator[None]:
    """
    Turn unexpected errors inside a route handler into a 500 with ``message``.

    ``HTTPException`` passes through untouched; a Pydantic ``ValidationError``
    raised while building a record becomes a 400 like any invalid request.

    Args:
        message: Client-facing message, e.g. ``"Failed to fetch properties"``
    """
    try:
        yield
    except HTTPException:
        raise
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc
    except Exception as exc:
        logger.exception(message)
        raise HTTPException(status_code=500, detail=message) from exc
