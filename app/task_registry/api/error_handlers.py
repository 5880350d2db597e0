"""
Exception handlers mapping task registry errors to HTTP responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.task_registry.api.fastapi_integration import NOT_FOUND_MESSAGE
from app.task_registry.domain.errors import TaskNotFoundError, TaskValidationError
from app.task_registry.domain.validation import FieldErrors

# Leading loc segments FastAPI adds to say where a value came from.
_REQUEST_SOURCES = {"body", "path", "query", "header", "cookie"}


async def task_not_found_handler(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    """Respond 404 with the generic not-found body."""
    logging.info(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": NOT_FOUND_MESSAGE},
    )


async def task_validation_handler(request: Request, exc: TaskValidationError) -> JSONResponse:
    """Respond 400 with the flattened field errors."""
    logging.warning(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=exc.errors.to_dict(),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Respond 400 for requests FastAPI rejects before reaching a route,
    such as a body that is not valid JSON.
    """
    form_errors: list[str] = []
    field_errors: dict[str, list[str]] = {}

    for error in exc.errors():
        loc = list(error.get("loc", ()))
        if loc and loc[0] in _REQUEST_SOURCES:
            loc = loc[1:]
        if loc and isinstance(loc[0], str):
            field_errors.setdefault(loc[0], []).append(error["msg"])
        else:
            form_errors.append(error["msg"])

    errors = FieldErrors(form_errors=form_errors, field_errors=field_errors)
    logging.warning(f"{request.method} {request.url.path}: invalid request {errors.to_dict()}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors.to_dict())


def register_error_handlers(app: FastAPI) -> None:
    """
    Register the task registry exception handlers on an application.

    Args:
        app: The FastAPI application.
    """
    app.add_exception_handler(TaskNotFoundError, task_not_found_handler)  # type: ignore[arg-type]
    app.add_exception_handler(TaskValidationError, task_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
