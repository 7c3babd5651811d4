#!/usr/bin/env python3
"""
Service exceptions and the handlers that turn them into JSON error bodies.

Every error response has the shape ``{"success": false, "error": ..., "type": ...}``.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    status_code = 500


class TalentNotFoundException(ServiceException):
    status_code = 404


class JobNotFoundException(ServiceException):
    status_code = 404


class ApplicationNotFoundException(ServiceException):
    status_code = 404


class ApplicationConflictException(ServiceException):
    """Duplicate (job, talent) application, or an action the current status does not allow."""
    status_code = 409


class InvalidMatchScoreException(ServiceException):
    """Match score outside 0-100."""
    status_code = 400


def _error_body(error, error_type: str) -> dict:
    return {"success": False, "error": error, "type": error_type}


async def service_exception_handler(request: Request, exc: ServiceException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc}")

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc), exc.__class__.__name__)
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Same body shape for HTTPExceptions raised by routes (e.g. malformed ids)."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.detail, "HTTPException")
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content=_error_body("Internal server error", "InternalError")
    )


def register_exception_handlers(app) -> None:
    app.add_exception_handler(ServiceException, service_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
