"""Exception handlers that render errors as ``{"message": ...}`` bodies."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = 'Internal server error'


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={'message': exc.detail},
        headers=getattr(exc, 'headers', None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for errors no route translated.

    User routes let store failures (duplicate email, missing row) propagate
    here, so they end up as a 500 with a log line carrying the traceback.
    """
    logger.error(
        'Unhandled exception in %s %s: %s',
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={'message': SERVER_ERROR_MESSAGE})


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    logger.debug('Exception handlers registered')
