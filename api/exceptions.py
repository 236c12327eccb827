"""
Error types raised by the post handlers and the single place where every
error is turned into an HTTP response.

All error bodies share one shape: ``{"message": "..."}``. Storage failures are
logged with their traceback but the client only ever sees a generic message.
"""

import logging

from bson.errors import BSONError
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
NOT_FOUND_MESSAGE = "Not Found"


class BlogApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PostValidationError(BlogApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class PostNotFoundError(BlogApiError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, post_id: str):
        super().__init__(f"Post with id ({post_id}) not found")
        self.post_id = post_id


def _message(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(BlogApiError)
    async def handle_blog_api_error(request: Request, exc: BlogApiError):
        logger.warning("%s %s: %s", request.method, request.url.path, exc.message)
        return _message(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        # unknown method on a known path is still an unmatched route
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return _message(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
        return _message(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        logger.warning("%s %s: unreadable request body", request.method, request.url.path)
        return _message(status.HTTP_400_BAD_REQUEST, "Request body must be a JSON object")

    @app.exception_handler(PyMongoError)
    @app.exception_handler(BSONError)
    async def handle_storage_error(request: Request, exc: Exception):
        logger.error("%s %s: storage error", request.method, request.url.path, exc_info=exc)
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("%s %s: unexpected error", request.method, request.url.path, exc_info=exc)
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
