"""API error mapping

Use case errors (libs.result.Error) are raised as ClientError and
rendered as {"error": {"code": ..., "message": ...}}.
"""

import logging
from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Error

logger = logging.getLogger(__name__)


class ClientError(HTTPException):
    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=error.message)
        self.error = error

    @classmethod
    def from_error(cls, error: Error) -> "ClientError":
        """Pick the HTTP status from the error code"""
        if error.code.endswith("_NOT_FOUND"):
            return cls(error, status_code=status.HTTP_404_NOT_FOUND)
        if error.code.endswith("_FAILED"):
            return cls(error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return cls(error)


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "%s on %s: %s", exc.error.code, request.url.path, exc.error.reason
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.error.code, "message": exc.error.message}},
    )


async def persistence_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error on %s: %s", request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": {"code": "PERSISTENCE_ERROR", "message": "Internal database error"}},
    )


async def command_validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Command DTOs built inside a route reject input the request schema let through"""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_encoder(exc.errors(include_url=False, include_context=False))},
    )
