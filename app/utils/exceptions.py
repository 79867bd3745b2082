import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.utils.response import error_response

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"


def register_exception_handlers(app: FastAPI) -> None:
    async def storage_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Storage error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=500,
            content=error_response(INTERNAL_ERROR_MESSAGE),
        )

    # Driver errors not wrapped by SQLAlchemy (e.g. refused connections) are OSErrors.
    app.add_exception_handler(SQLAlchemyError, storage_exception_handler)
    app.add_exception_handler(OSError, storage_exception_handler)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Values the columns cannot hold fail the same way a rejected statement does."""
        logger.error(
            "Rejected values on %s %s: %s", request.method, request.url.path, exc.errors()
        )
        return JSONResponse(
            status_code=500,
            content=error_response(INTERNAL_ERROR_MESSAGE),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=500,
            content=error_response(INTERNAL_ERROR_MESSAGE),
        )
