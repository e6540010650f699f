import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catshop.utils.response import error_response

logger = logging.getLogger(__name__)

INVALID_REQUEST = "Некорректный запрос"
INTERNAL_ERROR = "Внутренняя ошибка сервера"


class AppException(Exception):
    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppException):
    status_code = 400


class ConflictError(AppException):
    status_code = 409


class AuthError(AppException):
    status_code = 401


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected malformed request on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=400,
            content=error_response(INVALID_REQUEST),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_response(INTERNAL_ERROR),
        )
