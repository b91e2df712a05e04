# -*- coding: utf-8 -*-
"""
Глобальные обработчики исключений API.

APIException превращается в JSON с полями detail и error_code,
необработанные исключения отдают 500 без внутренних подробностей.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from edcenter.utils.exceptions import APIException, ErrorCode


def register_error_handlers(app: FastAPI) -> None:
    """Зарегистрировать обработчики ошибок в приложении."""
    _register_api_error_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:
    @app.exception_handler(APIException)
    async def api_error_handler(request: Request, exc: APIException):
        logger.warning(
            f"⚠️ {exc.error_code} на {request.url.path}: {exc.detail}"
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail, "error_code": exc.error_code},
            headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(f"💥 Необработанное исключение на {request.url.path}: {exc}")
        logger.exception("Детали ошибки:")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Внутренняя ошибка сервера",
                "error_code": ErrorCode.INTERNAL_ERROR,
            },
        )
