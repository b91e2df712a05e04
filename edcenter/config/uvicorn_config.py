# -*- coding: utf-8 -*-
"""
Конфигурация для Uvicorn с логами через loguru.
"""

import logging

from edcenter.config.logger import InterceptHandler


def setup_uvicorn_logging():
    """Настраивает перехват логов uvicorn и SQLAlchemy."""

    # Очищаем существующие обработчики
    for logger_name in [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
        "fastapi",
        "sqlalchemy.engine",
        "sqlalchemy.pool",
    ]:
        logger_obj = logging.getLogger(logger_name)
        logger_obj.handlers.clear()
        logger_obj.propagate = False

    logging.getLogger("uvicorn").handlers = [InterceptHandler()]
    logging.getLogger("uvicorn.error").handlers = [InterceptHandler()]
    logging.getLogger("fastapi").handlers = [InterceptHandler()]

    # SQLAlchemy (только предупреждения и ошибки)
    for logger_name in ("sqlalchemy.engine", "sqlalchemy.pool"):
        sa_logger = logging.getLogger(logger_name)
        sa_logger.handlers = [InterceptHandler()]
        sa_logger.setLevel(logging.WARNING)
