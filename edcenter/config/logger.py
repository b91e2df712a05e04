# -*- coding: utf-8 -*-
"""
Настройка логирования для Educational Center API с использованием loguru.

Стандартный logging (uvicorn, SQLAlchemy, alembic) перенаправляется в loguru.
Системные сообщения (logger.bind(system=True)) выводятся без файловых путей.
"""
import logging
import sys

from loguru import logger

from edcenter.config.settings import settings

# Шумные библиотеки, INFO-логи которых не нужны в консоли
SILENCED_PREFIXES = ("httpx", "httpcore", "asyncio", "aiosqlite")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

SYSTEM_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>SYSTEM</cyan> | "
    "<level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


class InterceptHandler(logging.Handler):
    """Перехватывает стандартные логи и перенаправляет их в loguru."""

    def emit(self, record):
        # uvicorn INFO (Will watch, Started server...) дублирует баннер
        if record.name.startswith("uvicorn") and record.levelno == logging.INFO:
            return

        if record.name.startswith(SILENCED_PREFIXES) and record.levelno < logging.WARNING:
            return

        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _is_system(record) -> bool:
    return record["extra"].get("system") is True


def _console_filter(record) -> bool:
    if _is_system(record):
        return False
    return record["level"].name != "DEBUG" or settings.debug


def setup_logging() -> None:
    """Пересобирает хендлеры loguru по текущим настройкам."""
    logger.remove()
    level = settings.log_level.upper()

    logger.add(
        sys.stdout,
        format=CONSOLE_FORMAT,
        level=level,
        colorize=True,
        backtrace=False,
        diagnose=False,
        filter=_console_filter,
    )
    logger.add(
        sys.stdout,
        format=SYSTEM_FORMAT,
        level=level,
        colorize=True,
        backtrace=False,
        diagnose=False,
        filter=_is_system,
    )

    if settings.log_file:
        logger.add(
            settings.log_file,
            format=FILE_FORMAT,
            level=level,
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            encoding="utf-8",
            enqueue=True,
            filter=lambda record: not _is_system(record),
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


setup_logging()


def configure_logger(name: str = "edcenter"):
    """
    Возвращает настроенный логгер.

    Args:
        name: Имя логгера (игнорируется в loguru)

    Returns:
        loguru.Logger: Настроенный логгер
    """
    return logger


def get_system_logger():
    """Получает логгер для системных сообщений без файловых путей."""
    return logger.bind(system=True)
