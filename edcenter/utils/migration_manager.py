# -*- coding: utf-8 -*-
"""
Менеджер миграций для автоматической проверки и применения миграций.
"""

import subprocess
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy import inspect, text

from edcenter.clients.database_client import async_engine
from edcenter.config.settings import settings

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


async def get_current_migration_version() -> Optional[str]:
    """
    Получает текущую версию миграции из базы данных.

    Returns:
        Текущая версия миграции или None если таблица не существует
    """
    try:
        async with async_engine.connect() as conn:
            table_exists = await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).has_table("alembic_version")
            )
            if not table_exists:
                logger.warning("⚠️ Таблица alembic_version не найдена")
                return None

            result = await conn.execute(text("SELECT version_num FROM alembic_version"))
            return result.scalar()

    except Exception as e:
        logger.error(f"❌ Ошибка при получении версии миграции: {e}")
        return None


def get_latest_migration_version() -> Optional[str]:
    """
    Получает последнюю версию миграции у Alembic.

    Returns:
        Последняя версия миграции или None если ее не удалось определить
    """
    try:
        result = subprocess.run(
            ["alembic", "heads", "--verbose"],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
        if result.returncode == 0 and result.stdout:
            # Строки формата: "Revision ID: <rev>"
            for line in result.stdout.splitlines():
                if "Revision ID:" in line:
                    return line.split("Revision ID:", 1)[1].strip()

        logger.warning("⚠️ Не удалось определить последнюю миграцию")
        return None

    except Exception as e:
        logger.warning(f"⚠️ Ошибка при получении последней версии миграции: {e}")
        return None


async def run_migrations() -> bool:
    """
    Запускает миграции Alembic.

    Returns:
        True если миграции применены успешно
    """
    try:
        result = subprocess.run(
            ["alembic", "upgrade", "head"],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )

        if result.returncode == 0:
            logger.info("✅ Миграции успешно применены")
            return True

        logger.error(f"❌ Ошибка при применении миграций: {result.stderr}")
        logger.error(f"❌ stdout: {result.stdout}")
        return False

    except Exception as e:
        logger.error(f"❌ Ошибка при запуске миграций: {e}")
        return False


async def check_and_apply_migrations() -> None:
    """
    Проверяет и применяет миграции при необходимости.

    Ошибки только логируются, чтобы приложение могло запуститься.
    """
    if not settings.auto_migrate:
        logger.info("⚙️ AUTO_MIGRATE=false: автоприменение миграций отключено")
        return

    try:
        current_version = await get_current_migration_version()
        latest_version = get_latest_migration_version()

        if current_version is None:
            logger.info("🔄 База данных пустая, применяем миграции...")
        elif current_version != latest_version:
            logger.info(
                f"🔄 Обнаружены новые миграции: {current_version} -> {latest_version}"
            )
        else:
            logger.info("✅ Миграции актуальны")
            return

        if not await run_migrations():
            logger.warning("⚠️ Не удалось применить миграции, но продолжаем работу")

    except Exception as e:
        logger.warning(f"⚠️ Ошибка при проверке миграций: {e}, но продолжаем работу")
