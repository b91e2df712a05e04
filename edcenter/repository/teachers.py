# -*- coding: utf-8 -*-
"""
Репозиторий для работы с преподавателями.
"""

from typing import Any, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from edcenter.domain.models import Teacher

from .base import create_item, delete_item, find_item, list_items, update_item


async def list_teachers_repo(session: AsyncSession) -> List[Teacher]:
    """Получить всех преподавателей."""
    return await list_items(session, Teacher)


async def get_teacher_by_id(
    session: AsyncSession, teacher_id: int, with_groups: bool = False
) -> Optional[Teacher]:
    """
    Получить преподавателя по ID.

    Args:
        session: Сессия базы данных
        teacher_id: ID преподавателя
        with_groups: Загрузить группы, которые ведет преподаватель

    Returns:
        Преподаватель или None если не найден
    """
    options = [selectinload(Teacher.groups)] if with_groups else []
    return await find_item(session, Teacher, teacher_id, *options)


async def create_teacher_repo(session: AsyncSession, **fields: Any) -> Teacher:
    """Создать преподавателя."""
    return await create_item(session, Teacher, **fields)


async def update_teacher_repo(
    session: AsyncSession, teacher_id: int, **fields: Any
) -> Optional[Teacher]:
    """Обновить преподавателя. Возвращает None если он не найден."""
    return await update_item(session, Teacher, teacher_id, **fields)


async def delete_teacher_repo(session: AsyncSession, teacher_id: int) -> bool:
    """
    Удалить преподавателя.

    Группы преподавателя остаются, ссылка на преподавателя в них обнуляется.
    """
    return await delete_item(session, Teacher, teacher_id, selectinload(Teacher.groups))
