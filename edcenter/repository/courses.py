# -*- coding: utf-8 -*-
"""
Репозиторий для работы с курсами.
"""

from typing import Any, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from edcenter.domain.models import Course

from .base import create_item, delete_item, find_item, list_items, update_item


async def list_courses_repo(session: AsyncSession) -> List[Course]:
    """Получить все курсы."""
    return await list_items(session, Course)


async def get_course_by_id(
    session: AsyncSession, course_id: int, with_groups: bool = False
) -> Optional[Course]:
    """Получить курс по ID, при необходимости вместе с группами."""
    options = [selectinload(Course.groups)] if with_groups else []
    return await find_item(session, Course, course_id, *options)


async def create_course_repo(session: AsyncSession, **fields: Any) -> Course:
    """Создать курс."""
    return await create_item(session, Course, **fields)


async def update_course_repo(
    session: AsyncSession, course_id: int, **fields: Any
) -> Optional[Course]:
    """Обновить курс. Возвращает None если он не найден."""
    return await update_item(session, Course, course_id, **fields)


async def delete_course_repo(session: AsyncSession, course_id: int) -> bool:
    """Удалить курс. Ссылка на курс в группах обнуляется."""
    return await delete_item(session, Course, course_id, selectinload(Course.groups))
