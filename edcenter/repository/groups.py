# -*- coding: utf-8 -*-
"""
Репозиторий для CRUD операций с группами.

Этот модуль содержит функции для выборки, создания, обновления и удаления
групп вместе с их составом студентов.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from edcenter.domain.models import Group, Student

# Схемы не импортируем в repository - работаем только с моделями

GROUP_LOAD_OPTIONS = (
    selectinload(Group.teacher),
    selectinload(Group.course),
    selectinload(Group.students),
)


async def list_groups_repo(session: AsyncSession) -> List[Group]:
    """
    Получить все группы с преподавателем, курсом и студентами.

    Args:
        session: Сессия базы данных

    Returns:
        Список групп, упорядоченный по ID
    """
    result = await session.execute(
        select(Group)
        .options(*GROUP_LOAD_OPTIONS)
        .order_by(Group.id)
        .execution_options(populate_existing=True)
    )
    return list(result.scalars().all())


async def get_group_by_id(session: AsyncSession, group_id: int) -> Optional[Group]:
    """
    Получить группу по ID.

    Args:
        session: Сессия базы данных
        group_id: ID группы

    Returns:
        Группа или None если не найдена
    """
    result = await session.execute(
        select(Group)
        .options(*GROUP_LOAD_OPTIONS)
        .where(Group.id == group_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def create_group_repo(
    session: AsyncSession,
    name: str,
    course_id: Optional[int],
    teacher_id: Optional[int],
    students: List[Student],
    days: List[str],
    time: Optional[str],
) -> Group:
    """
    Создать новую группу.

    Args:
        session: Сессия базы данных
        name: Название группы
        course_id: ID курса
        teacher_id: ID преподавателя
        students: Студенты группы
        days: Дни занятий
        time: Время занятий

    Returns:
        Созданная группа
    """
    group = Group(
        name=name,
        course_id=course_id,
        teacher_id=teacher_id,
        students=students,
        days=days,
        time=time,
    )

    session.add(group)
    await session.commit()

    return await get_group_by_id(session, group.id)


async def update_group_repo(
    session: AsyncSession,
    group_id: int,
    fields: Dict[str, Any],
    students: Optional[List[Student]] = None,
) -> Optional[Group]:
    """
    Обновить группу.

    Args:
        session: Сессия базы данных
        group_id: ID группы
        fields: Значения колонок для обновления
        students: Новый состав студентов, если передан

    Returns:
        Обновленная группа или None если не найдена
    """
    group = await get_group_by_id(session, group_id)
    if not group:
        return None

    for key, value in fields.items():
        setattr(group, key, value)

    if students is not None:
        group.students = students

    await session.commit()

    return await get_group_by_id(session, group_id)


async def delete_group_repo(session: AsyncSession, group_id: int) -> bool:
    """
    Удалить группу навсегда. Студенты остаются без группы.

    Args:
        session: Сессия базы данных
        group_id: ID группы

    Returns:
        True если группа удалена, False если не найдена
    """
    group = await get_group_by_id(session, group_id)
    if not group:
        return False

    await session.delete(group)
    await session.commit()

    return True
