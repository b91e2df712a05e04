# -*- coding: utf-8 -*-
"""
Сервис для работы с преподавателями.
"""

from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.repository.teachers import (create_teacher_repo,
                                          delete_teacher_repo,
                                          get_teacher_by_id,
                                          list_teachers_repo,
                                          update_teacher_repo)
from edcenter.service.serializers import (serialize_group_short,
                                          serialize_teacher, split_person_name)
from edcenter.utils.exceptions import NotFoundError

RESOURCE = "Преподаватель"


def teacher_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """Колонки модели из переданных полей преподавателя."""
    fields = {}
    if "name" in data:
        fields.update(split_person_name(data["name"]))
    if "phone" in data:
        fields["phone"] = data["phone"]
    return fields


async def list_teachers_service(session: AsyncSession) -> List[Dict[str, Any]]:
    """Получить всех преподавателей."""
    return [serialize_teacher(t) for t in await list_teachers_repo(session)]


async def create_teacher_service(
    session: AsyncSession, data: Dict[str, Any]
) -> Dict[str, Any]:
    """Создать преподавателя."""
    teacher = await create_teacher_repo(session, **teacher_fields(data))
    return serialize_teacher(teacher)


async def get_teacher_service(session: AsyncSession, teacher_id: int) -> Dict[str, Any]:
    """
    Получить преподавателя вместе с группами, которые он ведет.

    Raises:
        NotFoundError: Если преподаватель не найден
    """
    teacher = await get_teacher_by_id(session, teacher_id, with_groups=True)
    if not teacher:
        raise NotFoundError(RESOURCE, teacher_id)

    data = serialize_teacher(teacher)
    data["groups"] = [serialize_group_short(g) for g in teacher.groups]
    return data


async def update_teacher_service(
    session: AsyncSession, teacher_id: int, data: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Обновить преподавателя переданными полями.

    Raises:
        NotFoundError: Если преподаватель не найден
    """
    teacher = await update_teacher_repo(session, teacher_id, **teacher_fields(data))
    if not teacher:
        raise NotFoundError(RESOURCE, teacher_id)
    return serialize_teacher(teacher)


async def delete_teacher_service(session: AsyncSession, teacher_id: int) -> Dict[str, Any]:
    """
    Удалить преподавателя.

    Raises:
        NotFoundError: Если преподаватель не найден
    """
    if not await delete_teacher_repo(session, teacher_id):
        raise NotFoundError(RESOURCE, teacher_id)
    return {"success": True, "message": "Teacher is deleted"}
