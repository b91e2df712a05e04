# -*- coding: utf-8 -*-
"""
Сервис для работы с курсами.
"""

from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.repository.courses import (create_course_repo,
                                         delete_course_repo, get_course_by_id,
                                         list_courses_repo, update_course_repo)
from edcenter.service.serializers import (serialize_course,
                                          serialize_group_short)
from edcenter.utils.exceptions import NotFoundError

RESOURCE = "Курс"
COURSE_COLUMNS = ("name", "price")


async def list_courses_service(session: AsyncSession) -> List[Dict[str, Any]]:
    """Получить все курсы."""
    return [serialize_course(c) for c in await list_courses_repo(session)]


async def create_course_service(
    session: AsyncSession, data: Dict[str, Any]
) -> Dict[str, Any]:
    """Создать курс."""
    fields = {key: data[key] for key in COURSE_COLUMNS if key in data}
    course = await create_course_repo(session, **fields)
    return serialize_course(course)


async def get_course_service(session: AsyncSession, course_id: int) -> Dict[str, Any]:
    """
    Получить курс вместе с его группами.

    Raises:
        NotFoundError: Если курс не найден
    """
    course = await get_course_by_id(session, course_id, with_groups=True)
    if not course:
        raise NotFoundError(RESOURCE, course_id)

    data = serialize_course(course)
    data["groups"] = [serialize_group_short(g) for g in course.groups]
    return data


async def update_course_service(
    session: AsyncSession, course_id: int, data: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Обновить курс переданными полями.

    Raises:
        NotFoundError: Если курс не найден
    """
    fields = {key: data[key] for key in COURSE_COLUMNS if key in data}
    course = await update_course_repo(session, course_id, **fields)
    if not course:
        raise NotFoundError(RESOURCE, course_id)
    return serialize_course(course)


async def delete_course_service(session: AsyncSession, course_id: int) -> Dict[str, Any]:
    """
    Удалить курс.

    Raises:
        NotFoundError: Если курс не найден
    """
    if not await delete_course_repo(session, course_id):
        raise NotFoundError(RESOURCE, course_id)
    return {"success": True, "message": "Course is deleted"}
