# -*- coding: utf-8 -*-
"""
Сервис для работы с группами.

Этот модуль содержит бизнес-логику групп: проверку ссылок на курс,
преподавателя и студентов, а также формирование ответов со связанными
данными.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.domain.models import Student
from edcenter.repository.courses import get_course_by_id
from edcenter.repository.groups import (create_group_repo, delete_group_repo,
                                        get_group_by_id, list_groups_repo,
                                        update_group_repo)
from edcenter.repository.students import get_students_by_ids
from edcenter.repository.teachers import get_teacher_by_id
from edcenter.service.serializers import (person_name, serialize_course_short,
                                          serialize_group,
                                          serialize_student_short,
                                          serialize_teacher_short)
from edcenter.utils.exceptions import NotFoundError

RESOURCE = "Группа"
GROUP_COLUMNS = ("name", "course_id", "teacher_id", "days", "time")


async def _ensure_references(
    session: AsyncSession,
    course_id: Optional[int],
    teacher_id: Optional[int],
) -> None:
    """
    Проверить, что курс и преподаватель существуют.

    Raises:
        NotFoundError: Если курс или преподаватель не найден
    """
    if course_id is not None and not await get_course_by_id(session, course_id):
        raise NotFoundError("Курс", course_id)
    if teacher_id is not None and not await get_teacher_by_id(session, teacher_id):
        raise NotFoundError("Преподаватель", teacher_id)


async def _load_students(session: AsyncSession, student_ids: List[int]) -> List[Student]:
    """
    Загрузить студентов по ID, сохраняя уникальность.

    Raises:
        NotFoundError: Если часть студентов не найдена
    """
    unique_ids = list(dict.fromkeys(student_ids))
    students = await get_students_by_ids(session, unique_ids)

    missing = set(unique_ids) - {student.id for student in students}
    if missing:
        raise NotFoundError(
            "Студент", details=f"ID {', '.join(str(i) for i in sorted(missing))}"
        )
    return students


async def list_groups_service(session: AsyncSession) -> List[Dict[str, Any]]:
    """
    Получить список групп с названием курса и именем преподавателя.

    Returns:
        Список словарей {id, name, course, teacher, students_count, days, time}
    """
    groups = await list_groups_repo(session)
    return [
        {
            "id": group.id,
            "name": group.name,
            "course": group.course.name if group.course else None,
            "teacher": (
                person_name(group.teacher.first_name, group.teacher.last_name)
                if group.teacher
                else None
            ),
            "students_count": len(group.students),
            "days": list(group.days or []),
            "time": group.time,
        }
        for group in groups
    ]


async def create_group_service(
    session: AsyncSession, data: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Создать группу.

    Args:
        session: Сессия базы данных
        data: Поля группы (name, course_id, teacher_id, students, days, time)

    Returns:
        Созданная группа

    Raises:
        NotFoundError: Если курс, преподаватель или студенты не найдены
    """
    await _ensure_references(session, data.get("course_id"), data.get("teacher_id"))
    students = await _load_students(session, data.get("students") or [])

    group = await create_group_repo(
        session=session,
        name=data["name"],
        course_id=data.get("course_id"),
        teacher_id=data.get("teacher_id"),
        students=students,
        days=data.get("days") or [],
        time=data.get("time"),
    )
    return serialize_group(group)


async def get_group_service(session: AsyncSession, group_id: int) -> Dict[str, Any]:
    """
    Получить группу с курсом, преподавателем и студентами.

    Raises:
        NotFoundError: Если группа не найдена
    """
    group = await get_group_by_id(session, group_id)
    if not group:
        raise NotFoundError(RESOURCE, group_id)

    return {
        "id": group.id,
        "name": group.name,
        "days": list(group.days or []),
        "time": group.time,
        "course": serialize_course_short(group.course) if group.course else None,
        "teacher": serialize_teacher_short(group.teacher) if group.teacher else None,
        "students": [serialize_student_short(s) for s in group.students],
    }


async def update_group_service(
    session: AsyncSession, group_id: int, data: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Обновить группу переданными полями.

    Переданный список students заменяет состав группы целиком.

    Raises:
        NotFoundError: Если группа или связанные сущности не найдены
    """
    fields = {key: data[key] for key in GROUP_COLUMNS if key in data}
    if "days" in fields and fields["days"] is None:
        fields["days"] = []

    await _ensure_references(session, fields.get("course_id"), fields.get("teacher_id"))

    students = None
    if data.get("students") is not None:
        students = await _load_students(session, data["students"])

    group = await update_group_repo(session, group_id, fields, students)
    if not group:
        raise NotFoundError(RESOURCE, group_id)
    return serialize_group(group)


async def delete_group_service(session: AsyncSession, group_id: int) -> Dict[str, Any]:
    """
    Удалить группу. Студенты группы остаются без группы.

    Raises:
        NotFoundError: Если группа не найдена
    """
    if not await delete_group_repo(session, group_id):
        raise NotFoundError(RESOURCE, group_id)
    return {"success": True, "message": "Group is deleted"}
