# -*- coding: utf-8 -*-
"""
Сервис для работы со студентами.

Этот модуль содержит операции над студентами: список с группой и
преподавателем, карточку студента с курсом и историей платежей,
создание, редактирование, удаление и добавление платежей.
"""

from typing import Any, Dict, List, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.repository.students import (add_payment_repo,
                                          create_student_repo,
                                          delete_student_repo,
                                          get_student_by_id,
                                          get_student_group_repo,
                                          get_student_payments_repo,
                                          list_students_with_groups_repo,
                                          list_unassigned_students_repo,
                                          update_student_repo)
from edcenter.service.serializers import (person_name, serialize_course_short,
                                          serialize_payment, serialize_student,
                                          serialize_student_short,
                                          serialize_teacher_short,
                                          split_person_name)
from edcenter.utils.coercion import (coerce_quantity, optional_text,
                                     parse_payment_date)

STUDENT_COLUMNS = ("phone", "info")


def build_payment_fields(
    date: Any = None, quantity: Any = None, method: Any = None, info: Any = None
) -> Dict[str, Any]:
    """
    Приводит поля платежа из тела запроса к значениям для хранения.

    Дата по умолчанию - текущий момент, сумма по умолчанию - 0.
    """
    return {
        "date": parse_payment_date(date),
        "quantity": coerce_quantity(quantity),
        "method": optional_text(method),
        "info": optional_text(info),
    }


async def list_students_service(session: AsyncSession) -> List[Dict[str, Any]]:
    """
    Получить список студентов с названием группы и именем преподавателя.

    Если студент состоит в нескольких группах, берется первая по ID.

    Args:
        session: Сессия базы данных

    Returns:
        Список словарей {id, name, phone, group, teacher}
    """
    rows = await list_students_with_groups_repo(session)

    students: Dict[int, Dict[str, Any]] = {}
    for student, group_name, teacher_first, teacher_last in rows:
        if student.id in students:
            continue
        teacher = None
        if teacher_first is not None or teacher_last is not None:
            teacher = person_name(teacher_first, teacher_last)
        students[student.id] = {
            "id": student.id,
            "name": person_name(student.first_name, student.last_name),
            "phone": student.phone,
            "group": group_name,
            "teacher": teacher,
        }

    return list(students.values())


async def create_student_service(
    session: AsyncSession, data: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Создать студента из тела запроса.

    Args:
        session: Сессия базы данных
        data: Поля студента (name, phone, info, payment_history)

    Returns:
        Созданный студент
    """
    payments = [
        build_payment_fields(**payment) for payment in data.get("payment_history") or []
    ]
    student = await create_student_repo(
        session,
        phone=data.get("phone"),
        info=data.get("info"),
        payments=payments,
        **split_person_name(data.get("name")),
    )
    return serialize_student(student)


async def get_student_service(
    session: AsyncSession, student_id: int
) -> Dict[str, Any]:
    """
    Получить карточку студента.

    Карточка объединяет студента, его группу, преподавателя и курс группы,
    а также историю платежей от новых к старым. Ключи group, teacher и
    course отсутствуют, если их нет.

    Args:
        session: Сессия базы данных
        student_id: ID студента

    Returns:
        Словарь карточки или пустой словарь если студент не найден
    """
    student = await get_student_by_id(session, student_id)
    if not student:
        return {}

    payments = await get_student_payments_repo(session, student_id)
    group = await get_student_group_repo(session, student_id)

    data: Dict[str, Any] = {
        "id": student.id,
        "name": person_name(student.first_name, student.last_name),
        "phone": student.phone,
        "info": student.info,
        "payment_history": [serialize_payment(p) for p in payments],
    }

    if group:
        data["group"] = {
            "id": group.id,
            "name": group.name,
            "course": group.course_id,
            "teacher": group.teacher_id,
            "days": list(group.days or []),
            "time": group.time,
        }
        if group.teacher:
            data["teacher"] = serialize_teacher_short(group.teacher)
        if group.course:
            data["course"] = serialize_course_short(group.course)

    return data


async def update_student_service(
    session: AsyncSession, student_id: int, data: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    """
    Обновить студента полями из тела запроса.

    Переданное имя заменяется целиком, переданная история платежей
    заменяет текущую. ID из тела запроса не используется.

    Args:
        session: Сессия базы данных
        student_id: ID студента
        data: Переданные поля студента

    Returns:
        Обновленный студент или None если не найден
    """
    fields = {key: data[key] for key in STUDENT_COLUMNS if key in data}
    if "name" in data:
        fields.update(split_person_name(data["name"]))

    payments = None
    if data.get("payment_history") is not None:
        payments = [build_payment_fields(**p) for p in data["payment_history"]]

    student = await update_student_repo(session, student_id, fields, payments)
    if not student:
        return None
    return serialize_student(student)


async def delete_student_service(
    session: AsyncSession, student_id: int
) -> Dict[str, Any]:
    """
    Удалить студента. Всегда сообщает об успехе.

    Args:
        session: Сессия базы данных
        student_id: ID студента

    Returns:
        {success, message}
    """
    deleted = await delete_student_repo(session, student_id)
    if not deleted:
        logger.debug(f"Студент {student_id} не найден, удалять нечего")
    return {"success": True, "message": "Student is deleted"}


async def make_payment_service(
    session: AsyncSession,
    student_id: int,
    date: Any = None,
    quantity: Any = None,
    method: Any = None,
    info: Any = None,
) -> Dict[str, Any]:
    """
    Добавить платеж в историю студента.

    Args:
        session: Сессия базы данных
        student_id: ID студента
        date: Дата платежа (по умолчанию - текущий момент)
        quantity: Сумма (нечисловое значение сохраняется как 0)
        method: Способ оплаты
        info: Комментарий

    Returns:
        {success, message}
    """
    await add_payment_repo(
        session,
        student_id,
        **build_payment_fields(date=date, quantity=quantity, method=method, info=info),
    )
    return {"success": True, "message": "Payment is added"}


async def list_unassigned_students_service(
    session: AsyncSession,
) -> List[Dict[str, Any]]:
    """Получить студентов без группы в виде {id, name, phone}."""
    students = await list_unassigned_students_repo(session)
    return [serialize_student_short(student) for student in students]
