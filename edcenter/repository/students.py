# -*- coding: utf-8 -*-
"""
Репозиторий для работы со студентами.

Этот модуль содержит запросы к таблицам students, payments и group_students:
выборки с join'ами на группы и преподавателей, создание, обновление,
удаление студентов и добавление платежей.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from loguru import logger
from sqlalchemy import Row, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from edcenter.domain.models import (Group, Payment, Student, Teacher,
                                    group_students)

# Схемы не импортируем в repository - работаем только с моделями


async def get_student_by_id(
    session: AsyncSession, student_id: int, with_groups: bool = False
) -> Optional[Student]:
    """
    Получить студента по ID вместе с платежами.

    Args:
        session: Сессия базы данных
        student_id: ID студента
        with_groups: Загрузить также группы студента

    Returns:
        Студент или None если не найден
    """
    options = [selectinload(Student.payments)]
    if with_groups:
        options.append(selectinload(Student.groups))

    result = await session.execute(
        select(Student)
        .options(*options)
        .where(Student.id == student_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def list_students_with_groups_repo(
    session: AsyncSession,
) -> Sequence[Row]:
    """
    Получить всех студентов с названием группы и именем преподавателя.

    Студент без группы возвращается одной строкой с пустыми полями группы.
    Студент в нескольких группах возвращается несколькими строками,
    упорядоченными по ID группы.

    Args:
        session: Сессия базы данных

    Returns:
        Строки (Student, group_name, teacher_first_name, teacher_last_name)
    """
    stmt = (
        select(
            Student,
            Group.name.label("group_name"),
            Teacher.first_name.label("teacher_first_name"),
            Teacher.last_name.label("teacher_last_name"),
        )
        .outerjoin(group_students, group_students.c.student_id == Student.id)
        .outerjoin(Group, Group.id == group_students.c.group_id)
        .outerjoin(Teacher, Teacher.id == Group.teacher_id)
        .order_by(Student.id, Group.id)
    )
    result = await session.execute(stmt)
    return result.all()


async def list_unassigned_students_repo(session: AsyncSession) -> List[Student]:
    """
    Получить студентов, не состоящих ни в одной группе.

    Args:
        session: Сессия базы данных

    Returns:
        Список студентов
    """
    result = await session.execute(
        select(Student).where(~Student.groups.any()).order_by(Student.id)
    )
    return list(result.scalars().all())


async def list_students_repo(session: AsyncSession) -> List[Student]:
    """Получить всех студентов без связанных данных."""
    result = await session.execute(select(Student).order_by(Student.id))
    return list(result.scalars().all())


async def get_student_group_repo(
    session: AsyncSession, student_id: int
) -> Optional[Group]:
    """
    Получить первую (по ID) группу студента с преподавателем и курсом.

    Args:
        session: Сессия базы данных
        student_id: ID студента

    Returns:
        Группа или None если студент не состоит в группе
    """
    result = await session.execute(
        select(Group)
        .options(selectinload(Group.teacher), selectinload(Group.course))
        .where(Group.students.any(Student.id == student_id))
        .order_by(Group.id)
        .limit(1)
        .execution_options(populate_existing=True)
    )
    return result.scalars().first()


async def get_student_payments_repo(
    session: AsyncSession, student_id: int
) -> List[Payment]:
    """
    Получить историю платежей студента, от новых к старым.

    Args:
        session: Сессия базы данных
        student_id: ID студента

    Returns:
        Список платежей, отсортированный по дате по убыванию
    """
    result = await session.execute(
        select(Payment)
        .where(Payment.student_id == student_id)
        .order_by(Payment.date.desc(), Payment.id.desc())
    )
    return list(result.scalars().all())


async def create_student_repo(
    session: AsyncSession,
    first_name: Optional[str],
    last_name: Optional[str],
    phone: Optional[str],
    info: Optional[str],
    payments: Optional[List[Dict[str, Any]]] = None,
) -> Student:
    """
    Создать нового студента.

    Args:
        session: Сессия базы данных
        first_name: Имя
        last_name: Фамилия
        phone: Телефон
        info: Произвольная информация
        payments: Начальная история платежей (словари полей Payment)

    Returns:
        Созданный студент с загруженными платежами
    """
    student = Student(
        first_name=first_name,
        last_name=last_name,
        phone=phone,
        info=info,
        payments=[Payment(**payment) for payment in payments or []],
    )

    session.add(student)
    await session.commit()

    return await get_student_by_id(session, student.id)


async def update_student_repo(
    session: AsyncSession,
    student_id: int,
    fields: Dict[str, Any],
    payments: Optional[List[Dict[str, Any]]] = None,
) -> Optional[Student]:
    """
    Обновить студента.

    Args:
        session: Сессия базы данных
        student_id: ID студента
        fields: Значения колонок для обновления
        payments: Новая история платежей (заменяет текущую), если передана

    Returns:
        Обновленный студент или None если не найден
    """
    student = await get_student_by_id(session, student_id)
    if not student:
        return None

    for key, value in fields.items():
        setattr(student, key, value)

    if payments is not None:
        student.payments = [Payment(**payment) for payment in payments]

    await session.commit()

    return await get_student_by_id(session, student_id)


async def delete_student_repo(session: AsyncSession, student_id: int) -> bool:
    """
    Удалить студента вместе с платежами и членством в группах.

    Args:
        session: Сессия базы данных
        student_id: ID студента

    Returns:
        True если студент удален, False если не найден
    """
    student = await get_student_by_id(session, student_id, with_groups=True)
    if not student:
        return False

    await session.delete(student)
    await session.commit()

    return True


async def add_payment_repo(
    session: AsyncSession,
    student_id: int,
    date: datetime,
    quantity: float,
    method: Optional[str],
    info: Optional[str],
) -> Optional[Payment]:
    """
    Добавить платеж в историю студента.

    Args:
        session: Сессия базы данных
        student_id: ID студента
        date: Дата платежа
        quantity: Сумма
        method: Способ оплаты
        info: Комментарий

    Returns:
        Созданный платеж или None если студент не найден
    """
    exists = await session.execute(select(Student.id).where(Student.id == student_id))
    if exists.scalar_one_or_none() is None:
        logger.warning(f"Студент {student_id} не найден, платеж не сохранен")
        return None

    payment = Payment(
        student_id=student_id,
        date=date,
        quantity=quantity,
        method=method,
        info=info,
    )
    session.add(payment)
    await session.commit()
    await session.refresh(payment)

    return payment


async def get_students_by_ids(
    session: AsyncSession, student_ids: List[int]
) -> List[Student]:
    """Получить студентов по списку ID."""
    if not student_ids:
        return []
    result = await session.execute(
        select(Student).where(Student.id.in_(student_ids)).order_by(Student.id)
    )
    return list(result.scalars().all())
