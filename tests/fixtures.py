# -*- coding: utf-8 -*-
"""
Фикстуры для тестирования учебного центра
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.domain.models import Course, Group, Payment, Student, Teacher
from edcenter.repository.base import create_item


async def create_test_student(
    session: AsyncSession,
    first_name: str = "John",
    last_name: str = "Smith",
    phone: str = "+998901234567",
    info: Optional[str] = None,
) -> Student:
    """Создать тестового студента"""
    return await create_item(
        session,
        Student,
        first_name=first_name,
        last_name=last_name,
        phone=phone,
        info=info,
    )


async def create_test_teacher(
    session: AsyncSession,
    first_name: str = "Dilnoza",
    last_name: str = "Rahimova",
    phone: str = "+998907778899",
) -> Teacher:
    """Создать тестового преподавателя"""
    return await create_item(
        session,
        Teacher,
        first_name=first_name,
        last_name=last_name,
        phone=phone,
    )


async def create_test_course(
    session: AsyncSession, name: str = "English A2", price: float = 500000.0
) -> Course:
    """Создать тестовый курс"""
    return await create_item(session, Course, name=name, price=price)


async def create_test_group(
    session: AsyncSession,
    name: str = "English A2 - вечер",
    course_id: Optional[int] = None,
    teacher_id: Optional[int] = None,
    students: Optional[List[Student]] = None,
    days: Optional[List[str]] = None,
    time: str = "18:00",
) -> Group:
    """Создать тестовую группу с составом студентов"""
    return await create_item(
        session,
        Group,
        name=name,
        course_id=course_id,
        teacher_id=teacher_id,
        students=list(students or []),
        days=days if days is not None else ["Mon", "Wed", "Fri"],
        time=time,
    )


async def create_test_payment(
    session: AsyncSession,
    student_id: int,
    date: datetime,
    quantity: float = 100000.0,
    method: str = "cash",
    info: Optional[str] = None,
) -> Payment:
    """Создать тестовый платеж"""
    return await create_item(
        session,
        Payment,
        student_id=student_id,
        date=date,
        quantity=quantity,
        method=method,
        info=info,
    )
