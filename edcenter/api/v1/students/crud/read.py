# -*- coding: utf-8 -*-
"""
edcenter/api/v1/students/crud/read.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для чтения студентов.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.clients.database_client import get_db
from edcenter.service.students import (get_student_service,
                                       list_students_service)

from ..schemas import StudentDetailSchema, StudentListItemSchema

router = APIRouter(prefix="/students", tags=["🎓 Студенты - 📖 Чтение"])


@router.get("", response_model=List[StudentListItemSchema])
async def list_students_endpoint(
    session: AsyncSession = Depends(get_db),
) -> List[StudentListItemSchema]:
    """Получить всех студентов с группой и преподавателем."""
    try:
        logger.info("Запрос списка студентов")
        students = await list_students_service(session)
        logger.info(f"Найдено студентов: {len(students)}")
        return [StudentListItemSchema.model_validate(s) for s in students]
    except Exception as e:
        logger.error(f"Ошибка получения списка студентов: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка получения списка студентов",
        )


@router.get("/select/{student_id}", response_model=dict)
async def get_student_endpoint(
    student_id: int,
    session: AsyncSession = Depends(get_db),
) -> dict:
    """
    Получить карточку студента.

    Карточка содержит группу, преподавателя, курс и историю платежей
    (от новых к старым). Для несуществующего студента возвращается {}.

    Args:
        student_id: ID студента
        session: Сессия базы данных

    Returns:
        Карточка студента
    """
    try:
        logger.info(f"Запрос студента по ID: {student_id}")
        student_data = await get_student_service(session, student_id)
        if not student_data:
            logger.warning(f"Студент с ID {student_id} не найден")
            return {}
        return StudentDetailSchema.model_validate(student_data).model_dump(
            mode="json", exclude_unset=True
        )
    except Exception as e:
        logger.error(f"Ошибка получения студента {student_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка получения студента",
        )
