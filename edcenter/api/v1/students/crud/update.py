# -*- coding: utf-8 -*-
"""
edcenter/api/v1/students/crud/update.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для обновления студентов.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.clients.database_client import get_db
from edcenter.service.students import update_student_service

from ..schemas import StudentReadSchema, StudentUpdateSchema

router = APIRouter(prefix="/students", tags=["🎓 Студенты - ✏️ Обновление"])


@router.patch("/select/{student_id}", response_model=Optional[StudentReadSchema])
async def update_student_endpoint(
    student_id: int,
    student_data: StudentUpdateSchema,
    session: AsyncSession = Depends(get_db),
) -> Optional[StudentReadSchema]:
    """
    Обновить студента переданными полями.

    Возвращает null, если студент не найден.
    """
    try:
        logger.info(f"Обновление студента {student_id}")
        student = await update_student_service(
            session, student_id, student_data.model_dump(exclude_unset=True)
        )
        if student is None:
            logger.warning(f"Студент с ID {student_id} не найден для обновления")
            return None
        logger.info(f"Студент {student_id} успешно обновлен")
        return StudentReadSchema.model_validate(student)
    except Exception as e:
        logger.error(f"Ошибка обновления студента {student_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка обновления студента",
        )
