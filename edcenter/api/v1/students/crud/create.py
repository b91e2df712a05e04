# -*- coding: utf-8 -*-
"""
edcenter/api/v1/students/crud/create.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для создания студентов.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.clients.database_client import get_db
from edcenter.service.students import create_student_service

from ..schemas import StudentCreateSchema, StudentReadSchema

router = APIRouter(prefix="/students", tags=["🎓 Студенты - ➕ Создание"])


@router.post("", response_model=StudentReadSchema)
async def create_student_endpoint(
    student_data: StudentCreateSchema,
    session: AsyncSession = Depends(get_db),
) -> StudentReadSchema:
    """Создать нового студента."""
    try:
        logger.info(f"Создание студента: {student_data.name}")
        student = await create_student_service(
            session, student_data.model_dump(exclude_unset=True)
        )
        logger.info(f"Студент успешно создан с ID {student['id']}")
        return StudentReadSchema.model_validate(student)
    except Exception as e:
        logger.error(f"Ошибка создания студента: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка создания студента",
        )
