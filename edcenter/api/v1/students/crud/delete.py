# -*- coding: utf-8 -*-
"""
edcenter/api/v1/students/crud/delete.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для удаления студентов.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.clients.database_client import get_db
from edcenter.service.students import delete_student_service

from ...shared.schemas import StatusResponseSchema

router = APIRouter(prefix="/students", tags=["🎓 Студенты - 🗑️ Удаление"])


@router.delete("/select/{student_id}", response_model=StatusResponseSchema)
async def delete_student_endpoint(
    student_id: int,
    session: AsyncSession = Depends(get_db),
) -> StatusResponseSchema:
    """Удалить студента вместе с историей платежей."""
    try:
        logger.info(f"Удаление студента {student_id}")
        result = await delete_student_service(session, student_id)
        return StatusResponseSchema.model_validate(result)
    except Exception as e:
        logger.error(f"Ошибка удаления студента {student_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка удаления студента",
        )
