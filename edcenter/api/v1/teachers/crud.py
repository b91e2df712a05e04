# -*- coding: utf-8 -*-
"""
edcenter/api/v1/teachers/crud.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для управления преподавателями.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.clients.database_client import get_db
from edcenter.service.teachers import (create_teacher_service,
                                       delete_teacher_service,
                                       get_teacher_service,
                                       list_teachers_service,
                                       update_teacher_service)

from ..shared.schemas import StatusResponseSchema
from .schemas import (TeacherCreateSchema, TeacherDetailSchema,
                      TeacherReadSchema, TeacherUpdateSchema)

router = APIRouter(prefix="/teachers", tags=["👨‍🏫 Преподаватели - ⚙️ Управление"])


@router.get("", response_model=List[TeacherReadSchema])
async def list_teachers_endpoint(
    session: AsyncSession = Depends(get_db),
) -> List[TeacherReadSchema]:
    """Получить всех преподавателей."""
    try:
        logger.info("Запрос списка преподавателей")
        teachers = await list_teachers_service(session)
        logger.info(f"Найдено преподавателей: {len(teachers)}")
        return [TeacherReadSchema.model_validate(t) for t in teachers]
    except Exception as e:
        logger.error(f"Ошибка получения списка преподавателей: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка получения списка преподавателей",
        )


@router.post("", response_model=TeacherReadSchema, status_code=status.HTTP_201_CREATED)
async def create_teacher_endpoint(
    teacher_data: TeacherCreateSchema,
    session: AsyncSession = Depends(get_db),
) -> TeacherReadSchema:
    """Создать преподавателя."""
    try:
        logger.info(f"Создание преподавателя: {teacher_data.name}")
        teacher = await create_teacher_service(
            session, teacher_data.model_dump(exclude_unset=True)
        )
        logger.info(f"Преподаватель успешно создан с ID {teacher['id']}")
        return TeacherReadSchema.model_validate(teacher)
    except Exception as e:
        logger.error(f"Ошибка создания преподавателя: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка создания преподавателя",
        )


@router.get("/select/{teacher_id}", response_model=TeacherDetailSchema)
async def get_teacher_endpoint(
    teacher_id: int,
    session: AsyncSession = Depends(get_db),
) -> TeacherDetailSchema:
    """Получить преподавателя с его группами."""
    try:
        logger.info(f"Запрос преподавателя по ID: {teacher_id}")
        teacher = await get_teacher_service(session, teacher_id)
        return TeacherDetailSchema.model_validate(teacher)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Ошибка получения преподавателя {teacher_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка получения преподавателя",
        )


@router.patch("/select/{teacher_id}", response_model=TeacherReadSchema)
async def update_teacher_endpoint(
    teacher_id: int,
    teacher_data: TeacherUpdateSchema,
    session: AsyncSession = Depends(get_db),
) -> TeacherReadSchema:
    """Обновить преподавателя."""
    try:
        logger.info(f"Обновление преподавателя {teacher_id}")
        teacher = await update_teacher_service(
            session, teacher_id, teacher_data.model_dump(exclude_unset=True)
        )
        logger.info(f"Преподаватель {teacher_id} успешно обновлен")
        return TeacherReadSchema.model_validate(teacher)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Ошибка обновления преподавателя {teacher_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка обновления преподавателя",
        )


@router.delete("/select/{teacher_id}", response_model=StatusResponseSchema)
async def delete_teacher_endpoint(
    teacher_id: int,
    session: AsyncSession = Depends(get_db),
) -> StatusResponseSchema:
    """Удалить преподавателя. Его группы остаются без преподавателя."""
    try:
        logger.info(f"Удаление преподавателя {teacher_id}")
        result = await delete_teacher_service(session, teacher_id)
        logger.info(f"Преподаватель {teacher_id} удален")
        return StatusResponseSchema.model_validate(result)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Ошибка удаления преподавателя {teacher_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка удаления преподавателя",
        )
