# -*- coding: utf-8 -*-
"""
edcenter/api/v1/courses/crud.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для управления курсами.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.clients.database_client import get_db
from edcenter.service.courses import (create_course_service,
                                      delete_course_service,
                                      get_course_service,
                                      list_courses_service,
                                      update_course_service)

from ..shared.schemas import StatusResponseSchema
from .schemas import (CourseCreateSchema, CourseDetailSchema,
                      CourseReadSchema, CourseUpdateSchema)

router = APIRouter(prefix="/courses", tags=["📚 Курсы - ⚙️ Управление"])


@router.get("", response_model=List[CourseReadSchema])
async def list_courses_endpoint(
    session: AsyncSession = Depends(get_db),
) -> List[CourseReadSchema]:
    """Получить все курсы."""
    try:
        logger.info("Запрос списка курсов")
        courses = await list_courses_service(session)
        return [CourseReadSchema.model_validate(c) for c in courses]
    except Exception as e:
        logger.error(f"Ошибка получения списка курсов: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка получения списка курсов",
        )


@router.post("", response_model=CourseReadSchema, status_code=status.HTTP_201_CREATED)
async def create_course_endpoint(
    course_data: CourseCreateSchema,
    session: AsyncSession = Depends(get_db),
) -> CourseReadSchema:
    """Создать курс."""
    try:
        logger.info(f"Создание курса: {course_data.name}")
        course = await create_course_service(
            session, course_data.model_dump(exclude_unset=True)
        )
        logger.info(f"Курс {course_data.name} успешно создан с ID {course['id']}")
        return CourseReadSchema.model_validate(course)
    except Exception as e:
        logger.error(f"Ошибка создания курса {course_data.name}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка создания курса",
        )


@router.get("/select/{course_id}", response_model=CourseDetailSchema)
async def get_course_endpoint(
    course_id: int,
    session: AsyncSession = Depends(get_db),
) -> CourseDetailSchema:
    """Получить курс с его группами."""
    try:
        logger.info(f"Запрос курса по ID: {course_id}")
        course = await get_course_service(session, course_id)
        return CourseDetailSchema.model_validate(course)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Ошибка получения курса {course_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка получения курса",
        )


@router.patch("/select/{course_id}", response_model=CourseReadSchema)
async def update_course_endpoint(
    course_id: int,
    course_data: CourseUpdateSchema,
    session: AsyncSession = Depends(get_db),
) -> CourseReadSchema:
    """Обновить курс."""
    try:
        logger.info(f"Обновление курса {course_id}")
        course = await update_course_service(
            session, course_id, course_data.model_dump(exclude_unset=True)
        )
        return CourseReadSchema.model_validate(course)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Ошибка обновления курса {course_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка обновления курса",
        )


@router.delete("/select/{course_id}", response_model=StatusResponseSchema)
async def delete_course_endpoint(
    course_id: int,
    session: AsyncSession = Depends(get_db),
) -> StatusResponseSchema:
    """Удалить курс. Его группы остаются без курса."""
    try:
        logger.info(f"Удаление курса {course_id}")
        result = await delete_course_service(session, course_id)
        return StatusResponseSchema.model_validate(result)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Ошибка удаления курса {course_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка удаления курса",
        )
