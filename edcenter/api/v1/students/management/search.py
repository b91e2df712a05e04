# -*- coding: utf-8 -*-
"""
edcenter/api/v1/students/management/search.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Поиск студентов и преподавателей, список студентов без группы.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.clients.database_client import get_db
from edcenter.service.search import search_service
from edcenter.service.students import list_unassigned_students_service

from ...shared.schemas import StudentShortSchema
from ..schemas import SearchResultSchema

router = APIRouter(prefix="/students", tags=["🎓 Студенты - 🔍 Поиск"])


@router.get("/unassigned", response_model=List[StudentShortSchema])
async def list_unassigned_students_endpoint(
    session: AsyncSession = Depends(get_db),
) -> List[StudentShortSchema]:
    """Получить студентов, не состоящих ни в одной группе."""
    try:
        logger.info("Запрос студентов без группы")
        students = await list_unassigned_students_service(session)
        logger.info(f"Найдено студентов без группы: {len(students)}")
        return [StudentShortSchema.model_validate(s) for s in students]
    except Exception as e:
        logger.error(f"Ошибка получения студентов без группы: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка получения студентов без группы",
        )


@router.get("/search", response_model=SearchResultSchema)
async def search_endpoint(
    search: Optional[str] = Query(
        None, description="Поиск по имени, фамилии или телефону"
    ),
    session: AsyncSession = Depends(get_db),
) -> SearchResultSchema:
    """Нечеткий поиск по студентам и преподавателям."""
    try:
        logger.info(f"Поиск студентов и преподавателей: {search}")
        result = await search_service(session, search)
        return SearchResultSchema.model_validate(result)
    except Exception as e:
        logger.error(f"Ошибка поиска '{search}': {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка поиска",
        )
