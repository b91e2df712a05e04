# -*- coding: utf-8 -*-
"""
edcenter/api/v1/groups/crud.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для управления группами.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.clients.database_client import get_db
from edcenter.service.groups import (create_group_service,
                                     delete_group_service, get_group_service,
                                     list_groups_service, update_group_service)

from ..shared.schemas import StatusResponseSchema
from .schemas import (GroupCreateSchema, GroupDetailSchema,
                      GroupListItemSchema, GroupReadSchema, GroupUpdateSchema)

router = APIRouter(prefix="/groups", tags=["👥 Группы - ⚙️ Управление"])


@router.get("", response_model=List[GroupListItemSchema])
async def list_groups_endpoint(
    session: AsyncSession = Depends(get_db),
) -> List[GroupListItemSchema]:
    """Получить все группы с курсом и преподавателем."""
    try:
        logger.info("Запрос списка групп")
        groups = await list_groups_service(session)
        logger.info(f"Найдено групп: {len(groups)}")
        return [GroupListItemSchema.model_validate(g) for g in groups]
    except Exception as e:
        logger.error(f"Ошибка получения списка групп: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка получения списка групп",
        )


@router.post("", response_model=GroupReadSchema, status_code=status.HTTP_201_CREATED)
async def create_group_endpoint(
    group_data: GroupCreateSchema,
    session: AsyncSession = Depends(get_db),
) -> GroupReadSchema:
    """Создать новую группу."""
    try:
        logger.info(f"Создание группы: {group_data.name}")
        group = await create_group_service(session, group_data.model_dump())
        logger.info(f"Группа {group_data.name} успешно создана с ID {group['id']}")
        return GroupReadSchema.model_validate(group)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Ошибка создания группы {group_data.name}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка создания группы",
        )


@router.get("/select/{group_id}", response_model=GroupDetailSchema)
async def get_group_endpoint(
    group_id: int,
    session: AsyncSession = Depends(get_db),
) -> GroupDetailSchema:
    """Получить группу по ID с курсом, преподавателем и студентами."""
    try:
        logger.info(f"Запрос группы по ID: {group_id}")
        group_data = await get_group_service(session, group_id)
        logger.info(f"Группа {group_data['name']} (ID: {group_id}) успешно получена")
        return GroupDetailSchema.model_validate(group_data)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Ошибка получения группы {group_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка получения группы",
        )


@router.patch("/select/{group_id}", response_model=GroupReadSchema)
async def update_group_endpoint(
    group_id: int,
    group_data: GroupUpdateSchema,
    session: AsyncSession = Depends(get_db),
) -> GroupReadSchema:
    """Обновить группу."""
    try:
        logger.info(f"Обновление группы {group_id}")
        group = await update_group_service(
            session, group_id, group_data.model_dump(exclude_unset=True)
        )
        logger.info(f"Группа {group_id} успешно обновлена")
        return GroupReadSchema.model_validate(group)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Ошибка обновления группы {group_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка обновления группы",
        )


@router.delete("/select/{group_id}", response_model=StatusResponseSchema)
async def delete_group_endpoint(
    group_id: int,
    session: AsyncSession = Depends(get_db),
) -> StatusResponseSchema:
    """Удалить группу навсегда."""
    try:
        logger.info(f"Удаление группы {group_id}")
        result = await delete_group_service(session, group_id)
        logger.info(f"Группа {group_id} удалена")
        return StatusResponseSchema.model_validate(result)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Ошибка удаления группы {group_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка удаления группы",
        )
