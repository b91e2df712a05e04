# -*- coding: utf-8 -*-
"""
edcenter/api/v1/students/management/payments.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Добавление платежей в историю студента.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.clients.database_client import get_db
from edcenter.service.students import make_payment_service

from ...shared.schemas import StatusResponseSchema
from ..schemas import PaymentCreateSchema

router = APIRouter(prefix="/students", tags=["🎓 Студенты - 💳 Платежи"])


@router.post("/select/{student_id}", response_model=StatusResponseSchema)
async def make_payment_endpoint(
    student_id: int,
    payment_data: PaymentCreateSchema,
    session: AsyncSession = Depends(get_db),
) -> StatusResponseSchema:
    """
    Добавить платеж студенту.

    Дата по умолчанию - текущий момент, нечисловая сумма сохраняется как 0.
    """
    try:
        logger.info(f"Добавление платежа студенту {student_id}")
        result = await make_payment_service(
            session,
            student_id,
            date=payment_data.date,
            quantity=payment_data.quantity,
            method=payment_data.method,
            info=payment_data.info,
        )
        return StatusResponseSchema.model_validate(result)
    except Exception as e:
        logger.error(f"Ошибка добавления платежа студенту {student_id}: {str(e)}")
        logger.exception("Детали ошибки:")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка добавления платежа",
        )
