# -*- coding: utf-8 -*-
"""
Схемы для студентов.

Этот модуль содержит все Pydantic схемы, используемые в API студентов.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel

from ..shared.schemas import (CourseShortSchema, PersonName,
                              StudentShortSchema, TeacherShortSchema)

# ---------------------------------------------------------------------------
# Платежи
# ---------------------------------------------------------------------------


class PaymentCreateSchema(BaseModel):
    """
    Схема для добавления платежа.

    Значения не валидируются: дата и сумма приводятся в сервисе.
    """

    date: Optional[Any] = None
    quantity: Optional[Any] = None
    method: Optional[Any] = None
    info: Optional[Any] = None

    class Config:
        json_schema_extra = {
            "example": {
                "date": "2024-09-01T10:00:00",
                "quantity": 500000,
                "method": "cash",
                "info": "Сентябрь",
            }
        }


class PaymentReadSchema(BaseModel):
    """Схема для чтения платежа."""

    id: int
    date: datetime
    quantity: float
    method: Optional[str] = None
    info: Optional[str] = None


# ---------------------------------------------------------------------------
# Студенты
# ---------------------------------------------------------------------------


class StudentCreateSchema(BaseModel):
    """Схема для создания студента. Неизвестные поля игнорируются."""

    name: Optional[PersonName] = None
    phone: Optional[str] = None
    info: Optional[str] = None
    payment_history: Optional[List[PaymentCreateSchema]] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": {"first": "Ali", "last": "Karimov"},
                "phone": "+998901112233",
                "info": "Уровень A2",
            }
        }


class StudentUpdateSchema(BaseModel):
    """Схема для обновления студента. Обновляются только переданные поля."""

    name: Optional[PersonName] = None
    phone: Optional[str] = None
    info: Optional[str] = None
    payment_history: Optional[List[PaymentCreateSchema]] = None


class StudentReadSchema(BaseModel):
    """Схема для чтения студента."""

    id: int
    name: PersonName
    phone: Optional[str] = None
    info: Optional[str] = None
    payment_history: List[PaymentReadSchema] = []
    created_at: datetime
    updated_at: datetime


class StudentListItemSchema(BaseModel):
    """Строка списка студентов: группа и преподаватель по имени."""

    id: int
    name: PersonName
    phone: Optional[str] = None
    group: Optional[str] = None
    teacher: Optional[PersonName] = None


class StudentGroupSchema(BaseModel):
    """Группа студента в карточке."""

    id: int
    name: str
    course: Optional[int] = None
    teacher: Optional[int] = None
    days: List[str] = []
    time: Optional[str] = None


class StudentDetailSchema(BaseModel):
    """
    Карточка студента.

    Поля group, teacher и course отсутствуют в ответе, если студент
    не состоит в группе.
    """

    id: int
    name: PersonName
    phone: Optional[str] = None
    info: Optional[str] = None
    payment_history: List[PaymentReadSchema] = []
    group: Optional[StudentGroupSchema] = None
    teacher: Optional[TeacherShortSchema] = None
    course: Optional[CourseShortSchema] = None


class SearchResultSchema(BaseModel):
    """Результат поиска по студентам и преподавателям."""

    students: List[StudentShortSchema] = []
    teachers: List[TeacherShortSchema] = []
