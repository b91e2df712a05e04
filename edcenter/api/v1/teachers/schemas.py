# -*- coding: utf-8 -*-
"""
Схемы для преподавателей.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from ..shared.schemas import GroupShortSchema, PersonName


class TeacherCreateSchema(BaseModel):
    """Схема для создания преподавателя."""

    name: Optional[PersonName] = None
    phone: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": {"first": "Dilnoza", "last": "Rahimova"},
                "phone": "+998907778899",
            }
        }


class TeacherUpdateSchema(BaseModel):
    """Схема для обновления преподавателя."""

    name: Optional[PersonName] = None
    phone: Optional[str] = None


class TeacherReadSchema(BaseModel):
    """Схема для чтения преподавателя."""

    id: int
    name: PersonName
    phone: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class TeacherDetailSchema(TeacherReadSchema):
    """Преподаватель с группами, которые он ведет."""

    groups: List[GroupShortSchema] = []
