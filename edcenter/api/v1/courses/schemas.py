# -*- coding: utf-8 -*-
"""
Схемы для курсов.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from ..shared.schemas import GroupShortSchema


class CourseCreateSchema(BaseModel):
    """Схема для создания курса."""

    name: str
    price: Optional[float] = None

    class Config:
        json_schema_extra = {"example": {"name": "English A2", "price": 500000}}


class CourseUpdateSchema(BaseModel):
    """Схема для обновления курса."""

    name: Optional[str] = None
    price: Optional[float] = None


class CourseReadSchema(BaseModel):
    """Схема для чтения курса."""

    id: int
    name: str
    price: Optional[float] = None
    created_at: datetime
    updated_at: datetime


class CourseDetailSchema(CourseReadSchema):
    """Курс с его группами."""

    groups: List[GroupShortSchema] = []
