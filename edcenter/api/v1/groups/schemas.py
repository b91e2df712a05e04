# -*- coding: utf-8 -*-
"""
Схемы для групп.

Этот модуль содержит все Pydantic схемы, используемые в API групп.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from ..shared.schemas import (CourseShortSchema, PersonName,
                              StudentShortSchema, TeacherShortSchema)


class GroupCreateSchema(BaseModel):
    """Схема для создания группы."""

    name: str
    course_id: Optional[int] = None
    teacher_id: Optional[int] = None
    students: List[int] = []
    days: List[str] = []
    time: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "English A2 - вечер",
                "course_id": 1,
                "teacher_id": 1,
                "students": [1, 2],
                "days": ["Mon", "Wed", "Fri"],
                "time": "18:00",
            }
        }


class GroupUpdateSchema(BaseModel):
    """Схема для обновления группы. Список students заменяет состав целиком."""

    name: Optional[str] = None
    course_id: Optional[int] = None
    teacher_id: Optional[int] = None
    students: Optional[List[int]] = None
    days: Optional[List[str]] = None
    time: Optional[str] = None


class GroupReadSchema(BaseModel):
    """Схема для чтения группы."""

    id: int
    name: str
    course_id: Optional[int] = None
    teacher_id: Optional[int] = None
    students: List[int] = []
    days: List[str] = []
    time: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class GroupListItemSchema(BaseModel):
    """Строка списка групп."""

    id: int
    name: str
    course: Optional[str] = None
    teacher: Optional[PersonName] = None
    students_count: int = 0
    days: List[str] = []
    time: Optional[str] = None


class GroupDetailSchema(BaseModel):
    """Группа с курсом, преподавателем и студентами."""

    id: int
    name: str
    days: List[str] = []
    time: Optional[str] = None
    course: Optional[CourseShortSchema] = None
    teacher: Optional[TeacherShortSchema] = None
    students: List[StudentShortSchema] = []
