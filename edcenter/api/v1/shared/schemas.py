# -*- coding: utf-8 -*-
"""
Общие схемы API.

Этот модуль содержит Pydantic схемы, которые используются несколькими
разделами API: имя человека, короткие представления сущностей и ответ
о результате операции.
"""

from typing import Optional

from pydantic import BaseModel


class PersonName(BaseModel):
    """Имя и фамилия."""

    first: Optional[str] = None
    last: Optional[str] = None

    class Config:
        json_schema_extra = {"example": {"first": "Ali", "last": "Karimov"}}


class StatusResponseSchema(BaseModel):
    """Результат операции без данных."""

    success: bool
    message: str


class StudentShortSchema(BaseModel):
    """Короткое представление студента."""

    id: int
    name: PersonName
    phone: Optional[str] = None


class TeacherShortSchema(BaseModel):
    """Короткое представление преподавателя."""

    id: int
    name: PersonName
    phone: Optional[str] = None


class CourseShortSchema(BaseModel):
    """Короткое представление курса."""

    id: int
    name: str
    price: Optional[float] = None


class GroupShortSchema(BaseModel):
    """Короткое представление группы."""

    id: int
    name: str
