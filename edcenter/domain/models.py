# -*- coding: utf-8 -*-
"""
edcenter/domain/models.py
~~~~~~~~~~~~~~~~~~~~~~~~~
ORM-модели учебного центра: студенты, платежи, преподаватели, курсы и группы.

Связь студента с группой хранится в таблице group_students. Студент
предполагается членом не более одной группы, но на уровне схемы это
не ограничивается.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import (JSON, Column, DateTime, Float, ForeignKey, Integer,
                        String, Table, Text)
from sqlalchemy.orm import (DeclarativeBase, Mapped, mapped_column,
                            relationship)

from edcenter.utils.coercion import utc_now


class Base(DeclarativeBase):
    """Базовый класс для всех моделей."""


class TimestampMixin:
    """Поля времени создания и обновления."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, onupdate=utc_now, nullable=False
    )


group_students = Table(
    "group_students",
    Base.metadata,
    Column(
        "group_id",
        Integer,
        ForeignKey("groups.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "student_id",
        Integer,
        ForeignKey("students.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Student(TimestampMixin, Base):
    """Студент учебного центра."""

    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(100))
    last_name: Mapped[Optional[str]] = mapped_column(String(100))
    phone: Mapped[Optional[str]] = mapped_column(String(32))
    info: Mapped[Optional[str]] = mapped_column(Text)

    payments: Mapped[List["Payment"]] = relationship(
        back_populates="student",
        cascade="all, delete-orphan",
        order_by="Payment.id",
    )
    groups: Mapped[List["Group"]] = relationship(
        secondary=group_students,
        back_populates="students",
        order_by="Group.id",
    )


class Payment(Base):
    """Платеж студента. Записи только добавляются."""

    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    student_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date: Mapped[datetime] = mapped_column(DateTime, default=utc_now, nullable=False)
    quantity: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    method: Mapped[Optional[str]] = mapped_column(String(64))
    info: Mapped[Optional[str]] = mapped_column(Text)

    student: Mapped["Student"] = relationship(back_populates="payments")


class Teacher(TimestampMixin, Base):
    """Преподаватель."""

    __tablename__ = "teachers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(100))
    last_name: Mapped[Optional[str]] = mapped_column(String(100))
    phone: Mapped[Optional[str]] = mapped_column(String(32))

    groups: Mapped[List["Group"]] = relationship(
        back_populates="teacher", order_by="Group.id"
    )


class Course(TimestampMixin, Base):
    """Курс с ценой."""

    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    price: Mapped[Optional[float]] = mapped_column(Float)

    groups: Mapped[List["Group"]] = relationship(
        back_populates="course", order_by="Group.id"
    )


class Group(TimestampMixin, Base):
    """Группа: курс, преподаватель, студенты и расписание."""

    __tablename__ = "groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    course_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("courses.id", ondelete="SET NULL"), index=True
    )
    teacher_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("teachers.id", ondelete="SET NULL"), index=True
    )
    # Расписание: дни недели и время занятий
    days: Mapped[List[str]] = mapped_column(JSON, default=list, nullable=False)
    time: Mapped[Optional[str]] = mapped_column(String(32))

    course: Mapped[Optional["Course"]] = relationship(back_populates="groups")
    teacher: Mapped[Optional["Teacher"]] = relationship(back_populates="groups")
    students: Mapped[List["Student"]] = relationship(
        secondary=group_students,
        back_populates="groups",
        order_by="Student.id",
    )
