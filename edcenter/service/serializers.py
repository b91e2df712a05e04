# -*- coding: utf-8 -*-
"""
Преобразование ORM-моделей в словари ответов API.
"""

from typing import Any, Dict, Optional

from edcenter.domain.models import Course, Group, Payment, Student, Teacher


def person_name(first: Optional[str], last: Optional[str]) -> Dict[str, Optional[str]]:
    """Имя в виде {first, last}."""
    return {"first": first, "last": last}


def split_person_name(name: Optional[Dict[str, Any]]) -> Dict[str, Optional[str]]:
    """Разбирает {first, last} из тела запроса в колонки модели."""
    name = name or {}
    return {"first_name": name.get("first"), "last_name": name.get("last")}


def serialize_payment(payment: Payment) -> Dict[str, Any]:
    return {
        "id": payment.id,
        "date": payment.date,
        "quantity": payment.quantity,
        "method": payment.method,
        "info": payment.info,
    }


def serialize_student(student: Student) -> Dict[str, Any]:
    """Студент с историей платежей в порядке добавления."""
    return {
        "id": student.id,
        "name": person_name(student.first_name, student.last_name),
        "phone": student.phone,
        "info": student.info,
        "payment_history": [serialize_payment(p) for p in student.payments],
        "created_at": student.created_at,
        "updated_at": student.updated_at,
    }


def serialize_student_short(student: Student) -> Dict[str, Any]:
    return {
        "id": student.id,
        "name": person_name(student.first_name, student.last_name),
        "phone": student.phone,
    }


def serialize_teacher(teacher: Teacher) -> Dict[str, Any]:
    return {
        "id": teacher.id,
        "name": person_name(teacher.first_name, teacher.last_name),
        "phone": teacher.phone,
        "created_at": teacher.created_at,
        "updated_at": teacher.updated_at,
    }


def serialize_teacher_short(teacher: Teacher) -> Dict[str, Any]:
    return {
        "id": teacher.id,
        "name": person_name(teacher.first_name, teacher.last_name),
        "phone": teacher.phone,
    }


def serialize_course(course: Course) -> Dict[str, Any]:
    return {
        "id": course.id,
        "name": course.name,
        "price": course.price,
        "created_at": course.created_at,
        "updated_at": course.updated_at,
    }


def serialize_course_short(course: Course) -> Dict[str, Any]:
    return {"id": course.id, "name": course.name, "price": course.price}


def serialize_group_short(group: Group) -> Dict[str, Any]:
    return {"id": group.id, "name": group.name}


def serialize_group(group: Group) -> Dict[str, Any]:
    """Группа со ссылками на курс, преподавателя и студентов по ID."""
    return {
        "id": group.id,
        "name": group.name,
        "course_id": group.course_id,
        "teacher_id": group.teacher_id,
        "students": [student.id for student in group.students],
        "days": list(group.days or []),
        "time": group.time,
        "created_at": group.created_at,
        "updated_at": group.updated_at,
    }
