# -*- coding: utf-8 -*-
"""
Сервис нечеткого поиска по студентам и преподавателям.

Поиск идет по имени, фамилии и телефону, независимо для каждой сущности.
Слово запроса совпадает со словом поля, если они отличаются не более чем
на settings.search_max_edits правок.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.config.settings import settings
from edcenter.repository.students import list_students_repo
from edcenter.repository.teachers import list_teachers_repo
from edcenter.service.serializers import (serialize_student_short,
                                          serialize_teacher_short)
from edcenter.utils.text_comparison import fuzzy_match_score, normalize_text

T = TypeVar("T")


def rank_by_relevance(
    query: str,
    items: Iterable[T],
    fields: Callable[[T], Iterable[Optional[str]]],
    max_edits: int,
) -> List[T]:
    """
    Отбирает совпавшие объекты и сортирует их по убыванию релевантности.

    Args:
        query: Поисковый запрос
        items: Объекты для поиска
        fields: Функция, возвращающая значения полей объекта
        max_edits: Максимальное число правок в одном слове

    Returns:
        Совпавшие объекты, самые релевантные первыми
    """
    scored = []
    for index, item in enumerate(items):
        score = fuzzy_match_score(query, fields(item), max_edits)
        if score > 0:
            scored.append((score, index, item))

    scored.sort(key=lambda entry: (-entry[0], entry[1]))
    return [item for _, _, item in scored]


def person_fields(person) -> List[Optional[str]]:
    return [person.first_name, person.last_name, person.phone]


async def search_service(
    session: AsyncSession, query: Optional[str]
) -> Dict[str, List[Dict[str, Any]]]:
    """
    Найти студентов и преподавателей по имени или телефону.

    Args:
        session: Сессия базы данных
        query: Поисковый запрос

    Returns:
        {students: [...], teachers: [...]}; пустые списки если ничего не найдено
    """
    if not normalize_text(query):
        return {"students": [], "teachers": []}

    max_edits = settings.search_max_edits

    students = rank_by_relevance(
        query, await list_students_repo(session), person_fields, max_edits
    )
    teachers = rank_by_relevance(
        query, await list_teachers_repo(session), person_fields, max_edits
    )

    logger.debug(
        f"Поиск '{query}': студентов {len(students)}, преподавателей {len(teachers)}"
    )
    return {
        "students": [serialize_student_short(s) for s in students],
        "teachers": [serialize_teacher_short(t) for t in teachers],
    }
