"""
Модуль нечеткого сравнения текста для поиска по имени и телефону
"""

import re
from difflib import SequenceMatcher
from typing import Iterable, List, Optional


def normalize_text(text: Optional[str]) -> str:
    """
    Нормализует текст для сравнения:
    - Приводит к нижнему регистру
    - Убирает знаки препинания
    - Убирает множественные пробелы
    """
    if not text:
        return ""

    text = text.lower().strip()
    text = re.sub(r"[^\w\s]", "", text)
    text = re.sub(r"\s+", " ", text)

    return text.strip()


def tokenize(text: Optional[str]) -> List[str]:
    """Разбивает нормализованный текст на слова."""
    normalized = normalize_text(text)
    return normalized.split() if normalized else []


def calculate_similarity(text1: str, text2: str) -> float:
    """
    Вычисляет схожесть между двумя текстами (0.0 - 1.0)
    """
    if not text1 or not text2:
        return 0.0

    norm1 = normalize_text(text1)
    norm2 = normalize_text(text2)

    if norm1 == norm2:
        return 1.0

    matcher = SequenceMatcher(None, norm1, norm2)
    return matcher.ratio()


def edit_distance(source: str, target: str) -> int:
    """
    Расстояние Дамерау-Левенштейна (вариант optimal string alignment):
    вставка, удаление, замена и перестановка соседних символов стоят 1.
    """
    if source == target:
        return 0
    if not source:
        return len(target)
    if not target:
        return len(source)

    previous_previous: List[int] = []
    previous = list(range(len(target) + 1))

    for i, source_char in enumerate(source, start=1):
        current = [i] + [0] * len(target)
        for j, target_char in enumerate(target, start=1):
            cost = 0 if source_char == target_char else 1
            current[j] = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            )
            if (
                i > 1
                and j > 1
                and source_char == target[j - 2]
                and source[i - 2] == target_char
            ):
                current[j] = min(current[j], previous_previous[j - 2] + 1)
        previous_previous, previous = previous, current

    return previous[-1]


def allowed_edits(term: str, max_edits: int = 2) -> int:
    """
    Допустимое число правок для слова запроса.

    Слова из одного-двух символов должны совпадать точно.
    """
    return max(0, min(max_edits, len(term) - 2))


def fuzzy_term_score(query_term: str, field_terms: Iterable[str], max_edits: int = 2) -> float:
    """
    Лучшая оценка совпадения слова запроса со словами поля.

    Returns:
        float: 0.0 если ни одно слово не совпало, иначе схожесть (0.0 - 1.0]
    """
    limit = allowed_edits(query_term, max_edits)
    best = 0.0

    for field_term in field_terms:
        if field_term == query_term:
            return 1.0
        # Длины отличаются больше чем на лимит - совпадения точно нет
        if abs(len(field_term) - len(query_term)) > limit:
            continue
        if edit_distance(query_term, field_term) <= limit:
            best = max(best, calculate_similarity(query_term, field_term))

    return best


def fuzzy_match_score(
    query: Optional[str], fields: Iterable[Optional[str]], max_edits: int = 2
) -> float:
    """
    Оценка релевантности документа для нечеткого текстового поиска.

    Документ совпадает, если хотя бы одно слово запроса совпало
    с каким-либо словом полей. Оценка - сумма лучших совпадений слов запроса.

    Args:
        query: Поисковый запрос
        fields: Значения полей документа
        max_edits: Максимальное число правок в одном слове

    Returns:
        float: 0.0 если документ не совпал
    """
    query_terms = tokenize(query)
    if not query_terms:
        return 0.0

    field_terms = [term for field in fields for term in tokenize(field)]
    if not field_terms:
        return 0.0

    return sum(
        fuzzy_term_score(query_term, field_terms, max_edits)
        for query_term in query_terms
    )
