# -*- coding: utf-8 -*-
"""
Приведение произвольных значений из тела запроса к типам платежа.

Даты хранятся как naive UTC datetime, чтобы одинаково вести себя
в PostgreSQL и SQLite.
"""

import math
from datetime import datetime, timezone
from typing import Any, Optional


def utc_now() -> datetime:
    """Текущий момент в UTC без tzinfo."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Переводит datetime с часовым поясом в naive UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def parse_payment_date(value: Any, default: Optional[datetime] = None) -> datetime:
    """
    Разбирает дату платежа.

    Поддерживаются datetime, строки ISO-8601 и числа (миллисекунды Unix).
    Пустое или нераспознанное значение заменяется текущим моментом.

    Args:
        value: Значение из тела запроса
        default: Значение по умолчанию (по умолчанию - текущий момент)

    Returns:
        datetime: Дата платежа в naive UTC
    """
    fallback = default if default is not None else utc_now()

    if value is None or isinstance(value, bool):
        return fallback

    if isinstance(value, datetime):
        return to_naive_utc(value)

    if isinstance(value, (int, float)):
        # 0 считается отсутствующей датой
        if not value:
            return fallback
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return fallback
        return to_naive_utc(parsed)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return fallback
        if text[-1] in "Zz":
            text = text[:-1] + "+00:00"
        try:
            return to_naive_utc(datetime.fromisoformat(text))
        except ValueError:
            return fallback

    return fallback


def coerce_quantity(value: Any) -> float:
    """
    Приводит сумму платежа к числу.

    Нечисловые, бесконечные и NaN значения дают 0.

    Args:
        value: Значение из тела запроса

    Returns:
        float: Сумма платежа
    """
    if value is None:
        return 0.0

    if isinstance(value, bool):
        return float(value)

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        # "1_000" Python разбирает, но это не число в JSON-смысле
        if not text or "_" in text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    else:
        return 0.0

    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def optional_text(value: Any) -> Optional[str]:
    """Строковое представление значения или None."""
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)
