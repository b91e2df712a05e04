# -*- coding: utf-8 -*-
"""
Unit тесты для приведения полей платежа
"""

from datetime import datetime, timedelta, timezone

from edcenter.utils.coercion import (coerce_quantity, optional_text,
                                     parse_payment_date, utc_now)


class TestParsePaymentDate:
    """Тесты разбора даты платежа"""

    def test_missing_date_defaults_to_now(self):
        """Пустая дата заменяется текущим моментом"""
        before = utc_now()
        result = parse_payment_date(None)
        after = utc_now()

        assert before <= result <= after

    def test_iso_string(self):
        """Строка ISO-8601 разбирается"""
        assert parse_payment_date("2024-09-01T10:30:00") == datetime(2024, 9, 1, 10, 30)

    def test_iso_string_with_offset_converted_to_utc(self):
        """Дата с часовым поясом переводится в naive UTC"""
        result = parse_payment_date("2024-09-01T15:00:00+05:00")

        assert result == datetime(2024, 9, 1, 10, 0)
        assert result.tzinfo is None

    def test_epoch_milliseconds(self):
        """Число трактуется как миллисекунды Unix"""
        assert parse_payment_date(86_400_000) == datetime(1970, 1, 2)

    def test_zero_treated_as_missing(self):
        """Дата 0 заменяется текущим моментом, а не началом эпохи"""
        before = utc_now()
        result = parse_payment_date(0)
        after = utc_now()

        assert before <= result <= after
        assert parse_payment_date(0.0) >= before

    def test_iso_string_with_z_suffix(self):
        """Формат toISOString() с суффиксом Z разбирается как UTC"""
        result = parse_payment_date("2024-10-01T09:00:00.000Z")

        assert result == datetime(2024, 10, 1, 9, 0)
        assert result.tzinfo is None

    def test_aware_datetime(self):
        """datetime с часовым поясом переводится в UTC"""
        value = datetime(2024, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))

        assert parse_payment_date(value) == datetime(2024, 1, 1, 10, 0)

    def test_invalid_string_uses_default(self):
        """Нераспознанная строка заменяется значением по умолчанию"""
        default = datetime(2020, 5, 5)

        assert parse_payment_date("not a date", default=default) == default
        assert parse_payment_date("   ", default=default) == default
        assert parse_payment_date(True, default=default) == default


class TestCoerceQuantity:
    """Тесты приведения суммы платежа"""

    def test_numbers_kept(self):
        assert coerce_quantity(100) == 100.0
        assert coerce_quantity(99.5) == 99.5

    def test_numeric_string(self):
        assert coerce_quantity(" 250.5 ") == 250.5

    def test_non_numeric_becomes_zero(self):
        """Нечисловая сумма сохраняется как 0"""
        assert coerce_quantity("abc") == 0.0
        assert coerce_quantity(None) == 0.0
        assert coerce_quantity("") == 0.0
        assert coerce_quantity({"amount": 5}) == 0.0
        assert coerce_quantity([1]) == 0.0
        assert coerce_quantity("0x10") == 0.0

    def test_nan_and_infinity_become_zero(self):
        assert coerce_quantity("NaN") == 0.0
        assert coerce_quantity(float("inf")) == 0.0
        assert coerce_quantity("-Infinity") == 0.0

    def test_underscore_digits_rejected(self):
        assert coerce_quantity("1_000") == 0.0

    def test_booleans(self):
        assert coerce_quantity(True) == 1.0
        assert coerce_quantity(False) == 0.0


def test_optional_text():
    """Значения приводятся к строке, None сохраняется"""
    assert optional_text(None) is None
    assert optional_text("card") == "card"
    assert optional_text(42) == "42"
