# apps/api/src/core/errors.py

"""Иерархия исключений mock cars API."""

from typing import Optional


class MockApiError(Exception):
    """
    База для всех ошибок, которые сервис бросает намеренно.

    Всё остальное, что долетело до клиента, это баг.
    """


class ValidationError(MockApiError):
    """
    Переданное значение не целое число >= 0.

    Хранит имя query-параметра. str(err) это ровно тело ответа 400.

    Пример:
        ValidationError("count")  # -> "bad count"
    """

    def __init__(self, field: str, raw: Optional[str] = None):
        self.field = field
        self.raw = raw
        super().__init__(f"bad {field}")
