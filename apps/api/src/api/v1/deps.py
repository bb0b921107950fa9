# apps/api/src/api/v1/deps.py

from typing import Callable, Optional

from fastapi import Request

from config import Settings
from services.values_store import ValuesStore


def get_values_store(request: Request) -> ValuesStore:
    """Store текущего приложения (см. main.create_app)."""
    return request.app.state.values_store


def get_settings(request: Request) -> Settings:
    """Settings, с которыми собрано приложение, а не глобальные."""
    return request.app.state.settings


def first_query_value(name: str) -> Callable[[Request], Optional[str]]:
    """
    Dependency: первое значение query-параметра.

    ?count=5&count=abc -> "5" (Starlette по умолчанию отдаёт последнее).
    """

    def _first(request: Request) -> Optional[str]:
        values = request.query_params.getlist(name)
        return values[0] if values else None

    return _first
