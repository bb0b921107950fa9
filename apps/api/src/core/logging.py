# apps/api/src/core/logging.py

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_HANDLER_NAME = "mock-cars-api"


def setup_logging(level: str = "INFO") -> None:
    """
    Настраивает root logger один раз.

    Повторный вызов меняет только уровень, handler не дублируется
    (uvicorn reload / тесты создают приложение несколько раз).
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
