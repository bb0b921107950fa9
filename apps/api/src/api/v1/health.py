# apps/api/src/api/v1/health.py

from fastapi import APIRouter, Depends

from api.v1.deps import get_settings
from config import Settings

router = APIRouter(tags=["Health"])


@router.get("/health", summary="Liveness probe")
def health(config: Settings = Depends(get_settings)):
    """
    Liveness probe.

    Проверяет только то, что процесс жив
    и FastAPI может отдавать ответы.

    ❗ Внешних зависимостей у сервиса нет.
    """
    return {
        "status": "ok",
        "service": config.app_name,
        "env": config.env,
    }
