# apps/api/src/main.py

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse

from api.v1.cars import router as cars_router
from api.v1.health import router as health_router
from api.v1.values import router as values_router

from config import Settings, settings
from core.errors import ValidationError
from core.logging import setup_logging
from services.values_store import ValuesStore

logger = logging.getLogger(__name__)


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Собирает приложение со своим ValuesStore.

    Каждый вызов стартует с дефолтных values (как рестарт процесса).
    """
    config = config or settings
    setup_logging(config.log_level)

    app = FastAPI(
        title="Mock Cars API",
        version="0.1.0",
        debug=config.DEBUG,
    )

    app.state.settings = config
    app.state.values_store = ValuesStore(
        count=config.default_count,
        updated=config.default_updated,
        version_days=config.default_version_days,
        bump_days=config.default_bump_days,
    )

    # gzip, уровень 1 = best speed
    app.add_middleware(
        GZipMiddleware,
        minimum_size=config.gzip_min_size,
        compresslevel=1,
    )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("%s %s -> 400 %s", request.method, request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=400)

    # без префикса: /values/set и /cars, это контракт для потребителей
    app.include_router(health_router)
    app.include_router(values_router)
    app.include_router(cars_router)

    logger.info(
        "app created: env=%s values=%s",
        config.env,
        app.state.values_store.get().model_dump(),
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
