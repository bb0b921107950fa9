# apps/api/src/api/v1/values.py

from typing import Optional

from fastapi import APIRouter, Depends

from api.v1.deps import first_query_value, get_values_store
from services.values_store import ValuesSnapshot, ValuesStore

router = APIRouter(prefix="/values", tags=["Values"])


# =====================================================
# SET VALUES
# =====================================================

@router.post(
    "/set",
    response_model=ValuesSnapshot,
    summary="Update generator values",
)
def set_values(
    count: Optional[str] = Depends(first_query_value("count")),
    updated: Optional[str] = Depends(first_query_value("updated")),
    versionDays: Optional[str] = Depends(first_query_value("versionDays")),
    bumpDays: Optional[str] = Depends(first_query_value("bumpDays")),
    store: ValuesStore = Depends(get_values_store),
):
    """
    Обновляет настройки генератора.

    Query-параметры (все необязательные, целые >= 0):
    - count: сколько машин отдаёт GET /cars
    - updated: у скольких первых машин sourceUpdatedAt свежее
    - versionDays: сдвиг всех sourceUpdatedAt (в днях)
    - bumpDays: насколько "обновлённые" свежее (в днях)

    Плохое значение -> 400 "bad <field>" (обработчик в main.py).
    Возвращает values после clamp updated до count.
    """
    # сырые строки: валидирует store, а не FastAPI (иначе был бы 422)
    return store.update(
        count=count,
        updated=updated,
        versionDays=versionDays,
        bumpDays=bumpDays,
    )
