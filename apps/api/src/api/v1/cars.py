# apps/api/src/api/v1/cars.py

from typing import List, Optional

from fastapi import APIRouter, Depends

from api.v1.deps import first_query_value, get_values_store
from services.car_generator import CarRecord, list_cars
from services.values_store import ValuesStore, parse_override

router = APIRouter(tags=["Cars"])


@router.get(
    "/cars",
    response_model=List[CarRecord],
    summary="Synthetic car list",
)
def get_cars(
    count: Optional[str] = Depends(first_query_value("count")),
    updated: Optional[str] = Depends(first_query_value("updated")),
    store: ValuesStore = Depends(get_values_store),
):
    """
    Возвращает список машин.

    count / updated переопределяют values только для этого запроса
    (удобно в тестах, без /values/set), кривые значения игнорируются.
    versionDays / bumpDays всегда из store.
    """
    values = store.get()

    n = parse_override(count, values.count)
    u = parse_override(updated, values.updated)
    if u > n:
        u = n

    return list_cars(n, u, values.versionDays, values.bumpDays)
