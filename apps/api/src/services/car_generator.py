# apps/api/src/services/car_generator.py

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Dict, List, Union
import logging

import yaml
from pydantic import BaseModel, ConfigDict, field_serializer

logger = logging.getLogger(__name__)


# =========================
# CONSTANTS
# =========================

# все sourceUpdatedAt считаются от этой точки
EPOCH = datetime(2025, 12, 29, tzinfo=timezone.utc)

SECONDS_PER_DAY = 86400

EXTERNAL_ID_PREFIX = "jp-"
EXTERNAL_ID_WIDTH = 6

YEAR_BASE = 1990
YEAR_SPAN = 35

PRICE_BASE = 1000.0
PRICE_SPAN = 50000

CATALOG_PATH = Path(__file__).resolve().parent / "cars.yaml"


# =========================
# LOAD CATALOG (SINGLE SOURCE OF TRUTH)
# =========================

def load_catalog(path: Path = CATALOG_PATH) -> Dict[str, List[str]]:
    """
    Загружает cars.yaml.
    Формат:
    {
      "brands": [...],
      "models": [...]
    }

    Оба списка обязательны и не пустые:
    без них генерировать нечего, фолбэка нет.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    catalog: Dict[str, List[str]] = {}
    for key in ("brands", "models"):
        values = data.get(key) or []
        if not values:
            raise ValueError(f"{path}: '{key}' list is missing or empty")
        catalog[key] = [str(v) for v in values]

    return catalog


CATALOG = load_catalog()
BRANDS: List[str] = CATALOG["brands"]
MODELS: List[str] = CATALOG["models"]


# =========================
# SCHEMA
# =========================

class CarRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    externalId: str
    brand: str
    model: str
    year: int
    price: float
    sourceUpdatedAt: str

    @field_serializer("price")
    def _serialize_price(self, price: float) -> Union[int, float]:
        # целая цена уходит без ".0": 1001, а не 1001.0
        if price.is_integer():
            return int(price)
        return price


# =========================
# FIELD HELPERS
# =========================

def format_external_id(index: int) -> str:
    # минимум 6 цифр, длинные номера не обрезаем
    return EXTERNAL_ID_PREFIX + str(index).zfill(EXTERNAL_ID_WIDTH)


def format_timestamp(value: datetime) -> str:
    """RFC 3339, UTC, до секунд: 2025-12-29T00:00:01Z"""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def base_time(version_days: int) -> datetime:
    return EPOCH + timedelta(days=version_days)


# =========================
# SYNTHESIS
# =========================

def build_car(
    index: int,
    updated: int,
    version_days: int,
    bump_days: int,
) -> CarRecord:
    """
    Одна машина по индексу (с 1).

    От values зависит только sourceUpdatedAt:
    - i <= updated -> EPOCH + versionDays + bumpDays + (i mod 86400)s
    - иначе        -> EPOCH + versionDays + (i mod 86400)s
    """
    base = base_time(version_days)
    if index <= updated:
        base = base + timedelta(days=bump_days)

    updated_at = base + timedelta(seconds=index % SECONDS_PER_DAY)

    return CarRecord(
        externalId=format_external_id(index),
        brand=BRANDS[index % len(BRANDS)],
        model=MODELS[index % len(MODELS)],
        year=YEAR_BASE + index % YEAR_SPAN,
        price=PRICE_BASE + (index % PRICE_SPAN) / 10.0,
        sourceUpdatedAt=format_timestamp(updated_at),
    )


def list_cars(
    count: int,
    updated: int,
    version_days: int,
    bump_days: int,
) -> List[CarRecord]:
    """
    Весь список, индексы 1..count по возрастанию.

    updated <= count гарантирует вызывающий.
    """
    cars = [
        build_car(i, updated, version_days, bump_days)
        for i in range(1, count + 1)
    ]

    logger.debug("generated cars: count=%d updated=%d", count, updated)
    return cars
