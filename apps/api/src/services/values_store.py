# apps/api/src/services/values_store.py

import logging
import re
import threading
from typing import Optional

from pydantic import BaseModel, ConfigDict

from core.errors import ValidationError

logger = logging.getLogger(__name__)


# =========================
# LIMITS
# =========================

# signed int64
MAX_INT64 = 2**63 - 1

# EPOCH + versionDays + bumpDays должен влезать в datetime
MAX_OFFSET_DAYS = 1_000_000

_INT_RE = re.compile(r"[+-]?[0-9]+")


# =========================
# PARSING
# =========================

def parse_non_negative(field: str, raw: str, limit: int = MAX_INT64) -> int:
    """
    Строгий разбор значения из query string.

    Принимает необязательный знак и цифры ("42", "+42", "-0", "007").
    Всё остальное, отрицательные и больше `limit` -> ValidationError.
    """
    if not _INT_RE.fullmatch(raw):
        raise ValidationError(field, raw)

    # int() не берёт слишком длинные строки, а они всё равно вне диапазона
    if len(raw.lstrip("+-").lstrip("0")) > len(str(MAX_INT64)):
        raise ValidationError(field, raw)

    value = int(raw)
    if value < 0 or value > limit:
        raise ValidationError(field, raw)

    return value


def parse_override(raw: Optional[str], fallback: int) -> int:
    """
    Мягкий вариант для переопределений на запрос:
    пустое или кривое значение -> молча берём сохранённое.
    """
    if not raw:
        return fallback

    try:
        return parse_non_negative("override", raw)
    except ValidationError:
        return fallback


# =========================
# SNAPSHOT
# =========================

class ValuesSnapshot(BaseModel):
    """Нормализованные values, он же ответ /values/set."""

    model_config = ConfigDict(frozen=True)

    count: int
    updated: int
    versionDays: int
    bumpDays: int


# =========================
# STORE
# =========================

class ValuesStore:
    """
    Общие настройки генератора: count, updated, versionDays, bumpDays.

    Один экземпляр на приложение. Каждая операция под локом, поэтому
    недописанное поле никто не увидит; между двумя разными update
    читатель вклиниться всё ещё может.
    """

    # порядок важен: первое плохое поле останавливает остальные (предыдущие уже применены)
    FIELDS = ("count", "updated", "versionDays", "bumpDays")

    LIMITS = {
        "count": MAX_INT64,
        "updated": MAX_INT64,
        "versionDays": MAX_OFFSET_DAYS,
        "bumpDays": MAX_OFFSET_DAYS,
    }

    def __init__(
        self,
        count: int = 10000,
        updated: int = 0,
        version_days: int = 0,
        bump_days: int = 1,
    ):
        self._defaults = {
            "count": count,
            "updated": updated,
            "versionDays": version_days,
            "bumpDays": bump_days,
        }
        self._lock = threading.Lock()
        self._values = {}
        self.reset()

    def reset(self) -> ValuesSnapshot:
        with self._lock:
            self._values = dict(self._defaults)
            self._clamp()
            return self._snapshot()

    def get(self) -> ValuesSnapshot:
        with self._lock:
            return self._snapshot()

    def update(
        self,
        count: Optional[str] = None,
        updated: Optional[str] = None,
        versionDays: Optional[str] = None,
        bumpDays: Optional[str] = None,
    ) -> ValuesSnapshot:
        """
        Применяет переданные сырые значения по одному полю.

        Отсутствующие (None / "") не трогаем. На плохом поле -> ValidationError;
        поля до него остаются, updated <= count соблюдается всё равно.
        """
        supplied = {
            "count": count,
            "updated": updated,
            "versionDays": versionDays,
            "bumpDays": bumpDays,
        }

        with self._lock:
            try:
                for field in self.FIELDS:
                    raw = supplied[field]
                    if not raw:
                        continue

                    try:
                        value = parse_non_negative(field, raw, self.LIMITS[field])
                    except ValidationError:
                        logger.warning("rejected %s=%r", field, raw)
                        raise

                    self._values[field] = value
            finally:
                self._clamp()

            snapshot = self._snapshot()

        logger.info("values updated: %s", snapshot.model_dump())
        return snapshot

    # -------------------------
    # internals (под локом)
    # -------------------------

    def _clamp(self) -> None:
        if self._values["updated"] > self._values["count"]:
            self._values["updated"] = self._values["count"]

    def _snapshot(self) -> ValuesSnapshot:
        return ValuesSnapshot(**self._values)
