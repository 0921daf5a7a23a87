"""
Error taxonomy of the pricing core
"""
from datetime import time
from typing import Optional


def _fmt(moment: time) -> str:
    return moment.strftime("%H:%M") if moment.second == 0 and moment.microsecond == 0 \
        else moment.isoformat()


class PricingError(Exception):
    """Базовая ошибка ценового ядра"""


class CatalogValidationError(PricingError):
    """Снимок каталога не может быть активирован"""


class DayPartCoverageError(CatalogValidationError):
    """Части дня локации не образуют разбиение суток"""


class CoverageGapError(DayPartCoverageError):
    """Участок суток [start, end) не покрыт ни одной частью дня"""

    def __init__(self, start: time, end: time):
        self.start = start
        self.end = end
        super().__init__(f"day parts leave [{_fmt(start)}, {_fmt(end)}) uncovered")


class CoverageOverlapError(DayPartCoverageError):
    """Две части дня пересекаются на участке [start, end)"""

    def __init__(self, start: time, end: time, first: str, second: str):
        self.start = start
        self.end = end
        self.first = first
        self.second = second
        super().__init__(
            f"day parts '{first}' and '{second}' overlap on [{_fmt(start)}, {_fmt(end)})"
        )


class InvalidDayPartError(DayPartCoverageError):
    """Вырожденный интервал [t, t) при t != 00:00"""

    def __init__(self, name: str, moment: time):
        self.name = name
        self.moment = moment
        super().__init__(
            f"day part '{name}' is empty [{_fmt(moment)}, {_fmt(moment)}); "
            f"only [00:00, 00:00) may span the full day"
        )


class DuplicateEntityError(CatalogValidationError):
    """Нарушена уникальность сущности"""

    def __init__(self, entity: str, key: str, scope: Optional[str] = None):
        self.entity = entity
        self.key = key
        self.scope = scope
        where = f" in {scope}" if scope else ""
        super().__init__(f"duplicate {entity} {key!r}{where}")


class AmbiguousPriceConfigurationError(CatalogValidationError):
    """Для одной пары (тип заказа, часть дня) заданы разные ценовые уровни"""

    def __init__(self, order_type_id: str, day_part: Optional[str], price_levels):
        self.order_type_id = order_type_id
        self.day_part = day_part
        self.price_levels = tuple(price_levels)
        super().__init__(
            f"order type {order_type_id!r} with day part {day_part!r} maps to "
            f"several price levels: {', '.join(self.price_levels)}"
        )


class UnknownReferenceError(CatalogValidationError):
    """Ссылка на несуществующую сущность"""

    def __init__(self, entity: str, key: str, referenced_by: str):
        self.entity = entity
        self.key = key
        self.referenced_by = referenced_by
        super().__init__(f"{referenced_by} references unknown {entity} {key!r}")


class UnknownLocationError(PricingError, LookupError):
    """Локация отсутствует в снимке"""

    def __init__(self, location_id: str):
        self.location_id = location_id
        super().__init__(f"unknown location {location_id!r}")


class UnknownBrandError(PricingError, LookupError):
    """Бренд отсутствует в снимке"""

    def __init__(self, brand_id: str):
        self.brand_id = brand_id
        super().__init__(f"unknown brand {brand_id!r}")
