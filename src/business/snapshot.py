"""
Immutable, validated pricing snapshot built from catalog data
"""
from dataclasses import dataclass
from typing import Dict, Iterable, Optional
from zoneinfo import ZoneInfo

from config.settings import settings
from src.models.catalog import BrandCatalog, CatalogData, LocationConfig
from .day_parts import DayPartSet
from .errors import (
    DuplicateEntityError, UnknownBrandError, UnknownLocationError, UnknownReferenceError
)
from .menu_prices import MenuItemPriceTable
from .price_configurations import PriceConfigurationIndex
from .resolver import PricingResolver


def _check_unique(values: Iterable[str], entity: str, scope: str):
    seen = set()
    for value in values:
        if value in seen:
            raise DuplicateEntityError(entity, value, scope)
        seen.add(value)


def check_brand(brand: BrandCatalog):
    """Уникальность имён и ключей каталогов бренда, ссылки из таблицы цен"""
    scope = f"brand {brand.id!r}"
    for entity, items in (
        ("order type", brand.order_types),
        ("price level", brand.price_levels),
        ("menu item", brand.menu_items),
    ):
        _check_unique((i.id for i in items), f"{entity} id", scope)
        _check_unique((i.name for i in items), f"{entity} name", scope)

    menu_items = {i.id for i in brand.menu_items}
    price_levels = {p.id for p in brand.price_levels}
    for price in brand.menu_item_prices:
        if price.menu_item_id not in menu_items:
            raise UnknownReferenceError("menu item", price.menu_item_id, f"price in {scope}")
        if price.price_level_id not in price_levels:
            raise UnknownReferenceError("price level", price.price_level_id, f"price in {scope}")


def check_location_references(location: LocationConfig, brand: BrandCatalog):
    """Правила локации ссылаются на каталоги бренда и свои части дня"""
    order_types = {o.id for o in brand.order_types}
    price_levels = {p.id for p in brand.price_levels}
    day_parts = {d.name for d in location.day_parts}
    referenced_by = f"price configuration of location {location.id!r}"

    for config in location.price_configurations:
        if config.order_type_id not in order_types:
            raise UnknownReferenceError("order type", config.order_type_id, referenced_by)
        if config.price_level_id not in price_levels:
            raise UnknownReferenceError("price level", config.price_level_id, referenced_by)
        if config.day_part is not None and config.day_part not in day_parts:
            raise UnknownReferenceError("day part", config.day_part, referenced_by)


def location_timezone(location: LocationConfig) -> Optional[ZoneInfo]:
    name = location.timezone or settings.DEFAULT_TIMEZONE
    return ZoneInfo(name) if name else None


@dataclass(frozen=True)
class LocationPricing:
    """Проверенные настройки одной локации"""
    location: LocationConfig
    brand_id: str
    day_parts: DayPartSet
    price_index: PriceConfigurationIndex


def build_location(location: LocationConfig, brand: BrandCatalog) -> LocationPricing:
    """Сборка и проверка настроек локации"""
    # Покрытие суток проверяется раньше ссылок правил на части дня
    day_parts = DayPartSet(location.day_parts, tz=location_timezone(location))
    check_location_references(location, brand)
    return LocationPricing(
        location=location,
        brand_id=brand.id,
        day_parts=day_parts,
        price_index=PriceConfigurationIndex(location.price_configurations)
    )


class PricingSnapshot:
    """
    Неизменяемый снимок каталога для разрешения цен.

    Собирается целиком и проверяется до публикации; любая ошибка
    CatalogValidationError блокирует активацию снимка.
    """

    def __init__(self, locations: Dict[str, LocationPricing],
                 price_tables: Dict[str, MenuItemPriceTable],
                 catalog: Optional[CatalogData] = None):
        self._locations = dict(locations)
        self._price_tables = dict(price_tables)
        self.catalog = catalog
        self.resolver = PricingResolver(self)

    @classmethod
    def build(cls, catalog: CatalogData) -> "PricingSnapshot":
        _check_unique((b.id for b in catalog.brands), "brand id", "catalog")

        locations: Dict[str, LocationPricing] = {}
        price_tables: Dict[str, MenuItemPriceTable] = {}

        for brand in catalog.brands:
            check_brand(brand)
            price_tables[brand.id] = MenuItemPriceTable(brand.menu_item_prices)

            for location in brand.locations:
                if location.id in locations:
                    raise DuplicateEntityError("location id", location.id, "catalog")
                locations[location.id] = build_location(location, brand)

        return cls(locations, price_tables, catalog)

    @property
    def location_ids(self):
        return list(self._locations)

    @property
    def brand_ids(self):
        return list(self._price_tables)

    def _location(self, location_id: str) -> LocationPricing:
        try:
            return self._locations[location_id]
        except KeyError:
            raise UnknownLocationError(location_id) from None

    def location(self, location_id: str) -> LocationConfig:
        return self._location(location_id).location

    def brand_of(self, location_id: str) -> str:
        return self._location(location_id).brand_id

    def day_parts(self, location_id: str) -> DayPartSet:
        return self._location(location_id).day_parts

    def price_index(self, location_id: str) -> PriceConfigurationIndex:
        return self._location(location_id).price_index

    def price_table(self, brand_id: str) -> MenuItemPriceTable:
        try:
            return self._price_tables[brand_id]
        except KeyError:
            raise UnknownBrandError(brand_id) from None
