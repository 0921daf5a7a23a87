"""
Catalog data models: the read-only snapshot handed over by catalog management
"""
from datetime import time
from decimal import Decimal
from typing import List, Optional
from pydantic import Field, field_validator
from config.settings import Settings
from src.models.base import PricingBaseModel

MIDNIGHT = time(0, 0)

class OrderType(PricingBaseModel):
    """Тип заказа (Dine In, Delivery...)"""
    id: str = Field(..., min_length=1, description="Ключ типа заказа")
    name: str = Field(..., min_length=1, max_length=100, description="Название")

class PriceLevel(PricingBaseModel):
    """Ценовой уровень (Regular, Happy Hour...)"""
    id: str = Field(..., min_length=1, description="Ключ ценового уровня")
    name: str = Field(..., min_length=1, max_length=100, description="Название")

class MenuItem(PricingBaseModel):
    """Позиция меню бренда"""
    id: str = Field(..., min_length=1, description="Ключ позиции")
    name: str = Field(..., min_length=1, max_length=200, description="Название")

class MenuItemPrice(PricingBaseModel):
    """Цена позиции на ценовом уровне"""
    menu_item_id: str = Field(..., min_length=1)
    price_level_id: str = Field(..., min_length=1)
    amount: Decimal = Field(..., ge=0, description="Сумма")

class DayPart(PricingBaseModel):
    """
    Часть дня: полуинтервал [start, end) на 24-часовой шкале.

    end < start означает переход через полночь, [00:00, 00:00) - весь день.
    """
    name: str = Field(..., min_length=1, max_length=100)
    start: time
    end: time

    @field_validator("start", "end")
    @classmethod
    def reject_aware_times(cls, v: time) -> time:
        if v.tzinfo is not None:
            raise ValueError("day part boundaries are local wall-clock times")
        return v

    @property
    def is_full_cycle(self) -> bool:
        return self.start == MIDNIGHT and self.end == MIDNIGHT

    @property
    def is_wraparound(self) -> bool:
        return self.end < self.start

    def contains(self, moment: time) -> bool:
        """Попадает ли время суток в интервал"""
        moment = moment.replace(tzinfo=None)
        if self.is_full_cycle:
            return True
        if self.start == self.end:
            return False
        if self.is_wraparound:
            return moment >= self.start or moment < self.end
        return self.start <= moment < self.end

class PriceConfiguration(PricingBaseModel):
    """Правило локации: (тип заказа, часть дня или None) -> ценовой уровень"""
    order_type_id: str = Field(..., min_length=1)
    day_part: Optional[str] = Field(None, description="Имя части дня; None - правило на весь день")
    price_level_id: str = Field(..., min_length=1)

class LocationConfig(PricingBaseModel):
    """Настройки локации"""
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    timezone: Optional[str] = Field(None, description="Часовой пояс IANA")
    day_parts: List[DayPart] = Field(default_factory=list)
    price_configurations: List[PriceConfiguration] = Field(default_factory=list)

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, v: Optional[str]) -> Optional[str]:
        if not Settings.validate_timezone(v):
            raise ValueError(f"unknown timezone: {v}")
        return v

class BrandCatalog(PricingBaseModel):
    """Каталоги бренда и его локации"""
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    order_types: List[OrderType] = Field(default_factory=list)
    price_levels: List[PriceLevel] = Field(default_factory=list)
    menu_items: List[MenuItem] = Field(default_factory=list)
    menu_item_prices: List[MenuItemPrice] = Field(default_factory=list)
    locations: List[LocationConfig] = Field(default_factory=list)

class CatalogData(PricingBaseModel):
    """Полный снимок каталога"""
    brands: List[BrandCatalog] = Field(default_factory=list)
