"""
Point-of-sale price resolution
"""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from .day_parts import Instant

if TYPE_CHECKING:
    from .snapshot import PricingSnapshot


class UnavailableReason(str, Enum):
    """Почему позицию сейчас нельзя продать"""
    NO_APPLICABLE_PRICE_LEVEL = "no_applicable_price_level"
    NO_PRICE_AT_RESOLVED_LEVEL = "no_price_at_resolved_level"


@dataclass(frozen=True)
class PricedQuote:
    """Цена определена"""
    amount: Decimal
    price_level_id: str
    day_part: Optional[str] = None

    @property
    def available(self) -> bool:
        return True


@dataclass(frozen=True)
class Unavailable:
    """Цена недоступна: не найдено правило или нет цены на найденном уровне"""
    reason: UnavailableReason
    day_part: Optional[str] = None
    price_level_id: Optional[str] = None

    @property
    def available(self) -> bool:
        return False


QuoteResult = Union[PricedQuote, Unavailable]


class PricingResolver:
    """Определение цены позиции для локации, типа заказа и момента времени"""

    def __init__(self, snapshot: "PricingSnapshot"):
        self.snapshot = snapshot

    def quote(self, location_id: str, menu_item_id: str, order_type_id: str,
              instant: Instant) -> QuoteResult:
        """
        Цена позиции в точке продаж.

        Args:
            location_id: локация
            menu_item_id: позиция меню бренда
            order_type_id: тип заказа
            instant: момент продажи (datetime или время суток)

        Returns:
            PricedQuote или Unavailable с причиной

        Raises:
            UnknownLocationError: локации нет в снимке
        """
        day_parts = self.snapshot.day_parts(location_id)
        price_index = self.snapshot.price_index(location_id)
        price_table = self.snapshot.price_table(self.snapshot.brand_of(location_id))

        active = day_parts.active_day_part(instant)
        day_part_name = active.name if active is not None else None

        price_level_id = price_index.resolve_price_level(order_type_id, day_part_name)
        if price_level_id is None:
            return Unavailable(
                reason=UnavailableReason.NO_APPLICABLE_PRICE_LEVEL,
                day_part=day_part_name
            )

        amount = price_table.price_for(menu_item_id, price_level_id)
        if amount is None:
            return Unavailable(
                reason=UnavailableReason.NO_PRICE_AT_RESOLVED_LEVEL,
                day_part=day_part_name,
                price_level_id=price_level_id
            )

        return PricedQuote(amount=amount, price_level_id=price_level_id, day_part=day_part_name)
