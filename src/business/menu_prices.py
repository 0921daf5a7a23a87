"""
Menu item prices per price level
"""
from decimal import Decimal
from typing import Dict, Iterable, Optional, Tuple

from src.models.catalog import MenuItemPrice
from .errors import DuplicateEntityError


class MenuItemPriceTable:
    """Таблица цен бренда: (позиция, ценовой уровень) -> сумма"""

    def __init__(self, prices: Iterable[MenuItemPrice] = ()):
        self._prices: Dict[Tuple[str, str], Decimal] = {}
        for price in prices:
            key = (price.menu_item_id, price.price_level_id)
            if key in self._prices:
                raise DuplicateEntityError("menu item price", f"{key[0]}@{key[1]}")
            self._prices[key] = price.amount

    def __len__(self) -> int:
        return len(self._prices)

    def price_for(self, menu_item_id: str, price_level_id: str) -> Optional[Decimal]:
        """Цена позиции на уровне; None - позиция на этом уровне не продаётся"""
        return self._prices.get((menu_item_id, price_level_id))
