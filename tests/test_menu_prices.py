"""
Tests for the menu item price table
"""
from decimal import Decimal

import pytest

from src.business import DuplicateEntityError, MenuItemPriceTable
from src.models.catalog import MenuItemPrice


class TestMenuItemPriceTable:

    def test_price_lookup(self, deli_brand):
        table = MenuItemPriceTable(deli_brand.menu_item_prices)

        assert table.price_for("reuben", "regular") == Decimal("4")
        assert table.price_for("reuben", "happy_hour") == Decimal("2")

    def test_missing_price_is_none(self, deli_brand):
        table = MenuItemPriceTable(deli_brand.menu_item_prices)

        assert table.price_for("reuben", "delivery") is None
        assert table.price_for("pastrami", "regular") is None

    def test_zero_amount_is_a_price(self):
        table = MenuItemPriceTable([
            MenuItemPrice(menu_item_id="water", price_level_id="regular", amount=Decimal("0"))
        ])

        assert table.price_for("water", "regular") == Decimal("0")

    def test_duplicate_pair_rejected(self):
        with pytest.raises(DuplicateEntityError):
            MenuItemPriceTable([
                MenuItemPrice(menu_item_id="reuben", price_level_id="regular", amount=Decimal("4")),
                MenuItemPrice(menu_item_id="reuben", price_level_id="regular", amount=Decimal("5")),
            ])

    def test_negative_amount_rejected_by_model(self):
        with pytest.raises(ValueError):
            MenuItemPrice(menu_item_id="reuben", price_level_id="regular", amount=Decimal("-1"))
