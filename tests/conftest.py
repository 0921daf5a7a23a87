"""
Shared fixtures: the FiDi business example
"""
from datetime import time
from decimal import Decimal

import pytest

from src.business import PricingSnapshot
from src.models.catalog import (
    BrandCatalog, CatalogData, DayPart, LocationConfig, MenuItem, MenuItemPrice,
    OrderType, PriceConfiguration, PriceLevel
)


@pytest.fixture
def fidi_day_parts():
    return [
        DayPart(name="Breakfast", start=time(2, 0), end=time(11, 0)),
        DayPart(name="Lunch", start=time(11, 0), end=time(17, 0)),
        DayPart(name="Dinner", start=time(17, 0), end=time(2, 0)),
    ]


@pytest.fixture
def fidi_rules():
    return [
        PriceConfiguration(order_type_id="dine_in", day_part=None, price_level_id="regular"),
        PriceConfiguration(order_type_id="dine_in", day_part="Dinner", price_level_id="happy_hour"),
        PriceConfiguration(order_type_id="delivery", day_part=None, price_level_id="delivery"),
    ]


@pytest.fixture
def fidi_location(fidi_day_parts, fidi_rules):
    return LocationConfig(
        id="fidi",
        name="FiDi",
        day_parts=fidi_day_parts,
        price_configurations=fidi_rules,
    )


@pytest.fixture
def deli_brand(fidi_location):
    return BrandCatalog(
        id="deli",
        name="Downtown Deli",
        order_types=[
            OrderType(id="dine_in", name="Dine In"),
            OrderType(id="take_out", name="Take Out"),
            OrderType(id="delivery", name="Delivery"),
        ],
        price_levels=[
            PriceLevel(id="regular", name="Regular"),
            PriceLevel(id="happy_hour", name="Happy Hour"),
            PriceLevel(id="delivery", name="Delivery"),
        ],
        menu_items=[MenuItem(id="reuben", name="Spicy Reuben")],
        menu_item_prices=[
            MenuItemPrice(menu_item_id="reuben", price_level_id="regular", amount=Decimal("4")),
            MenuItemPrice(menu_item_id="reuben", price_level_id="happy_hour", amount=Decimal("2")),
        ],
        locations=[fidi_location],
    )


@pytest.fixture
def catalog(deli_brand):
    return CatalogData(brands=[deli_brand])


@pytest.fixture
def snapshot(catalog):
    return PricingSnapshot.build(catalog)
