"""
Pricing core: day-part partitioning and price-level resolution
"""

from .day_parts import DayPartSet, validate_day_parts
from .errors import (
    PricingError,
    CatalogValidationError,
    DayPartCoverageError,
    CoverageGapError,
    CoverageOverlapError,
    InvalidDayPartError,
    DuplicateEntityError,
    AmbiguousPriceConfigurationError,
    UnknownReferenceError,
    UnknownLocationError,
    UnknownBrandError
)
from .menu_prices import MenuItemPriceTable
from .price_configurations import PriceConfigurationIndex
from .resolver import PricingResolver, PricedQuote, Unavailable, UnavailableReason
from .rules import CatalogRulesEngine
from .snapshot import PricingSnapshot
from .standards import ValidationLevel, ValidationResult

__all__ = [
    'DayPartSet',
    'validate_day_parts',
    'PricingError',
    'CatalogValidationError',
    'DayPartCoverageError',
    'CoverageGapError',
    'CoverageOverlapError',
    'InvalidDayPartError',
    'DuplicateEntityError',
    'AmbiguousPriceConfigurationError',
    'UnknownReferenceError',
    'UnknownLocationError',
    'UnknownBrandError',
    'MenuItemPriceTable',
    'PriceConfigurationIndex',
    'PricingResolver',
    'PricedQuote',
    'Unavailable',
    'UnavailableReason',
    'CatalogRulesEngine',
    'PricingSnapshot',
    'ValidationLevel',
    'ValidationResult'
]

__version__ = '1.0.0'
