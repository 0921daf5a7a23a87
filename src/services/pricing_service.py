"""
Pricing service: holds the published snapshot and answers quotes
"""
import json
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, Optional
from src.business import (
    CatalogRulesEngine, CatalogValidationError, PricingSnapshot, validate_day_parts
)
from src.business.day_parts import Instant
from src.business.resolver import QuoteResult
from src.models.catalog import BrandCatalog, CatalogData, DayPart, LocationConfig
from src.utils.logger import logger
from config.settings import settings

class SnapshotNotLoadedError(RuntimeError):
    """Снимок каталога ещё не опубликован"""

class PricingService:
    """Сервис разрешения цен"""

    def __init__(self):
        self._snapshot: Optional[PricingSnapshot] = None
        self._publish_lock = threading.Lock()
        self._rules_engine = CatalogRulesEngine()
        self._stats = {"published": 0, "rejected": 0}

    @property
    def snapshot(self) -> PricingSnapshot:
        snapshot = self._snapshot
        if snapshot is None:
            raise SnapshotNotLoadedError("catalog snapshot is not loaded")
        return snapshot

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    async def initialize(self):
        """Инициализация сервиса"""
        logger.info("Initializing PricingService")
        await self.load_catalog()
        logger.info("PricingService initialized")

    async def load_catalog(self, path: Optional[Path] = None) -> PricingSnapshot:
        """Загрузка каталога из файла"""
        catalog_path = Path(path or settings.CATALOG_DATA_PATH)

        if not catalog_path.exists():
            logger.warning("Catalog data file not found, creating sample data", path=str(catalog_path))
            self._create_sample_catalog(catalog_path)

        with open(catalog_path, 'r', encoding='utf-8') as f:
            catalog_data = json.load(f)

        return self.publish(CatalogData.model_validate(catalog_data))

    def publish(self, catalog: CatalogData) -> PricingSnapshot:
        """
        Сборка нового снимка и атомарная замена текущего.

        При ошибке валидации продолжает работать предыдущий снимок.
        """
        with self._publish_lock:
            try:
                snapshot = PricingSnapshot.build(catalog)
            except CatalogValidationError as e:
                self._stats["rejected"] += 1
                logger.snapshot_rejected(str(e), error_type=type(e).__name__)
                raise

            self._snapshot = snapshot
            self._stats["published"] += 1

        logger.snapshot_published(len(snapshot.brand_ids), len(snapshot.location_ids))
        return snapshot

    def quote(self, location_id: str, menu_item_id: str, order_type_id: str,
              instant: Instant) -> QuoteResult:
        """Цена позиции для локации, типа заказа и момента продажи"""
        result = self.snapshot.resolver.quote(location_id, menu_item_id, order_type_id, instant)

        if result.available:
            logger.quote_resolved(location_id, menu_item_id, result.amount,
                                  price_level_id=result.price_level_id, day_part=result.day_part)
        else:
            logger.quote_unavailable(location_id, menu_item_id, result.reason.value,
                                     order_type_id=order_type_id, day_part=result.day_part)
        return result

    def active_day_part(self, location_id: str, instant: Instant) -> Optional[DayPart]:
        """Текущая часть дня локации"""
        return self.snapshot.day_parts(location_id).active_day_part(instant)

    def validate_day_parts(self, day_parts: Iterable[DayPart]) -> None:
        """Проверка набора частей дня перед сохранением (бросает CoverageGapError / CoverageOverlapError)"""
        validate_day_parts(day_parts)

    def validate_location(self, location: LocationConfig,
                          brand_id: Optional[str] = None) -> Dict[str, Any]:
        """Полный отчёт по предлагаемым настройкам локации"""
        brand = self._find_brand(brand_id) if brand_id else None
        return self._rules_engine.validate_location(location, brand)

    def _find_brand(self, brand_id: str) -> Optional[BrandCatalog]:
        snapshot = self._snapshot
        if snapshot is None or snapshot.catalog is None:
            return None
        for brand in snapshot.catalog.brands:
            if brand.id == brand_id:
                return brand
        return None

    def get_stats(self) -> Dict[str, Any]:
        snapshot = self._snapshot
        return {
            "loaded": snapshot is not None,
            "brands": len(snapshot.brand_ids) if snapshot else 0,
            "locations": len(snapshot.location_ids) if snapshot else 0,
            "snapshots_published": self._stats["published"],
            "snapshots_rejected": self._stats["rejected"]
        }

    def _create_sample_catalog(self, catalog_path: Path):
        """Создание образца каталога"""
        sample_data = {
            "brands": [
                {
                    "id": "deli",
                    "name": "Downtown Deli",
                    "order_types": [
                        {"id": "dine_in", "name": "Dine In"},
                        {"id": "take_out", "name": "Take Out"},
                        {"id": "delivery", "name": "Delivery"}
                    ],
                    "price_levels": [
                        {"id": "regular", "name": "Regular"},
                        {"id": "happy_hour", "name": "Happy Hour"},
                        {"id": "delivery", "name": "Delivery"}
                    ],
                    "menu_items": [
                        {"id": "spicy_reuben", "name": "Spicy Reuben"}
                    ],
                    "menu_item_prices": [
                        {"menu_item_id": "spicy_reuben", "price_level_id": "regular", "amount": "4.00"},
                        {"menu_item_id": "spicy_reuben", "price_level_id": "happy_hour", "amount": "2.00"}
                    ],
                    "locations": [
                        {
                            "id": "fidi",
                            "name": "FiDi",
                            "timezone": "America/New_York",
                            "day_parts": [
                                {"name": "Breakfast", "start": "02:00:00", "end": "11:00:00"},
                                {"name": "Lunch", "start": "11:00:00", "end": "17:00:00"},
                                {"name": "Dinner", "start": "17:00:00", "end": "02:00:00"}
                            ],
                            "price_configurations": [
                                {"order_type_id": "dine_in", "day_part": None, "price_level_id": "regular"},
                                {"order_type_id": "dine_in", "day_part": "Dinner", "price_level_id": "happy_hour"},
                                {"order_type_id": "delivery", "day_part": None, "price_level_id": "delivery"}
                            ]
                        }
                    ]
                }
            ]
        }

        catalog_path.parent.mkdir(parents=True, exist_ok=True)

        with open(catalog_path, 'w', encoding='utf-8') as f:
            json.dump(sample_data, f, ensure_ascii=False, indent=2)

        logger.info("Sample catalog created", path=str(catalog_path))

# Глобальный экземпляр
pricing_service = PricingService()
