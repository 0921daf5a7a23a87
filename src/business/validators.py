from typing import List, Optional
from src.models.catalog import BrandCatalog, LocationConfig
from .day_parts import validate_day_parts
from .errors import (
    AmbiguousPriceConfigurationError, CatalogValidationError, CoverageGapError,
    CoverageOverlapError, DuplicateEntityError
)
from .price_configurations import PriceConfigurationIndex
from .snapshot import check_location_references
from .standards import ValidationResult, ValidationLevel

class DayPartCoverageValidator:
    """Валидатор покрытия суток частями дня"""

    @staticmethod
    def validate(location: LocationConfig, brand: Optional[BrandCatalog] = None) -> List[ValidationResult]:
        results = []

        if not location.day_parts:
            results.append(ValidationResult(
                level=ValidationLevel.INFO,
                message="✅ Части дня не заданы: правила действуют весь день",
                field="day_parts"
            ))
            return results

        try:
            validate_day_parts(location.day_parts)
        except CoverageGapError as e:
            results.append(ValidationResult(
                level=ValidationLevel.ERROR,
                message=f"❌ Пробел в расписании: {e}",
                field="day_parts",
                recommendation="Расширьте соседнюю часть дня или добавьте новую на непокрытый участок"
            ))
        except CoverageOverlapError as e:
            results.append(ValidationResult(
                level=ValidationLevel.ERROR,
                message=f"❌ Пересечение частей дня: {e}",
                field="day_parts",
                recommendation=f"Сдвиньте границу между '{e.first}' и '{e.second}'"
            ))
        except CatalogValidationError as e:
            results.append(ValidationResult(
                level=ValidationLevel.ERROR,
                message=f"❌ Некорректная часть дня: {e}",
                field="day_parts",
                recommendation="Проверьте имена и границы частей дня"
            ))
        else:
            results.append(ValidationResult(
                level=ValidationLevel.INFO,
                message=f"✅ {len(location.day_parts)} част(ей) дня покрывают сутки без пересечений",
                field="day_parts"
            ))

        return results

class PriceConfigurationValidator:
    """Валидатор правил выбора ценового уровня"""

    @staticmethod
    def validate(location: LocationConfig, brand: Optional[BrandCatalog] = None) -> List[ValidationResult]:
        results = []

        try:
            PriceConfigurationIndex(location.price_configurations)
        except (DuplicateEntityError, AmbiguousPriceConfigurationError) as e:
            results.append(ValidationResult(
                level=ValidationLevel.ERROR,
                message=f"❌ Конфликт правил: {e}",
                field="price_configurations",
                recommendation="Оставьте одно правило на пару (тип заказа, часть дня)"
            ))
            return results

        # Тип заказа только с правилами по частям дня недоступен в остальное время
        with_fallback = {c.order_type_id for c in location.price_configurations if c.day_part is None}
        partial = sorted({
            c.order_type_id for c in location.price_configurations
            if c.day_part is not None and c.order_type_id not in with_fallback
        })
        covered_parts = {c.order_type_id: set() for c in location.price_configurations}
        for c in location.price_configurations:
            if c.day_part is not None:
                covered_parts[c.order_type_id].add(c.day_part)
        all_parts = {d.name for d in location.day_parts}

        for order_type_id in partial:
            missing = sorted(all_parts - covered_parts[order_type_id])
            if missing:
                results.append(ValidationResult(
                    level=ValidationLevel.WARNING,
                    message=f"⚠️ Тип заказа {order_type_id!r} без цены в частях дня: {', '.join(missing)}",
                    field="price_configurations",
                    recommendation="Добавьте правило без части дня как запасное"
                ))

        if not location.price_configurations:
            results.append(ValidationResult(
                level=ValidationLevel.WARNING,
                message="⚠️ У локации нет правил: ни одна позиция не будет продаваться",
                field="price_configurations",
                recommendation="Добавьте хотя бы одно правило для основного типа заказа"
            ))

        return results

class ReferenceValidator:
    """Валидатор ссылок на каталоги бренда"""

    @staticmethod
    def validate(location: LocationConfig, brand: Optional[BrandCatalog] = None) -> List[ValidationResult]:
        results = []

        if brand is None:
            return results

        try:
            check_location_references(location, brand)
        except CatalogValidationError as e:
            results.append(ValidationResult(
                level=ValidationLevel.ERROR,
                message=f"❌ Неизвестная ссылка: {e}",
                field="price_configurations",
                recommendation="Проверьте ключи типов заказа, ценовых уровней и частей дня"
            ))

        return results
