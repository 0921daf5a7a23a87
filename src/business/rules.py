from typing import Dict, Any, List, Optional
from src.models.catalog import BrandCatalog, LocationConfig
from .validators import DayPartCoverageValidator, PriceConfigurationValidator, ReferenceValidator
from .standards import ValidationResult, ValidationLevel

class CatalogRulesEngine:
    """Проверка предлагаемых настроек локации до публикации снимка"""

    def __init__(self):
        self.validators = [
            DayPartCoverageValidator(),
            PriceConfigurationValidator(),
            ReferenceValidator()
        ]

    def validate_location(self, location: LocationConfig,
                          brand: Optional[BrandCatalog] = None) -> Dict[str, Any]:
        """
        Полный отчёт по настройкам локации

        Args:
            location: предлагаемые настройки локации
            brand: каталоги бренда для проверки ссылок (необязательно)

        Returns:
            Результат валидации в формате JSON
        """
        all_validations = []
        for validator in self.validators:
            all_validations.extend(validator.validate(location, brand))

        return {
            "location_id": location.id,
            "overall_status": self._determine_overall_status(all_validations),
            "validations": [
                {
                    "level": v.level.value,
                    "message": v.message,
                    "field": v.field,
                    "recommendation": v.recommendation
                }
                for v in all_validations
            ],
            "summary": {
                "total_validations": len(all_validations),
                "by_level": self._count_by_level(all_validations)
            }
        }

    def _determine_overall_status(self, validations: List[ValidationResult]) -> str:
        """Общий статус: ошибки блокируют публикацию"""
        if any(v.level == ValidationLevel.ERROR for v in validations):
            return "error"
        elif any(v.level == ValidationLevel.WARNING for v in validations):
            return "warning"
        return "valid"

    def _count_by_level(self, validations: List[ValidationResult]) -> Dict[str, int]:
        counts = {level.value: 0 for level in ValidationLevel}
        for validation in validations:
            counts[validation.level.value] += 1
        return counts
