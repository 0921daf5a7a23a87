"""
Per-location index of price-level rules
"""
from typing import Dict, Iterable, Optional, Set, Tuple, Union

from src.models.catalog import DayPart, PriceConfiguration
from .errors import AmbiguousPriceConfigurationError, DuplicateEntityError

RuleKey = Tuple[str, Optional[str]]


class PriceConfigurationIndex:
    """
    Правила локации (тип заказа, часть дня или None) -> ценовой уровень.

    Разрешение идёт от наиболее конкретного правила:
    1. точное совпадение (тип заказа, часть дня);
    2. правило типа заказа без части дня;
    3. иначе None.
    """

    def __init__(self, configurations: Iterable[PriceConfiguration] = ()):
        self._configurations = tuple(configurations)
        self._rules: Dict[RuleKey, str] = {}
        self._build()

    def _build(self):
        """Построение индекса с проверкой уникальности правил"""
        seen: Set[Tuple[str, Optional[str], str]] = set()
        for config in self._configurations:
            tuple_key = (config.order_type_id, config.day_part, config.price_level_id)
            if tuple_key in seen:
                raise DuplicateEntityError(
                    "price configuration",
                    f"{config.order_type_id}/{config.day_part or '*'}/{config.price_level_id}"
                )
            seen.add(tuple_key)

            rule_key = (config.order_type_id, config.day_part)
            existing = self._rules.get(rule_key)
            if existing is not None:
                raise AmbiguousPriceConfigurationError(
                    config.order_type_id, config.day_part, [existing, config.price_level_id]
                )
            self._rules[rule_key] = config.price_level_id

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self):
        return iter(self._configurations)

    def resolve_price_level(self, order_type_id: str,
                            day_part: Union[DayPart, str, None] = None) -> Optional[str]:
        """Ценовой уровень для типа заказа в данной части дня"""
        day_part_name = day_part.name if isinstance(day_part, DayPart) else day_part

        if day_part_name is not None:
            exact = self._rules.get((order_type_id, day_part_name))
            if exact is not None:
                return exact

        return self._rules.get((order_type_id, None))
