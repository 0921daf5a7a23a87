"""
Logging configuration for the pricing core
"""
import logging
import json
import sys
from typing import Any, Optional
from config.settings import settings

class PricingLogger:
    """Логгер ценового ядра с контекстом"""

    def __init__(self, name: str = "pricing_core"):
        self.logger = logging.getLogger(name)
        self._setup_logger()

    def _setup_logger(self):
        """Настройка логгера"""
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stdout)

            formatter = logging.Formatter(
                fmt=settings.LOG_FORMAT,
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

            log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
            self.logger.setLevel(log_level)

            # Предотвращаем дублирование логов
            self.logger.propagate = False

    def info(self, message: str, **kwargs):
        """Логирование информации с контекстом"""
        if settings.DETAILED_LOGGING:
            context = self._format_context(**kwargs)
            self.logger.info(f"{message} {context}".rstrip())
        else:
            self.logger.info(message)

    def error(self, message: str, **kwargs):
        """Логирование ошибок с контекстом"""
        context = self._format_context(**kwargs)
        self.logger.error(f"{message} {context}".rstrip())

    def warning(self, message: str, **kwargs):
        """Логирование предупреждений с контекстом"""
        context = self._format_context(**kwargs)
        self.logger.warning(f"{message} {context}".rstrip())

    def debug(self, message: str, **kwargs):
        """Логирование отладочной информации"""
        if settings.DEBUG:
            context = self._format_context(**kwargs)
            self.logger.debug(f"{message} {context}".rstrip())

    def snapshot_published(self, brands: int, locations: int, **kwargs):
        """Публикация нового снимка каталога"""
        self.info(
            f"📦 Catalog snapshot published: {brands} brand(s), {locations} location(s)",
            brands=brands,
            locations=locations,
            **kwargs
        )

    def snapshot_rejected(self, error: str, **kwargs):
        """Снимок каталога отклонён валидацией"""
        self.error(
            f"❌ Catalog snapshot rejected: {error}",
            error=error,
            **kwargs
        )

    def quote_resolved(self, location_id: str, menu_item_id: str, amount: Any, **kwargs):
        """Цена успешно определена"""
        self.debug(
            f"💰 Quote {location_id}/{menu_item_id} = {amount}",
            location_id=location_id,
            menu_item_id=menu_item_id,
            amount=amount,
            **kwargs
        )

    def quote_unavailable(self, location_id: str, menu_item_id: str, reason: str,
                          order_type_id: Optional[str] = None, **kwargs):
        """Цена недоступна"""
        self.debug(
            f"🚫 Quote {location_id}/{menu_item_id} unavailable: {reason}",
            location_id=location_id,
            menu_item_id=menu_item_id,
            order_type_id=order_type_id,
            reason=reason,
            **kwargs
        )

    def _format_context(self, **kwargs) -> str:
        """Форматирование контекста для логов"""
        if not kwargs:
            return ""

        # Удаляем None значения и большие объекты
        clean_context = {}
        for key, value in kwargs.items():
            if value is not None:
                if isinstance(value, (dict, list)):
                    str_value = str(value)
                    if len(str_value) > 500:
                        clean_context[key] = f"<{type(value).__name__} size={len(str_value)}>"
                    else:
                        clean_context[key] = value
                elif isinstance(value, str) and len(value) > 200:
                    clean_context[key] = f"{value[:200]}..."
                else:
                    clean_context[key] = value

        if not clean_context:
            return ""

        try:
            return f"| {json.dumps(clean_context, ensure_ascii=False, default=str)}"
        except (TypeError, ValueError):
            return f"| {str(clean_context)}"

# Глобальный экземпляр логгера
logger = PricingLogger("pricing_core")
