"""
Settings for the restaurant pricing core
"""
import os
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from dotenv import load_dotenv

# Загружаем переменные окружения из .env файла
load_dotenv()

class Settings:
    """Конфигурация ценового ядра"""

    # ===== CATALOG SETTINGS =====
    CATALOG_DATA_PATH: str = os.getenv("CATALOG_DATA_PATH", "data/catalog.json")
    DEFAULT_TIMEZONE: Optional[str] = os.getenv("DEFAULT_TIMEZONE") or None

    # ===== LOGGING SETTINGS =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    DETAILED_LOGGING: bool = os.getenv("DETAILED_LOGGING", "true").lower() == "true"

    # ===== APPLICATION SETTINGS =====
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", "8000"))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # ===== VALIDATION METHODS =====

    @classmethod
    def validate_timezone(cls, name: Optional[str]) -> bool:
        """Проверка имени часового пояса IANA"""
        if not name:
            return True
        try:
            ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            return False
        return True

    @classmethod
    def validate_pricing_config(cls) -> bool:
        """Проверка конфигурации ценового ядра"""
        return all([
            bool(cls.CATALOG_DATA_PATH),
            cls.validate_timezone(cls.DEFAULT_TIMEZONE),
            0 < cls.APP_PORT < 65536
        ])

    @classmethod
    def to_dict(cls) -> dict:
        """Конвертация настроек в словарь для логирования"""
        return {
            "catalog_data_path": cls.CATALOG_DATA_PATH,
            "default_timezone": cls.DEFAULT_TIMEZONE,
            "environment": cls.ENVIRONMENT,
            "debug": cls.DEBUG,
            "log_level": cls.LOG_LEVEL,
            "pricing_config_valid": cls.validate_pricing_config()
        }

# Глобальный экземпляр настроек
settings = Settings()

if not settings.validate_pricing_config():
    raise ValueError("Invalid pricing configuration. Check your environment variables.")
