"""
Base models for the pricing core
"""
from pydantic import BaseModel, ConfigDict

class PricingBaseModel(BaseModel):
    """Базовая модель каталога: неизменяемый снимок"""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True
    )
