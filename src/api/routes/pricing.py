"""
Pricing API endpoints
"""
from datetime import datetime
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field
from src.business import (
    CatalogValidationError, CoverageGapError, CoverageOverlapError, UnknownLocationError
)
from src.models.catalog import CatalogData, DayPart, LocationConfig
from src.services.pricing_service import SnapshotNotLoadedError, pricing_service
from src.utils.logger import logger

router = APIRouter(prefix="/api/pricing", tags=["pricing"])

class QuoteRequest(BaseModel):
    location_id: str
    menu_item_id: str
    order_type_id: str
    at: Optional[datetime] = Field(None, description="Момент продажи; по умолчанию сейчас")

class DayPartsRequest(BaseModel):
    day_parts: List[DayPart] = Field(default_factory=list)

@router.post("/quote")
async def quote(request: QuoteRequest) -> Dict[str, Any]:
    """Цена позиции в точке продаж"""
    instant = request.at or datetime.now().astimezone()
    try:
        result = pricing_service.quote(
            request.location_id, request.menu_item_id, request.order_type_id, instant
        )
    except UnknownLocationError:
        raise HTTPException(status_code=404, detail="Локация не найдена")
    except SnapshotNotLoadedError:
        raise HTTPException(status_code=503, detail="Каталог не загружен")

    if result.available:
        return {
            "available": True,
            "amount": str(result.amount),
            "price_level_id": result.price_level_id,
            "day_part": result.day_part
        }
    return {
        "available": False,
        "reason": result.reason.value,
        "price_level_id": result.price_level_id,
        "day_part": result.day_part
    }

@router.post("/validate-day-parts")
async def validate_day_parts(request: DayPartsRequest) -> Dict[str, Any]:
    """Проверка покрытия суток до сохранения частей дня"""
    try:
        pricing_service.validate_day_parts(request.day_parts)
    except CoverageGapError as e:
        return {
            "valid": False,
            "error": "coverage_gap",
            "message": str(e),
            "start": e.start.isoformat(),
            "end": e.end.isoformat()
        }
    except CoverageOverlapError as e:
        return {
            "valid": False,
            "error": "coverage_overlap",
            "message": str(e),
            "start": e.start.isoformat(),
            "end": e.end.isoformat(),
            "day_parts": [e.first, e.second]
        }
    except CatalogValidationError as e:
        return {"valid": False, "error": "invalid_day_parts", "message": str(e)}

    return {"valid": True}

@router.post("/validate-location")
async def validate_location(location: LocationConfig, brand_id: Optional[str] = Query(None)):
    """Полный отчёт по настройкам локации"""
    return pricing_service.validate_location(location, brand_id)

@router.put("/catalog")
async def publish_catalog(catalog: CatalogData) -> Dict[str, Any]:
    """Публикация нового снимка каталога"""
    try:
        pricing_service.publish(catalog)
    except CatalogValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": type(e).__name__, "message": str(e)}
        )

    logger.info("🔄 Catalog replaced via API")
    return {"published": True, **pricing_service.get_stats()}

@router.get("/locations/{location_id}/day-parts/active")
async def get_active_day_part(location_id: str, at: Optional[datetime] = Query(None)):
    """Текущая часть дня локации"""
    instant = at or datetime.now().astimezone()
    try:
        day_part = pricing_service.active_day_part(location_id, instant)
    except UnknownLocationError:
        raise HTTPException(status_code=404, detail="Локация не найдена")
    except SnapshotNotLoadedError:
        raise HTTPException(status_code=503, detail="Каталог не загружен")

    if day_part is None:
        return {"location_id": location_id, "day_part": None}
    return {
        "location_id": location_id,
        "day_part": day_part.name,
        "start": day_part.start.isoformat(),
        "end": day_part.end.isoformat()
    }
