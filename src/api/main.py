"""
Restaurant Pricing Core - point-of-sale price resolution API
"""
from datetime import datetime
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from config.settings import settings
from src.utils.logger import logger
from src.api.routes.pricing import router as pricing_router
from src.services.pricing_service import pricing_service

VERSION = "1.0.0"

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Управление жизненным циклом приложения"""

    logger.info("🚀 Pricing core starting up", version=VERSION, **settings.to_dict())

    try:
        await pricing_service.initialize()
        logger.info("🎉 All services initialized successfully")
    except Exception as e:
        logger.error("❌ Failed to initialize services", error=str(e))
        raise

    yield

    logger.info("🔄 Pricing core shutting down")

def create_app(use_lifespan: bool = True) -> FastAPI:
    """Создание и настройка FastAPI приложения"""

    app = FastAPI(
        title="Restaurant Pricing Core",
        description="Day-part aware price-level resolution for point-of-sale terminals",
        version=VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan if use_lifespan else None
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(pricing_router)
    logger.info("🔗 Pricing router included")

    @app.get("/")
    async def root():
        """Корневой endpoint с информацией о системе"""
        return {
            "service": "Restaurant Pricing Core",
            "version": VERSION,
            "status": "running" if pricing_service.is_loaded else "starting",
            "timestamp": datetime.now().isoformat(),
            "endpoints": {
                "quote": "/api/pricing/quote",
                "validate_day_parts": "/api/pricing/validate-day-parts",
                "validate_location": "/api/pricing/validate-location",
                "catalog": "/api/pricing/catalog",
                "active_day_part": "/api/pricing/locations/{location_id}/day-parts/active",
                "health": "/health"
            },
            "configuration": {
                "debug_mode": settings.DEBUG,
                "environment": settings.ENVIRONMENT
            }
        }

    @app.get("/health")
    async def health():
        """Состояние сервиса"""
        stats = pricing_service.get_stats()
        return {
            "status": "healthy" if stats["loaded"] else "degraded",
            "timestamp": datetime.now().isoformat(),
            **stats
        }

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        """Глобальный обработчик исключений"""
        logger.error("💥 Unhandled exception",
                    path=request.url.path,
                    method=request.method,
                    error=str(exc))

        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc) if settings.DEBUG else "An unexpected error occurred",
                "path": request.url.path,
                "timestamp": datetime.now().isoformat()
            }
        )

    return app

app = create_app()

if __name__ == "__main__":
    logger.info("🚀 Starting pricing core development server...")
    logger.info(f"📍 Server will start on http://{settings.APP_HOST}:{settings.APP_PORT}")

    uvicorn.run(
        "src.api.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.DEBUG,
        log_level="info"
    )
