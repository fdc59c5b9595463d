# app/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config.settings import settings
from app.config.database import init_db
from app.core.middleware import setup_middleware, setup_exception_handlers
from app.api.v1.router import api_router

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"{settings.app_name} starting - version {settings.version}")
    logger.info(f"Environment: {'Development' if settings.debug else 'Production'}")
    logger.info(f"Database: {settings.database_label}")
    if settings.auto_create_tables:
        init_db()

    yield

    # Shutdown
    logger.info(f"{settings.app_name} shutting down")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        description="Inventario, clientes, proveedores y facturación para pequeños comercios",
        lifespan=lifespan
    )

    setup_middleware(app)
    setup_exception_handlers(app)

    app.include_router(api_router, prefix="/api")

    @app.get("/")
    async def root():
        return {
            "message": f"{settings.app_name} - Inventario y ventas",
            "version": settings.version,
            "status": "running",
            "environment": "development" if settings.debug else "production",
            "docs": "/docs",
            "api": "/api"
        }

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "version": settings.version,
            "app": settings.app_name
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
