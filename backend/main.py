"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from infrastructure.config import get_settings, get_logger, setup_logger, ROOT_LOGGER_NAME
from infrastructure.database import init_db, close_db, get_session
from presentation.api.v1.dependencies import build_init_db_use_case
from presentation.api.v1.error_handlers import register_exception_handlers
from presentation.api.v1.endpoints import (
    addresses,
    clients,
    counterparties,
    health,
    parcels,
    post_offices,
    postcode_pools,
    shipments,
    tariff_grids,
    tracking,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()
    
    # Setup logging
    setup_logger(
        name=ROOT_LOGGER_NAME,
        level=settings.log_level,
        log_format=settings.log_format,
    )
    logger = get_logger("main")
    
    # Initialize database
    logger.info(f"Starting {settings.app_name} {settings.app_version} ({settings.environment})")
    await init_db()
    
    if settings.seed_database:
        async for session in get_session():
            await build_init_db_use_case(session).execute()
    
    yield
    
    # Shutdown
    await close_db()


# Create FastAPI app
settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(health.router, prefix=settings.api_v1_prefix)
app.include_router(addresses.router, prefix=settings.api_v1_prefix)
app.include_router(postcode_pools.router, prefix=settings.api_v1_prefix)
app.include_router(postcode_pools.barcode_router, prefix=settings.api_v1_prefix)
app.include_router(counterparties.router, prefix=settings.api_v1_prefix)
app.include_router(clients.router, prefix=settings.api_v1_prefix)
app.include_router(post_offices.router, prefix=settings.api_v1_prefix)
app.include_router(tariff_grids.router, prefix=settings.api_v1_prefix)
app.include_router(shipments.router, prefix=settings.api_v1_prefix)
app.include_router(parcels.router, prefix=settings.api_v1_prefix)
app.include_router(tracking.router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
