"""Voice Connect Backend - Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .routers import connection

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings = get_settings()
    logger.info("Starting Voice Connect Backend")

    logger.info(f"Token provider: {settings.token_provider}")
    logger.info(f"LiveKit URL: {settings.livekit_url}")
    if not settings.livekit_configured:
        logger.warning("LiveKit settings incomplete, connection requests will fail until they are set")
    if settings.agent_dispatch_enabled:
        logger.info(f"Agent dispatch: {settings.agent_name}")

    routes = [f"{route.methods} {route.path}" for route in app.routes if hasattr(route, "methods")]
    logger.info(f"Registered routes: {routes}")

    yield
    logger.info("Shutting down Voice Connect Backend")


# Create FastAPI application
app = FastAPI(
    title="Voice Connect Backend",
    description="Issues LiveKit room tokens with voice agent dispatch",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(connection.router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "name": "Voice Connect Backend",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/health")
async def health_check(settings: Settings = Depends(get_settings)) -> dict[str, object]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "provider": settings.token_provider,
        "livekit_configured": settings.livekit_configured,
    }


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
