"""
Main FastAPI application for Image Studio.
Serves health, the image generator API and metrics.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from imagestudio.core.config import settings
from imagestudio.core.logging import configure_logging
from imagestudio.api.deps import close_generator_service
from imagestudio.api.routes import health, images
from imagestudio.utils.metrics import router as metrics_router


configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    # Shutdown: close relay clients held by the cached generator service
    close_generator_service()


app = FastAPI(
    title="Image Studio API",
    description="Text-to-image demo: prompt, style presets and gallery history",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS
origins = settings.cors_origins_list
if not origins:
    origins = ["http://localhost:5173", "http://127.0.0.1:5173", "http://localhost:3000"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(health.router, tags=["health"])
app.include_router(images.router)
app.include_router(metrics_router)
