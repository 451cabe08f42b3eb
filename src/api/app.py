import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import analysis, substances
from config import settings
from services.label_analysis import CLAMP_AUTHENTICITY_CONFIDENCE, get_substance_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    logger.info(f"Loaded {len(get_substance_registry())} banned substances")
    if not settings.cloud_vision_api_key:
        logger.warning("CLOUD_VISION_API_KEY not set; image analysis is disabled")
    if CLAMP_AUTHENTICITY_CONFIDENCE:
        logger.info("Authenticity confidence is clamped to [0, 1]")
    yield

app = FastAPI(
    title=settings.app_name,
    description="Detect banned additives and assess Italian authenticity of product labels",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analysis.router, prefix="/api/v1/analysis", tags=["analysis"])
app.include_router(substances.router, prefix="/api/v1/substances", tags=["substances"])


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}
