"""Test fixtures for API tests."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
import sys
from pathlib import Path
import os


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


ensure_src_on_path()

os.environ.setdefault("CLAMP_AUTHENTICITY_CONFIDENCE", "false")

from api.routers import analysis, substances


PARMIGIANO_LABEL = (
    "Parmigiano Reggiano DOP\n"
    "by Caseificio Rossi\n"
    "serial: ABCDE12345\n"
    "prod: 01/02/2023\n"
    "Made in Italy"
)


@pytest.fixture
def parmigiano_label() -> str:
    return PARMIGIANO_LABEL


@pytest.fixture(scope="function")
def test_app():
    @asynccontextmanager
    async def test_lifespan(app: FastAPI) -> AsyncGenerator:
        yield

    app = FastAPI(
        title="LabelLens Test",
        description="Detect banned additives and assess Italian authenticity of product labels",
        version="0.1.0",
        lifespan=test_lifespan,
    )

    app.include_router(analysis.router, prefix="/api/v1/analysis", tags=["analysis"])
    app.include_router(substances.router, prefix="/api/v1/substances", tags=["substances"])

    @app.get("/")
    async def root():
        return {
            "name": "LabelLens",
            "version": "0.1.0",
            "status": "running",
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


@pytest.fixture(scope="function")
def client(test_app: FastAPI):
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()
