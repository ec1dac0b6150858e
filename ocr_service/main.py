from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ocr_service.api.routes import router
from ocr_service.core.config import settings
from ocr_service.core.logging import configure_logging
from ocr_service.ocr.client import OCRClient, check_tesseract_installation

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if settings.check_tesseract_on_startup and settings.ocr_provider == "tesseract":
        path = check_tesseract_installation()
        logger.info("tesseract_found", extra={"path": path})

    # One engine session per process, shared by all requests
    app.state.ocr_client = OCRClient()
    logger.info("startup")
    try:
        yield
    finally:
        app.state.ocr_client.close()
        logger.info("shutdown")


def create_app() -> FastAPI:
    configure_logging(settings.log_level)
    app = FastAPI(title="Tesseract OCR Service", version="0.1.0", lifespan=lifespan)
    app.include_router(router)

    @app.get("/")
    async def root():
        return {
            "message": "Welcome to the Tesseract OCR Service",
            "docs": "/docs",
            "health": "/health"
        }

    return app


app = create_app()
