from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from fastapi.concurrency import run_in_threadpool

from ocr_service.core.errors import (
    OCRClientReleasedError,
    OCREngineError,
    OCRError,
    OCRNotInstalledError,
)
from ocr_service.ocr.base_ocr import OCRResult
from ocr_service.ocr.client import OCRClient, check_tesseract_installation
from ocr_service.schemas import HealthResponse, OCRResponse

logger = logging.getLogger(__name__)
router = APIRouter()

_STATUS_BY_ERROR: list[tuple[type[OCRError], int]] = [
    (OCREngineError, 422),
    (OCRClientReleasedError, 503),
]


def get_ocr_client(request: Request) -> OCRClient:
    client = getattr(request.app.state, "ocr_client", None)
    if client is None:
        raise HTTPException(status_code=503, detail="OCR client is not initialized")
    return client


def _to_http_error(exc: OCRError) -> HTTPException:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=500, detail=str(exc))


def _to_response(result: OCRResult) -> OCRResponse:
    return OCRResponse(
        text=result.text,
        processing_time=result.processing_time,
        timestamp=result.timestamp,
    )


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    try:
        check_tesseract_installation()
    except OCRNotInstalledError:
        return HealthResponse(status="ok", tesseract="missing")
    return HealthResponse(status="ok", tesseract="installed")


@router.post("/ocr/image", response_model=OCRResponse)
async def ocr_image(
    client: OCRClient = Depends(get_ocr_client),
    file: UploadFile = File(...),
) -> OCRResponse:
    image_bytes = await file.read()

    try:
        result = await run_in_threadpool(client.process_image_bytes, image_bytes)
    except OCRError as exc:
        logger.warning("ocr_failed", extra={"source": "upload", "upload_filename": file.filename, "error": str(exc)})
        raise _to_http_error(exc) from exc

    return _to_response(result)

