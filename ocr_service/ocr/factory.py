from __future__ import annotations

from ocr_service.core.config import settings
from ocr_service.ocr.base_ocr import OCREngine
from ocr_service.ocr.mock_ocr import MockOCREngine


def get_ocr_engine() -> OCREngine:
    """Return a fresh engine session for the configured provider.

    OCR_PROVIDER options:
        tesseract — TesseractEngine (pytesseract + Pillow, tesseract binary on PATH)
        mock      — fixed text (dev/test, no deps required)
    """
    provider = settings.ocr_provider.lower().strip()

    if provider == "mock":
        return MockOCREngine()

    if provider == "tesseract":
        from ocr_service.ocr.engines import TesseractEngine
        return TesseractEngine(
            tesseract_cmd=settings.tesseract_cmd,
            config=settings.tesseract_config,
        )

    raise ValueError(f"Unknown OCR_PROVIDER={settings.ocr_provider!r}")
