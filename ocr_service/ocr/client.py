"""Thread-safe OCR client.

One ``OCRClient`` owns one engine session. Every recognition call and
``close()`` hold the client's lock for their whole duration, so the engine
only ever sees one caller at a time. Calls block; there is no timeout and no
retry.
"""
from __future__ import annotations

import logging
import os
import shutil
import threading
import time
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from ocr_service.core.config import settings
from ocr_service.core.errors import (
    OCRClientReleasedError,
    OCRConfigurationError,
    OCREngineError,
    OCRNotInstalledError,
    OCRRecognitionError,
    OCRReleaseError,
    OCRValidationError,
)
from ocr_service.ocr.base_ocr import OCREngine, OCRResult
from ocr_service.ocr.factory import get_ocr_engine

logger = logging.getLogger(__name__)

# Case-sensitive: "scan.PNG" is rejected.
IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".bmp", ".tiff"})


def is_image_file(path: str | os.PathLike[str]) -> bool:
    # Suffix from the last "." of the basename, leading dot included (".png" counts)
    name = os.path.basename(os.fspath(path))
    i = name.rfind(".")
    ext = name[i:] if i >= 0 else ""
    return ext in IMAGE_EXTENSIONS


def check_tesseract_installation(binary: str | None = None) -> str:
    """Return the resolved path of the tesseract binary on ``PATH``.

    Raises OCRNotInstalledError when it cannot be found. Takes no lock and
    touches no client state.
    """
    name = binary or settings.tesseract_cmd
    path = shutil.which(name)
    if path is None:
        raise OCRNotInstalledError(f"{name} is not installed: executable file not found in $PATH")
    return path


class OCRClient:
    def __init__(
        self,
        engine: OCREngine | None = None,
        languages: Sequence[str] | None = None,
    ) -> None:
        self._engine = engine if engine is not None else get_ocr_engine()
        self._languages = tuple(languages if languages is not None else settings.ocr_languages)
        self._lock = threading.Lock()
        self._released = False

        if not self._languages:
            raise OCRConfigurationError("failed to set language: no languages configured")
        try:
            self._engine.set_languages(*self._languages)
        except Exception as exc:
            raise OCRConfigurationError(f"failed to set language: {exc}") from exc

        logger.info("ocr_client_ready", extra={"languages": list(self._languages)})

    @property
    def languages(self) -> tuple[str, ...]:
        return self._languages

    @property
    def released(self) -> bool:
        return self._released

    def __enter__(self) -> OCRClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    #  Recognition                                                         #
    # ------------------------------------------------------------------ #

    def process_image(self, image_path: str | os.PathLike[str]) -> OCRResult:
        """Run OCR on an image file.

        Only ``.jpg``, ``.jpeg``, ``.png``, ``.bmp`` and ``.tiff`` paths are
        accepted; anything else fails with OCRValidationError before the
        engine is touched.
        """
        path = os.fspath(image_path)
        if not is_image_file(path):
            raise OCRValidationError(f"invalid image file: {path}")

        return self._recognize(
            lambda: self._engine.set_image(path),
            load_error="failed to set image",
            source="path",
        )

    def process_image_bytes(self, image_data: bytes) -> OCRResult:
        """Run OCR on an in-memory image.

        No format check is done here; the engine decides whether the bytes
        are an image.
        """
        return self._recognize(
            lambda: self._engine.set_image_from_bytes(image_data),
            load_error="failed to set image from bytes",
            source="bytes",
        )

    def _recognize(self, load: Callable[[], None], *, load_error: str, source: str) -> OCRResult:
        # Includes time spent queued on the lock
        start = time.perf_counter()

        with self._lock:
            if self._released:
                raise OCRClientReleasedError("OCR client has already been released")

            try:
                load()
            except Exception as exc:
                raise OCREngineError(f"{load_error}: {exc}") from exc

            try:
                text = self._engine.text()
            except Exception as exc:
                raise OCRRecognitionError(f"OCR failed: {exc}") from exc

            processing_time = time.perf_counter() - start
            result = OCRResult(
                text=text,
                processing_time=processing_time,
                timestamp=datetime.now(timezone.utc),
            )

        logger.info(
            "ocr_complete",
            extra={"source": source, "chars": len(text), "processing_time": round(processing_time, 4)},
        )
        return result

    # ------------------------------------------------------------------ #
    #  Lifecycle                                                           #
    # ------------------------------------------------------------------ #

    def close(self) -> None:
        """Free the engine session. Calling it again is a no-op."""
        with self._lock:
            if self._released:
                return
            self._released = True
            try:
                self._engine.close()
            except Exception as exc:
                raise OCRReleaseError(f"failed to release OCR session: {exc}") from exc

        logger.info("ocr_client_released")
