"""Shared pytest configuration and fixtures for the OCR service tests."""
from __future__ import annotations

import os
import threading
import time

import pytest

# Provide env vars before any ocr_service module is imported
os.environ.setdefault("OCR_PROVIDER", "mock")
os.environ.setdefault("CHECK_TESSERACT_ON_STARTUP", "false")

from ocr_service.ocr.base_ocr import OCREngine  # noqa: E402


class FakeEngine(OCREngine):
    """Instrumented engine: records every call and any overlapping use."""

    def __init__(
        self,
        text: str = "HELLO",
        delay: float = 0.0,
        fail_on: dict[str, Exception] | None = None,
    ) -> None:
        self._text = text
        self._delay = delay
        self._fail_on = fail_on or {}
        self._guard = threading.Lock()
        self._active = 0
        self.overlaps = 0
        self.max_active = 0
        self.calls: list[tuple[str, object]] = []

    def _enter(self, name: str, arg: object = None) -> None:
        with self._guard:
            self._active += 1
            self.max_active = max(self.max_active, self._active)
            if self._active > 1:
                self.overlaps += 1
            self.calls.append((name, arg))
        try:
            if self._delay:
                time.sleep(self._delay)
            if name in self._fail_on:
                raise self._fail_on[name]
        finally:
            with self._guard:
                self._active -= 1

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def set_languages(self, *languages: str) -> None:
        self._enter("set_languages", languages)

    def set_image(self, image_path: str) -> None:
        self._enter("set_image", image_path)

    def set_image_from_bytes(self, image_data: bytes) -> None:
        self._enter("set_image_from_bytes", image_data)

    def text(self) -> str:
        self._enter("text")
        return self._text

    def close(self) -> None:
        self._enter("close")


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def client(fake_engine: FakeEngine):
    from ocr_service.ocr.client import OCRClient

    ocr_client = OCRClient(engine=fake_engine, languages=("eng", "ara"))
    yield ocr_client
    ocr_client.close()
