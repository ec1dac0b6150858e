from __future__ import annotations

from ocr_service.ocr.base_ocr import OCREngine

MOCK_TEXT = "The quick brown fox jumps over the lazy dog.\n"


class MockOCREngine(OCREngine):
    """In-memory engine for development/testing; accepts any image."""

    def __init__(self, text: str = MOCK_TEXT) -> None:
        self._text = text
        self.languages: tuple[str, ...] = ()

    def set_languages(self, *languages: str) -> None:
        self.languages = languages

    def set_image(self, image_path: str) -> None:
        pass

    def set_image_from_bytes(self, image_data: bytes) -> None:
        pass

    def text(self) -> str:
        return self._text

    def close(self) -> None:
        pass
