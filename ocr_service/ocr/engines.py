"""TesseractEngine: an OCR session backed by pytesseract and Pillow."""
from __future__ import annotations

import io
import logging

import pytesseract
from PIL import Image

from ocr_service.ocr.base_ocr import OCREngine

logger = logging.getLogger(__name__)


class TesseractEngine(OCREngine):
    """OCR engine session backed by the local ``tesseract`` binary.

    Install dependency:
        apt-get install tesseract-ocr tesseract-ocr-ara
        pip install pytesseract pillow

    Config (via .env):
        OCR_PROVIDER=tesseract
        OCR_LANGUAGES=["eng","ara"]
        TESSERACT_CMD=tesseract
        TESSERACT_CONFIG=--oem 3 --psm 3
    """

    def __init__(self, tesseract_cmd: str = "tesseract", config: str = "") -> None:
        pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        self._config = config
        self._languages: tuple[str, ...] = ()
        self._image: Image.Image | None = None
        self._closed = False

    @property
    def lang(self) -> str:
        """Languages in the ``eng+ara`` form tesseract expects."""
        return "+".join(self._languages)

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("tesseract session is closed")

    def set_languages(self, *languages: str) -> None:
        self._ensure_open()
        if not languages:
            raise ValueError("at least one language is required")
        installed = set(pytesseract.get_languages(config=""))
        missing = [code for code in languages if code not in installed]
        if missing:
            raise ValueError(f"missing language data: {', '.join(missing)}")
        self._languages = tuple(languages)

    def _replace_image(self, image: Image.Image) -> None:
        # load() forces decoding now so corrupt data fails here, not in text()
        image.load()
        if self._image is not None:
            self._image.close()
        self._image = image

    def set_image(self, image_path: str) -> None:
        self._ensure_open()
        self._replace_image(Image.open(image_path))

    def set_image_from_bytes(self, image_data: bytes) -> None:
        self._ensure_open()
        self._replace_image(Image.open(io.BytesIO(image_data)))

    def text(self) -> str:
        self._ensure_open()
        if self._image is None:
            raise RuntimeError("no image set")
        text = pytesseract.image_to_string(self._image, lang=self.lang or None, config=self._config)
        logger.debug("tesseract_complete", extra={"lang": self.lang, "chars": len(text)})
        return text

    def close(self) -> None:
        if self._closed:
            return
        if self._image is not None:
            self._image.close()
            self._image = None
        self._closed = True
