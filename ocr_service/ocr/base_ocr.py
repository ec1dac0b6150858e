from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class OCRResult:
    text: str
    processing_time: float  # seconds
    timestamp: datetime  # UTC, completion time
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "text": self.text,
            "processing_time": self.processing_time,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.error:
            out["error"] = self.error
        return out


class OCREngine:
    """One stateful engine session: configured languages plus the current image.

    Not thread-safe; callers serialize access (see ``OCRClient``).
    """

    def set_languages(self, *languages: str) -> None:
        raise NotImplementedError

    def set_image(self, image_path: str) -> None:
        raise NotImplementedError

    def set_image_from_bytes(self, image_data: bytes) -> None:
        raise NotImplementedError

    def text(self) -> str:
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError
