from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    tesseract: str


class OCRResponse(BaseModel):
    text: str
    processing_time: float
    timestamp: datetime
